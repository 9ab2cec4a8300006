"""vuepage CLI — render a page or check a component directory.

Entry point registered as ``vuepage`` in ``pyproject.toml``::

    [project.scripts]
    vuepage = "vuepage.cli:main"
"""

import argparse
import logging
import sys


def _add_component_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--views",
        default="./views",
        help="Component directory to scan (default: ./views)",
    )
    parser.add_argument(
        "--ext",
        default=".vue",
        help="Component file extension (default: .vue)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``vuepage`` command."""
    parser = argparse.ArgumentParser(
        prog="vuepage",
        description="vuepage — compose single-file Vue components into an HTML page.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log scan and render diagnostics to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- vuepage render ----------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a page to stdout or a file")
    _add_component_args(render_parser)
    render_parser.add_argument(
        "--layout",
        default=None,
        help="Layout file path or literal HTML (default: built-in Vue layout)",
    )
    render_parser.add_argument("--title", default="", help="Page title")
    render_parser.add_argument(
        "--root",
        default="",
        help='Root element markup, e.g. "<hello-world></hello-world>"',
    )
    render_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the page to this file instead of stdout",
    )

    # -- vuepage check -----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="List components and skipped files")
    _add_component_args(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        from vuepage.cli._render import run_render

        run_render(args)
    elif args.command == "check":
        from vuepage.cli._check import run_check

        run_check(args)
