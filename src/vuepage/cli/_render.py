"""``vuepage render`` — compile once and write the page.

Exits with code 1 when the layout is invalid or rendering fails.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from kida import TemplateError

from vuepage.config import LoaderConfig
from vuepage.errors import VuePageError
from vuepage.loader import VueLoader


def build_config(args: argparse.Namespace) -> LoaderConfig:
    """Translate parsed arguments into a :class:`LoaderConfig`."""
    config = LoaderConfig(
        component_path=args.views,
        component_extension=args.ext,
    )
    if args.layout is not None:
        config = replace(config, layout=args.layout)
    return config


def run_render(args: argparse.Namespace) -> None:
    """Render one page with the configuration from *args*."""
    try:
        loader = VueLoader.from_config(build_config(args))
        page = loader.render_string(args.title, args.root)
    except (VuePageError, TemplateError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.output is None:
        sys.stdout.write(page)
        return

    try:
        Path(args.output).write_text(page, encoding="utf-8")
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
