"""``vuepage check`` — list what a compile pass would pick up.

Prints one line per component and one per skipped file.  Exits with
code 1 if any file was skipped.
"""

import argparse
import sys

from vuepage.scanner import scan


def run_check(args: argparse.Namespace) -> None:
    """Scan ``args.views`` and report components and skips."""
    result = scan(args.views, args.ext)

    for component in result.components:
        print(f"{component.identifier}\t{component.file_name}")
    for skip in result.skipped:
        print(f"skipped\t{skip.path}\t{skip.reason}", file=sys.stderr)

    print(f"{len(result.components)} component(s), {len(result.skipped)} skipped")
    if result.skipped:
        raise SystemExit(1)
