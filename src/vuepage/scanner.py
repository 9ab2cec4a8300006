"""Component directory scanning.

Walks the component directory tree in lexical order and extracts every
file whose suffix matches the component extension. Files that cannot be
read or parsed are skipped, so one broken component never takes the
page down; each skip is logged and returned as a :class:`ScanSkip`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from vuepage.errors import ComponentParseError
from vuepage.extractor import ComponentRecord, extract

logger = logging.getLogger("vuepage.scanner")


@dataclass(frozen=True, slots=True)
class ScanSkip:
    """A file or directory left out of a scan, and why."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Components found by one scan, in traversal order, plus skips."""

    components: tuple[ComponentRecord, ...] = ()
    skipped: tuple[ScanSkip, ...] = ()

    def __len__(self) -> int:
        return len(self.components)


def scan(root: str | Path, extension: str = ".vue") -> ScanResult:
    """Scan *root* recursively for component files.

    Args:
        root: Directory to walk. A missing directory means zero
            components, not an error.
        extension: Component file suffix, compared case-insensitively.

    Returns:
        A :class:`ScanResult`. Entries of each directory are visited in
        name order; subdirectories are descended into where their name
        sorts.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("Component directory %s not found; no components loaded", root)
        return ScanResult()

    components: list[ComponentRecord] = []
    skipped: list[ScanSkip] = []
    _walk_directory(
        root,
        extension=extension.lower(),
        components=components,
        skipped=skipped,
    )
    return ScanResult(components=tuple(components), skipped=tuple(skipped))


def _walk_directory(
    directory: Path,
    *,
    extension: str,
    components: list[ComponentRecord],
    skipped: list[ScanSkip],
) -> None:
    """Visit one directory level, recursing into subdirectories in place.

    Args:
        directory: Current directory being walked.
        extension: Lower-cased component suffix.
        components: Accumulator for extracted records.
        skipped: Accumulator for files and directories left out.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        _skip(skipped, directory, f"directory could not be listed: {exc}")
        return

    for item in entries:
        if item.is_dir():
            # Symlinked directories are not followed, so cycles cannot occur
            if not item.is_symlink():
                _walk_directory(
                    item,
                    extension=extension,
                    components=components,
                    skipped=skipped,
                )
            continue

        if item.suffix.lower() != extension:
            continue

        try:
            raw = item.read_bytes()
        except OSError as exc:
            _skip(skipped, item, f"could not be read: {exc}")
            continue

        try:
            components.append(extract(raw, item.name))
        except ComponentParseError as exc:
            _skip(skipped, item, f"could not be parsed: {exc.detail}")


def _skip(skipped: list[ScanSkip], path: Path, reason: str) -> None:
    logger.warning("Skipping %s: %s", path, reason)
    skipped.append(ScanSkip(path=path, reason=reason))
