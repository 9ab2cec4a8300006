"""Compile pass — layout plus aggregated component blocks.

One pass runs, in order::

    1. resolve_layout_source   literal source or file content
    2. validate_layout         must contain <html>
    3. compile_layout          kida Environment.from_string
    4. scan                    component directory → records
    5. build_aggregates        records → templates / scripts / styles

Any failure in steps 1–3 raises a ConfigurationError. The result is an
immutable :class:`CompiledPage`; nothing shared is touched, so the
caller decides when to publish it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from kida import Environment, Markup, Template

from vuepage.config import LoaderConfig
from vuepage.extractor import ComponentRecord
from vuepage.layout import compile_layout, resolve_layout_source, validate_layout
from vuepage.scanner import ScanResult, scan

TEMPLATES_MARKER = "\n<!--####### Templates #######-->\n"
SCRIPTS_MARKER = "\n<!--####### Scripts #######-->\n"
STYLES_MARKER = "\n<!--####### Styles #######-->\n"


@dataclass(frozen=True, slots=True)
class AggregateBlocks:
    """The three concatenated, marker-prefixed component streams."""

    templates: str = TEMPLATES_MARKER
    scripts: str = f"{SCRIPTS_MARKER}<script>\n</script>\n"
    styles: str = f"{STYLES_MARKER}<style>\n</style>\n"


@dataclass(frozen=True, slots=True)
class PageContext:
    """The data record a layout is rendered with.

    ``title`` is plain text and gets escaped. The rest is trusted
    markup and is wrapped in ``Markup`` so autoescape leaves it alone.
    """

    title: str
    root_element: str
    templates: str
    scripts: str
    styles: str

    @classmethod
    def for_page(cls, blocks: AggregateBlocks, title: str, root_element: str) -> PageContext:
        return cls(
            title=title,
            root_element=root_element,
            templates=blocks.templates,
            scripts=blocks.scripts,
            styles=blocks.styles,
        )

    def as_context(self) -> dict[str, Any]:
        """Return the kida render context."""
        return {
            "title": self.title,
            "root_element": Markup(self.root_element),
            "templates": Markup(self.templates),
            "scripts": Markup(self.scripts),
            "styles": Markup(self.styles),
        }


@dataclass(frozen=True, slots=True)
class CompiledPage:
    """Snapshot of one compile pass. Never mutated after creation."""

    layout: Template
    layout_source: str
    blocks: AggregateBlocks
    scan_result: ScanResult

    @property
    def components(self) -> tuple[ComponentRecord, ...]:
        return self.scan_result.components


def build_aggregates(records: Iterable[ComponentRecord]) -> AggregateBlocks:
    """Fold component records, in order, into :class:`AggregateBlocks`.

    Every record contributes one newline-terminated fragment to each
    block, empty fragments included.
    """
    templates = [TEMPLATES_MARKER]
    scripts = [SCRIPTS_MARKER, "<script>\n"]
    styles = [STYLES_MARKER, "<style>\n"]

    for record in records:
        templates.append(f"{record.markup}\n")
        scripts.append(f"{record.script}\n")
        styles.append(f"{record.style}\n")

    scripts.append("</script>\n")
    styles.append("</style>\n")

    return AggregateBlocks(
        templates="".join(templates),
        scripts="".join(scripts),
        styles="".join(styles),
    )


def compile_page(config: LoaderConfig, env: Environment) -> CompiledPage:
    """Run one full compile pass for *config*.

    Raises:
        InvalidLayoutError: The layout is unreadable or has no ``<html>``.
        LayoutSyntaxError: kida could not compile the layout.
    """
    source = resolve_layout_source(config.layout)
    validate_layout(source)
    layout = compile_layout(env, source)

    result = scan(config.component_path, config.component_extension)

    return CompiledPage(
        layout=layout,
        layout_source=source,
        blocks=build_aggregates(result.components),
        scan_result=result,
    )
