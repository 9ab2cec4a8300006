"""Tests for vuepage.compiler — aggregate blocks and the compile pass."""

from pathlib import Path

import pytest
from kida import Markup

from vuepage.compiler import (
    AggregateBlocks,
    CompiledPage,
    PageContext,
    build_aggregates,
    compile_page,
)
from vuepage.config import LoaderConfig
from vuepage.errors import ConfigurationError, InvalidLayoutError, LayoutSyntaxError
from vuepage.extractor import ComponentRecord
from vuepage.layout import create_environment


def _record(name: str, *, markup: str = "", script: str = "", style: str = "") -> ComponentRecord:
    return ComponentRecord(file_name=f"{name}.vue", identifier=name, markup=markup, script=script, style=style)


class TestBuildAggregates:
    def test_no_components(self) -> None:
        blocks = build_aggregates([])

        assert blocks.templates == "\n<!--####### Templates #######-->\n"
        assert blocks.scripts == "\n<!--####### Scripts #######-->\n<script>\n</script>\n"
        assert blocks.styles == "\n<!--####### Styles #######-->\n<style>\n</style>\n"
        assert blocks == AggregateBlocks()

    def test_fragments_in_order(self) -> None:
        blocks = build_aggregates([
            _record("a", markup='<template id="a"></template>', script="a()", style="a {}\n"),
            _record("b", markup='<template id="b"></template>', script="b()", style="b {}\n"),
        ])

        assert blocks.templates == (
            "\n<!--####### Templates #######-->\n"
            '<template id="a"></template>\n'
            '<template id="b"></template>\n'
        )
        assert blocks.scripts == (
            "\n<!--####### Scripts #######-->\n<script>\na()\nb()\n</script>\n"
        )
        assert blocks.styles == (
            "\n<!--####### Styles #######-->\n<style>\na {}\n\nb {}\n\n</style>\n"
        )

    def test_empty_fragments_still_contribute_a_line(self) -> None:
        blocks = build_aggregates([_record("x"), _record("y")])

        assert blocks.templates.endswith("-->\n\n\n")
        assert blocks.scripts == "\n<!--####### Scripts #######-->\n<script>\n\n\n</script>\n"


class TestPageContext:
    def test_only_title_is_plain_text(self) -> None:
        ctx = PageContext.for_page(build_aggregates([]), "Title", "<app></app>").as_context()

        assert set(ctx) == {"title", "root_element", "templates", "scripts", "styles"}
        assert not isinstance(ctx["title"], Markup)
        for key in ("root_element", "templates", "scripts", "styles"):
            assert isinstance(ctx[key], Markup)


class TestCompilePage:
    def test_compiles_default_layout_and_components(self, views: Path, write_component) -> None:
        write_component("first")
        write_component("second", styles=(".second { margin: 0; }",))

        compiled = compile_page(LoaderConfig(component_path=views), create_environment())

        assert isinstance(compiled, CompiledPage)
        assert [c.identifier for c in compiled.components] == ["first", "second"]
        assert compiled.blocks.templates.count("<template id=") == 2
        assert compiled.blocks.scripts.count("Vue.component(") == 2
        assert ".second { margin: 0; }" in compiled.blocks.styles
        assert "<html>" in compiled.layout_source

    def test_each_block_has_one_fragment_per_component(self, views: Path, write_component) -> None:
        names = ["c0", "c1", "c2", "c3", "c4"]
        for name in names:
            write_component(name, styles=(f".{name} {{}}",))

        blocks = compile_page(LoaderConfig(component_path=views), create_environment()).blocks

        positions = [blocks.templates.index(f'id="{n}"') for n in names]
        assert positions == sorted(positions)
        positions = [blocks.scripts.index(f'"#{n}"') for n in names]
        assert positions == sorted(positions)
        positions = [blocks.styles.index(f".{n} {{}}") for n in names]
        assert positions == sorted(positions)

    def test_layout_from_file(self, tmp_path: Path, views: Path) -> None:
        layout = tmp_path / "layout.html"
        layout.write_text("<html><title>{{ title }}</title></html>", encoding="utf-8")

        compiled = compile_page(
            LoaderConfig(layout=str(layout), component_path=views), create_environment()
        )

        assert compiled.layout_source == "<html><title>{{ title }}</title></html>"

    def test_layout_without_html_is_rejected(self, views: Path) -> None:
        config = LoaderConfig(layout="<body>{{ title }}</body>", component_path=views)

        with pytest.raises(InvalidLayoutError):
            compile_page(config, create_environment())

    def test_layout_syntax_error_is_configuration_error(self, views: Path) -> None:
        config = LoaderConfig(layout="<html>{% async something %}</html>", component_path=views)

        with pytest.raises(LayoutSyntaxError) as exc_info:
            compile_page(config, create_environment())
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.__cause__ is not None

    def test_break_outside_loop_is_configuration_error(self, views: Path) -> None:
        config = LoaderConfig(layout="<html>{% break %}</html>", component_path=views)

        with pytest.raises(LayoutSyntaxError) as exc_info:
            compile_page(config, create_environment())
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.__cause__ is not None

    def test_missing_component_directory_compiles_empty(self, tmp_path: Path) -> None:
        compiled = compile_page(
            LoaderConfig(component_path=tmp_path / "nowhere"), create_environment()
        )

        assert compiled.components == ()
        assert compiled.blocks == AggregateBlocks()
