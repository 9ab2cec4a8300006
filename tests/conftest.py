"""Shared fixtures: a throwaway component directory and a component writer."""

from collections.abc import Callable
from pathlib import Path

import pytest


def component_source(
    name: str,
    *,
    markup: str | None = None,
    script: str | None = None,
    styles: tuple[str, ...] = (),
) -> str:
    """Build a .vue file body for component *name*."""
    if markup is None:
        markup = f'<template id="{name}">\n  <div class="{name}">{{{{ message }}}}</div>\n</template>'
    if script is None:
        script = f'Vue.component("{name}", {{template: "#{name}"}});'
    parts = [markup, f"<script>\n{script}\n</script>"]
    parts.extend(f"<style>\n{style}\n</style>" for style in styles)
    return "\n\n".join(parts) + "\n"


@pytest.fixture
def views(tmp_path: Path) -> Path:
    """An empty component directory."""
    path = tmp_path / "views"
    path.mkdir()
    return path


@pytest.fixture
def write_component(views: Path) -> Callable[..., Path]:
    """Write a component file under ``views`` and return its path.

    ``write_component("hello")`` writes ``views/hello.vue``;
    ``write_component("nav", subdir="layout")`` writes ``views/layout/nav.vue``.
    """

    def _write(name: str, *, subdir: str = "", filename: str | None = None, **kwargs: object) -> Path:
        directory = views / subdir if subdir else views
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / (filename or f"{name}.vue")
        path.write_text(component_source(name, **kwargs), encoding="utf-8")  # type: ignore[arg-type]
        return path

    return _write
