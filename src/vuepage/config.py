"""Loader configuration.

LoaderConfig is a frozen dataclass, immutable after creation, so the
layout path a caller passes in is never overwritten by file content.
Layout resolution happens in :func:`vuepage.layout.resolve_layout_source`.
"""

from dataclasses import dataclass
from pathlib import Path

from vuepage.layout import DEFAULT_LAYOUT


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Loader configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = LoaderConfig(
            layout="./layout.html",
            component_path="./vuetify",
            compile_every_request=True,
        )
    """

    # Layout: literal kida/HTML source or a path to a file holding it
    layout: str = DEFAULT_LAYOUT

    # Components
    component_path: str | Path = "./views"
    component_extension: str = ".vue"  # Matched case-insensitively

    # Recompile on every render to pick up edits without a restart
    compile_every_request: bool = False
