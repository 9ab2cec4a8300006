"""VueLoader — compiles components once (or per request) and renders pages.

Usage::

    loader = VueLoader.new()  # ./views, built-in layout, compile once

    def index(request):
        buf = io.StringIO()
        loader.render(buf, "Demo", "<hello-world></hello-world>")
        return buf.getvalue()

Construction runs a compile pass and raises on a bad layout. After that,
``render`` never raises: a failed recompile or a failed write is logged
and ``render`` returns ``False``.

Thread safety: the compiled state is an immutable :class:`CompiledPage`.
Recompiles build a new one locally and swap the reference under a lock;
each render uses exactly one snapshot from start to finish.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from vuepage.compiler import CompiledPage, PageContext, compile_page
from vuepage.config import LoaderConfig
from vuepage.errors import VuePageError
from vuepage.extractor import ComponentRecord
from vuepage.layout import create_environment

logger = logging.getLogger("vuepage.loader")


class OutputSink(Protocol):
    """Anything pages can be written to: a text file, ``io.StringIO``, a response body."""

    def write(self, s: str, /) -> object: ...


class VueLoader:
    """Page compositor for a directory of single-file Vue components."""

    __slots__ = ("_config", "_env", "_lock", "_snapshot")

    def __init__(self, config: LoaderConfig | None = None) -> None:
        self._config = config or LoaderConfig()
        self._env = create_environment()
        self._lock = threading.Lock()
        self._snapshot = compile_page(self._config, self._env)

    @classmethod
    def from_config(cls, config: LoaderConfig) -> VueLoader:
        """Create a loader and run the first compile pass.

        Raises:
            ConfigurationError: The layout is missing ``<html>``, could not
                be read, or is not a valid kida template.
        """
        return cls(config)

    @classmethod
    def new(cls) -> VueLoader:
        """Create a loader with the default :class:`LoaderConfig`."""
        return cls(LoaderConfig())

    # -- state -------------------------------------------------------------

    @property
    def config(self) -> LoaderConfig:
        return self._config

    @property
    def snapshot(self) -> CompiledPage:
        """The most recently published compile pass."""
        return self._snapshot

    @property
    def components(self) -> tuple[ComponentRecord, ...]:
        return self._snapshot.components

    def recompile(self) -> CompiledPage:
        """Run a compile pass and publish it.

        Compile and publish happen under one lock, so concurrent
        recompiles publish in the order they ran. On failure the previous
        snapshot stays in place and the error propagates.
        """
        with self._lock:
            compiled = compile_page(self._config, self._env)
            self._snapshot = compiled
        return compiled

    def _current(self) -> CompiledPage:
        if self._config.compile_every_request:
            return self.recompile()
        return self._snapshot

    # -- rendering ---------------------------------------------------------

    def render(self, out: OutputSink, title: str, root_element: str) -> bool:
        """Write the full page into *out*.

        Args:
            out: Text sink; every rendered chunk is passed to ``out.write``.
            title: Page title. Escaped.
            root_element: Markup mounted inside ``<main id="main">``.
                Inserted verbatim; the caller must trust it.

        Returns:
            True when the whole page was written. False when the recompile
            failed (nothing written) or rendering/writing failed part way
            (whatever was already written stays written).
        """
        try:
            compiled = self._current()
        except VuePageError as exc:
            logger.error("Recompile failed, page not rendered: %s", exc)
            return False
        except Exception:
            logger.exception("Recompile failed, page not rendered")
            return False

        context = PageContext.for_page(compiled.blocks, title, root_element)
        try:
            for chunk in compiled.layout.render_stream(context.as_context()):
                out.write(chunk)
        except Exception:
            logger.exception("Rendering page %r failed", title)
            return False
        return True

    def render_string(self, title: str, root_element: str) -> str:
        """Render the full page to a string, raising instead of logging.

        Raises:
            ConfigurationError: A per-request recompile failed.
            kida.TemplateError: The layout failed while rendering.
        """
        compiled = self._current()
        context = PageContext.for_page(compiled.blocks, title, root_element)
        return compiled.layout.render(context.as_context())
