"""Single-file component extraction.

Splits one ``.vue`` file into its three regions::

    <template id="hello-world">...</template>   first one only, outer HTML
    <script>...</script>                        first one in the file, text
    <style>...</style>                          every one in the file, text

The tokenizer is :class:`html.parser.HTMLParser`. It reports where each
tag starts; the markup region is sliced from the original source at those
positions so the component's template reaches the page byte-for-byte,
Vue directives and mustaches included.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from html.parser import HTMLParser

from vuepage.errors import ComponentParseError

_NEWLINE_RE = re.compile(r"\n")


@dataclass(frozen=True, slots=True)
class ComponentRecord:
    """One component's regions, extracted from a single file."""

    file_name: str
    identifier: str
    markup: str = ""
    script: str = ""
    style: str = ""


class _RegionParser(HTMLParser):
    """Collects template/script/style regions while tokenizing."""

    def __init__(self, source: str) -> None:
        super().__init__(convert_charrefs=False)
        self._source = source
        # HTMLParser reports (line, column); map lines back to offsets
        self._line_starts = [0] + [m.end() for m in _NEWLINE_RE.finditer(source)]

        self.template_id: str | None = None
        self.markup: str | None = None
        self._markup_start = -1
        self._template_depth = 0

        self.script: str | None = None
        self.styles: list[str] = []
        self._capture: str | None = None
        self._buffer: list[str] = []

    # -- positions ---------------------------------------------------------

    def _offset(self) -> int:
        line, column = self.getpos()
        return self._line_starts[line - 1] + column

    def _tag_end(self, start: int) -> int:
        end = self._source.find(">", start)
        return len(self._source) if end == -1 else end + 1

    @property
    def in_template(self) -> bool:
        return self._template_depth > 0

    # -- tag events --------------------------------------------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "template":
            if self.in_template:
                self._template_depth += 1
            elif self._markup_start < 0:
                self._markup_start = self._offset()
                self._template_depth = 1
                self.template_id = dict(attrs).get("id")
            return

        # Regions nested in the template count too; they also stay in its markup
        if tag == "script" and self.script is None and self._capture is None:
            self._capture = "script"
            self._buffer = []
        elif tag == "style" and self._capture is None:
            self._capture = "style"
            self._buffer = []

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "template" and not self.in_template and self._markup_start < 0:
            self.template_id = dict(attrs).get("id")
            self.markup = self.get_starttag_text() or ""
            self._markup_start = self._offset()

    def handle_endtag(self, tag: str) -> None:
        if tag == "template" and self.in_template:
            self._template_depth -= 1
            if self._template_depth == 0:
                end = self._tag_end(self._offset())
                self.markup = self._source[self._markup_start : end]
            return

        if tag == self._capture:
            self._finish_capture()

    def handle_data(self, data: str) -> None:
        if self._capture is not None:
            self._buffer.append(data)

    # -- end of input ------------------------------------------------------

    def _finish_capture(self) -> None:
        text = "".join(self._buffer)
        if self._capture == "script":
            self.script = text
        elif text:
            self.styles.append(text)
        self._capture = None
        self._buffer = []

    def finish(self) -> None:
        """Close the tokenizer and settle regions left open at EOF."""
        self.close()
        if self.in_template:
            self.markup = self._source[self._markup_start :]
            self._template_depth = 0
        if self._capture is not None:
            self._finish_capture()


def extract(raw: bytes, file_name: str) -> ComponentRecord:
    """Parse one component file into a :class:`ComponentRecord`.

    Args:
        raw: The file's bytes, UTF-8 encoded (a BOM is accepted).
        file_name: Base name of the file; the identifier falls back to it
            when the template has no ``id``.

    Returns:
        The extracted record. A file with none of the three regions
        yields a record whose fragments are all empty.

    Raises:
        ComponentParseError: The bytes are not UTF-8 text or the
            tokenizer rejected them.
    """
    try:
        source = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ComponentParseError(file_name, f"not valid UTF-8 ({exc.reason})") from exc

    parser = _RegionParser(source)
    try:
        parser.feed(source)
        parser.finish()
    except (AssertionError, ValueError) as exc:
        raise ComponentParseError(file_name, str(exc)) from exc

    return ComponentRecord(
        file_name=file_name,
        identifier=parser.template_id or file_name,
        markup=parser.markup or "",
        script=parser.script or "",
        style="".join(f"{style}\n" for style in parser.styles),
    )
