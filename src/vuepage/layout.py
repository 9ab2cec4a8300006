"""Page layout — default template, source resolution, and kida compilation.

The layout is a kida template with five placeholders::

    {{ title }}          page title, escaped
    {{ root_element }}   caller-trusted root component markup
    {{ templates }}      aggregated <template> blocks
    {{ scripts }}        aggregated component scripts
    {{ styles }}         aggregated component styles

Only ``title`` is escaped; the other four arrive as ``kida.Markup``.
"""

import re
from pathlib import Path

from kida import Environment, Template, TemplateSyntaxError
from kida.lexer import LexerError
from kida.parser.errors import ParseError

from vuepage.errors import InvalidLayoutError, LayoutSyntaxError

DEFAULT_VUE_VERSION = "2.6.14"

# <html> or <html lang="en" ...>, any case
_HTML_TAG_RE = re.compile(r"<html(?:\s[^>]*)?>", re.IGNORECASE)


def vue_snippet(version: str) -> str:
    """Build the Vue.js CDN script tag for the default layout.

    Args:
        version: Vue 2 release (e.g. "2.6.14").

    Returns:
        HTML script tag loading the minified build from jsDelivr.
    """
    return f'<script src="https://cdn.jsdelivr.net/npm/vue@{version}/dist/vue.min.js"></script>'


def default_layout(vue_version: str = DEFAULT_VUE_VERSION) -> str:
    """Return the built-in layout, mounting Vue on ``#main``."""
    return f"""
<!DOCTYPE html>
<html>
    <head>
        <meta charset="utf-8">
        <meta http-equiv="X-UA-Compatible" content="IE=edge">
        <meta name="description" content="">
        <meta name="viewport" content="width=device-width, initial-scale=1">
        <title>{{{{ title }}}}</title>
        {vue_snippet(vue_version)}
        {{{{ styles }}}}
    </head>
    <body>
        {{{{ templates }}}}

        <main id="main" v-cloak>
            {{{{ root_element }}}}
        </main>

        {{{{ scripts }}}}
        <script>
            new Vue({{el: "#main"}});
        </script>
    </body>
</html>
"""


DEFAULT_LAYOUT = default_layout()


def create_environment() -> Environment:
    """Create the kida Environment used to compile layouts.

    Called once per loader. Autoescape is always on so the page title
    can never inject markup.
    """
    return Environment(autoescape=True)


def resolve_layout_source(layout: str) -> str:
    """Return the layout source for *layout*.

    If *layout* names an existing file its content is returned;
    otherwise *layout* is literal source and is returned unchanged.

    Raises:
        InvalidLayoutError: The file exists but could not be read.
    """
    path = Path(layout)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        # Literal HTML can be too long or contain NUL for a path lookup
        is_file = False
    if not is_file:
        return layout

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Layout file {str(path)!r} could not be read: {exc}"
        raise InvalidLayoutError(msg) from exc


def validate_layout(source: str) -> None:
    """Reject a layout that has no ``<html>`` opening tag."""
    if not _HTML_TAG_RE.search(source):
        msg = "Layout is not valid HTML: no <html> element found"
        raise InvalidLayoutError(msg)


def compile_layout(env: Environment, source: str) -> Template:
    """Compile validated layout *source* into a kida Template."""
    try:
        return env.from_string(source)
    except (TemplateSyntaxError, LexerError, ParseError) as exc:
        msg = f"Layout template has a syntax error: {exc}"
        raise LayoutSyntaxError(msg) from exc
