"""vuepage exception hierarchy.

Shared across the extractor, scanner, compiler and loader so every
module raises and catches the same types.
"""


class VuePageError(Exception):
    """Base for all vuepage-specific errors."""


class ConfigurationError(VuePageError):
    """Raised when loader configuration is invalid.

    Fatal at construction: ``VueLoader.from_config()`` propagates it and
    no loader is produced.
    """


class InvalidLayoutError(ConfigurationError):
    """The resolved layout is not an HTML document or could not be read."""


class LayoutSyntaxError(ConfigurationError):
    """kida rejected the layout source.

    The kida syntax, lexer or parser error is chained as ``__cause__``.
    """


class ComponentParseError(VuePageError):
    """A component file could not be turned into a ComponentRecord.

    Raised by ``extract()``. The scanner records it as a skip instead of
    letting it abort the compile pass.
    """

    def __init__(self, file_name: str, detail: str = "") -> None:
        self.file_name = file_name
        self.detail = detail
        super().__init__(f"{file_name}: {detail}" if detail else file_name)
