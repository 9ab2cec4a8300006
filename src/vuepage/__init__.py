"""vuepage — server-side page compositor for single-file Vue components.

Scans a directory of ``.vue`` files, concatenates their templates,
scripts and styles, and injects them plus a root element into a page
layout rendered with kida.

Basic usage::

    from vuepage import VueLoader

    loader = VueLoader.new()

    def index(request):
        return loader.render_string("Demo", "<hello-world></hello-world>")

Custom configuration::

    from vuepage import LoaderConfig, VueLoader

    loader = VueLoader.from_config(LoaderConfig(
        layout="./layout.html",
        component_path="./vuetify",
        compile_every_request=True,
    ))
"""

__version__ = "0.1.0"
__all__ = [
    "AggregateBlocks",
    "CompiledPage",
    "ComponentParseError",
    "ComponentRecord",
    "ConfigurationError",
    "DEFAULT_LAYOUT",
    "InvalidLayoutError",
    "LayoutSyntaxError",
    "LoaderConfig",
    "ScanResult",
    "ScanSkip",
    "VueLoader",
    "VuePageError",
    "extract",
    "scan",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import vuepage`` fast while providing a clean top-level API.
    """
    if name == "VueLoader":
        from vuepage.loader import VueLoader

        return VueLoader

    if name == "LoaderConfig":
        from vuepage.config import LoaderConfig

        return LoaderConfig

    if name == "DEFAULT_LAYOUT":
        from vuepage.layout import DEFAULT_LAYOUT

        return DEFAULT_LAYOUT

    if name in ("AggregateBlocks", "CompiledPage"):
        from vuepage import compiler as _compiler

        return getattr(_compiler, name)

    if name in ("ComponentRecord", "extract"):
        from vuepage import extractor as _extractor

        return getattr(_extractor, name)

    if name in ("ScanResult", "ScanSkip", "scan"):
        from vuepage import scanner as _scanner

        return getattr(_scanner, name)

    if name in (
        "ComponentParseError",
        "ConfigurationError",
        "InvalidLayoutError",
        "LayoutSyntaxError",
        "VuePageError",
    ):
        from vuepage import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
