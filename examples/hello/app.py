"""Hello World — two loaders behind a plain WSGI server.

``/`` uses the defaults: components from ``views/``, the built-in
layout with Vue from a CDN, compiled once at startup.

``/vuetify`` uses ``layout.html`` and the ``vuetify/`` components and
recompiles on every request, so edits show up on reload.

Run:
    python app.py
"""

import io
from pathlib import Path
from wsgiref.simple_server import make_server

from vuepage import LoaderConfig, VueLoader

HERE = Path(__file__).parent

default_loader = VueLoader.from_config(LoaderConfig(component_path=HERE / "views"))

vuetify_loader = VueLoader.from_config(
    LoaderConfig(
        layout=str(HERE / "layout.html"),
        component_path=HERE / "vuetify",
        compile_every_request=True,
    )
)

PAGES = {
    "/": (default_loader, "vuepage Demo", "<hello-world></hello-world>"),
    "/vuetify": (vuetify_loader, "vuepage Vuetify Demo", "<app></app>"),
}


def app(environ, start_response):
    page = PAGES.get(environ.get("PATH_INFO", "/"))
    if page is None:
        start_response("404 Not Found", [("Content-Type", "text/plain; charset=utf-8")])
        return [b"Not Found"]

    loader, title, root = page
    buf = io.StringIO()
    if not loader.render(buf, title, root):
        start_response("500 Internal Server Error", [("Content-Type", "text/plain; charset=utf-8")])
        return [b"Page could not be rendered"]

    start_response("200 OK", [("Content-Type", "text/html; charset=utf-8")])
    return [buf.getvalue().encode("utf-8")]


if __name__ == "__main__":
    with make_server("127.0.0.1", 8082, app) as server:
        print("Serving on http://127.0.0.1:8082")
        server.serve_forever()
