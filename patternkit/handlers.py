"""A small web service with a single JSON endpoint."""

from __future__ import annotations

import json
import logging
import sys
from typing import Callable, Iterable
from wsgiref.simple_server import make_server

log = logging.getLogger(__name__)

StartResponse = Callable[..., object]
WsgiApp = Callable[[dict, StartResponse], Iterable[bytes]]

PORT = 4000

_USER = {"Name": "Bill", "Email": "bill@example.com"}


def send_json(environ: dict, start_response: StartResponse) -> list[bytes]:
    """Respond with a simple JSON document describing a user."""
    body = (json.dumps(_USER, separators=(",", ":")) + "\n").encode("utf-8")
    start_response(
        "200 OK",
        [("Content-Type", "application/json"), ("Content-Length", str(len(body)))],
    )
    return [body]


def _not_found(environ: dict, start_response: StartResponse) -> list[bytes]:
    body = b"404 page not found\n"
    start_response(
        "404 Not Found",
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def make_app() -> WsgiApp:
    """Return a WSGI application routing the service's endpoints."""
    routes: dict[str, WsgiApp] = {"/sendjson": send_json}

    def app(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        handler = routes.get(environ.get("PATH_INFO", ""), _not_found)
        return handler(environ, start_response)

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the application on port 4000 until interrupted."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    with make_server("", PORT, make_app()) as server:
        log.info("listener : Started : Listening on :%d", PORT)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))