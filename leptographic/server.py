"""HTTP server that renders the showcase page as a full HTML document."""

from __future__ import annotations

import argparse
import logging
import os
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional, Sequence
from urllib.parse import urlsplit

from .app import App, render_document

log = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
SITE_ADDR_ENV = "LEPTOS_SITE_ADDR"
ROUTES = frozenset({"/"})


def make_handler(app: App) -> type[BaseHTTPRequestHandler]:
    """Return a request handler class that serves ``app``.

    Known routes answer 200; any other path answers 404 with the same page.
    """
    lock = threading.Lock()

    class AppHandler(BaseHTTPRequestHandler):
        server_version = "leptographic"

        def _respond(self, include_body: bool) -> None:
            path = urlsplit(self.path).path or "/"
            status = 200 if path in ROUTES else 404
            with lock:
                body = render_document(app).encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if include_body:
                self.wfile.write(body)

        def do_GET(self) -> None:  # noqa: N802
            self._respond(include_body=True)

        def do_HEAD(self) -> None:  # noqa: N802
            self._respond(include_body=False)

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            log.info("%s - %s", self.address_string(), format % args)

    return AppHandler


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve the showcase on ``host:port`` until interrupted."""
    with ThreadingHTTPServer((host, port), make_handler(App())) as server:
        bound_port = server.server_address[1]
        print(f"listening on http://{host}:{bound_port}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port_text = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"invalid site address {address!r}")
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in site address {address!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in site address {address!r}")
    return host, port


def _port(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port {text!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and run the server."""
    env_addr = os.environ.get(SITE_ADDR_ENV)
    default_host, default_port = DEFAULT_HOST, DEFAULT_PORT
    parser = argparse.ArgumentParser(
        prog="leptographic", description="Serve the component showcase."
    )
    if env_addr:
        try:
            default_host, default_port = _split_address(env_addr)
        except ValueError as exc:
            parser.error(str(exc))
    parser.add_argument("--host", default=default_host, help="address to bind")
    parser.add_argument("--port", type=_port, default=default_port, help="port to bind")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    serve(args.host, args.port)
    return 0