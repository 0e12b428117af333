"""Serve a built site over HTTP for local previews."""

from __future__ import annotations

import functools
import logging
import typing as typ
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LISTEN = "0.0.0.0:8080"


class _QuietHandler(SimpleHTTPRequestHandler):
    """Static file handler that routes request logs through ``logging``."""

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        logger.debug("%s %s", self.address_string(), format % args)


def parse_listen(listen: str) -> tuple[str, int]:
    """Split ``host:port`` into its parts.

    Examples
    --------
    >>> parse_listen("127.0.0.1:8000")
    ('127.0.0.1', 8000)
    >>> parse_listen(":9000")
    ('', 9000)
    """
    host, sep, port = listen.rpartition(":")
    if not sep or not port.isdigit():
        msg = f"listen address must look like host:port, found {listen!r}"
        raise ValueError(msg)
    return host, int(port)


def make_server(public_dir: Path, listen: str = DEFAULT_LISTEN) -> ThreadingHTTPServer:
    """Bind a server that serves files from ``public_dir``.

    Raises
    ------
    FileNotFoundError
        If ``public_dir`` does not exist; build the site first.
    """
    if not public_dir.is_dir():
        msg = f"Output directory '{public_dir}' not found; run `recipes build` first."
        raise FileNotFoundError(msg)
    handler = functools.partial(_QuietHandler, directory=str(public_dir))
    return ThreadingHTTPServer(parse_listen(listen), handler)


def serve(public_dir: Path, listen: str = DEFAULT_LISTEN) -> None:
    """Serve ``public_dir`` until interrupted with Ctrl+C."""
    with make_server(public_dir, listen) as httpd:
        host, port = httpd.server_address[:2]
        logger.info("serving %s at http://%s:%s/", public_dir, host, port)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("stopping server")


__all__ = ["DEFAULT_LISTEN", "make_server", "parse_listen", "serve"]
