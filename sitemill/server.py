"""Local preview server for a built site."""

from __future__ import annotations

import collections.abc as cabc
import functools
import logging
import threading
import typing as typ
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer

from .builder import build
from .config import BuildOptions, BuildPaths, resolve_port

if typ.TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

logger = logging.getLogger(__name__)


class _QuietHandler(SimpleHTTPRequestHandler):
    """Static file handler that logs requests instead of writing to stderr."""

    def log_message(self, format: str, *args: typ.Any) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


class DevServer:
    """Serve a directory over HTTP from a background thread.

    The listener binds as soon as the instance is created; call :meth:`close`
    (or use the instance as a context manager) to stop listening.
    """

    def __init__(self, root: Path, port: int, host: str = "") -> None:
        self.root = root
        handler = functools.partial(_QuietHandler, directory=str(root))
        self._server = ThreadingHTTPServer((host, port), handler)
        self._thread = threading.Thread(
            target=self._server.serve_forever, name="sitemill-serve", daemon=True
        )
        self._thread.start()

    @property
    def port(self) -> int:
        """Return the bound port, which differs from the request when it was 0."""
        return self._server.server_address[1]

    @property
    def url(self) -> str:
        return f"http://localhost:{self.port}"

    def wait(self) -> None:
        """Block until the server thread exits."""
        self._thread.join()

    def close(self) -> None:
        """Stop serving and release the port."""
        self._server.shutdown()
        self._server.server_close()
        self._thread.join()

    def __enter__(self) -> DevServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def serve(
    site_config: cabc.Mapping[str, typ.Any] | None = None,
    options: BuildOptions | None = None,
) -> DevServer:
    """Build the site, then serve its output directory.

    The port comes from the ``PORT`` environment variable, then
    ``options.port``, then 8080.
    """
    options = options or BuildOptions()
    build(site_config, options)
    out_dir = BuildPaths.resolve(options).out_dir
    server = DevServer(out_dir, resolve_port(options))
    logger.debug("serving %s at %s", out_dir, server.url)
    return server


__all__ = ["DevServer", "serve"]
