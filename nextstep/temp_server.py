"""
Temporary local server publishing generated portfolios for "Open" / "Share".
"""
from __future__ import annotations
import logging
import shutil
import socket
import tempfile
import threading
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

logger = logging.getLogger(__name__)


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        logger.debug("preview %s - %s", self.address_string(), format % args)


class PreviewServer:
    def __init__(self, host: str = "127.0.0.1"):
        self.host = host
        self.server = None
        self.server_thread = None
        self.root = None
        self.port = None

    @property
    def is_running(self) -> bool:
        return self.server is not None

    def start(self) -> None:
        if self.is_running:
            return
        self.root = Path(tempfile.mkdtemp(prefix="nextstep-portfolios-"))
        self.port = self._find_free_port()
        handler = partial(_QuietHandler, directory=str(self.root))
        self.server = ThreadingHTTPServer((self.host, self.port), handler)
        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        logger.info("Portfolio preview server on http://%s:%d/", self.host, self.port)

    def publish(self, html: str, slug: str) -> str:
        """Write ``html`` under ``/<slug>/`` (replacing any earlier version) and return its URL."""
        if not slug or "/" in slug or slug.startswith("."):
            raise ValueError(f"Invalid portfolio slug: {slug!r}")
        self.start()
        target = self.root / slug / "index.html"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        return f"http://{self.host}:{self.port}/{slug}/"

    def stop(self) -> None:
        if self.server:
            self.server.shutdown()
            self.server.server_close()
            self.server = None
        if self.server_thread:
            self.server_thread.join(timeout=2)
            self.server_thread = None
        if self.root:
            shutil.rmtree(self.root, ignore_errors=True)
            self.root = None
        self.port = None

    def _find_free_port(self) -> int:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind((self.host, 0))
            return s.getsockname()[1]


# Global instance for the streamlit app
_preview_server = PreviewServer()


def publish_portfolio(html: str, slug: str) -> str:
    return _preview_server.publish(html, slug)


def cleanup_preview_server() -> None:
    _preview_server.stop()
