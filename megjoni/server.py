"""Configuration and WSGI application serving the shop's pages."""

import argparse
import mimetypes
import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from wsgiref.simple_server import make_server

from megjoni.app import render_page, resolve

DEFAULT_SITE_ADDR = "127.0.0.1:3000"
DEFAULT_SITE_ROOT = "target/site"
DEFAULT_SITE_PKG_DIR = "pkg"

_HTML_TYPE = "text/html; charset=utf-8"
_ALLOWED_METHODS = ("GET", "HEAD")


class Env(Enum):
    DEV = "DEV"
    PROD = "PROD"

    @classmethod
    def parse(cls, value):
        normalized = value.strip().lower()
        if normalized in ("dev", "development"):
            return cls.DEV
        if normalized in ("prod", "production"):
            return cls.PROD
        raise ValueError(f"unknown environment: {value!r}")


def _parse_addr(addr):
    host, sep, port_text = addr.strip().rpartition(":")
    if not sep or not host:
        raise ValueError(f"address must be host:port: {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_text)
    except ValueError as exc:
        raise ValueError(f"invalid port in address: {addr!r}") from exc
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in address: {addr!r}")
    return host, port


@dataclass(frozen=True)
class SiteConfig:
    """Where the site listens and where its static files live."""

    host: str = "127.0.0.1"
    port: int = 3000
    site_root: str = DEFAULT_SITE_ROOT
    site_pkg_dir: str = DEFAULT_SITE_PKG_DIR
    env: Env = Env.DEV

    @property
    def site_addr(self):
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"


def load_config(env=None):
    """Build a SiteConfig from LEPTOS_* variables in ``env`` (default: os.environ)."""
    if env is None:
        env = os.environ
    host, port = _parse_addr(env.get("LEPTOS_SITE_ADDR", DEFAULT_SITE_ADDR))
    return SiteConfig(
        host=host,
        port=port,
        site_root=env.get("LEPTOS_SITE_ROOT", DEFAULT_SITE_ROOT),
        site_pkg_dir=env.get("LEPTOS_SITE_PKG_DIR", DEFAULT_SITE_PKG_DIR),
        env=Env.parse(env.get("LEPTOS_ENV", "DEV")),
    )


def _static_file(root, path):
    relative = path.split("?", 1)[0].lstrip("/")
    if not relative:
        return None
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def create_app(config):
    """Return a WSGI application serving routed pages and static files."""
    root = Path(config.site_root).resolve()

    def application(environ, start_response):
        method = environ.get("REQUEST_METHOD", "GET").upper()
        path = environ.get("PATH_INFO", "/") or "/"

        if method not in _ALLOWED_METHODS:
            body = b"Method Not Allowed"
            start_response(
                "405 Method Not Allowed",
                [
                    ("Content-Type", "text/plain; charset=utf-8"),
                    ("Content-Length", str(len(body))),
                    ("Allow", ", ".join(_ALLOWED_METHODS)),
                ],
            )
            return [b"" if method == "HEAD" else body]

        if resolve(path) is not None:
            status, content_type = "200 OK", _HTML_TYPE
            body = render_page(path).encode("utf-8")
        else:
            file_path = _static_file(root, path)
            if file_path is not None:
                status = "200 OK"
                guessed, _ = mimetypes.guess_type(file_path.name)
                content_type = guessed or "application/octet-stream"
                body = file_path.read_bytes()
            else:
                status, content_type = "404 Not Found", _HTML_TYPE
                body = render_page(path).encode("utf-8")

        start_response(
            status,
            [("Content-Type", content_type), ("Content-Length", str(len(body)))],
        )
        return [b"" if method == "HEAD" else body]

    return application


def main(argv=None):
    """Serve the site until interrupted."""
    parser = argparse.ArgumentParser(prog="megjoni", description="Serve the shop.")
    parser.add_argument("--addr", help="address to listen on, as host:port")
    args = parser.parse_args(argv)

    override = _parse_addr(args.addr) if args.addr else None
    config = load_config()
    if override is not None:
        config = replace(config, host=override[0], port=override[1])

    app = create_app(config)
    with make_server(config.host, config.port, app) as server:
        print(f"listening on http://{config.site_addr}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0