from __future__ import annotations

import posixpath

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vanity.app.ports.page_renderer import PageRenderer
from vanity.app.services.metadata_store import MetadataStore

_REASONS = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def plain_error(status_code: int) -> PlainTextResponse:
    return PlainTextResponse(_REASONS[status_code], status_code=status_code)


async def _plain_method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 405:
        return plain_error(405)
    return await http_exception_handler(request, exc)


def install_error_handlers(app: FastAPI) -> None:
    """Answer routing-level 405s (methods the package route does not list) in plain text too."""
    app.add_exception_handler(StarletteHTTPException, _plain_method_not_allowed)


def package_path(host: str, url_path: str) -> str:
    """
    Join host and URL path into a clean package path.

    Repeated slashes collapse, "." and ".." resolve, and the trailing slash is
    dropped: ("example.com", "/foo//bar/") -> "example.com/foo/bar".
    """
    joined = posixpath.normpath(f"{host}/{url_path}")
    if joined.startswith("//"):
        joined = joined[1:]
    return "" if joined == "." else joined


def get_metadata_store(request: Request) -> MetadataStore | None:
    return getattr(request.app.state, "metadata_store", None)


def get_page_renderer(request: Request) -> PageRenderer | None:
    return getattr(request.app.state, "page_renderer", None)


__all__ = [
    "plain_error",
    "install_error_handlers",
    "package_path",
    "get_metadata_store",
    "get_page_renderer",
]
