from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse
from loguru import logger

from vanity.app.constants import GO_GET_PARAM, GO_GET_VALUE, PACKAGE_ROUTE_METHODS
from vanity.app.core import SERVICE_NAME
from vanity.app.domain.errors import RenderError
from vanity.app.routers.utils import get_metadata_store, get_page_renderer, package_path, plain_error


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


go_import_router = APIRouter(tags=["GoImport"])


# Sync handler: runs on the server threadpool, so requests are served in parallel.
@go_import_router.api_route(
    "/{requested_path:path}",
    methods=PACKAGE_ROUTE_METHODS,
    summary="Serve go-import metadata",
    description="Resolves <host>/<path> against the metadata table and returns the HTML page carrying the go-import (and optional go-source / refresh) meta tags.",
    response_class=HTMLResponse,
    responses={
        200: {"description": "Metadata page."},
        400: {"description": "Missing or incorrect go-get query parameter."},
        404: {"description": "No record matches the package path."},
        405: {"description": "Method other than GET."},
        500: {"description": "Page failed to render."},
        503: {"description": "No metadata table installed."},
    },
)
def get_package(request: Request, requested_path: str) -> Response:
    if request.method != "GET":
        return plain_error(405)
    # First value wins when the parameter is repeated.
    go_get = request.query_params.getlist(GO_GET_PARAM)
    if not go_get or go_get[0] != GO_GET_VALUE:
        return plain_error(400)

    # scope["path"] is the decoded path; request.url would re-split on an encoded "?" or "#".
    pkg = package_path(request.headers.get("host", ""), request.scope["path"])
    _log("package_requested", package=pkg)

    store = get_metadata_store(request)
    renderer = get_page_renderer(request)
    if store is None or renderer is None or not store.ready:
        return plain_error(503)

    record = store.lookup(pkg)
    if record is None:
        _log("package_not_found", package=pkg)
        return plain_error(404)

    try:
        page = renderer.render(record)
    except RenderError as e:
        logger.bind(service_name=SERVICE_NAME, event="render_failed", package=pkg).error("{}", e)
        return plain_error(500)
    return HTMLResponse(page)
