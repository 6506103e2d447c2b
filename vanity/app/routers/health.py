from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from vanity.app.constants import HEALTH_PREFIX
from vanity.app.core import SERVICE_NAME
from vanity.app.routers.utils import get_metadata_store

health_router = APIRouter(prefix=HEALTH_PREFIX, tags=["Health"])

def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")

@health_router.get(
    "/live",
    summary="Liveness probe",
    description="Returns 200 if the server process is running.",
    responses={200: {"description": "Service is alive."}},
)
async def live() -> dict:
    return {"status": "ok"}


@health_router.get(
    "/ready",
    summary="Readiness probe",
    description="Returns 200 only when a metadata table has been loaded and installed.",
    responses={
        200: {"description": "Metadata table is installed."},
        503: {"description": "No metadata table installed yet."},
    },
)
async def ready(request: Request) -> Response:
    store = get_metadata_store(request)
    if store is None:
        _log("components_not_initialized")
        return Response(status_code=503, content="Not ready")
    table = store.snapshot()
    if table is None:
        _log("metadata_not_loaded")
        return Response(status_code=503, content="Metadata not loaded")
    return Response(status_code=200, content="OK")
