from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from vanity.app.composition import create_app_dependencies
from vanity.app.config.settings import Settings
from vanity.app.core import SERVICE_NAME
from vanity.app.domain.errors import ConfigError
from vanity.app.routers.go_import import go_import_router
from vanity.app.routers.health import health_router
from vanity.app.routers.utils import install_error_handlers


def create_app(settings: Settings | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.bind(service_name=SERVICE_NAME, event="server_starting").info("")
        deps = create_app_dependencies(settings)
        try:
            await deps.connect()
        except ConfigError as e:
            logger.bind(service_name=SERVICE_NAME, event="metadata_load_failed", path=e.path).error(
                "cannot load metadata: {}", e.reason
            )
            raise

        app.state.settings = deps.settings
        app.state.metadata_store = deps.metadata_store
        app.state.reload_command = deps.reload_command
        app.state.page_renderer = deps.page_renderer
        try:
            yield
        finally:
            logger.bind(service_name=SERVICE_NAME, event="server_stopping").info("")
            await deps.close()

    app = FastAPI(
        title="Vanity Import Server",
        version="0.1.0",
        lifespan=lifespan,
        # Keep /docs, /redoc and /openapi.json free for package paths.
        docs_url=None,
        redoc_url=None,
        openapi_url="/-/openapi.json",
    )

    install_error_handlers(app)
    # Health first: the package route matches every path.
    app.include_router(health_router)
    app.include_router(go_import_router)
    return app
