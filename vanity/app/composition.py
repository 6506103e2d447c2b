"""
Composition root: single place where concrete implementations are wired.

Builds the metadata loader, store, reload command, reload trigger and page
renderer from settings; provides connect/close lifecycle. Used by lifespan to
populate app.state. No DI container library; explicit wiring only.
"""
from __future__ import annotations

from vanity.app.config.settings import Settings
from vanity.app.infrastructure.persistence.factory import create_metadata_loader
from vanity.app.infrastructure.reload.factory import create_reload_trigger
from vanity.app.infrastructure.templating.jinja_page_renderer import JinjaPageRenderer
from vanity.app.ports.metadata_loader import MetadataLoader
from vanity.app.ports.page_renderer import PageRenderer
from vanity.app.ports.reload_trigger import ReloadTrigger
from vanity.app.services.metadata_store import MetadataStore
from vanity.app.services.reload_metadata import ReloadCommand


class AppDependencies:
    """Holds wired dependencies and their lifecycle. Built only in composition root."""

    def __init__(
        self,
        *,
        settings: Settings,
        loader: MetadataLoader,
        metadata_store: MetadataStore,
        reload_command: ReloadCommand,
        reload_trigger: ReloadTrigger,
        page_renderer: PageRenderer,
    ) -> None:
        self._settings = settings
        self._loader = loader
        self._metadata_store = metadata_store
        self._reload_command = reload_command
        self._reload_trigger = reload_trigger
        self._page_renderer = page_renderer
        self._trigger_started = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def loader(self) -> MetadataLoader:
        return self._loader

    @property
    def metadata_store(self) -> MetadataStore:
        return self._metadata_store

    @property
    def reload_command(self) -> ReloadCommand:
        return self._reload_command

    @property
    def reload_trigger(self) -> ReloadTrigger:
        return self._reload_trigger

    @property
    def page_renderer(self) -> PageRenderer:
        return self._page_renderer

    async def connect(self) -> None:
        """Load the first table (ConfigError propagates) and start listening for reloads."""
        self._reload_command.initial_load()
        await self._reload_trigger.start()
        self._trigger_started = True

    async def close(self) -> None:
        if self._trigger_started:
            await self._reload_trigger.stop()
            self._trigger_started = False


def create_app_dependencies(settings: Settings | None = None) -> AppDependencies:
    """
    Composition root: build all app dependencies in one place.
    Caller owns lifecycle (connect/close). Loader and trigger implementations
    are selected from settings (metadata_backend, reload_trigger).
    """
    _settings = settings or Settings()
    loader = create_metadata_loader(_settings)
    store = MetadataStore()
    command = ReloadCommand(loader, store)
    trigger = create_reload_trigger(_settings, command.run)

    return AppDependencies(
        settings=_settings,
        loader=loader,
        metadata_store=store,
        reload_command=command,
        reload_trigger=trigger,
        page_renderer=JinjaPageRenderer(),
    )
