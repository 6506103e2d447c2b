"""
Load-then-swap of the metadata table.

Every reload trigger calls the same ReloadCommand. A failed load leaves the
store untouched and is reported through the returned outcome and the log.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from loguru import logger

from vanity.app.core import SERVICE_NAME
from vanity.app.domain.errors import ConfigError
from vanity.app.ports.metadata_loader import MetadataLoader
from vanity.app.services.metadata_store import MetadataStore


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


@dataclass(frozen=True)
class ReloadOutcome:
    """Result of a reload.
    success=True => record_count set to the size of the installed table.
    success=False => error set; the previous table is still installed.
    """
    success: bool
    record_count: int = 0
    error: str | None = None


class ReloadCommand:
    def __init__(self, loader: MetadataLoader, store: MetadataStore) -> None:
        self._loader = loader
        self._store = store
        # Triggers may fire concurrently; reloads run one at a time.
        self._reload_lock = threading.Lock()

    def initial_load(self) -> int:
        """Install the first table. ConfigError propagates: there is nothing to fall back to."""
        with self._reload_lock:
            table = self._loader.load()
            self._store.swap(table)
        return len(table)

    def run(self) -> ReloadOutcome:
        with self._reload_lock:
            try:
                table = self._loader.load()
            except ConfigError as e:
                logger.bind(
                    service_name=SERVICE_NAME,
                    event="metadata_reload_failed",
                    path=e.path,
                ).error("reload failed, keeping previous table: {}", e.reason)
                return ReloadOutcome(success=False, error=str(e))
            previous = self._store.swap(table)

        _log(
            "metadata_reloaded",
            record_count=len(table),
            previous_record_count=len(previous) if previous is not None else 0,
        )
        return ReloadOutcome(success=True, record_count=len(table))

    def __call__(self) -> ReloadOutcome:
        return self.run()
