"""
Holds the currently published metadata table.

The store never mutates a table. `swap` replaces the reference under a lock;
readers take the same lock only to copy the reference and then work on that
snapshot, so a lookup sees either the old table or the new one, never both.
"""
from __future__ import annotations

import threading

from vanity.app.domain.models import MetadataRecord, MetadataTable, lookup


class MetadataStore:
    def __init__(self, table: MetadataTable | None = None) -> None:
        self._lock = threading.Lock()
        self._table = table

    @property
    def ready(self) -> bool:
        return self.snapshot() is not None

    def snapshot(self) -> MetadataTable | None:
        with self._lock:
            return self._table

    def swap(self, table: MetadataTable) -> MetadataTable | None:
        """Install `table` and return the one it replaced."""
        with self._lock:
            previous, self._table = self._table, table
        return previous

    def lookup(self, package_path: str) -> MetadataRecord | None:
        table = self.snapshot()
        if table is None:
            return None
        return lookup(table, package_path)
