"""Port: metadata table loading. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Protocol

from vanity.app.domain.models import MetadataTable


class MetadataLoader(Protocol):
    """Builds a fresh table from its source on every call; raises ConfigError on failure."""

    def load(self) -> MetadataTable: ...
