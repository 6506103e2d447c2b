"""Port: metadata page rendering."""
from __future__ import annotations

from typing import Protocol

from vanity.app.domain.models import MetadataRecord


class PageRenderer(Protocol):
    def render(self, record: MetadataRecord) -> str: ...
