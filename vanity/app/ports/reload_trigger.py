"""Port: something that decides when to reload metadata. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Protocol


class ReloadTrigger(Protocol):
    """Interface for reload trigger lifecycle."""

    async def start(self) -> None: ...
    async def stop(self) -> None: ...

    @property
    def running(self) -> bool: ...
