"""Reload trigger that never fires. Used when reloads are disabled, and in tests."""
from __future__ import annotations


class NullReloadTrigger:
    def __init__(self) -> None:
        self._running = False

    async def start(self) -> None:
        self._running = True

    async def stop(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running
