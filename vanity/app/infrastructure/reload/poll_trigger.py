from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable

from loguru import logger

from vanity.app.constants import TriggerState
from vanity.app.core import SERVICE_NAME


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _mtime_ns(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except OSError:
        return None


class PollingReloadTrigger:
    """ReloadTrigger that reloads whenever the configuration file's mtime changes."""

    def __init__(self, reload: Callable[[], Any], path: str | Path, interval_seconds: float) -> None:
        if interval_seconds <= 0:
            raise ValueError("reload poll interval must be positive")
        self._reload = reload
        self._path = Path(path)
        self._interval = float(interval_seconds)
        self._state = TriggerState.STOPPED
        self._task: asyncio.Task[None] | None = None
        self._last_mtime: int | None = None

    @property
    def running(self) -> bool:
        return self._state == TriggerState.RUNNING

    async def start(self) -> None:
        if self._task is not None:
            return
        self._last_mtime = _mtime_ns(self._path)
        self._task = asyncio.create_task(self._poll_loop())
        self._state = TriggerState.RUNNING
        _log("reload_trigger_started", trigger="poll", path=str(self._path), interval=self._interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        self._state = TriggerState.STOPPED
        _log("reload_trigger_stopped", trigger="poll", path=str(self._path))

    async def _poll_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            mtime = _mtime_ns(self._path)
            if mtime == self._last_mtime:
                continue
            self._last_mtime = mtime
            _log("config_change_detected", path=str(self._path))
            try:
                await asyncio.to_thread(self._reload)
            except Exception as e:
                logger.exception("reload failed: {}", e)
