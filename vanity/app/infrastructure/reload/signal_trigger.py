from __future__ import annotations

import asyncio
import signal
from typing import Any, Callable

from loguru import logger

from vanity.app.constants import TriggerState
from vanity.app.core import SERVICE_NAME


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def resolve_signal(name: str) -> signal.Signals:
    """Map "SIGUSR1" / "USR1" / "10" to a signal; ValueError if unknown on this platform."""
    value = name.strip().upper()
    if value.isdigit():
        return signal.Signals(int(value))
    if not value.startswith("SIG"):
        value = "SIG" + value
    try:
        return signal.Signals[value]
    except KeyError:
        raise ValueError(f"Unsupported reload signal: {name}") from None


class SignalReloadTrigger:
    """
    ReloadTrigger that reloads when the process receives a signal.

    The handler is installed on the running event loop; each delivery runs
    `reload` in a worker thread so request handling is never blocked by it.
    Must be started from the main thread's event loop.
    """

    def __init__(self, reload: Callable[[], Any], signal_name: str = "SIGUSR1") -> None:
        self._reload = reload
        self._signum = resolve_signal(signal_name)
        self._state = TriggerState.STOPPED
        self._loop: asyncio.AbstractEventLoop | None = None
        self._pending: set[asyncio.Task[Any]] = set()

    @property
    def running(self) -> bool:
        return self._state == TriggerState.RUNNING

    @property
    def signum(self) -> signal.Signals:
        return self._signum

    async def start(self) -> None:
        loop = asyncio.get_running_loop()
        try:
            loop.add_signal_handler(self._signum, self._on_signal)
        except (NotImplementedError, RuntimeError) as e:
            logger.bind(service_name=SERVICE_NAME, event="reload_trigger_unavailable").warning(
                "cannot install {} handler: {}", self._signum.name, e
            )
            return
        self._loop = loop
        self._state = TriggerState.RUNNING
        _log("reload_trigger_started", trigger="signal", signal=self._signum.name)

    async def stop(self) -> None:
        if self._loop is not None:
            self._loop.remove_signal_handler(self._signum)
            self._loop = None
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        if self._state == TriggerState.RUNNING:
            _log("reload_trigger_stopped", trigger="signal", signal=self._signum.name)
        self._state = TriggerState.STOPPED

    def _on_signal(self) -> None:
        _log("reload_signal_received", signal=self._signum.name)
        if self._loop is None:
            logger.bind(service_name=SERVICE_NAME, event="reload_signal_ignored").warning(
                "{} received while trigger is stopped", self._signum.name
            )
            return
        task = self._loop.create_task(asyncio.to_thread(self._reload))
        self._pending.add(task)
        task.add_done_callback(self._on_reload_done)

    def _on_reload_done(self, task: asyncio.Task[Any]) -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.opt(exception=task.exception()).bind(
                service_name=SERVICE_NAME, event="reload_crashed"
            ).error("reload raised unexpectedly")
