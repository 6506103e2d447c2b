"""Reload trigger factory: selects implementation from config."""
from __future__ import annotations

from typing import Any, Callable

from vanity.app.config.settings import Settings
from vanity.app.constants import ReloadTriggerKind
from vanity.app.infrastructure.reload.null_trigger import NullReloadTrigger
from vanity.app.infrastructure.reload.poll_trigger import PollingReloadTrigger
from vanity.app.infrastructure.reload.signal_trigger import SignalReloadTrigger
from vanity.app.ports.reload_trigger import ReloadTrigger


def create_reload_trigger(settings: Settings, reload: Callable[[], Any]) -> ReloadTrigger:
    kind = settings.reload_trigger.strip().lower()

    if kind == ReloadTriggerKind.SIGNAL:
        return SignalReloadTrigger(reload, settings.reload_signal)

    if kind == ReloadTriggerKind.POLL:
        return PollingReloadTrigger(reload, settings.config_path, settings.reload_poll_interval_seconds)

    if kind == ReloadTriggerKind.NONE:
        return NullReloadTrigger()

    raise ValueError(f"Unsupported reload trigger: {kind}")
