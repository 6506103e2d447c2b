"""App-level constants shared across modules."""
from __future__ import annotations

GO_GET_PARAM = "go-get"
GO_GET_VALUE = "1"

HEALTH_PREFIX = "/-/health"

# Every method is routed to the package handler so non-GET requests get a 405
# from the handler itself rather than falling through as "not found".
PACKAGE_ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class ReloadTriggerKind:
    SIGNAL = "signal"
    POLL = "poll"
    NONE = "none"


class TriggerState:
    STOPPED = "STOPPED"
    RUNNING = "RUNNING"
