"""Structured event logging shared by the client, dispatcher and transports.

Events are ordinary log records: the event name is the message and the
fields travel as record attributes, so ``LogfmtFormatter`` (or any other
formatter) can render them.
"""

from __future__ import annotations

import logging
import time
from typing import Any

EVENT_LOGGER = "linear_mcp.observability"

# Attributes every LogRecord already carries; fields may not shadow them.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def elapsed_ms(start: float) -> int:
    """Milliseconds since ``start`` (a ``time.perf_counter()`` reading)."""
    return int((time.perf_counter() - start) * 1000)


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    extra = {
        key: value
        for key, value in fields.items()
        if value is not None and key not in _RECORD_ATTRS
    }
    (logger or logging.getLogger(EVENT_LOGGER)).log(level, event, extra=extra)


__all__ = ["EVENT_LOGGER", "elapsed_ms", "log_event"]
