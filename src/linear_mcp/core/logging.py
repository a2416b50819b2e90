import logging
import sys
from typing import Any, Iterable, Optional, TextIO

LOG_EXTRA_FIELDS = (
    "request_id",
    "method",
    "path",
    "endpoint",
    "tool",
    "operation",
    "status",
    "error_type",
    "duration_ms",
    "attempt",
)

# httpx logs every request at INFO; graphql_call events already cover that
QUIET_LOGGERS = ("httpx", "httpcore")


def _quote(value: Any) -> str:
    if isinstance(value, (bool, int, float)):
        return str(value)
    text = str(value)
    if not text or any(c in text for c in ' ="'):
        return '"' + text.replace('"', '\\"') + '"'
    return text


class LogfmtFormatter(logging.Formatter):
    """Render records as ``key=value`` pairs; absent extras are omitted."""

    def __init__(self, fields: Iterable[str] = LOG_EXTRA_FIELDS):
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        pairs = [("level", record.levelname.lower()), ("logger", record.name)]
        message = record.getMessage()
        if message:
            pairs.append(("event", message))
        pairs.extend(
            (name, getattr(record, name))
            for name in self.fields
            if getattr(record, name, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))
        return " ".join(f"{key}={_quote(value)}" for key, value in pairs)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Send logfmt lines to stderr (stdout carries the stdio MCP protocol)."""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(LogfmtFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
