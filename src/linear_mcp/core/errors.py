from __future__ import annotations

from typing import Optional

from .client import (
    LinearClientError,
    LinearGraphQLError,
    LinearHTTPError,
    LinearParseError,
)


class ToolError(Exception):
    """Base error for failures surfaced to MCP callers."""


class UnknownToolError(ToolError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolValidationError(ToolError, ValueError):
    """Structural validation failure: a missing or mis-typed argument."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class AuthenticationError(ToolError):
    """No authenticated Linear client is available."""


class OperationFailedError(ToolError):
    """The remote call reported success=false or returned no payload."""

    def __init__(self, operation: str, detail: Optional[str] = None):
        message = f"Failed to {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation
        self.detail = detail


__all__ = [
    "ToolError",
    "UnknownToolError",
    "ToolValidationError",
    "AuthenticationError",
    "OperationFailedError",
    "LinearClientError",
    "LinearHTTPError",
    "LinearGraphQLError",
    "LinearParseError",
]
