"""linear_mcp package exports."""

from .core.client import (
    LinearClient,
    LinearClientError,
    LinearGraphQLError,
    LinearHTTPError,
    LinearParseError,
    RetryConfig,
)
from .core.registry import ToolDispatcher, build_dispatcher
from .core.tool_schemas import default_registry
from .server import build_server

__all__ = [
    # Client
    "LinearClient",
    "RetryConfig",
    # Exceptions
    "LinearClientError",
    "LinearHTTPError",
    "LinearGraphQLError",
    "LinearParseError",
    # Server utilities
    "ToolDispatcher",
    "build_dispatcher",
    "build_server",
    "default_registry",
]
