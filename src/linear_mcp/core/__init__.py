"""Core domain surface for linear-mcp (transport-agnostic)."""

from .client import (
    LinearClient,
    LinearClientError,
    LinearGraphQLError,
    LinearHTTPError,
    LinearParseError,
    RetryConfig,
)
from .config import load_env_config, log_level_from_env
from .context import (
    MissingApiKeyError,
    RequestContext,
    apply_context,
    client_from_context,
    ensure_request_id,
    get_context,
    reset_context,
    seed_from_env,
    seed_from_headers,
)
from .errors import (
    AuthenticationError,
    OperationFailedError,
    ToolError,
    ToolValidationError,
    UnknownToolError,
)
from .registry import (
    ToolDispatcher,
    build_dispatcher,
    collect_handlers,
    discover_tool_modules,
    iter_tool_functions,
)
from .results import FailureKind, ToolFailure, ToolResult, ToolSuccess
from .schemas import SchemaRegistry, ToolSchema
from .tool_schemas import TOOL_SCHEMAS, default_registry

__all__ = [
    # Client
    "LinearClient",
    "RetryConfig",
    # Exceptions
    "LinearClientError",
    "LinearHTTPError",
    "LinearGraphQLError",
    "LinearParseError",
    "ToolError",
    "UnknownToolError",
    "ToolValidationError",
    "AuthenticationError",
    "OperationFailedError",
    # Config helpers
    "load_env_config",
    "log_level_from_env",
    # Schemas
    "ToolSchema",
    "SchemaRegistry",
    "TOOL_SCHEMAS",
    "default_registry",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "collect_handlers",
    "ToolDispatcher",
    "build_dispatcher",
    # Results
    "FailureKind",
    "ToolSuccess",
    "ToolFailure",
    "ToolResult",
    # Context
    "RequestContext",
    "MissingApiKeyError",
    "seed_from_env",
    "seed_from_headers",
    "get_context",
    "apply_context",
    "reset_context",
    "ensure_request_id",
    "client_from_context",
]
