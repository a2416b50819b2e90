from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
import time
from types import ModuleType
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel

from .client import LinearClient, LinearClientError
from .errors import (
    AuthenticationError,
    OperationFailedError,
    ToolValidationError,
    UnknownToolError,
)
from .observability import elapsed_ms, log_event
from .results import FailureKind, ToolFailure, ToolResult, ToolSuccess
from .schemas import SchemaRegistry

log = logging.getLogger("linear_mcp.core.registry")

TOOL_PREFIX = "linear_"

Handler = Callable[[LinearClient, BaseModel], Awaitable[ToolSuccess]]
ClientProvider = Callable[[], LinearClient]


# --- Discovery helpers ----------------------------------------------------- #


def discover_tool_modules(
    package_name: str = "linear_mcp.core.tools",
) -> List[ModuleType]:
    """Import all modules under the given tools package, skipping failures."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        name = finder.name
        try:
            module = importlib.import_module(name)
            modules.append(module)
        except Exception as exc:  # pragma: no cover - logged, not fatal
            log.error("Failed importing tool module %s: %s", name, exc)
            continue

    return modules


def iter_tool_functions(module: ModuleType) -> Iterable[Callable]:
    """Yield functions that satisfy the handler convention."""
    for _, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            # Skip imported functions
            continue

        params = list(inspect.signature(func).parameters.values())
        if len(params) != 2 or params[0].name != "client":
            log.debug(
                "Skipping %s.%s: expected (client, args) parameters",
                module.__name__,
                func.__name__,
            )
            continue

        yield func


def collect_handlers(modules: Iterable[ModuleType]) -> Dict[str, Handler]:
    handlers: Dict[str, Handler] = {}
    for module in modules:
        for func in iter_tool_functions(module):
            name = TOOL_PREFIX + func.__name__
            if name in handlers:
                raise ValueError(f"Duplicate tool name detected: {name}")
            handlers[name] = func
            log.debug("Discovered handler: %s (%s)", name, module.__name__)
    return handlers


# --- Dispatch -------------------------------------------------------------- #


class ToolDispatcher:
    """Route a tool call through validation, the auth gate and its handler.

    Every outcome comes back as an explicit ToolSuccess or ToolFailure.
    """

    def __init__(
        self,
        schemas: SchemaRegistry,
        handlers: Mapping[str, Handler],
        client_provider: ClientProvider,
    ):
        missing = sorted(set(schemas) - set(handlers))
        if missing:
            raise ValueError(f"Tools without a handler: {', '.join(missing)}")
        orphaned = sorted(set(handlers) - set(schemas))
        if orphaned:
            raise ValueError(f"Handlers without a schema: {', '.join(orphaned)}")

        self.schemas = schemas
        self.handlers = dict(handlers)
        self.client_provider = client_provider

    async def dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolResult:
        start = time.perf_counter()
        status = "exception"
        try:
            result = await self._dispatch(name, arguments)
            status = "ok" if isinstance(result, ToolSuccess) else result.kind.value
            return result
        finally:
            log_event(
                "tool_call",
                logger=log,
                tool=name,
                operation=getattr(self.schemas.get(name), "operation", None),
                status=status,
                duration_ms=elapsed_ms(start),
            )

    async def _dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolResult:
        try:
            schema = self.schemas.get_schema(name)
        except UnknownToolError as exc:
            return ToolFailure(kind=FailureKind.UNKNOWN_TOOL, message=str(exc))

        operation = schema.operation
        try:
            args = schema.validate(arguments)
            client = self.client_provider()
            return await self.handlers[name](client, args)
        except ToolValidationError as exc:
            return _failure(FailureKind.VALIDATION, operation, str(exc))
        except AuthenticationError as exc:
            return _failure(FailureKind.AUTH, operation, str(exc))
        except OperationFailedError as exc:
            return ToolFailure(
                kind=FailureKind.REMOTE, message=str(exc), operation=operation
            )
        except (LinearClientError, ValueError) as exc:
            log.warning("Tool %s failed: %s", name, exc)
            return _failure(FailureKind.REMOTE, operation, str(exc))
        except Exception as exc:
            # Unexpected payload shapes or transport misconfiguration
            log.exception("Tool %s raised unexpectedly", name)
            return _failure(FailureKind.REMOTE, operation, str(exc) or type(exc).__name__)


def _failure(kind: FailureKind, operation: str, detail: str) -> ToolFailure:
    return ToolFailure(
        kind=kind,
        message=str(OperationFailedError(operation, detail)),
        operation=operation,
    )


def build_dispatcher(
    schemas: SchemaRegistry,
    client_provider: ClientProvider,
    modules: List[ModuleType] | None = None,
) -> ToolDispatcher:
    modules = modules or discover_tool_modules()
    return ToolDispatcher(schemas, collect_handlers(modules), client_provider)


__all__ = [
    "TOOL_PREFIX",
    "Handler",
    "ClientProvider",
    "discover_tool_modules",
    "iter_tool_functions",
    "collect_handlers",
    "ToolDispatcher",
    "build_dispatcher",
]
