from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from linear_mcp.core.context import client_from_context
from linear_mcp.core.registry import build_dispatcher
from linear_mcp.core.schemas import SchemaRegistry
from linear_mcp.core.tool_schemas import default_registry
from linear_mcp.server import build_server
from linear_mcp.transports.http.config import HttpConfig
from linear_mcp.transports.http.middleware import ContextMiddleware, RequestIdMiddleware
from linear_mcp.transports.http.origin import OriginMiddleware
from linear_mcp.transports.http.ops import healthz, readiness_checks, readyz_endpoint

log = logging.getLogger(__name__)


class StreamableHTTPEndpoint:
    """ASGI endpoint handing requests to the MCP session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


class _SharedHttp:
    """Holds the httpx client opened by the app lifespan."""

    client: Optional[httpx.AsyncClient] = None


def build_http_app(
    cfg: HttpConfig | None = None, *, schemas: SchemaRegistry | None = None
) -> Starlette:
    """Return a Starlette app serving MCP over streamable HTTP plus ops endpoints."""
    cfg = cfg or HttpConfig.from_env()
    shared = _SharedHttp()

    dispatcher = build_dispatcher(
        schemas or default_registry(),
        lambda: client_from_context(http=shared.client),
    )
    # Stateless sessions keep each request's context (and key) separate
    session_manager = StreamableHTTPSessionManager(
        app=build_server(dispatcher),
        json_response=cfg.json_response,
        stateless=True,
    )

    readiness = readiness_checks()

    @asynccontextmanager
    async def lifespan(_app):
        async with httpx.AsyncClient(timeout=cfg.timeout_seconds) as http:
            shared.client = http
            try:
                async with session_manager.run():
                    yield
            finally:
                shared.client = None

    app = Starlette(
        routes=[
            Route("/healthz", healthz, methods=["GET"]),
            Route("/readyz", readyz_endpoint(readiness), methods=["GET"]),
            Route(cfg.path, endpoint=StreamableHTTPEndpoint(session_manager)),
        ],
        # Outermost first: every request gets an id, then foreign origins are
        # refused before any context (and key) is seeded
        middleware=[
            Middleware(RequestIdMiddleware),
            Middleware(OriginMiddleware, cfg=cfg),
            Middleware(ContextMiddleware),
        ],
        lifespan=lifespan,
    )
    app.state.readiness = readiness

    log.info(
        "Built HTTP app (path=%s, json_response=%s, allowed_origins=%d)",
        cfg.path,
        cfg.json_response,
        len(cfg.origin_allowlist()),
    )
    return app


__all__ = ["HttpConfig", "build_http_app"]
