from __future__ import annotations

import time
from dataclasses import replace
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from linear_mcp.core.context import (
    apply_context,
    ensure_request_id,
    reset_context,
    seed_from_headers,
)
from linear_mcp.core.observability import elapsed_ms, log_event

from .ops import is_ops_path

REQUEST_ID_HEADER = "X-Request-Id"
CORRELATION_ID_HEADER = "X-Correlation-Id"


def _incoming_request_id(request: Request) -> str:
    for header in (REQUEST_ID_HEADER, CORRELATION_ID_HEADER):
        value = (request.headers.get(header) or "").strip()
        if value:
            return value
    return ensure_request_id()


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log one ``http_request`` event for it.

    The id is taken from X-Request-Id or X-Correlation-Id when present, kept
    on ``request.state.request_id`` and echoed back as X-Request-Id. The event
    is logged even when the downstream app raises.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        rid = _incoming_request_id(request)
        request.state.request_id = rid

        start = time.perf_counter()
        status: int | str = "exception"
        try:
            response: Response = await call_next(request)
            status = response.status_code
            response.headers.setdefault(REQUEST_ID_HEADER, rid)
            return response
        finally:
            log_event(
                "http_request",
                request_id=rid,
                method=request.method.upper(),
                path=request.url.path,
                status=status,
                duration_ms=elapsed_ms(start),
            )


class ContextMiddleware(BaseHTTPMiddleware):
    """Seed and reset ContextVars per request.

    The Linear key comes from X-Linear-Key / Authorization, falling back to
    LINEAR_API_KEY. A missing key is reported by each tool call.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        if is_ops_path(request.url.path):
            return await call_next(request)
        ctx = seed_from_headers(request.headers)
        request_id = getattr(request.state, "request_id", None) or ctx.request_id
        token = apply_context(replace(ctx, request_id=request_id))
        try:
            return await call_next(request)
        finally:
            reset_context(token)


__all__ = [
    "RequestIdMiddleware",
    "ContextMiddleware",
    "REQUEST_ID_HEADER",
    "CORRELATION_ID_HEADER",
]
