"""Deny-by-default Origin allowlist with minimal CORS support.

Requests without an Origin header (CLI and server-side MCP clients) pass
through untouched. Browser requests must come from an allowlisted origin,
which also blocks DNS-rebinding pages from reaching a local server.
"""

from __future__ import annotations

from typing import Callable, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .config import HttpConfig, OriginSpec, parse_origin

ALLOWED_REQUEST_HEADERS = (
    "Content-Type",
    "Accept",
    "Authorization",
    "X-Linear-Key",
    "X-Request-Id",
    "Mcp-Session-Id",
    "Mcp-Protocol-Version",
)
EXPOSED_HEADERS = ("X-Request-Id", "Mcp-Session-Id")


def _denied(message: str, request_id: str) -> JSONResponse:
    body = {"error": "origin_denied", "message": message}
    headers = {}
    if request_id:
        body["request_id"] = request_id
        headers["X-Request-Id"] = request_id
    return JSONResponse(body, status_code=403, headers=headers)


class OriginMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, cfg: HttpConfig):
        super().__init__(app)
        self.cfg = cfg
        self.allowlist: Tuple[OriginSpec, ...] = cfg.origin_allowlist()

    def is_allowed(self, origin: OriginSpec) -> bool:
        return any(allowed.matches(origin) for allowed in self.allowlist)

    async def dispatch(self, request: Request, call_next: Callable):
        raw = request.headers.get("origin")
        if not raw:
            return await call_next(request)

        rid = getattr(request.state, "request_id", "")
        try:
            origin = parse_origin(raw)
        except ValueError as exc:
            return _denied(str(exc), rid)
        if not self.is_allowed(origin):
            return _denied("Origin not allowed", rid)

        if request.method.upper() == "OPTIONS" and request.url.path == self.cfg.path:
            return self._preflight(origin)

        response: Response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = origin.header_value()
        response.headers["Access-Control-Expose-Headers"] = ", ".join(EXPOSED_HEADERS)
        vary = [v.strip() for v in response.headers.get("Vary", "").split(",") if v.strip()]
        if "Origin" not in vary:
            response.headers["Vary"] = ", ".join(vary + ["Origin"])
        return response

    @staticmethod
    def _preflight(origin: OriginSpec) -> Response:
        return Response(
            status_code=204,
            headers={
                "Access-Control-Allow-Origin": origin.header_value(),
                "Access-Control-Allow-Methods": "POST, OPTIONS",
                "Access-Control-Allow-Headers": ", ".join(ALLOWED_REQUEST_HEADERS),
                "Access-Control-Expose-Headers": ", ".join(EXPOSED_HEADERS),
                "Vary": "Origin, Access-Control-Request-Method, Access-Control-Request-Headers",
            },
        )


__all__ = ["OriginMiddleware", "ALLOWED_REQUEST_HEADERS", "EXPOSED_HEADERS"]
