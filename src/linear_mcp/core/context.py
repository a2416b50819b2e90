"""Per-request context and the auth gate.

The active ``RequestContext`` lives in a single ContextVar. Transports apply
one before dispatching (stdio once at startup, HTTP once per request) and
tool calls obtain their ``LinearClient`` through ``client_from_context``.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Mapping, Optional

import httpx

from .client import DEFAULT_API_URL, LinearClient
from .config import load_env_config
from .errors import AuthenticationError

API_KEY_HEADER = "x-linear-key"
AUTHORIZATION_HEADER = "authorization"
REQUEST_ID_HEADER = "x-request-id"
USER_AGENT_HEADER = "user-agent"


class MissingApiKeyError(AuthenticationError):
    """Raised when a Linear API key is required but missing."""


@dataclass(frozen=True)
class RequestContext:
    api_key: str
    api_url: str = DEFAULT_API_URL
    request_id: str = ""
    user_agent: Optional[str] = None


_current: ContextVar[Optional[RequestContext]] = ContextVar(
    "linear_request_context", default=None
)


def ensure_request_id(candidate: Optional[str] = None) -> str:
    return candidate or uuid.uuid4().hex


def seed_from_env(*, use_dotenv: bool = False) -> RequestContext:
    """Context for the stdio transport; an empty key is left for the gate to report."""
    api_url, api_key = load_env_config(use_dotenv=use_dotenv)
    return RequestContext(api_key=api_key, api_url=api_url, request_id=ensure_request_id())


def seed_from_headers(headers: Mapping[str, str]) -> RequestContext:
    """Context for one HTTP request; a key header wins over LINEAR_API_KEY."""
    api_url, env_key = load_env_config(use_dotenv=False)
    api_key = headers.get(API_KEY_HEADER) or headers.get(AUTHORIZATION_HEADER) or env_key
    return RequestContext(
        api_key=(api_key or "").strip(),
        api_url=api_url,
        request_id=ensure_request_id(headers.get(REQUEST_ID_HEADER)),
        user_agent=headers.get(USER_AGENT_HEADER),
    )


def apply_context(ctx: RequestContext) -> Token:
    """Make ``ctx`` current; pass the returned token to ``reset_context``."""
    return _current.set(ctx)


def reset_context(token: Token) -> None:
    _current.reset(token)


def get_context(*, require_api_key: bool = True) -> RequestContext:
    ctx = _current.get() or RequestContext(api_key="")
    if require_api_key and not ctx.api_key:
        raise MissingApiKeyError(
            "Linear API key is required and missing; set LINEAR_API_KEY."
        )
    return RequestContext(
        api_key=ctx.api_key,
        api_url=ctx.api_url or DEFAULT_API_URL,
        request_id=ensure_request_id(ctx.request_id),
        user_agent=ctx.user_agent,
    )


def client_from_context(http: Optional[httpx.AsyncClient] = None) -> LinearClient:
    """Auth gate: return a ready client for the current context or raise."""
    ctx = get_context(require_api_key=True)
    return LinearClient(
        api_key=ctx.api_key,
        api_url=ctx.api_url,
        request_id=ctx.request_id,
        http=http,
    )


__all__ = [
    "RequestContext",
    "MissingApiKeyError",
    "seed_from_env",
    "seed_from_headers",
    "get_context",
    "apply_context",
    "reset_context",
    "ensure_request_id",
    "client_from_context",
    "API_KEY_HEADER",
    "AUTHORIZATION_HEADER",
    "REQUEST_ID_HEADER",
    "USER_AGENT_HEADER",
]
