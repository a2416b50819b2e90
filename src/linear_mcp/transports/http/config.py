from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Tuple
from urllib.parse import urlsplit


@dataclass(frozen=True)
class OriginSpec:
    """Normalized browser origin. ``port=None`` matches any port."""

    scheme: str
    host: str
    port: int | None

    def matches(self, other: "OriginSpec") -> bool:
        if (self.scheme, self.host) != (other.scheme, other.host):
            return False
        return self.port is None or self.port == other.port

    def header_value(self) -> str:
        default_port = 80 if self.scheme == "http" else 443
        if self.port is None or self.port == default_port:
            return f"{self.scheme}://{self.host}"
        return f"{self.scheme}://{self.host}:{self.port}"


LOCALHOST_ORIGINS: Tuple[OriginSpec, ...] = tuple(
    OriginSpec(scheme, host, None)
    for scheme in ("http", "https")
    for host in ("localhost", "127.0.0.1")
)


def parse_origin(origin: str) -> OriginSpec:
    """Normalize an Origin value; raises ValueError for anything but http(s)://host[:port]."""
    raw = (origin or "").strip()
    if not raw or raw.lower() == "null":
        raise ValueError("Null origin not allowed")

    parts = urlsplit(raw)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Invalid origin: {origin}")
    if parts.path not in {"", "/"} or parts.query or parts.fragment:
        raise ValueError("Origin must not include path, query, or fragment")

    scheme = parts.scheme.lower()
    if scheme not in {"http", "https"}:
        raise ValueError("Origin scheme must be http or https")
    if not parts.hostname:
        raise ValueError("Origin host missing")

    host = parts.hostname.strip().rstrip(".").encode("idna").decode("ascii").lower()
    port = parts.port or (80 if scheme == "http" else 443)
    return OriginSpec(scheme=scheme, host=host, port=port)


def _get_bool_env(name: str, default: bool) -> bool:
    """Parse a boolean environment variable with a safe default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if val in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _split_csv_env(name: str) -> List[str]:
    return [part.strip() for part in os.getenv(name, "").split(",") if part.strip()]


def _normalize_path(path: str) -> str:
    path = "/" + path.strip().strip("/")
    return path if path != "/" else "/mcp"


def _parse_origins(origins: Iterable[str]) -> Tuple[OriginSpec, ...]:
    return tuple(parse_origin(origin) for origin in origins)


@dataclass(frozen=True)
class HttpConfig:
    host: str = "127.0.0.1"
    port: int = 8000
    path: str = "/mcp"
    json_response: bool = False
    timeout_seconds: float = 30.0
    # Requests carrying an Origin header are refused unless it is listed here
    allowed_origins: Tuple[OriginSpec, ...] = ()
    dev_allow_localhost: bool = False

    def origin_allowlist(self) -> Tuple[OriginSpec, ...]:
        if self.dev_allow_localhost:
            return self.allowed_origins + LOCALHOST_ORIGINS
        return self.allowed_origins

    @classmethod
    def from_env(cls) -> "HttpConfig":
        return cls(
            host=os.getenv("LINEAR_MCP_HTTP_HOST", "").strip() or cls.host,
            port=_get_int_env("LINEAR_MCP_HTTP_PORT", cls.port),
            path=_normalize_path(os.getenv("LINEAR_MCP_HTTP_PATH", cls.path)),
            json_response=_get_bool_env(
                "LINEAR_MCP_HTTP_JSON_RESPONSE", cls.json_response
            ),
            allowed_origins=_parse_origins(
                _split_csv_env("LINEAR_MCP_HTTP_ALLOWED_ORIGINS")
            ),
            dev_allow_localhost=_get_bool_env(
                "LINEAR_MCP_HTTP_DEV_ALLOW_LOCALHOST", cls.dev_allow_localhost
            ),
        )


__all__ = ["HttpConfig", "OriginSpec", "LOCALHOST_ORIGINS", "parse_origin"]
