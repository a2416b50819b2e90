"""Operational endpoints: liveness and readiness probes."""

from __future__ import annotations

from typing import Callable, Dict

from starlette.requests import Request
from starlette.responses import JSONResponse

from linear_mcp.core.config import load_env_config

OPS_PATHS = frozenset({"/healthz", "/readyz"})
NO_STORE = {"Cache-Control": "no-store"}


def is_ops_path(path: str | None) -> bool:
    return path in OPS_PATHS


def readiness_checks() -> Dict[str, bool]:
    """Evaluate readiness once, from the environment the app was built with."""
    _, api_key = load_env_config(use_dotenv=False)
    return {
        "config_loaded": True,
        "default_api_key_present": bool(api_key),
        # Keys can also be supplied per request via X-Linear-Key
        "header_override_supported": True,
    }


def readiness_report(checks: Dict[str, bool]) -> Dict[str, object]:
    failed = [name for name, ok in checks.items() if not ok]
    return {"status": "fail" if failed else "ok", "checks": checks, "failed": failed}


async def healthz(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"}, headers=NO_STORE)


def readyz_endpoint(checks: Dict[str, bool]) -> Callable:
    async def readyz(_request: Request) -> JSONResponse:
        report = readiness_report(checks)
        return JSONResponse(
            report,
            status_code=200 if report["status"] == "ok" else 503,
            headers=NO_STORE,
        )

    return readyz


__all__ = [
    "OPS_PATHS",
    "is_ops_path",
    "readiness_checks",
    "readiness_report",
    "healthz",
    "readyz_endpoint",
]
