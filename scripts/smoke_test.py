"""Read-only smoke test against a real Linear workspace.

Requires LINEAR_API_KEY. Optionally set SMOKE_TEST_IDENTIFIERS
(comma-separated, e.g. "ENG-1,ENG-2") to exercise the identifier lookup.
"""

from __future__ import annotations

import asyncio
import os
import sys

import httpx

from linear_mcp.core.context import (
    apply_context,
    client_from_context,
    reset_context,
    seed_from_env,
)
from linear_mcp.core.registry import build_dispatcher
from linear_mcp.core.results import ToolFailure
from linear_mcp.core.tool_schemas import default_registry


def _print_step(title: str) -> None:
    print(f"\n== {title}")


async def run_smoke_test() -> int:
    ctx = seed_from_env(use_dotenv=True)
    if not ctx.api_key:
        print("FAILED: Missing LINEAR_API_KEY.")
        return 1

    token = apply_context(ctx)
    try:
        async with httpx.AsyncClient() as http:
            return await _run_steps(http)
    finally:
        reset_context(token)


async def _run_steps(http: httpx.AsyncClient) -> int:
    dispatcher = build_dispatcher(
        default_registry(), lambda: client_from_context(http=http)
    )
    steps = [
        ("linear_get_user", {}),
        ("linear_get_teams", {}),
        ("linear_search_issues", {"first": 5}),
    ]
    identifiers = [
        i.strip()
        for i in os.getenv("SMOKE_TEST_IDENTIFIERS", "").split(",")
        if i.strip()
    ]
    if identifiers:
        steps.append(("linear_search_issues_by_identifier", {"identifiers": identifiers}))

    for name, arguments in steps:
        _print_step(name)
        result = await dispatcher.dispatch(name, arguments)
        if isinstance(result, ToolFailure):
            print(f"FAILED: {result.message}")
            return 1
        print(result.text[:800])

    print("\nSmoke test passed.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(run_smoke_test()))
