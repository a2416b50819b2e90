from __future__ import annotations

import asyncio

import httpx
from mcp.server.stdio import stdio_server

from linear_mcp.core.config import log_level_from_env
from linear_mcp.core.context import (
    apply_context,
    client_from_context,
    reset_context,
    seed_from_env,
)
from linear_mcp.core.logging import setup_logging
from linear_mcp.core.registry import build_dispatcher
from linear_mcp.core.tool_schemas import default_registry
from linear_mcp.server import build_server


async def main() -> None:
    # Seed ContextVars from env (stdio bootstrap); a missing key fails per call
    ctx = seed_from_env(use_dotenv=True)
    setup_logging(log_level_from_env())
    token = apply_context(ctx)

    try:
        async with httpx.AsyncClient() as http:
            dispatcher = build_dispatcher(
                default_registry(), lambda: client_from_context(http=http)
            )
            server = build_server(dispatcher)

            async with stdio_server() as (read_stream, write_stream):
                await server.run(
                    read_stream,
                    write_stream,
                    server.create_initialization_options(),
                )
    finally:
        reset_context(token)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
