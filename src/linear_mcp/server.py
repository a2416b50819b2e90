from __future__ import annotations

import logging
from typing import Any, Dict, List

from mcp import types
from mcp.server.lowlevel import Server

from linear_mcp.core.registry import ToolDispatcher
from linear_mcp.core.results import ToolFailure, ToolResult

SERVER_NAME = "linear-mcp"

log = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """Raised inside call_tool so the MCP server returns an isError result."""


def tool_definitions(dispatcher: ToolDispatcher) -> List[types.Tool]:
    return [
        types.Tool(
            name=schema.name,
            description=schema.description,
            inputSchema=schema.input_schema(),
        )
        for schema in dispatcher.schemas.values()
    ]


def to_content(result: ToolResult) -> List[types.TextContent]:
    if isinstance(result, ToolFailure):
        raise ToolCallFailed(result.message)
    return [types.TextContent(type="text", text=result.text)]


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Create a low-level MCP server backed by the dispatcher."""
    server: Server = Server(SERVER_NAME)
    tools = tool_definitions(dispatcher)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return tools

    # Arguments are validated by the schema registry, not the MCP layer.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any] | None):
        result = await dispatcher.dispatch(name, arguments)
        return to_content(result)

    log.info("Built MCP server with %d tools", len(tools))
    return server


__all__ = ["SERVER_NAME", "ToolCallFailed", "build_server", "tool_definitions", "to_content"]
