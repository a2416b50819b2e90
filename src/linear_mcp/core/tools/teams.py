from __future__ import annotations

from linear_mcp.core.client import LinearClient
from linear_mcp.core.models import EmptyInput
from linear_mcp.core.results import ToolSuccess, structured


async def get_teams(client: LinearClient, args: EmptyInput) -> ToolSuccess:
    return structured(await client.get_teams())


async def get_user(client: LinearClient, args: EmptyInput) -> ToolSuccess:
    return structured(await client.get_viewer())
