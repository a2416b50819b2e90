from __future__ import annotations

from linear_mcp.core.client import LinearClient
from linear_mcp.core.formatters import format_customer_need, require_payload
from linear_mcp.core.models import CreateCustomerNeedInput
from linear_mcp.core.results import ToolSuccess, narrative


async def create_customer_need_from_attachment(
    client: LinearClient, args: CreateCustomerNeedInput
) -> ToolSuccess:
    data = await client.create_customer_need_from_attachment(args.to_remote())
    payload = require_payload(
        data,
        "customerNeedCreateFromAttachment",
        "create customer need from attachment",
        entity="need",
    )
    return narrative(format_customer_need(payload["need"]))
