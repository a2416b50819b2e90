from __future__ import annotations

from linear_mcp.core.client import LinearClient
from linear_mcp.core.formatters import (
    format_comment,
    format_deleted_comment,
    format_resolution,
    require_payload,
)
from linear_mcp.core.models import (
    CreateCommentInput,
    DeleteCommentInput,
    ResolveCommentInput,
    UnresolveCommentInput,
    UpdateCommentInput,
)
from linear_mcp.core.results import ToolSuccess, narrative


async def create_comment(client: LinearClient, args: CreateCommentInput) -> ToolSuccess:
    data = await client.create_comment(args.to_remote())
    payload = require_payload(data, "commentCreate", "create comment", entity="comment")
    return narrative(format_comment("created", payload["comment"]))


async def update_comment(client: LinearClient, args: UpdateCommentInput) -> ToolSuccess:
    data = await client.update_comment(args.id, args.input.to_remote())
    payload = require_payload(data, "commentUpdate", "update comment", entity="comment")
    return narrative(format_comment("updated", payload["comment"]))


async def delete_comment(client: LinearClient, args: DeleteCommentInput) -> ToolSuccess:
    data = await client.delete_comment(args.id)
    require_payload(data, "commentDelete", "delete comment")
    return narrative(format_deleted_comment(args.id))


async def resolve_comment(
    client: LinearClient, args: ResolveCommentInput
) -> ToolSuccess:
    data = await client.resolve_comment(args.id, args.resolving_comment_id)
    require_payload(data, "commentResolve", "resolve comment")
    return narrative(format_resolution(args.id, resolved=True))


async def unresolve_comment(
    client: LinearClient, args: UnresolveCommentInput
) -> ToolSuccess:
    data = await client.unresolve_comment(args.id)
    require_payload(data, "commentUnresolve", "unresolve comment")
    return narrative(format_resolution(args.id, resolved=False))
