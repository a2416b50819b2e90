from __future__ import annotations

from linear_mcp.core.client import LinearClient
from linear_mcp.core.errors import OperationFailedError
from linear_mcp.core.filters import (
    IDENTIFIER_PAGE_SIZE,
    DEFAULT_ORDER_BY,
    bulk_update_payload,
    identifier_filter,
    issue_batch_payload,
    search_variables,
)
from linear_mcp.core.formatters import (
    format_bulk_update,
    format_created_issue,
    format_created_issues,
    format_deleted_issue,
    format_deleted_issues,
    format_issue_lookup,
    require_payload,
)
from linear_mcp.core.models import (
    BulkUpdateIssuesInput,
    CreateIssueInput,
    CreateIssuesInput,
    DeleteIssueInput,
    DeleteIssuesInput,
    SearchIssuesByIdentifierInput,
    SearchIssuesInput,
)
from linear_mcp.core.results import ToolSuccess, narrative, structured


async def create_issue(client: LinearClient, args: CreateIssueInput) -> ToolSuccess:
    data = await client.create_issue(args.to_remote())
    payload = require_payload(data, "issueCreate", "create issue", entity="issue")
    return narrative(format_created_issue(payload["issue"]))


async def create_issues(client: LinearClient, args: CreateIssuesInput) -> ToolSuccess:
    data = await client.create_issues(issue_batch_payload(args.issues))
    payload = require_payload(data, "issueBatchCreate", "create issues")
    return narrative(format_created_issues(payload.get("issues") or []))


async def bulk_update_issues(
    client: LinearClient, args: BulkUpdateIssuesInput
) -> ToolSuccess:
    """Apply one update to every listed issue in a single call.

    The count reported is the number of ids sent; Linear's success flag
    covers the batch as a whole.
    """
    ids, update = bulk_update_payload(args)
    data = await client.update_issues(ids, update)
    require_payload(data, "issueBatchUpdate", "update issues")
    return narrative(format_bulk_update(len(ids)))


async def search_issues(client: LinearClient, args: SearchIssuesInput) -> ToolSuccess:
    """Filtered, paginated search; the raw result keeps ``pageInfo`` for paging."""
    filter, first, after, order_by = search_variables(args)
    data = await client.search_issues(filter, first, after, order_by)
    return structured(data)


async def search_issues_by_identifier(
    client: LinearClient, args: SearchIssuesByIdentifierInput
) -> ToolSuccess:
    data = await client.search_issues(
        identifier_filter(args.identifiers), IDENTIFIER_PAGE_SIZE, None, DEFAULT_ORDER_BY
    )
    issues = data.get("issues")
    if not isinstance(issues, dict):
        raise OperationFailedError("search issues by identifier")
    return narrative(format_issue_lookup(args.identifiers, issues.get("nodes") or []))


async def delete_issue(client: LinearClient, args: DeleteIssueInput) -> ToolSuccess:
    data = await client.delete_issue(args.id)
    require_payload(data, "issueDelete", "delete issue")
    return narrative(format_deleted_issue(args.id))


async def delete_issues(client: LinearClient, args: DeleteIssuesInput) -> ToolSuccess:
    data = await client.delete_issues(args.ids)
    require_payload(data, "issueDelete", "delete issues")
    return narrative(format_deleted_issues(args.ids))
