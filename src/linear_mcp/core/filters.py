"""Turn validated tool arguments into Linear GraphQL variables."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .models import (
    BatchIssueInput,
    BulkUpdateIssuesInput,
    ProjectInput,
    ProjectIssueInput,
    SearchIssuesInput,
)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 250
IDENTIFIER_PAGE_SIZE = 100
DEFAULT_ORDER_BY = "updatedAt"


def build_search_filter(args: SearchIssuesInput) -> Dict[str, Any]:
    """Build an IssueFilter from the optional search criteria.

    An identifier list supersedes the free-text query; every other
    criterion is applied independently.
    """
    filter: Dict[str, Any] = {}

    if args.identifiers:
        filter["identifier"] = {"in": list(args.identifiers)}
    elif args.query:
        # Linear's native search syntax, passed through untouched
        filter["search"] = args.query

    if args.project_id:
        filter["project"] = {"id": {"eq": args.project_id}}
    if args.team_ids:
        filter["team"] = {"id": {"in": list(args.team_ids)}}
    if args.assignee_ids:
        filter["assignee"] = {"id": {"in": list(args.assignee_ids)}}
    if args.states:
        filter["state"] = {"name": {"in": list(args.states)}}
    # 0 ("no priority") is a real filter value
    if args.priority is not None:
        filter["priority"] = {"eq": args.priority}

    return filter


def page_size(first: Optional[int]) -> int:
    """Default a missing or zero page size; cap at Linear's maximum."""
    if not first:
        return DEFAULT_PAGE_SIZE
    return max(1, min(first, MAX_PAGE_SIZE))


def search_variables(args: SearchIssuesInput) -> Tuple[Dict[str, Any], int, Optional[str], str]:
    return (
        build_search_filter(args),
        page_size(args.first),
        args.after or None,
        args.order_by or DEFAULT_ORDER_BY,
    )


def identifier_filter(identifiers: Sequence[str]) -> Dict[str, Any]:
    return {"identifier": {"in": list(identifiers)}}


def bulk_update_payload(args: BulkUpdateIssuesInput) -> Tuple[List[str], Dict[str, Any]]:
    """Return (ids, input); only supplied update fields are forwarded."""
    return list(args.issue_ids), args.update.to_remote()


def issue_batch_payload(
    issues: Sequence[BatchIssueInput | ProjectIssueInput],
    *,
    project_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Flatten issue inputs, attaching ``projectId`` when creating under a project.

    Team membership against the project is left to Linear to enforce.
    """
    payload = []
    for issue in issues:
        item = issue.to_remote()
        if project_id:
            item["projectId"] = project_id
        payload.append(item)
    return payload


def project_payload(project: ProjectInput) -> Dict[str, Any]:
    return project.to_remote()


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "IDENTIFIER_PAGE_SIZE",
    "DEFAULT_ORDER_BY",
    "build_search_filter",
    "page_size",
    "search_variables",
    "identifier_filter",
    "bulk_update_payload",
    "issue_batch_payload",
    "project_payload",
]
