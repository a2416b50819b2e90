"""Narrative (human-readable) rendering of Linear mutation results."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .errors import OperationFailedError


def require_payload(
    data: Mapping[str, Any],
    key: str,
    operation: str,
    *,
    entity: Optional[str] = None,
) -> Dict[str, Any]:
    """Return ``data[key]`` when it reports success (and carries ``entity``).

    Raises OperationFailedError naming ``operation`` otherwise.
    """
    payload = data.get(key)
    if not isinstance(payload, dict) or not payload.get("success"):
        raise OperationFailedError(operation)
    if entity is not None and not payload.get(entity):
        raise OperationFailedError(operation)
    return payload


def _name(ref: Any, default: str = "None") -> str:
    if isinstance(ref, dict) and ref.get("name"):
        return str(ref["name"])
    return default


def format_created_issue(issue: Mapping[str, Any]) -> str:
    return (
        "Successfully created issue\n"
        f"Issue: {issue.get('identifier')}\n"
        f"Title: {issue.get('title')}\n"
        f"URL: {issue.get('url')}\n"
        f"Project: {_name(issue.get('project'))}"
    )


def _issue_lines(issues: Sequence[Mapping[str, Any]]) -> str:
    return "\n".join(
        f"- {i.get('identifier')}: {i.get('title')}\n  URL: {i.get('url')}"
        for i in issues
    )


def format_created_issues(issues: Sequence[Mapping[str, Any]]) -> str:
    return f"Successfully created {len(issues)} issues:\n" + _issue_lines(issues)


def format_project_with_issues(
    project: Mapping[str, Any], issues: Sequence[Mapping[str, Any]]
) -> str:
    text = (
        "Successfully created project with issues\n"
        f"Project: {project.get('name')}\n"
        f"Project URL: {project.get('url')}\n"
        f"\nCreated {len(issues)} issues:"
    )
    if issues:
        text += "\n" + _issue_lines(issues)
    return text


def format_bulk_update(count: int) -> str:
    return f"Successfully updated {count} issues"


def format_issue_lookup(
    identifiers: Sequence[str], nodes: Sequence[Mapping[str, Any]]
) -> str:
    if not nodes:
        return f"No issues found with identifiers: {', '.join(identifiers)}"

    blocks: List[str] = []
    for issue in nodes:
        block = f"{issue.get('identifier')}: {issue.get('title')}\n"
        if issue.get("state"):
            block += f"Status: {_name(issue['state'])}\n"
        block += f"URL: {issue.get('url')}\n"
        if issue.get("assignee"):
            block += f"Assignee: {_name(issue['assignee'])}\n"
        if issue.get("project"):
            block += f"Project: {_name(issue['project'])}\n"
        blocks.append(block)
    return "\n".join(blocks)


def format_deleted_issue(issue_id: str) -> str:
    return f"Successfully deleted issue {issue_id}"


def format_deleted_issues(ids: Sequence[str]) -> str:
    return f"Successfully deleted {len(ids)} issues: {', '.join(ids)}"


def format_comment(action: str, comment: Mapping[str, Any]) -> str:
    text = f"Successfully {action} comment\nComment ID: {comment.get('id')}"
    if comment.get("url"):
        text += f"\nURL: {comment['url']}"
    if comment.get("body") is not None:
        text += f"\nBody: {comment['body']}"
    return text


def format_deleted_comment(comment_id: str) -> str:
    return f"Successfully deleted comment {comment_id}"


def format_resolution(comment_id: str, *, resolved: bool) -> str:
    state = "resolved" if resolved else "unresolved"
    return f"Successfully {state} comment {comment_id}"


def format_customer_need(need: Mapping[str, Any]) -> str:
    text = f"Successfully created customer need\nNeed ID: {need.get('id')}"
    issue = need.get("issue")
    if isinstance(issue, dict):
        text += f"\nIssue: {issue.get('identifier')}: {issue.get('title')}"
        if issue.get("url"):
            text += f"\nURL: {issue['url']}"
    return text


__all__ = [
    "require_payload",
    "format_created_issue",
    "format_created_issues",
    "format_project_with_issues",
    "format_bulk_update",
    "format_issue_lookup",
    "format_deleted_issue",
    "format_deleted_issues",
    "format_comment",
    "format_deleted_comment",
    "format_resolution",
    "format_customer_need",
]
