from __future__ import annotations

from linear_mcp.core.client import LinearClient
from linear_mcp.core.filters import issue_batch_payload, project_payload
from linear_mcp.core.formatters import format_project_with_issues, require_payload
from linear_mcp.core.models import (
    CreateProjectWithIssuesInput,
    GetProjectInput,
    SearchProjectsInput,
)
from linear_mcp.core.results import ToolSuccess, narrative, structured


async def create_project_with_issues(
    client: LinearClient, args: CreateProjectWithIssuesInput
) -> ToolSuccess:
    """Create the project, then its issues in one batch under the new project id."""
    operation = "create project with issues"
    data = await client.create_project(project_payload(args.project))
    project = require_payload(data, "projectCreate", operation, entity="project")[
        "project"
    ]

    issues = []
    if args.issues:
        batch = await client.create_issues(
            issue_batch_payload(args.issues, project_id=project["id"])
        )
        issues = require_payload(batch, "issueBatchCreate", operation).get("issues") or []

    return narrative(format_project_with_issues(project, issues))


async def get_project(client: LinearClient, args: GetProjectInput) -> ToolSuccess:
    return structured(await client.get_project(args.id))


async def search_projects(
    client: LinearClient, args: SearchProjectsInput
) -> ToolSuccess:
    return structured(await client.search_projects(args.name))
