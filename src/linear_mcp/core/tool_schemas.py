"""Declarations for every tool exposed by the server."""

from __future__ import annotations

from typing import Tuple

from . import models
from .schemas import SchemaRegistry, ToolSchema

PROJECT_WITH_ISSUES_EXAMPLES = (
    {
        "description": "Create a project with a single team and issue",
        "value": {
            "project": {
                "name": "Q1 Planning",
                "description": "Q1 2025 Planning Project",
                "teamIds": ["team-id-1"],
            },
            "issues": [
                {
                    "title": "Project Setup",
                    "description": "Initial project setup tasks",
                    "teamId": "team-id-1",
                }
            ],
        },
    },
    {
        "description": "Create a project with multiple teams",
        "value": {
            "project": {
                "name": "Cross-team Initiative",
                "description": "Project spanning multiple teams",
                "teamIds": ["team-id-1", "team-id-2"],
            },
            "issues": [
                {
                    "title": "Team 1 Tasks",
                    "description": "Tasks for team 1",
                    "teamId": "team-id-1",
                },
                {
                    "title": "Team 2 Tasks",
                    "description": "Tasks for team 2",
                    "teamId": "team-id-2",
                },
            ],
        },
    },
)

TOOL_SCHEMAS: Tuple[ToolSchema, ...] = (
    ToolSchema(
        name="linear_create_issue",
        description="Create a new issue in Linear",
        operation="create issue",
        input_model=models.CreateIssueInput,
    ),
    ToolSchema(
        name="linear_create_issues",
        description="Create multiple issues at once",
        operation="create issues",
        input_model=models.CreateIssuesInput,
    ),
    ToolSchema(
        name="linear_create_project_with_issues",
        description=(
            "Create a new project with associated issues. Note: Project requires "
            "teamIds (array) not teamId (single value)."
        ),
        operation="create project with issues",
        input_model=models.CreateProjectWithIssuesInput,
        examples=PROJECT_WITH_ISSUES_EXAMPLES,
    ),
    ToolSchema(
        name="linear_bulk_update_issues",
        description="Update multiple issues at once",
        operation="update issues",
        input_model=models.BulkUpdateIssuesInput,
    ),
    ToolSchema(
        name="linear_search_issues",
        description=(
            "Search for issues with filtering and pagination. Returns the raw "
            "result including pageInfo.endCursor for the next page."
        ),
        operation="search issues",
        input_model=models.SearchIssuesInput,
    ),
    ToolSchema(
        name="linear_search_issues_by_identifier",
        description='Search for issues by their identifiers (e.g., ["MIC-78", "MIC-79"])',
        operation="search issues by identifier",
        input_model=models.SearchIssuesByIdentifierInput,
    ),
    ToolSchema(
        name="linear_delete_issue",
        description="Delete an issue",
        operation="delete issue",
        input_model=models.DeleteIssueInput,
    ),
    ToolSchema(
        name="linear_delete_issues",
        description="Delete multiple issues",
        operation="delete issues",
        input_model=models.DeleteIssuesInput,
    ),
    ToolSchema(
        name="linear_get_teams",
        description="Get all teams with their states and labels",
        operation="get teams",
        input_model=models.EmptyInput,
    ),
    ToolSchema(
        name="linear_get_user",
        description="Get current user information",
        operation="get user",
        input_model=models.EmptyInput,
    ),
    ToolSchema(
        name="linear_get_project",
        description="Get project information",
        operation="get project",
        input_model=models.GetProjectInput,
    ),
    ToolSchema(
        name="linear_search_projects",
        description="Search for projects by name",
        operation="search projects",
        input_model=models.SearchProjectsInput,
    ),
    ToolSchema(
        name="linear_create_comment",
        description="Creates a new comment on an issue",
        operation="create comment",
        input_model=models.CreateCommentInput,
    ),
    ToolSchema(
        name="linear_update_comment",
        description="Updates an existing comment",
        operation="update comment",
        input_model=models.UpdateCommentInput,
    ),
    ToolSchema(
        name="linear_delete_comment",
        description="Deletes a comment",
        operation="delete comment",
        input_model=models.DeleteCommentInput,
    ),
    ToolSchema(
        name="linear_resolve_comment",
        description="Resolves a comment",
        operation="resolve comment",
        input_model=models.ResolveCommentInput,
    ),
    ToolSchema(
        name="linear_unresolve_comment",
        description="Unresolves a comment",
        operation="unresolve comment",
        input_model=models.UnresolveCommentInput,
    ),
    ToolSchema(
        name="linear_create_customer_need_from_attachment",
        description="Creates a new customer need from an attachment",
        operation="create customer need from attachment",
        input_model=models.CreateCustomerNeedInput,
    ),
)


def default_registry() -> SchemaRegistry:
    return SchemaRegistry(TOOL_SCHEMAS)


__all__ = ["TOOL_SCHEMAS", "default_registry"]
