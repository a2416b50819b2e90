"""Tool input models.

Field names follow the camelCase argument names MCP clients send; Python code
reads them through snake_case attributes. Primitive fields are strict so a
number never passes for a string (or the other way round).
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BeforeValidator, BaseModel, ConfigDict, Field, StrictInt, StrictStr

StrIds = List[StrictStr]


def _whole_number(value: Any) -> Any:
    # JSON has one number type: 2.0 is the integer 2, 2.5 is not
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("must be a whole number")
        return int(value)
    return value


WholeNumber = Annotated[StrictInt, BeforeValidator(_whole_number)]


class ToolInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_remote(self) -> Dict[str, Any]:
        """Dump set fields with their wire (camelCase) names."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Issues --- #


class CreateIssueInput(ToolInput):
    title: StrictStr = Field(description="Issue title")
    description: StrictStr = Field(description="Issue description")
    team_id: StrictStr = Field(alias="teamId", description="Team ID")
    assignee_id: Optional[StrictStr] = Field(
        default=None, alias="assigneeId", description="Assignee user ID"
    )
    priority: Optional[WholeNumber] = Field(
        default=None, description="Issue priority (0-4)"
    )
    project_id: Optional[StrictStr] = Field(
        default=None, alias="projectId", description="Project ID"
    )
    label_ids: Optional[StrIds] = Field(
        default=None, alias="labelIds", description="Label IDs to apply"
    )
    create_as_user: Optional[StrictStr] = Field(
        default=None,
        alias="createAsUser",
        description="Name to display for the created issue",
    )
    display_icon_url: Optional[StrictStr] = Field(
        default=None,
        alias="displayIconUrl",
        description="URL of the avatar to display",
    )


class BatchIssueInput(ToolInput):
    title: StrictStr = Field(description="Issue title")
    description: StrictStr = Field(description="Issue description")
    team_id: StrictStr = Field(alias="teamId", description="Team ID")
    project_id: Optional[StrictStr] = Field(
        default=None, alias="projectId", description="Project ID"
    )
    label_ids: Optional[StrIds] = Field(
        default=None, alias="labelIds", description="Label IDs to apply"
    )


class CreateIssuesInput(ToolInput):
    issues: List[BatchIssueInput] = Field(description="List of issues to create")


class IssueUpdate(ToolInput):
    state_id: Optional[StrictStr] = Field(
        default=None, alias="stateId", description="New state ID"
    )
    assignee_id: Optional[StrictStr] = Field(
        default=None, alias="assigneeId", description="New assignee ID"
    )
    priority: Optional[WholeNumber] = Field(
        default=None, description="New priority (0-4)"
    )


class BulkUpdateIssuesInput(ToolInput):
    issue_ids: StrIds = Field(alias="issueIds", description="List of issue IDs to update")
    update: IssueUpdate = Field(description="Fields applied to every listed issue")


class SearchIssuesInput(ToolInput):
    identifiers: Optional[StrIds] = Field(
        default=None,
        description="Issue identifiers (e.g. ENG-123); when given, query is ignored",
    )
    query: Optional[StrictStr] = Field(default=None, description="Search query string")
    project_id: Optional[StrictStr] = Field(
        default=None, alias="projectId", description="Filter by project ID"
    )
    team_ids: Optional[StrIds] = Field(
        default=None, alias="teamIds", description="Filter by team IDs"
    )
    assignee_ids: Optional[StrIds] = Field(
        default=None, alias="assigneeIds", description="Filter by assignee IDs"
    )
    states: Optional[StrIds] = Field(default=None, description="Filter by state names")
    priority: Optional[WholeNumber] = Field(
        default=None, description="Filter by priority (0-4)"
    )
    first: Optional[WholeNumber] = Field(
        default=None, description="Number of issues to return (default: 50)"
    )
    after: Optional[StrictStr] = Field(default=None, description="Cursor for pagination")
    order_by: Optional[StrictStr] = Field(
        default=None,
        alias="orderBy",
        description="Field to order by (default: updatedAt)",
    )


class SearchIssuesByIdentifierInput(ToolInput):
    identifiers: StrIds = Field(
        description="Array of issue identifiers to search for"
    )


class DeleteIssueInput(ToolInput):
    id: StrictStr = Field(description="Issue identifier (e.g., ENG-123)")


class DeleteIssuesInput(ToolInput):
    ids: StrIds = Field(
        min_length=1, description="List of issue identifiers to delete"
    )


# --- Projects --- #


class ProjectInput(ToolInput):
    name: StrictStr = Field(description="Project name")
    description: Optional[StrictStr] = Field(
        default=None, description="Project description (optional)"
    )
    team_ids: StrIds = Field(
        alias="teamIds",
        min_length=1,
        description="Array of team IDs this project belongs to (Required). "
        "Use linear_get_teams to get available team IDs.",
    )


class ProjectIssueInput(ToolInput):
    title: StrictStr = Field(description="Issue title")
    description: StrictStr = Field(description="Issue description")
    team_id: StrictStr = Field(
        alias="teamId", description="Team ID (must match one of the project teamIds)"
    )


class CreateProjectWithIssuesInput(ToolInput):
    project: ProjectInput
    issues: List[ProjectIssueInput] = Field(
        description="List of issues to create with this project"
    )


class GetProjectInput(ToolInput):
    id: StrictStr = Field(description="Project identifier")


class SearchProjectsInput(ToolInput):
    name: StrictStr = Field(description="Project name to search for (exact match)")


class EmptyInput(ToolInput):
    pass


# --- Comments --- #


class CreateCommentInput(ToolInput):
    body: StrictStr = Field(description="Comment text content")
    issue_id: StrictStr = Field(
        alias="issueId", description="ID of the issue to comment on"
    )


class CommentBody(ToolInput):
    body: StrictStr = Field(description="Updated comment text")


class UpdateCommentInput(ToolInput):
    id: StrictStr = Field(description="Comment ID")
    input: CommentBody


class DeleteCommentInput(ToolInput):
    id: StrictStr = Field(description="Comment ID to delete")


class ResolveCommentInput(ToolInput):
    id: StrictStr = Field(description="Comment ID to resolve")
    resolving_comment_id: Optional[StrictStr] = Field(
        default=None,
        alias="resolvingCommentId",
        description="Optional ID of a resolving comment",
    )


class UnresolveCommentInput(ToolInput):
    id: StrictStr = Field(description="Comment ID to unresolve")


# --- Customer needs --- #


class CreateCustomerNeedInput(ToolInput):
    attachment_id: StrictStr = Field(
        alias="attachmentId", description="ID of the attachment"
    )
    title: Optional[StrictStr] = Field(
        default=None, description="Title for the customer need"
    )
    description: Optional[StrictStr] = Field(
        default=None, description="Description for the customer need"
    )
    team_id: Optional[StrictStr] = Field(
        default=None, alias="teamId", description="Team ID for the customer need"
    )
