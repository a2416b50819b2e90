import json

import pytest
import respx
from httpx import Response
from linear_mcp.core.client import DEFAULT_API_URL, LinearClient
from linear_mcp.core.errors import OperationFailedError
from linear_mcp.core.models import (
    CreateProjectWithIssuesInput,
    GetProjectInput,
    SearchProjectsInput,
)
from linear_mcp.core.tools.projects import (
    create_project_with_issues,
    get_project,
    search_projects,
)

PROJECT = {"id": "p1", "name": "Q1 Planning", "url": "https://linear.app/acme/project/q1"}

ARGS = {
    "project": {
        "name": "Q1 Planning",
        "description": "Q1 2025 Planning Project",
        "teamIds": ["t1"],
    },
    "issues": [
        {"title": "Project Setup", "description": "Initial setup", "teamId": "t1"},
    ],
}


@pytest.fixture
def client():
    return LinearClient(api_key="lin_api_test")


def _ok(data):
    return Response(200, json={"data": data})


@pytest.mark.asyncio
@respx.mock
async def test_create_project_with_issues(client):
    route = respx.post(DEFAULT_API_URL).mock(
        side_effect=[
            _ok({"projectCreate": {"success": True, "project": PROJECT}}),
            _ok(
                {
                    "issueBatchCreate": {
                        "success": True,
                        "issues": [
                            {
                                "identifier": "ENG-7",
                                "title": "Project Setup",
                                "url": "https://linear.app/acme/issue/ENG-7",
                            }
                        ],
                    }
                }
            ),
        ]
    )
    args = CreateProjectWithIssuesInput.model_validate(ARGS)

    async with client:
        result = await create_project_with_issues(client, args)

    assert result.text.startswith(
        "Successfully created project with issues\nProject: Q1 Planning\n"
    )
    assert "- ENG-7: Project Setup" in result.text

    project_vars = json.loads(route.calls[0].request.content)["variables"]
    assert project_vars["input"] == {
        "name": "Q1 Planning",
        "description": "Q1 2025 Planning Project",
        "teamIds": ["t1"],
    }
    issue_vars = json.loads(route.calls[1].request.content)["variables"]
    assert issue_vars["input"]["issues"] == [
        {
            "title": "Project Setup",
            "description": "Initial setup",
            "teamId": "t1",
            "projectId": "p1",
        }
    ]


@pytest.mark.asyncio
@respx.mock
async def test_project_failure_skips_issue_creation(client):
    route = respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"projectCreate": {"success": False, "project": None}})
    )
    args = CreateProjectWithIssuesInput.model_validate(ARGS)

    async with client:
        with pytest.raises(OperationFailedError) as exc:
            await create_project_with_issues(client, args)

    assert str(exc.value) == "Failed to create project with issues"
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_project_without_issues_makes_one_call(client):
    route = respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"projectCreate": {"success": True, "project": PROJECT}})
    )
    args = CreateProjectWithIssuesInput.model_validate({**ARGS, "issues": []})

    async with client:
        result = await create_project_with_issues(client, args)

    assert route.call_count == 1
    assert "Created 0 issues:" in result.text


@pytest.mark.asyncio
@respx.mock
async def test_get_project_structured(client):
    payload = {"project": {**PROJECT, "issues": {"nodes": []}}}
    route = respx.post(DEFAULT_API_URL).mock(return_value=_ok(payload))

    async with client:
        result = await get_project(client, GetProjectInput(id="p1"))

    assert result.data == payload
    assert json.loads(route.calls[0].request.content)["variables"] == {"id": "p1"}


@pytest.mark.asyncio
@respx.mock
async def test_search_projects_exact_name_filter(client):
    payload = {"projects": {"nodes": [PROJECT]}}
    route = respx.post(DEFAULT_API_URL).mock(return_value=_ok(payload))

    async with client:
        result = await search_projects(client, SearchProjectsInput(name="Q1 Planning"))

    assert result.data == payload
    assert json.loads(route.calls[0].request.content)["variables"] == {
        "filter": {"name": {"eq": "Q1 Planning"}}
    }
