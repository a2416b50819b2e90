import json

import pytest
import respx
from httpx import Response
from linear_mcp.core.client import DEFAULT_API_URL, LinearClient
from linear_mcp.core.errors import OperationFailedError
from linear_mcp.core.models import (
    CreateCommentInput,
    DeleteCommentInput,
    ResolveCommentInput,
    UnresolveCommentInput,
    UpdateCommentInput,
)
from linear_mcp.core.tools.comments import (
    create_comment,
    delete_comment,
    resolve_comment,
    unresolve_comment,
    update_comment,
)

COMMENT = {"id": "c1", "body": "Looks good", "url": "https://linear.app/acme/comment/c1"}


@pytest.fixture
def client():
    return LinearClient(api_key="lin_api_test")


def _ok(data):
    return Response(200, json={"data": data})


def _variables(route):
    return json.loads(route.calls[0].request.content)["variables"]


@pytest.mark.asyncio
@respx.mock
async def test_create_comment(client):
    route = respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"commentCreate": {"success": True, "comment": COMMENT}})
    )
    args = CreateCommentInput.model_validate({"body": "Looks good", "issueId": "ENG-1"})

    async with client:
        result = await create_comment(client, args)

    assert result.text.startswith("Successfully created comment\nComment ID: c1")
    assert _variables(route) == {"input": {"body": "Looks good", "issueId": "ENG-1"}}


@pytest.mark.asyncio
@respx.mock
async def test_update_comment(client):
    route = respx.post(DEFAULT_API_URL).mock(
        return_value=_ok(
            {"commentUpdate": {"success": True, "comment": {**COMMENT, "body": "Edited"}}}
        )
    )
    args = UpdateCommentInput.model_validate({"id": "c1", "input": {"body": "Edited"}})

    async with client:
        result = await update_comment(client, args)

    assert "Body: Edited" in result.text
    assert _variables(route) == {"id": "c1", "input": {"body": "Edited"}}


@pytest.mark.asyncio
@respx.mock
async def test_delete_comment(client):
    respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"commentDelete": {"success": True}})
    )

    async with client:
        result = await delete_comment(client, DeleteCommentInput(id="c1"))

    assert result.text == "Successfully deleted comment c1"


@pytest.mark.asyncio
@respx.mock
async def test_delete_comment_failure(client):
    respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"commentDelete": {"success": False}})
    )

    async with client:
        with pytest.raises(OperationFailedError) as exc:
            await delete_comment(client, DeleteCommentInput(id="c1"))

    assert str(exc.value) == "Failed to delete comment"


@pytest.mark.asyncio
@respx.mock
async def test_resolve_comment_with_resolving_comment(client):
    route = respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"commentResolve": {"success": True, "comment": {"id": "c1"}}})
    )
    args = ResolveCommentInput.model_validate({"id": "c1", "resolvingCommentId": "c2"})

    async with client:
        result = await resolve_comment(client, args)

    assert result.text == "Successfully resolved comment c1"
    assert _variables(route) == {"id": "c1", "resolvingCommentId": "c2"}


@pytest.mark.asyncio
@respx.mock
async def test_resolve_comment_without_resolving_comment(client):
    route = respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"commentResolve": {"success": True, "comment": {"id": "c1"}}})
    )

    async with client:
        await resolve_comment(client, ResolveCommentInput(id="c1"))

    assert _variables(route) == {"id": "c1"}


@pytest.mark.asyncio
@respx.mock
async def test_unresolve_comment(client):
    respx.post(DEFAULT_API_URL).mock(
        return_value=_ok({"commentUnresolve": {"success": True, "comment": {"id": "c1"}}})
    )

    async with client:
        result = await unresolve_comment(client, UnresolveCommentInput(id="c1"))

    assert result.text == "Successfully unresolved comment c1"
