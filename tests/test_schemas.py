import pytest
from linear_mcp.core.errors import ToolValidationError, UnknownToolError
from linear_mcp.core.models import (
    CreateIssueInput,
    DeleteIssueInput,
    EmptyInput,
    SearchIssuesInput,
)
from linear_mcp.core.schemas import SchemaRegistry, ToolSchema
from linear_mcp.core.tool_schemas import TOOL_SCHEMAS, default_registry

EXPECTED_TOOLS = {
    "linear_create_issue",
    "linear_create_issues",
    "linear_create_project_with_issues",
    "linear_bulk_update_issues",
    "linear_search_issues",
    "linear_search_issues_by_identifier",
    "linear_delete_issue",
    "linear_delete_issues",
    "linear_get_teams",
    "linear_get_user",
    "linear_get_project",
    "linear_search_projects",
    "linear_create_comment",
    "linear_update_comment",
    "linear_delete_comment",
    "linear_resolve_comment",
    "linear_unresolve_comment",
    "linear_create_customer_need_from_attachment",
}


@pytest.fixture
def registry():
    return default_registry()


def test_default_registry_has_every_tool(registry):
    assert set(registry) == EXPECTED_TOOLS
    assert len(registry) == len(TOOL_SCHEMAS)


def test_unknown_tool(registry):
    with pytest.raises(UnknownToolError) as exc:
        registry.get_schema("linear_nope")
    assert "linear_nope" in str(exc.value)


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry["linear_extra"] = registry["linear_create_issue"]  # type: ignore[index]
    with pytest.raises(TypeError):
        registry._schemas["linear_extra"] = registry["linear_create_issue"]


def test_duplicate_schema_names_rejected():
    schema = ToolSchema(
        name="dup", description="d", operation="dup", input_model=EmptyInput
    )
    with pytest.raises(ValueError):
        SchemaRegistry([schema, schema])


def test_alternate_registry():
    registry = SchemaRegistry(
        [
            ToolSchema(
                name="linear_delete_issue",
                description="Delete",
                operation="delete issue",
                input_model=DeleteIssueInput,
            )
        ]
    )
    assert list(registry) == ["linear_delete_issue"]
    args = registry.validate("linear_delete_issue", {"id": "ENG-1"})
    assert args.id == "ENG-1"


def test_input_schema_lists_required_camel_case_fields(registry):
    schema = registry["linear_create_issue"].input_schema()
    assert schema["type"] == "object"
    assert set(schema["required"]) == {"title", "description", "teamId"}
    assert schema["properties"]["teamId"]["description"] == "Team ID"
    assert "assigneeId" in schema["properties"]


def test_search_schema_has_no_required_fields(registry):
    schema = registry["linear_search_issues"].input_schema()
    assert not schema.get("required")
    assert {"query", "teamIds", "priority", "first", "after", "orderBy"} <= set(
        schema["properties"]
    )


def test_examples_attached(registry):
    schema = registry["linear_create_project_with_issues"].input_schema()
    assert len(schema["examples"]) == 2


def test_missing_required_field_named(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate("linear_create_issue", {"title": "t", "description": "d"})
    assert str(exc.value) == "Missing required parameter: teamId"
    assert exc.value.field == "teamId"


def test_non_array_is_type_mismatch(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate("linear_delete_issues", {"ids": "ENG-1"})
    assert str(exc.value) == "Invalid type for parameter ids: expected array"


def test_number_for_string_is_type_mismatch(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate("linear_delete_issue", {"id": 123})
    assert str(exc.value) == "Invalid type for parameter id: expected string"


def test_string_for_number_is_type_mismatch(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate("linear_search_issues", {"priority": "2"})
    assert "expected number" in str(exc.value)


def test_nested_location_reported(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate(
            "linear_create_issues",
            {"issues": [{"title": "a", "description": "b", "teamId": "t"}, {"title": "c"}]},
        )
    assert str(exc.value) == "Missing required parameter: issues[1].description"


def test_project_requires_a_team(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate(
            "linear_create_project_with_issues",
            {"project": {"name": "P", "teamIds": []}, "issues": []},
        )
    assert exc.value.field == "project.teamIds"


def test_priority_range_not_enforced(registry):
    args = registry.validate(
        "linear_create_issue",
        {"title": "t", "description": "d", "teamId": "x", "priority": 9},
    )
    assert isinstance(args, CreateIssueInput)
    assert args.priority == 9


def test_arguments_must_be_object(registry):
    with pytest.raises(ToolValidationError):
        registry.validate("linear_search_issues", ["query"])  # type: ignore[arg-type]


def test_none_arguments_treated_as_empty(registry):
    args = registry.validate("linear_search_issues", None)
    assert isinstance(args, SearchIssuesInput)
    assert args.query is None


def test_whole_number_floats_accepted(registry):
    args = registry.validate("linear_search_issues", {"priority": 1.0, "first": 25.0})
    assert args.priority == 1
    assert isinstance(args.priority, int)
    assert args.first == 25


def test_fractional_number_rejected(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate("linear_search_issues", {"first": 2.5})
    assert str(exc.value).startswith("Invalid value for parameter first:")
    assert "whole number" in str(exc.value)


def test_bool_is_not_a_number(registry):
    with pytest.raises(ToolValidationError) as exc:
        registry.validate(
            "linear_create_issue",
            {"title": "t", "description": "d", "teamId": "x", "priority": True},
        )
    assert str(exc.value) == "Invalid type for parameter priority: expected number"
