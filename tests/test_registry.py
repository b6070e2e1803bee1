"""Tests for the tool registry."""

import pytest

from skillcaptain_mcp.error_handler import UnknownTool
from skillcaptain_mcp.tools.registry import (
    TOOL_DEFINITIONS,
    get_tool_definition,
    list_tool_descriptors,
)

EXPECTED_ARGUMENTS = {
    "login": ({"email", "password"}, set()),
    "list-todo": (set(), set()),
    "list-courses": (set(), {"userId"}),
    "get-course-details": ({"course_id"}, set()),
    "get-assignment-details": ({"course_id", "goal_id"}, set()),
    "submit-code": ({"code", "goal_id", "assignment_id", "course_id"}, {"language"}),
}


class TestToolDescriptors:
    """Test the discovery listing."""

    def test_names_in_order(self):
        names = [tool.name for tool in list_tool_descriptors()]

        assert names == [
            "login",
            "list-todo",
            "list-courses",
            "get-course-details",
            "get-assignment-details",
            "submit-code",
        ]

    @pytest.mark.parametrize("tool_name", list(EXPECTED_ARGUMENTS))
    def test_schema_required_and_optional(self, tool_name):
        tool = next(t for t in list_tool_descriptors() if t.name == tool_name)
        required, optional = EXPECTED_ARGUMENTS[tool_name]
        schema = tool.inputSchema

        assert schema["type"] == "object"
        assert set(schema.get("required", [])) == required
        assert set(schema["properties"]) == required | optional
        for prop in schema["properties"].values():
            assert prop["type"] == "string"
            assert prop["description"]

    def test_no_inputs_tool_has_empty_properties(self):
        tool = list_tool_descriptors()[1]

        assert tool.inputSchema == {"type": "object", "properties": {}}

    def test_listing_is_stable(self):
        first = list_tool_descriptors()
        second = list_tool_descriptors()

        assert [t.model_dump() for t in first] == [t.model_dump() for t in second]

    def test_every_tool_has_description(self):
        assert all(tool.description for tool in list_tool_descriptors())


class TestToolDefinitions:
    """Test lookup helpers."""

    def test_lookup(self):
        assert get_tool_definition("submit-code").name == "submit-code"

    def test_unknown_name(self):
        with pytest.raises(UnknownTool) as exc_info:
            get_tool_definition("delete-account")

        assert exc_info.value.message == "Unknown tool: delete-account"

    def test_requires_arguments(self):
        requiring = {d.name for d in TOOL_DEFINITIONS if d.requires_arguments}

        assert requiring == {
            "login",
            "get-course-details",
            "get-assignment-details",
            "submit-code",
        }
