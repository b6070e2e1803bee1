"""Static registry of the SkillCaptain MCP tools."""

from dataclasses import dataclass
from typing import Any, Dict, List, Type

from mcp import types

from ..error_handler import UnknownTool
from ..tool_models import (
    AssignmentDetailsParams,
    CourseDetailsParams,
    ListCoursesParams,
    ListTodoParams,
    LoginParams,
    SubmitCodeParams,
    ToolParams,
)


def input_schema(params_model: Type[ToolParams]) -> Dict[str, Any]:
    """Build a flat JSON schema of string properties from a params model."""
    properties = {}
    required = []
    for field_name, field in params_model.model_fields.items():
        properties[field_name] = {"type": "string", "description": field.description}
        if field.is_required():
            required.append(field_name)

    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    params_model: Type[ToolParams]

    @property
    def requires_arguments(self) -> bool:
        return any(
            field.is_required() for field in self.params_model.model_fields.values()
        )

    def to_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=input_schema(self.params_model),
        )


TOOL_DEFINITIONS = (
    ToolDefinition(
        name="login",
        description="Authenticate to SkillCaptain with email and password",
        params_model=LoginParams,
    ),
    ToolDefinition(
        name="list-todo",
        description="List SkillCaptain TODO progress tracker",
        params_model=ListTodoParams,
    ),
    ToolDefinition(
        name="list-courses",
        description=(
            "List all SkillCaptain courses. If logged in, uses your userId "
            "unless one is provided."
        ),
        params_model=ListCoursesParams,
    ),
    ToolDefinition(
        name="get-course-details",
        description=(
            "Get detailed information about a specific course including concepts, "
            "assignments, progress, and resources. Requires login."
        ),
        params_model=CourseDetailsParams,
    ),
    ToolDefinition(
        name="get-assignment-details",
        description=(
            "Get detailed assignment/problem information for a specific topic or "
            "concept in a course. Returns assignment, concept details, resources, "
            "and progress status. Requires login."
        ),
        params_model=AssignmentDetailsParams,
    ),
    ToolDefinition(
        name="submit-code",
        description=(
            "Submit code for evaluation and receive automated feedback, review, "
            "execution results, and code quality assessment. Requires login."
        ),
        params_model=SubmitCodeParams,
    ),
)

_DEFINITIONS_BY_NAME = {definition.name: definition for definition in TOOL_DEFINITIONS}
_TOOLS = tuple(definition.to_tool() for definition in TOOL_DEFINITIONS)


def get_tool_definition(name: str) -> ToolDefinition:
    try:
        return _DEFINITIONS_BY_NAME[name]
    except KeyError:
        raise UnknownTool(name) from None


def list_tool_descriptors() -> List[types.Tool]:
    """Return the tool descriptors in their fixed order."""
    return list(_TOOLS)
