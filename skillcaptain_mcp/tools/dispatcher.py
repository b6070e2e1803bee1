"""Routes MCP tool calls to the SkillCaptain API client."""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from mcp import types
from mcp.server.lowlevel import Server
from pydantic import BaseModel, ValidationError

from ..api_client import SkillCaptainClient
from ..error_handler import ErrorHandler, InvalidArguments, MissingArguments
from .registry import ToolDefinition, get_tool_definition, list_tool_descriptors

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Validates tool arguments, calls the API client and wraps the outcome.

    Every call produces a well-formed ``CallToolResult``: successes as
    pretty-printed JSON text, failures as ``Error: <message>`` with
    ``isError`` set.
    """

    def __init__(
        self,
        api_client: SkillCaptainClient,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.api_client = api_client
        self.error_handler = error_handler or ErrorHandler(logger)
        self._handlers: Dict[str, Callable[[Any], Awaitable[Any]]] = {
            "login": self._login,
            "list-todo": self._list_todo,
            "list-courses": self._list_courses,
            "get-course-details": self._get_course_details,
            "get-assignment-details": self._get_assignment_details,
            "submit-code": self._submit_code,
        }

    async def dispatch(
        self, name: str, arguments: Optional[Dict[str, Any]]
    ) -> types.CallToolResult:
        try:
            definition = get_tool_definition(name)
            params = self._parse_arguments(definition, arguments)
            logger.info(f"Calling tool {name}")
            result = await self._handlers[name](params)
        except Exception as e:
            return self.error_handler.create_error_result(e, name)

        return types.CallToolResult(
            content=[
                types.TextContent(
                    type="text", text=json.dumps(result, indent=2, ensure_ascii=False)
                )
            ]
        )

    @staticmethod
    def _parse_arguments(
        definition: ToolDefinition, arguments: Optional[Dict[str, Any]]
    ) -> BaseModel:
        if definition.requires_arguments and not arguments:
            raise MissingArguments(definition.name)

        try:
            return definition.params_model.model_validate(arguments or {})
        except ValidationError as e:
            missing = [
                str(error["loc"][0]) for error in e.errors() if error["type"] == "missing"
            ]
            if missing:
                raise MissingArguments(definition.name, missing) from e
            problems = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise InvalidArguments(definition.name, problems) from e

    async def _login(self, params):
        return await self.api_client.login(params.email, params.password)

    async def _list_todo(self, params):
        return await self.api_client.list_todo()

    async def _list_courses(self, params):
        return await self.api_client.list_courses(params.userId)

    async def _get_course_details(self, params):
        return await self.api_client.get_course_details(params.course_id)

    async def _get_assignment_details(self, params):
        return await self.api_client.get_assignment_details(
            params.course_id, params.goal_id
        )

    async def _submit_code(self, params):
        return await self.api_client.submit_code(
            params.code,
            params.goal_id,
            params.assignment_id,
            params.course_id,
            params.language,
        )


def register_tools(server: Server, components: Dict[str, Any]) -> None:
    """Register the tool discovery and call handlers with the MCP server.

    Args:
        server: Low-level MCP server instance
        components: Dictionary containing initialized components
    """
    dispatcher: ToolDispatcher = components["dispatcher"]

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_tool_descriptors()

    # Arguments are checked by the dispatcher so that failures keep the
    # "Error: <message>" form
    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: Optional[Dict[str, Any]]
    ) -> types.CallToolResult:
        return await dispatcher.dispatch(name, arguments)

    logger.info(f"Registered {len(list_tool_descriptors())} MCP tools")
