"""Test configuration and fixtures for SkillCaptain MCP Server tests."""

import json
from typing import Any, Dict

import pytest
from mcp import types

from skillcaptain_mcp.api_client import SkillCaptainClient
from skillcaptain_mcp.error_handler import ErrorHandler
from skillcaptain_mcp.session import Session
from skillcaptain_mcp.tools.dispatcher import ToolDispatcher
from tests.mocks.api_mock import MOCK_AUTH_TOKEN, MOCK_USER_ID, MockSkillCaptainAPI


@pytest.fixture
def mock_api() -> MockSkillCaptainAPI:
    """Fake SkillCaptain API with default successful responses."""
    return MockSkillCaptainAPI()


@pytest.fixture
def session() -> Session:
    """Empty session, as at server startup."""
    return Session()


@pytest.fixture
def logged_in_session() -> Session:
    """Session already holding the mock credentials."""
    session = Session()
    session.establish(MOCK_AUTH_TOKEN, MOCK_USER_ID)
    return session


@pytest.fixture
def api_client(session, mock_api) -> SkillCaptainClient:
    return SkillCaptainClient(session, transport=mock_api.transport)


@pytest.fixture
def logged_in_client(logged_in_session, mock_api) -> SkillCaptainClient:
    return SkillCaptainClient(logged_in_session, transport=mock_api.transport)


@pytest.fixture
def error_handler() -> ErrorHandler:
    return ErrorHandler()


@pytest.fixture
def dispatcher(api_client, error_handler) -> ToolDispatcher:
    return ToolDispatcher(api_client, error_handler)


@pytest.fixture
def logged_in_dispatcher(logged_in_client, error_handler) -> ToolDispatcher:
    return ToolDispatcher(logged_in_client, error_handler)


def result_text(result: types.CallToolResult) -> str:
    """Text of the single content block of a tool result."""
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


def result_json(result: types.CallToolResult) -> Dict[str, Any]:
    assert not result.isError, result_text(result)
    return json.loads(result_text(result))
