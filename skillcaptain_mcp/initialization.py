"""Component initialization for MCP server."""

import logging
from typing import Any, Dict, Optional

import httpx

from .api_client import SkillCaptainClient
from .error_handler import ErrorHandler
from .session import Session
from .tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


def initialize_components(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """Initialize all server components.

    Args:
        transport: Optional httpx transport for the API client

    Returns:
        Dictionary containing the session, API client, error handler and dispatcher
    """
    session = Session()
    api_client = SkillCaptainClient(session, transport=transport)
    error_handler = ErrorHandler()
    dispatcher = ToolDispatcher(api_client, error_handler)

    logger.info(f"SkillCaptain client targeting {api_client.api_base}")

    return {
        "session": session,
        "api_client": api_client,
        "error_handler": error_handler,
        "dispatcher": dispatcher,
    }
