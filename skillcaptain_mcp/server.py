"""Main MCP server implementation for SkillCaptain."""

import asyncio
import logging
import sys

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .config import SERVER_NAME, SERVER_VERSION
from .initialization import initialize_components
from .tools.dispatcher import register_tools

logger = logging.getLogger(__name__)

server = Server(SERVER_NAME, version=SERVER_VERSION)

# Component storage
components = {}


def init_and_register() -> None:
    """Initialize components and register all MCP tools."""
    global components

    components = initialize_components()
    register_tools(server, components)


async def run_stdio() -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("SkillCaptain MCP server running on stdio")
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


def main() -> None:
    """Run the MCP server."""
    logger.info("Starting SkillCaptain MCP server...")
    init_and_register()

    try:
        asyncio.run(run_stdio())
    except Exception as e:
        logger.critical(f"Fatal error in main(): {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
