"""Configuration constants for SkillCaptain MCP server."""

import logging

# Configure logging to stderr (not stdout for STDIO transport)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

SERVER_NAME = "skillcaptain-mcp"
SERVER_VERSION = "1.0.0"

# Remote SkillCaptain endpoints
API_BASE = "https://skillcaptain.app/unicorn/api"
COURSES_URL = "https://skillcaptain.app/unicorn/courses"

# Cookie names set by the login endpoint
AUTH_COOKIE = "authentication"
USER_ID_COOKIE = "user_id"

DEFAULT_LANGUAGE = "java"
NOT_STARTED_STATUS = "Not Started"
