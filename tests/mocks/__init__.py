"""Mock infrastructure for SkillCaptain MCP Server testing."""

from .api_mock import (
    MockSkillCaptainAPI,
    SAMPLE_COURSE_DETAILS,
    SAMPLE_COURSES,
    SAMPLE_PROGRESS,
    SAMPLE_SUBMISSION_RESULT,
)

__all__ = [
    "MockSkillCaptainAPI",
    "SAMPLE_COURSE_DETAILS",
    "SAMPLE_COURSES",
    "SAMPLE_PROGRESS",
    "SAMPLE_SUBMISSION_RESULT",
]
