"""MCP server exposing SkillCaptain courses, progress and code submission."""

__version__ = "1.0.0"
