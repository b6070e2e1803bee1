"""MCP tool registry and dispatcher for SkillCaptain."""

from . import dispatcher, registry

__all__ = ["registry", "dispatcher"]
