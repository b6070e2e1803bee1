"""Error types and error-result formatting for SkillCaptain MCP server."""

import logging
from collections import deque
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

from mcp import types


class ErrorCode(Enum):
    """Standardized error codes for the SkillCaptain MCP server."""

    # Authentication Errors (1000-1099)
    UNAUTHENTICATED = "AUTH_1000"
    MISSING_CREDENTIALS = "AUTH_1001"

    # Remote API Errors (1200-1299)
    REMOTE_REQUEST_FAILED = "REMOTE_1200"

    # Course Data Errors (1300-1399)
    ASSIGNMENT_NOT_FOUND = "COURSE_1300"

    # Validation Errors (1700-1799)
    MISSING_ARGUMENTS = "VALIDATION_1700"
    UNKNOWN_TOOL = "VALIDATION_1701"
    INVALID_ARGUMENTS = "VALIDATION_1702"

    # Generic Errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


# Errors caused by the caller are logged quieter than remote or internal faults
SEVERITY_BY_CODE = {
    ErrorCode.UNAUTHENTICATED: "low",
    ErrorCode.MISSING_ARGUMENTS: "low",
    ErrorCode.UNKNOWN_TOOL: "low",
    ErrorCode.INVALID_ARGUMENTS: "low",
    ErrorCode.ASSIGNMENT_NOT_FOUND: "low",
    ErrorCode.MISSING_CREDENTIALS: "medium",
    ErrorCode.REMOTE_REQUEST_FAILED: "medium",
    ErrorCode.UNKNOWN_ERROR: "high",
}

MAX_ERROR_HISTORY = 200


@dataclass
class ErrorDetails:
    """Detailed error information structure."""

    code: ErrorCode
    message: str
    context: Dict[str, Any]
    timestamp: datetime
    severity: str  # 'low', 'medium', 'high', 'critical'


class SkillCaptainError(Exception):
    """Base exception class for SkillCaptain MCP server errors."""

    error_code = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return self.message


class Unauthenticated(SkillCaptainError):
    """Raised when an operation needs a session and none exists."""

    error_code = ErrorCode.UNAUTHENTICATED

    def __init__(self):
        super().__init__("Not logged in. Run the 'login' tool first.")


class MissingArguments(SkillCaptainError):
    """Raised when a tool is called without its required arguments."""

    error_code = ErrorCode.MISSING_ARGUMENTS

    def __init__(self, tool_name: str, missing: Optional[List[str]] = None):
        self.tool_name = tool_name
        self.missing = missing or []
        if self.missing:
            message = (
                f"Missing required arguments for {tool_name}: "
                f"{', '.join(self.missing)}"
            )
        else:
            message = f"Arguments are required for {tool_name}"
        super().__init__(message, {"tool": tool_name, "missing": self.missing})


class InvalidArguments(SkillCaptainError):
    """Raised when a tool argument has the wrong type."""

    error_code = ErrorCode.INVALID_ARGUMENTS

    def __init__(self, tool_name: str, problems: List[str]):
        self.tool_name = tool_name
        self.problems = problems
        super().__init__(
            f"Invalid arguments for {tool_name}: {'; '.join(problems)}",
            {"tool": tool_name},
        )


class MissingCredentials(SkillCaptainError):
    """Raised when login succeeds over HTTP but the session cookies are absent."""

    error_code = ErrorCode.MISSING_CREDENTIALS

    def __init__(self, missing: Optional[List[str]] = None):
        super().__init__(
            "Missing authentication cookies", {"missing_cookies": missing or []}
        )


class RemoteRequestFailed(SkillCaptainError):
    """Raised for any non-2xx response from the SkillCaptain API."""

    error_code = ErrorCode.REMOTE_REQUEST_FAILED

    def __init__(self, action: str, status: int, body: str):
        self.action = action
        self.status = status
        self.body = body
        super().__init__(f"{action}: {status} {body}", {"status": status})


class AssignmentNotFound(SkillCaptainError):
    """Raised when a course has no assignment for the requested goal."""

    error_code = ErrorCode.ASSIGNMENT_NOT_FOUND

    def __init__(self, goal_id: str):
        self.goal_id = goal_id
        super().__init__(
            f"Assignment not found for goal_id: {goal_id}", {"goal_id": goal_id}
        )


class UnknownTool(SkillCaptainError):
    """Raised when the requested tool name is not registered."""

    error_code = ErrorCode.UNKNOWN_TOOL

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}", {"tool": name})


class ErrorHandler:
    """Converts exceptions into error-flagged tool results and keeps counts."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        history_size: int = MAX_ERROR_HISTORY,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self._error_history: Deque[ErrorDetails] = deque(maxlen=history_size)
        self.error_counts: Dict[ErrorCode, int] = {}

    def create_error_result(
        self, error: Exception, tool_name: Optional[str] = None
    ) -> types.CallToolResult:
        """Build the `Error: <message>` result for a failed tool call."""
        if isinstance(error, SkillCaptainError):
            error_details = ErrorDetails(
                code=error.error_code,
                message=error.message,
                context=dict(error.details),
                timestamp=error.timestamp,
                severity=SEVERITY_BY_CODE.get(error.error_code, "medium"),
            )
        else:
            error_details = ErrorDetails(
                code=ErrorCode.UNKNOWN_ERROR,
                message=str(error),
                context={"exception_type": type(error).__name__},
                timestamp=datetime.now(timezone.utc),
                severity="high",
            )

        if tool_name:
            error_details.context["tool"] = tool_name

        self._log_error(error_details)
        self._error_history.append(error_details)
        self.error_counts[error_details.code] = (
            self.error_counts.get(error_details.code, 0) + 1
        )

        return types.CallToolResult(
            content=[
                types.TextContent(type="text", text=f"Error: {error_details.message}")
            ],
            isError=True,
        )

    def _log_error(self, error_details: ErrorDetails):
        """Log error with appropriate level and context."""
        log_level_map = {
            "low": logging.INFO,
            "medium": logging.WARNING,
            "high": logging.ERROR,
            "critical": logging.CRITICAL,
        }

        level = log_level_map.get(error_details.severity, logging.ERROR)

        log_message = f"[{error_details.code.value}] {error_details.message}"
        if error_details.context:
            log_message += f" | Context: {error_details.context}"

        self.logger.log(level, log_message)

    def get_error_history(self, limit: int = 50) -> List[Dict[str, Any]]:
        """Get recent error history."""
        recent_errors = list(self._error_history)[-limit:]
        return [asdict(error) for error in recent_errors]

    def clear_error_history(self):
        """Clear error history."""
        self._error_history.clear()
        self.error_counts.clear()

    def get_error_statistics(self) -> Dict[str, Any]:
        """Get error statistics."""
        if not self.error_counts:
            return {
                "total_errors": 0,
                "unique_error_types": 0,
                "most_common_error": None,
            }

        most_common_code, count = max(self.error_counts.items(), key=lambda x: x[1])
        return {
            "total_errors": sum(self.error_counts.values()),
            "unique_error_types": len(self.error_counts),
            "most_common_error": {
                "error_code": most_common_code.value,
                "count": count,
            },
        }
