"""Pydantic models for MCP tool parameters and composite results."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_LANGUAGE, NOT_STARTED_STATUS


class ToolParams(BaseModel):
    # Upstream ids are sometimes sent as numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)


class LoginParams(ToolParams):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"email": "learner@example.com", "password": "s3cret"}]
        }
    )
    email: str = Field(description="Account email")
    password: str = Field(description="Account password")

    @field_validator("email")
    @classmethod
    def _strip_email(cls, value: str) -> str:
        return value.strip()


class ListTodoParams(ToolParams):
    pass


class ListCoursesParams(ToolParams):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{}, {"userId": "12345"}]}
    )
    userId: Optional[str] = Field(
        default=None, description="Optional userId to fetch courses for"
    )


class CourseDetailsParams(ToolParams):
    model_config = ConfigDict(json_schema_extra={"examples": [{"course_id": "42"}]})
    course_id: str = Field(description="The course ID to fetch details for")

    @field_validator("course_id")
    @classmethod
    def _strip_ids(cls, value: str) -> str:
        return value.strip()


class AssignmentDetailsParams(ToolParams):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"course_id": "42", "goal_id": "7"}]}
    )
    course_id: str = Field(description="The course ID")
    goal_id: str = Field(
        description="The goal ID (topic/concept ID) to get the assignment for"
    )

    @field_validator("course_id", "goal_id")
    @classmethod
    def _strip_ids(cls, value: str) -> str:
        return value.strip()


class SubmitCodeParams(ToolParams):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "code": "class Main { }",
                    "goal_id": "7",
                    "assignment_id": "301",
                    "course_id": "42",
                },
                {
                    "code": "print('hi')",
                    "goal_id": "7",
                    "assignment_id": "301",
                    "course_id": "42",
                    "language": "python",
                },
            ]
        }
    )
    code: str = Field(description="The code to submit for evaluation")
    goal_id: str = Field(description="The goal ID (topic/concept ID) this code is for")
    assignment_id: str = Field(description="The assignment ID")
    course_id: str = Field(description="The course ID")
    language: str = Field(
        default=DEFAULT_LANGUAGE,
        description=f"Programming language (default: {DEFAULT_LANGUAGE})",
    )

    @field_validator("goal_id", "assignment_id", "course_id")
    @classmethod
    def _strip_ids(cls, value: str) -> str:
        return value.strip()

    @field_validator("language", mode="before")
    @classmethod
    def _default_language(cls, value: Any) -> Any:
        return value or DEFAULT_LANGUAGE


class CourseInfo(BaseModel):
    course_id: Any = None
    course_title: Any = None
    completion_percentage: Any = None
    default_ide_language: Any = None


class AssignmentView(BaseModel):
    """Assignment, concept, resources and progress for one goal of a course."""

    assignment: Any
    assignment_id: Any = None
    concept: Any = None
    resources: Any = Field(default_factory=list)
    progress_status: Any = NOT_STARTED_STATUS
    course_info: CourseInfo
