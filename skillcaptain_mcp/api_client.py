"""Async client for the SkillCaptain REST API."""

import logging
from typing import Any, Dict, Optional

import httpx

from .config import (
    API_BASE,
    AUTH_COOKIE,
    COURSES_URL,
    DEFAULT_LANGUAGE,
    NOT_STARTED_STATUS,
    USER_ID_COOKIE,
)
from .cookies import parse_set_cookie
from .error_handler import AssignmentNotFound, MissingCredentials, RemoteRequestFailed
from .session import Session
from .tool_models import AssignmentView, CourseInfo

logger = logging.getLogger(__name__)


class SkillCaptainClient:
    """Performs the remote calls behind each MCP tool.

    Every request opens its own ``httpx.AsyncClient`` so that cookies set by
    the login response are never replayed implicitly; credentials are only
    attached where an operation asks for them.

    Args:
        session: Session state read by authenticated calls and written by login.
        api_base: Base URL of the SkillCaptain API.
        courses_url: URL of the public course listing.
        transport: Optional httpx transport, used by tests to fake the API.
    """

    def __init__(
        self,
        session: Session,
        api_base: str = API_BASE,
        courses_url: str = COURSES_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self.api_base = api_base.rstrip("/")
        self.courses_url = courses_url
        self._transport = transport

    async def _request(
        self, action: str, method: str, url: str, **kwargs: Any
    ) -> httpx.Response:
        """Send one request and map non-2xx responses to RemoteRequestFailed."""
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(method, url, **kwargs)

        if not response.is_success:
            raise RemoteRequestFailed(action, response.status_code, response.text)
        return response

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """Authenticate and store the session cookies returned by the API."""
        response = await self._request(
            "Login failed",
            "POST",
            f"{self.api_base}/user/login_user",
            json={"email": email, "password": password},
        )

        cookies = parse_set_cookie(response.headers.get("set-cookie"))
        auth_token = cookies.get(AUTH_COOKIE)
        user_id = cookies.get(USER_ID_COOKIE)
        if not auth_token or not user_id:
            missing = [
                name
                for name, value in ((AUTH_COOKIE, auth_token), (USER_ID_COOKIE, user_id))
                if not value
            ]
            raise MissingCredentials(missing)

        self.session.establish(auth_token, user_id)
        logger.info(f"Logged in as user {user_id}")
        return {"success": True, "user_id": user_id}

    async def list_todo(self) -> Any:
        """Fetch the progress tracker of the logged-in user."""
        headers = self.session.auth_headers()
        response = await self._request(
            "Error fetching tracker",
            "GET",
            f"{self.api_base}/todo/get-progress-tracker/{self.session.user_id}",
            headers=headers,
        )
        return response.json()

    async def list_courses(self, user_id: Optional[str] = None) -> Any:
        """List courses, personalised for `user_id` or the session user when known."""
        effective_user_id = user_id or self.session.user_id
        params = {"userId": effective_user_id} if effective_user_id else {}
        headers = (
            self.session.auth_headers() if self.session.is_authenticated() else {}
        )

        response = await self._request(
            "Error fetching courses",
            "GET",
            self.courses_url,
            params=params,
            headers=headers,
        )
        return response.json()

    async def get_course_details(self, course_id: str) -> Any:
        headers = self.session.auth_headers()
        response = await self._request(
            "Error fetching course details",
            "GET",
            f"{self.api_base}/goal/course/{course_id}",
            headers=headers,
        )
        return response.json()

    async def get_assignment_details(self, course_id: str, goal_id: Any) -> Dict[str, Any]:
        """Combine the assignment, concept, resources and progress of one goal.

        Everything comes from a single course-detail response. Goal ids are
        compared as strings since the API mixes numeric and string ids. Only a
        missing assignment is an error; the other lookups fall back to
        defaults.
        """
        self.session.require()
        course_data = await self.get_course_details(course_id)
        goal_key = str(goal_id)

        assignments = course_data.get("assignments") or {}
        assignment = assignments.get(goal_key)
        if assignment is None:
            raise AssignmentNotFound(goal_key)

        concept = next(
            (
                goal
                for goal in course_data.get("goals") or []
                if isinstance(goal, dict) and str(goal.get("id")) == goal_key
            ),
            None,
        )
        resources = (course_data.get("resources") or {}).get(goal_key) or []
        progress = (course_data.get("goal_id_of_completed_assignment") or {}).get(
            goal_key
        ) or NOT_STARTED_STATUS

        view = AssignmentView(
            assignment=assignment,
            assignment_id=assignment.get("id") if isinstance(assignment, dict) else None,
            concept=concept,
            resources=resources,
            progress_status=progress,
            course_info=CourseInfo(
                course_id=course_data.get("course_id"),
                course_title=(course_data.get("course_dto") or {}).get("title"),
                completion_percentage=course_data.get("completion_percentage"),
                default_ide_language=course_data.get("default_ide_language"),
            ),
        )
        return view.model_dump()

    async def submit_code(
        self,
        code: str,
        goal_id: Any,
        assignment_id: Any,
        course_id: Any,
        language: str = DEFAULT_LANGUAGE,
    ) -> Any:
        """Submit code for automated evaluation.

        The submit endpoint is inconsistent about where it reads credentials,
        so they are sent both as headers and as a Cookie header.
        """
        headers = {
            **self.session.auth_headers(),
            "assignment": str(assignment_id),
            "Cookie": self.session.cookie_header(),
        }
        payload = {
            "code": code,
            "goalId": str(goal_id),
            "assignmentId": str(assignment_id),
            "courseId": str(course_id),
            "language": language,
        }
        url = f"{self.api_base}/ide/v2/submit"

        logger.info(f"Submitting code - URL: {url}")
        logger.info(
            f"Payload: goalId={goal_id}, assignmentId={assignment_id}, "
            f"courseId={course_id}, language={language}"
        )

        try:
            response = await self._request(
                "Error submitting code", "POST", url, json=payload, headers=headers
            )
        except RemoteRequestFailed as e:
            logger.warning(f"Submission rejected with status {e.status}: {e.body}")
            raise

        logger.info(f"Response status: {response.status_code}")
        return response.json()
