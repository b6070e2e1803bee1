"""Authenticated session state for the SkillCaptain API."""

from typing import Dict, Optional

from .config import AUTH_COOKIE, USER_ID_COOKIE
from .error_handler import Unauthenticated


class Session:
    """Holds at most one authenticated identity for the process lifetime.

    The token and user id are always set together by `establish`; there is
    no logout.
    """

    def __init__(self):
        self._auth_token: Optional[str] = None
        self._user_id: Optional[str] = None

    @property
    def auth_token(self) -> Optional[str]:
        return self._auth_token

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    def is_authenticated(self) -> bool:
        return self._auth_token is not None and self._user_id is not None

    def establish(self, auth_token: str, user_id: str) -> None:
        """Replace the current identity with a freshly logged-in one."""
        self._auth_token, self._user_id = auth_token, user_id

    def require(self) -> None:
        """Raise Unauthenticated unless a session exists."""
        if not self.is_authenticated():
            raise Unauthenticated()

    def auth_headers(self) -> Dict[str, str]:
        self.require()
        return {"authentication": self._auth_token, "user_id": self._user_id}

    def cookie_header(self) -> str:
        self.require()
        return (
            f"{AUTH_COOKIE}={self._auth_token}; {USER_ID_COOKIE}={self._user_id}"
        )
