"""Tests for session state."""

import pytest

from skillcaptain_mcp.error_handler import Unauthenticated
from skillcaptain_mcp.session import Session


class TestSession:
    """Test session lifecycle and credential helpers."""

    def test_starts_empty(self):
        session = Session()

        assert session.is_authenticated() is False
        assert session.auth_token is None
        assert session.user_id is None

    def test_establish_sets_both_fields(self):
        session = Session()
        session.establish("TOK", "U1")

        assert session.is_authenticated() is True
        assert session.auth_token == "TOK"
        assert session.user_id == "U1"

    def test_establish_replaces_previous_identity(self):
        session = Session()
        session.establish("TOK", "U1")
        session.establish("TOK2", "U2")

        assert (session.auth_token, session.user_id) == ("TOK2", "U2")

    def test_require_raises_when_empty(self):
        with pytest.raises(Unauthenticated) as exc_info:
            Session().require()

        assert "Run the 'login' tool first" in exc_info.value.message

    def test_auth_headers(self, logged_in_session):
        assert logged_in_session.auth_headers() == {
            "authentication": "TOK123",
            "user_id": "U9",
        }

    def test_cookie_header(self, logged_in_session):
        assert logged_in_session.cookie_header() == "authentication=TOK123; user_id=U9"

    def test_helpers_require_session(self, session):
        with pytest.raises(Unauthenticated):
            session.auth_headers()
        with pytest.raises(Unauthenticated):
            session.cookie_header()
