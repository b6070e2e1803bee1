"""Tests for Set-Cookie header parsing."""

from skillcaptain_mcp.config import AUTH_COOKIE, USER_ID_COOKIE
from skillcaptain_mcp.cookies import parse_set_cookie


class TestParseSetCookie:
    """Test tokenizing of folded Set-Cookie headers."""

    def test_two_cookies_with_attributes(self):
        header = "authentication=TOK123; Path=/, user_id=U9; Path=/"

        cookies = parse_set_cookie(header)

        assert cookies[AUTH_COOKIE] == "TOK123"
        assert cookies[USER_ID_COOKIE] == "U9"

    def test_empty_or_missing_header(self):
        assert parse_set_cookie(None) == {}
        assert parse_set_cookie("") == {}

    def test_value_keeps_text_after_first_equals(self):
        cookies = parse_set_cookie("authentication=abc==; HttpOnly")

        assert cookies["authentication"] == "abc=="

    def test_expires_date_fragment_is_ignored(self):
        header = (
            "authentication=TOK; Expires=Wed, 21 Oct 2026 07:28:00 GMT; Path=/, "
            "user_id=U9; Path=/"
        )

        cookies = parse_set_cookie(header)

        assert cookies == {"authentication": "TOK", "user_id": "U9"}

    def test_fragment_without_equals_is_skipped(self):
        assert parse_set_cookie("garbage, user_id=U1") == {"user_id": "U1"}

    def test_empty_value_is_kept(self):
        assert parse_set_cookie("authentication=; Path=/") == {"authentication": ""}
