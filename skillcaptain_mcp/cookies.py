"""Parsing of the login endpoint's Set-Cookie header."""

from typing import Dict, Optional


def parse_set_cookie(header: Optional[str]) -> Dict[str, str]:
    """Map cookie names to values from a (possibly folded) Set-Cookie header.

    Multiple cookies arrive joined by commas, e.g.
    ``authentication=TOK; Path=/, user_id=U9; Path=/``. Each fragment keeps
    only the text before its first ``;`` and is split on the first ``=``.
    Fragments with no ``=`` (such as the tail of an ``Expires`` date) are
    skipped.
    """
    cookies: Dict[str, str] = {}
    if not header:
        return cookies

    for fragment in header.split(","):
        pair = fragment.strip().split(";", 1)[0]
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            continue
        cookies[name.strip()] = value.strip()

    return cookies
