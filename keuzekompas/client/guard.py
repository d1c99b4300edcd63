from __future__ import annotations

from typing import NamedTuple, Optional
from urllib.parse import urlencode

LOGIN_PATH = "/login"


class GuardResult(NamedTuple):
    allowed: bool
    redirect: Optional[str] = None


def auth_guard(session, url: str) -> GuardResult:
    """Let signed-in users through; send everyone else to the login page."""
    if session.is_logged_in:
        return GuardResult(True)
    return GuardResult(False, f"{LOGIN_PATH}?{urlencode({'returnUrl': url})}")
