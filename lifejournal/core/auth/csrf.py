"""CSRF tokens bound to the Flask session.

Signing in rotates the token. Mutating API calls echo it back in the
``X-CSRF-Token`` header, or in a ``csrfToken`` JSON field for clients that
cannot set headers.
"""

from __future__ import annotations

import hmac
import secrets

from flask import request, session

SESSION_KEY = "_csrf_token"
CSRF_HEADER = "X-CSRF-Token"
CSRF_FIELD = "csrfToken"


def issue_csrf_token(*, rotate: bool = False) -> str:
    token = None if rotate else session.get(SESSION_KEY)
    if not token:
        token = secrets.token_urlsafe(32)
        session[SESSION_KEY] = token
    return token


def submitted_csrf_token() -> str:
    token = request.headers.get(CSRF_HEADER)
    if not token and request.is_json:
        body = request.get_json(silent=True)
        if isinstance(body, dict):
            token = body.get(CSRF_FIELD)
    return token if isinstance(token, str) else ""


def csrf_token_matches() -> bool:
    """True when the submitted token equals the one in the session."""
    expected = session.get(SESSION_KEY)
    submitted = submitted_csrf_token()
    if not expected or not submitted:
        return False
    return hmac.compare_digest(submitted.encode("utf-8"), str(expected).encode("utf-8"))
