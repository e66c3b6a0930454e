"""Reusable decorators for controllers."""

from __future__ import annotations

from functools import wraps
from typing import Callable, Optional, TypeVar

from flask import current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException

from lifejournal.core.auth.csrf import csrf_token_matches

F = TypeVar("F", bound=Callable)


def _requested_user_id() -> Optional[str]:
    requested = request.args.get("userId")
    if requested is None and request.is_json:
        body = request.get_json(silent=True)
        if isinstance(body, dict):
            requested = body.get("userId")
    if requested in (None, ""):
        return None
    return str(requested)


def owner_scoped(fn: F) -> F:
    """Require a JWT and pass the caller's id as ``user_id``.

    A ``userId`` in the query string or JSON body must match the token
    identity; otherwise the request is rejected with 403.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):  # type: ignore[misc]
        try:
            verify_jwt_in_request()
        except JWTExtendedException:
            return jsonify({"ok": False, "error": "unauthorized"}), 401
        identity = str(get_jwt_identity())
        requested = _requested_user_id()
        if requested is not None and requested != identity:
            return jsonify({"ok": False, "error": "forbidden"}), 403
        return fn(*args, user_id=identity, **kwargs)

    return wrapper  # type: ignore[return-value]


def csrf_protected(fn: F) -> F:
    """Reject the request unless it echoes the session CSRF token."""

    @wraps(fn)
    def wrapper(*args, **kwargs):  # type: ignore[misc]
        if not current_app.config.get("WTF_CSRF_ENABLED", True):
            return fn(*args, **kwargs)
        if not csrf_token_matches():
            return jsonify({"ok": False, "error": "csrf_failed"}), 403
        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
