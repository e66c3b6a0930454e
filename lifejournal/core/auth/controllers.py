"""Auth HTTP controllers (API only)."""

from __future__ import annotations

from flask import Blueprint, jsonify, request, session
from flask_jwt_extended import get_jwt, jwt_required
from pydantic import ValidationError

from lifejournal.core.auth.auth_service import authenticate_user, issue_access_token, register_user
from lifejournal.core.auth.csrf import issue_csrf_token
from lifejournal.core.auth.schemas import AuthRequest, SignupRequest
from lifejournal.core.users.schemas import serialize_user
from lifejournal.core.users.services import get_user
from lifejournal.core.utils.validation import validation_failed
from lifejournal.extensions import limiter

auth_bp = Blueprint("auth_api", __name__)


def _session_payload(user: dict) -> dict:
    return {
        "ok": True,
        "user": serialize_user(user),
        "access_token": issue_access_token(user),
        "csrf_token": issue_csrf_token(rotate=True),
    }


@auth_bp.post("")
@limiter.limit("10/minute")
def authenticate():
    # Tokens are the session; drop any stale cookie state first.
    session.clear()
    payload = request.get_json(silent=True) or {}
    try:
        data = AuthRequest.model_validate(payload)
        if data.action == "signup":
            data = SignupRequest.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)

    if data.action == "signin":
        user = authenticate_user(data.email, data.password)
        if not user:
            return jsonify({"ok": False, "error": "invalid_credentials"}), 401
        return jsonify(_session_payload(user))

    try:
        user = register_user(data)
    except ValueError:
        return jsonify({"ok": False, "error": "user_exists"}), 409
    return jsonify(_session_payload(user)), 201


@auth_bp.get("/me")
@jwt_required()
def me():
    user = get_user(get_jwt().get("email") or "")
    if not user:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "user": serialize_user(user)})
