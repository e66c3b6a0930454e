"""User profile API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt, jwt_required
from pydantic import ValidationError

from lifejournal.core.users.schemas import UserUpdateRequest, serialize_user
from lifejournal.core.users.services import get_user, normalize_email, update_user
from lifejournal.core.utils.decorators import csrf_protected
from lifejournal.core.utils.validation import validation_failed

user_api_bp = Blueprint("user_api", __name__)


def _caller_email() -> str:
    return normalize_email(get_jwt().get("email") or "")


@user_api_bp.get("")
@jwt_required()
def api_get_user():
    email = normalize_email(request.args.get("email") or _caller_email())
    if not email:
        return jsonify({"ok": False, "error": "validation_error"}), 400
    if email != _caller_email():
        return jsonify({"ok": False, "error": "forbidden"}), 403
    user = get_user(email)
    if not user:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "user": serialize_user(user)})


@user_api_bp.put("")
@jwt_required()
@csrf_protected
def api_update_user():
    payload = request.get_json(silent=True) or {}
    try:
        data = UserUpdateRequest.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    email = data.email or _caller_email()
    if email != _caller_email():
        return jsonify({"ok": False, "error": "forbidden"}), 403
    try:
        user = update_user(email, data.updates)
    except ValueError:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "user": serialize_user(user)})
