"""Community feed JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt, jwt_required
from pydantic import ValidationError

from lifejournal.core.users.services import get_user
from lifejournal.core.utils.decorators import csrf_protected, owner_scoped
from lifejournal.core.utils.validation import validation_failed
from lifejournal.domains.community.schemas.community_schemas import (
    CommunityPostCreate,
    LikeToggleRequest,
)
from lifejournal.domains.community.services import community_service

community_api_bp = Blueprint("community_api", __name__)


@community_api_bp.get("")
@jwt_required()
def list_posts():
    return jsonify({"ok": True, "posts": community_service.list_posts()})


@community_api_bp.post("")
@owner_scoped
@csrf_protected
def create_post(user_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = CommunityPostCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    email = get_jwt().get("email")
    user = get_user(email) if email else None
    author = (user or {}).get("name") or (email or "").split("@")[0] or "Anonymous"
    post = community_service.create_post(user_id, author, data)
    return jsonify({"ok": True, "post": post}), 201


@community_api_bp.post("/like")
@owner_scoped
@csrf_protected
def toggle_like(user_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = LikeToggleRequest.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    try:
        liked, likes = community_service.toggle_like(data.post_id, user_id)
    except ValueError:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "liked": liked, "likes": likes})
