"""Goals JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from lifejournal.core.utils.decorators import csrf_protected, owner_scoped
from lifejournal.core.utils.validation import validation_failed
from lifejournal.domains.goals.schemas.goal_schemas import (
    GoalCreate,
    GoalDeleteRequest,
    GoalProgressUpdate,
    GoalUpdateRequest,
)
from lifejournal.domains.goals.services import goal_service

goal_api_bp = Blueprint("goal_api", __name__)


@goal_api_bp.get("")
@owner_scoped
def list_goals(user_id: str):
    return jsonify({"ok": True, "goals": goal_service.list_goals(user_id)})


@goal_api_bp.post("")
@owner_scoped
@csrf_protected
def create_goal(user_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = GoalCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    goal = goal_service.create_goal(user_id, data)
    return jsonify({"ok": True, "goal": goal}), 201


@goal_api_bp.put("")
@owner_scoped
@csrf_protected
def update_goal(user_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = GoalUpdateRequest.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    try:
        goal = goal_service.update_goal(user_id, data.goal_id, data.updates)
    except ValueError:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "goal": goal})


@goal_api_bp.patch("/<goal_id>/progress")
@owner_scoped
@csrf_protected
def update_goal_progress(user_id: str, goal_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = GoalProgressUpdate.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    try:
        goal = goal_service.update_progress(user_id, goal_id, data.progress)
    except ValueError:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "goal": goal})


@goal_api_bp.delete("")
@owner_scoped
@csrf_protected
def delete_goal(user_id: str):
    params = request.args.to_dict()
    if "goalId" not in params and request.is_json:
        params.update(request.get_json(silent=True) or {})
    try:
        data = GoalDeleteRequest.model_validate(params)
    except ValidationError as exc:
        return validation_failed(exc)
    goal_service.delete_goal(user_id, data.goal_id)
    return jsonify({"ok": True})
