"""Insight generation API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from pydantic import ValidationError

from lifejournal.core.insights.engine import get_generator
from lifejournal.core.insights.schemas import InsightRequestSchema
from lifejournal.core.utils.validation import validation_failed

insights_api_bp = Blueprint("insights_api", __name__)


@insights_api_bp.post("")
@jwt_required()
def generate_insights():
    payload = request.get_json(silent=True) or {}
    try:
        data = InsightRequestSchema.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    insights = get_generator().generate(data.to_request())
    return jsonify({"ok": True, "insights": insights})
