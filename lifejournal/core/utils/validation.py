"""Input validation helpers shared by the request schemas."""

from __future__ import annotations

from typing import Iterable, List

from flask import jsonify
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema whose JSON form uses camelCase keys (``lifeAreas``, ``goalAchieved``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def check_vocabulary(values: Iterable[str], allowed: Iterable[str], label: str) -> List[str]:
    """Return ``values`` de-duplicated in order, rejecting anything outside ``allowed``."""
    allowed_set = set(allowed)
    cleaned: List[str] = []
    for value in values:
        tag = value.strip().lower()
        if tag not in allowed_set:
            raise ValueError(f"unknown {label}: {value}")
        if tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def jsonable_errors(exc: ValidationError) -> list[dict]:
    errors = exc.errors(include_url=False)
    for err in errors:
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
    return errors


def validation_failed(exc: ValidationError):
    return jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}), 400
