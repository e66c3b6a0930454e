"""Journal entries JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from lifejournal.core.utils.decorators import csrf_protected, owner_scoped
from lifejournal.core.utils.validation import validation_failed
from lifejournal.domains.journal.schemas.journal_schemas import (
    JournalEntryCreate,
    JournalListFilter,
)
from lifejournal.domains.journal.services import journal_service

journal_api_bp = Blueprint("journal_api", __name__)


@journal_api_bp.get("")
@owner_scoped
def list_journal(user_id: str):
    try:
        filters = JournalListFilter.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return validation_failed(exc)
    entries = journal_service.list_entries(user_id, limit=filters.limit)
    return jsonify({"ok": True, "entries": entries})


@journal_api_bp.post("")
@owner_scoped
@csrf_protected
def create_journal_entry(user_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = JournalEntryCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_failed(exc)
    entry = journal_service.create_entry(user_id, data)
    return jsonify({"ok": True, "entry": entry}), 201


@journal_api_bp.get("/stats")
@owner_scoped
def journal_stats(user_id: str):
    return jsonify({"ok": True, "stats": journal_service.entry_stats(user_id)})
