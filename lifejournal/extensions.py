"""Shared extensions for the LifeJournal application."""

from __future__ import annotations

from typing import Optional

from flask import current_app, jsonify
from flask_bcrypt import Bcrypt
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from lifejournal.core.store import KeyValueStore, create_store


class KVStore:
    """Flask extension holding the configured key-value backend."""

    def __init__(self, app=None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app, backend: Optional[KeyValueStore] = None) -> None:
        if backend is None:
            backend = create_store(
                app.config.get("KV_STORE_URL", "memory://"),
                max_retries=app.config.get("KV_MAX_RETRIES", 5),
                socket_timeout=app.config.get("KV_SOCKET_TIMEOUT_SECONDS"),
            )
        app.extensions["kv_store"] = backend

    @property
    def backend(self) -> KeyValueStore:
        return current_app.extensions["kv_store"]


# Auth/security primitives and persistence
jwt = JWTManager()
bcrypt = Bcrypt()
kv_store = KVStore()
limiter = Limiter(key_func=get_remote_address, default_limits=["200 per hour"])


def _unauthorized(reason: str):
    return jsonify({"ok": False, "error": "unauthorized", "details": reason}), 401


@jwt.unauthorized_loader
def _missing_token(reason: str):
    return _unauthorized(reason)


@jwt.invalid_token_loader
def _invalid_token(reason: str):
    return _unauthorized(reason)


@jwt.expired_token_loader
def _expired_token(_header: dict, _payload: dict):
    return _unauthorized("token_expired")


def init_extensions(app) -> None:
    """Initialize all extensions with the Flask app."""
    kv_store.init_app(app)
    jwt.init_app(app)
    bcrypt.init_app(app)
    limiter.init_app(app)
