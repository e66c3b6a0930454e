"""LifeJournal application factory and bootstrap."""

from __future__ import annotations

import os
from typing import Optional

from flask import Flask

from lifejournal.config import config_by_name
from lifejournal.core.insights.engine import TemplateInsightGenerator
from lifejournal.core.insights.templates import DEFAULT_TEMPLATES
from lifejournal.core.store import StoreUnavailable
from lifejournal.extensions import init_extensions, kv_store


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the LifeJournal Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    app = Flask(__name__)
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)

    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    app.extensions["insight_generator"] = TemplateInsightGenerator(
        DEFAULT_TEMPLATES,
        seed=app.config.get("INSIGHTS_RANDOM_SEED"),
    )

    @app.get("/health")
    def health():
        store_ok = kv_store.backend.ping()
        return {"ok": store_ok, "store": "up" if store_ok else "down"}, (200 if store_ok else 503)

    from lifejournal.scripts.seed_demo import register_commands

    register_commands(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from lifejournal.core.auth.controllers import auth_bp  # local import to avoid circulars
    from lifejournal.core.insights.controllers import insights_api_bp
    from lifejournal.core.users.controllers import user_api_bp
    from lifejournal.domains.community.controllers.community_api import community_api_bp
    from lifejournal.domains.goals.controllers.goal_api import goal_api_bp
    from lifejournal.domains.journal.controllers.journal_api import journal_api_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(user_api_bp, url_prefix="/api/user")
    app.register_blueprint(journal_api_bp, url_prefix="/api/entries")
    app.register_blueprint(goal_api_bp, url_prefix="/api/goals")
    app.register_blueprint(community_api_bp, url_prefix="/api/community")
    app.register_blueprint(insights_api_bp, url_prefix="/api/insights")


def _register_error_handlers(app: Flask) -> None:
    """Basic JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        # "Not Found" -> "not_found"
        code = (exc.name or "error").lower().replace(" ", "_")
        return {"ok": False, "error": code, "details": exc.description}, exc.code

    @app.errorhandler(StoreUnavailable)
    def _store_unavailable(exc: StoreUnavailable):
        app.logger.error("Key-value store unavailable: %s", exc)
        return {"ok": False, "error": "store_unavailable"}, 503

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
