"""Application configuration for LifeJournal."""

from __future__ import annotations

import os
from datetime import timedelta
from typing import Dict, Type

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class BaseConfig:
    """Base configuration loaded for all environments."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = _env_flag("SESSION_COOKIE_SECURE", "false")
    WTF_CSRF_ENABLED = True

    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=int(os.environ.get("JWT_ACCESS_MINUTES", "720")))

    # Key-value store: redis://, rediss://, unix:// or memory://
    KV_STORE_URL = os.environ.get("KV_STORE_URL") or os.environ.get("REDIS_URL") or "memory://"
    KV_MAX_RETRIES = int(os.environ.get("KV_MAX_RETRIES", "5"))
    KV_SOCKET_TIMEOUT_SECONDS = float(os.environ.get("KV_SOCKET_TIMEOUT_SECONDS", "5"))

    COMMUNITY_MAX_POSTS = int(os.environ.get("COMMUNITY_MAX_POSTS", "100"))
    COMMUNITY_FEED_SIZE = int(os.environ.get("COMMUNITY_FEED_SIZE", "20"))

    RATELIMIT_DEFAULT = "200/hour"
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_ENABLED = _env_flag("RATELIMIT_ENABLED", "true")

    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", str(1024 * 1024)))

    INSIGHTS_RANDOM_SEED = os.environ.get("INSIGHTS_RANDOM_SEED")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    ENV = "development"


class TestingConfig(BaseConfig):
    TESTING = True
    KV_STORE_URL = "memory://"
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    BCRYPT_LOG_ROUNDS = 4
    JWT_SECRET_KEY = "testing-only-jwt-secret-0123456789abcdef"
    INSIGHTS_RANDOM_SEED = "0"


class ProductionConfig(BaseConfig):
    ENV = "production"
    SESSION_COOKIE_SECURE = True


config_by_name: Dict[str, Type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    # CI pipelines set APP_ENV=ci; map to testing defaults.
    "ci": TestingConfig,
}
