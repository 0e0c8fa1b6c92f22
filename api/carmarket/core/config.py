"""
Environment-backed settings.

Values are read at call time so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def storage_backend() -> str:
    return _env_str("STORAGE_BACKEND", "postgres").lower()


def db_pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def db_pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), 1)


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def db_schema_file() -> str | None:
    return os.environ.get("DB_SCHEMA_FILE", "").strip() or None


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", 3000)


def static_dir() -> str:
    return _env_str("STATIC_DIR", "public")


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def bcrypt_rounds() -> int:
    # bcrypt accepts cost factors 4..31.
    return min(max(_env_int("BCRYPT_ROUNDS", 12), 4), 31)
