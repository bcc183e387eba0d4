from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    app_title: str

    # Serving
    host: str
    port: int
    allowed_origins: tuple[str, ...]

    # Logging
    log_level: str
    debug_log_commands: bool


def get_settings() -> Settings:
    return Settings(
        app_title=os.getenv("APP_TITLE", "Record Desk"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_env_int("PORT", 8000),
        allowed_origins=_env_list("ALLOWED_ORIGINS", "*"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        debug_log_commands=_env_bool("DEBUG_LOG_COMMANDS", True),
    )
