# app/config.py

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    database_url: str
    timezone: str
    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    return Settings(
        database_url=_getenv("DATABASE_URL", "sqlite:///db.sqlite"),
        timezone=_getenv("APP_TIMEZONE", "UTC"),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
