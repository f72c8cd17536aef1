"""
Application settings read from the environment.

Values come from process environment variables, with a ``.env`` file in
the working directory loaded first when present.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()

VALID_ENVIRONMENTS = ("development", "production", "test")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Settings for the Users API process."""

    app_env: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Users API"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "http://localhost:3000"))
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./users.db"))
    sql_echo: bool = field(default_factory=lambda: _env_bool("SQL_ECHO", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    shutdown_grace_seconds: int = field(default_factory=lambda: int(os.getenv("SHUTDOWN_GRACE_SECONDS", "10")))
    # Production schemas are managed by Alembic; create_all is a dev convenience
    auto_create_tables: bool = field(default_factory=lambda: _env_bool("AUTO_CREATE_TABLES", "true"))

    def __post_init__(self):
        if self.app_env not in VALID_ENVIRONMENTS:
            raise ValueError(f"APP_ENV must be one of {', '.join(VALID_ENVIRONMENTS)}, got '{self.app_env}'")
        if not 1 <= self.port <= 65535:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.port}")
        if self.shutdown_grace_seconds < 0:
            raise ValueError("SHUTDOWN_GRACE_SECONDS must be >= 0")

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
