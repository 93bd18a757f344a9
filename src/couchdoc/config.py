"""Environment-driven configuration for the database client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class CouchConfig:
    """Connection settings for the database server."""

    url: str = field(default_factory=lambda: _env("COUCHDB_URL", "http://localhost:5984"))
    database: str = field(default_factory=lambda: _env("COUCHDB_DATABASE", "couchdoc"))
    username: str = field(default_factory=lambda: _env("COUCHDB_USER"))
    password: str = field(default_factory=lambda: _env("COUCHDB_PASSWORD"))
    timeout: float = field(default_factory=lambda: float(_env("COUCHDB_TIMEOUT", "10")))

    @property
    def has_credentials(self) -> bool:
        return bool(self.username)


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    """Top-level settings aggregating all sub-configs."""

    couch: CouchConfig = field(default_factory=CouchConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
