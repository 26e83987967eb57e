"""
TASKFLOW - Configuration Module

This module handles application configuration via environment variables.
"""

import os


def _default_database_url() -> str:
    db_path = os.getenv("TASKFLOW_DB_PATH")
    if db_path:
        return f"sqlite+aiosqlite:///{db_path}"
    return "sqlite+aiosqlite:///./data/taskflow.db"


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "TASKFLOW API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Storage
    # TASKFLOW_DB_PATH only replaces the SQLite file; DATABASE_URL wins when both are set
    DATABASE_URL: str = os.getenv("DATABASE_URL", _default_database_url())

    # Sessions
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "sid")
    SESSION_TTL_DAYS: int = int(os.getenv("SESSION_TTL_DAYS", "7"))
    # Off by default for plain-HTTP local deployments; turn on behind TLS
    COOKIE_SECURE: bool = os.getenv("COOKIE_SECURE", "false").lower() == "true"
    COOKIE_SAMESITE: str = os.getenv("COOKIE_SAMESITE", "lax")

    # Password hashing (Argon2id; memory cost in KiB)
    PASSWORD_TIME_COST: int = int(os.getenv("PASSWORD_TIME_COST", "3"))
    PASSWORD_MEMORY_COST: int = int(os.getenv("PASSWORD_MEMORY_COST", "65536"))
    PASSWORD_PARALLELISM: int = int(os.getenv("PASSWORD_PARALLELISM", "4"))

    # Requests
    MAX_BODY_BYTES: int = int(os.getenv("MAX_BODY_BYTES", str(1024 * 1024)))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
