"""
Workboard Backend: Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory and the server entry point.
When:  Loaded once at module import time. Tests build their own Settings
       instance and hand it to create_app() instead of patching the singleton.

Storage:
    The default DATABASE_URL is an in-memory SQLite database, so every process
    starts with empty tables (plus the optional sample employees). Point it at
    a file (sqlite+aiosqlite:///./workboard.db) or at PostgreSQL
    (postgresql+asyncpg://...) for durable storage; nothing else changes.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running the service locally.
    Attributes are grouped by concern.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: <dialect>+<async driver>://...
    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        description="Async SQLAlchemy connection URL",
    )

    # Echo every SQL statement through the sqlalchemy.engine logger
    db_echo: bool = Field(default=False)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; "*" allows every origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Sample Data ───────────────────────────────────────────────────────
    # Inserts the nine sample employees right after the employees table is created
    seed_sample_data: bool = Field(default=True)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        """True for SQLite URLs that never touch the file system."""
        return self.is_sqlite and (
            ":memory:" in self.database_url or self.database_url.rstrip("/").endswith(":")
        )


# Singleton instance used by the module-level app and the CLI entry point
settings = Settings()
