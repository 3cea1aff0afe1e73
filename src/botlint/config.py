"""Environment-based configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Feature flag: the whole pipeline is off unless ENABLE_ANALYZER=1/true
    enable_analyzer: bool = False

    # Static artifacts (None = packaged defaults under botlint/data)
    metadata_path: Path | None = None
    error_catalog_path: Path | None = None
    examples_path: Path | None = None

    # Optional discord.js package dir merged into the error catalog
    discordjs_source_dir: Path | None = None

    # Documentation enrichment service
    docs_service_url: str = "http://localhost:8000"
    docs_timeout_seconds: float = 5.0

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")

    # API
    cors_origins: str = "http://localhost:3000"
    max_code_length: int = 500_000

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}"
            )
        return level

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins split from the comma-separated setting."""
        return [
            o.strip() for o in self.cors_origins.split(",") if o.strip()
        ]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
