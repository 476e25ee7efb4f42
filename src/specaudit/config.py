"""Environment-based configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reads from .env file and SPECKIT_* environment variables."""

    # Project root (explicit argument still wins, see resolve_project_root)
    project_path: Path | None = None

    # Logging
    log_level: str = "INFO"

    # External spec-kit CLI used for prerequisite checks
    cli_command: str = "specify"
    cli_version_timeout_seconds: int = 10
    cli_check_timeout_seconds: int = 30

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @field_validator("cli_version_timeout_seconds", "cli_check_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("CLI timeouts must be positive")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SPECKIT_",
        "extra": "ignore",
    }


def resolve_project_root(
    explicit: str | Path | None = None,
    settings: Settings | None = None,
) -> Path:
    """Resolve the project root directory.

    Priority: explicit argument > SPECKIT_PROJECT_PATH > cwd.
    """
    if explicit is not None and str(explicit) != "":
        return Path(explicit).resolve()
    settings = settings or Settings()
    if settings.project_path is not None:
        return settings.project_path.resolve()
    cwd = Path(os.getcwd())
    logger.debug("No project path configured, using cwd %s", cwd)
    return cwd
