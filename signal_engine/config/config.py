"""Runtime settings for the signal engine CLI and catalog client."""

from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings from GRANTEE_* environment variables or .env."""

    api_base_url: str = "https://grantee.onrender.com"
    request_timeout_seconds: float = 30.0
    catalog_retry_attempts: int = 3
    engine_config_path: Optional[str] = None
    log_level: str = "INFO"

    model_config = {"env_prefix": "GRANTEE_", "env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    @field_validator("request_timeout_seconds")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"request_timeout_seconds must be positive, got {v}")
        return v

    @field_validator("catalog_retry_attempts")
    @classmethod
    def at_least_one_attempt(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"catalog_retry_attempts must be at least 1, got {v}")
        return v


def load_settings() -> Settings:
    """Load and validate settings from environment.

    Raises ValueError listing every invalid variable (not just the first one).
    """
    try:
        return Settings()
    except ValidationError as exc:
        problems = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            problems.append(f"GRANTEE_{field.upper()}: {error['msg']}")
        raise ValueError(
            f"Invalid settings: {'; '.join(problems)}. "
            "Check your .env file or environment."
        ) from exc
