"""Application configuration using Pydantic Settings.

Environment variables are loaded from .env files and system environment.
Simulation tuning (failure rate, synthetic step durations, pacing) lives
here so deployments can adjust it without code changes.
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Environment variables take precedence over .env file values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    PROJECT_NAME: str = "HRFlow Workflow Engine"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"

    # CORS
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_allowed_origins(cls, v: Any) -> list[str]:
        """Parse ALLOWED_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        return ["http://localhost:3000"]

    # Simulation
    SIMULATION_FAILURE_RATE: float = Field(default=0.05, ge=0.0, le=1.0)
    SIMULATION_MIN_STEP_MS: int = Field(default=500, ge=0)
    SIMULATION_MAX_STEP_MS: int = Field(default=2500, ge=1)
    SIMULATION_STEP_DELAY_SECONDS: float = Field(default=0.0, ge=0.0)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None  # No file handler when unset
    LOG_JSON_FORMAT: bool = True

    @model_validator(mode="after")
    def validate_step_duration_bounds(self) -> "Settings":
        """Ensure the synthetic duration range is non-empty."""
        if self.SIMULATION_MAX_STEP_MS <= self.SIMULATION_MIN_STEP_MS:
            raise ValueError(
                "SIMULATION_MAX_STEP_MS must be greater than SIMULATION_MIN_STEP_MS"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
