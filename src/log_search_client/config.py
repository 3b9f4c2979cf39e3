"""Configuration for the log search client.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The base URL is resolved exactly once from these settings by the bootstrap code
(see :mod:`log_search_client.page`). The client itself never reads the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_ORIGIN = "http://localhost:3000"


def resolve_base_url(environment: str, deployed_origin: str = "") -> str:
    """Select the API base URL for an environment.

    ``"production"`` targets the root of the origin the UI is deployed on; every other
    environment targets the fixed local development backend.
    """

    if environment == "production":
        return deployed_origin.rstrip("/") + "/"
    return DEVELOPMENT_ORIGIN


class LogSearchSettings(BaseSettings):
    """Settings for the log search client.

    Environment variables:
    - LOG_SEARCH_ENV            (optional, "development" or "production")
    - LOG_SEARCH_ORIGIN         (required in production)
    - LOG_SEARCH_HTTP_TIMEOUT   (optional)
    - LOG_SEARCH_STATE_PATH     (optional)
    - LOG_LEVEL                 (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `LogSearchSettings(_env_file=path_to_env)`.
    """

    environment: Literal["development", "production"] = Field(
        default="development",
        validation_alias="LOG_SEARCH_ENV",
        description="Deployment environment; selects the API base URL",
    )
    deployed_origin: str = Field(
        default="",
        validation_alias="LOG_SEARCH_ORIGIN",
        description="Origin serving the search UI and API in production, e.g. https://logs.example.com",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        validation_alias="LOG_SEARCH_HTTP_TIMEOUT",
        description="Optional per-request timeout. Unset means requests never time out.",
        gt=0,
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    state_path: Path = Field(
        default=Path("log_search_state"),
        validation_alias="LOG_SEARCH_STATE_PATH",
        description="Directory where search UI preferences are persisted",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _require_origin_in_production(self) -> LogSearchSettings:
        if self.environment == "production" and not self.deployed_origin.strip():
            raise ValueError("LOG_SEARCH_ORIGIN is required when LOG_SEARCH_ENV=production")
        return self

    @property
    def base_url(self) -> str:
        """API base URL for the configured environment."""

        return resolve_base_url(self.environment, self.deployed_origin)

    @property
    def storage_file(self) -> Path:
        """Path of the durable key/value file backing the UI config store."""

        return self.state_path / "storage.json"
