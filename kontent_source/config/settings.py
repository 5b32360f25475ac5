"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
The project identifier may also be supplied directly by the caller, so it is
optional here and only enforced at run time via ``require_project_id``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kontent_source.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Kontent Delivery API
    # -------------------------------------------------------------------------
    kontent_project_id: str | None = Field(
        default=None, description="Kontent project identifier"
    )
    kontent_delivery_url: str = Field(
        default="https://deliver.kontent.ai",
        description="Base URL of the Kontent Delivery API",
    )
    kontent_request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds for Delivery API calls",
    )
    kontent_max_retries: int = Field(
        default=3,
        ge=1,
        description="Attempts for transient Delivery API failures (timeouts, 5xx)",
    )
    kontent_linked_items_depth: int = Field(
        default=1,
        ge=0,
        description="How many levels of linked items the Delivery API should include",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("kontent_delivery_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the base URL so endpoint paths can be appended."""
        return value.rstrip("/")

    def require_project_id(self, override: str | None = None) -> str:
        """
        Resolve the project identifier for a run.

        Args:
            override: Project id supplied by the caller; wins over the environment.

        Raises:
            ConfigurationError: If neither the caller nor the environment provides one.
        """
        project_id = override or self.kontent_project_id
        if not project_id:
            raise ConfigurationError(
                "Kontent project id is not configured",
                config_key="kontent_project_id",
            )
        return project_id


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
