"""
Shared configuration management for the Markers service.
"""

from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import ConfigurationError


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Environment
    access_env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str = "markers"

    # Security
    api_key: str = Field(...)

    # Static data
    marker_seed: Optional[int] = Field(default=None)

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("API_KEY must be set to a non-empty value")
        return value


def get_config(service_name: str = "markers", **overrides) -> ServiceConfig:
    """Get configuration for a specific service.

    Raises ConfigurationError when the environment does not provide a usable
    configuration, most commonly a missing API_KEY.
    """
    try:
        return ServiceConfig(service_name=service_name, **overrides)
    except ValidationError as exc:
        fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        raise ConfigurationError(
            f"Invalid {service_name} configuration: {', '.join(fields)}",
            details={"fields": fields}
        ) from exc
