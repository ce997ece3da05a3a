"""
Broker configuration

Settings are read once from environment variables and cached for the
lifetime of the process.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Runtime settings for the broker"""

    catalog_path: Path | None = Field(default=None, description="Plan catalog JSON; bundled catalog if unset")
    apiserver_uri: str = Field(default="http://localhost:8080", description="Base URL of the policy API server")
    apiserver_timeout: float = Field(default=10.0, gt=0, description="API server request timeout in seconds")
    log_level: str = Field(default="INFO")

    @field_validator("apiserver_uri")
    @classmethod
    def validate_apiserver_uri(cls, v: str) -> str:
        """Validate API server URL format"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API server URI must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from BROKER_* environment variables"""
        catalog_path = os.getenv("BROKER_CATALOG_PATH")
        return cls(
            catalog_path=Path(catalog_path) if catalog_path else None,
            apiserver_uri=os.getenv("BROKER_APISERVER_URI", "http://localhost:8080"),
            apiserver_timeout=os.getenv("BROKER_APISERVER_TIMEOUT", "10.0"),
            log_level=os.getenv("BROKER_LOG_LEVEL", "INFO"),
        )


# Global singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.debug(f"Loaded settings: apiserver={_settings.apiserver_uri}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment"""
    global _settings
    _settings = None
