"""Configuration models for openapi-sync."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class OpenApiSyncSettings(BaseModel):
    """Global settings."""

    catalog_path: str = Field(
        default=".", description="Directory scanned for catalog YAML files"
    )
    timeout_seconds: float | None = Field(
        default=30.0, description="HTTP client timeout in seconds (null disables it)"
    )
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    log_level: str = Field(default="INFO", description="Root log level name")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        """Normalize to an upper-case logging level name."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class OpenApiSyncConfig(BaseModel):
    """Root configuration model."""

    version: int = Field(default=1)
    settings: OpenApiSyncSettings = Field(default_factory=OpenApiSyncSettings)
