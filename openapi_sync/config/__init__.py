"""Configuration module for openapi-sync."""

from .loader import ConfigLoader, load_config
from .models import OpenApiSyncConfig, OpenApiSyncSettings

__all__ = [
    "ConfigLoader",
    "OpenApiSyncConfig",
    "OpenApiSyncSettings",
    "load_config",
]
