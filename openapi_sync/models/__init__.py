"""Pydantic models for Backstage entities."""

from .api import APISpec, ApiEntity
from .base import BaseEntity, EntityMetadata, EntityRef, GenericEntity
from .catalog import Entity, parse_entity
from .status import (
    ENTITY_STATUS_CATALOG_PROCESSING_TYPE,
    EntityStatus,
    EntityStatusItem,
    SerializedError,
)

__all__ = [
    "ENTITY_STATUS_CATALOG_PROCESSING_TYPE",
    "APISpec",
    "ApiEntity",
    "BaseEntity",
    "Entity",
    "EntityMetadata",
    "EntityRef",
    "EntityStatus",
    "EntityStatusItem",
    "GenericEntity",
    "SerializedError",
    "parse_entity",
]
