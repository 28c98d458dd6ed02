"""Base models for Backstage entities."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .status import EntityStatus


class EntityRef(BaseModel):
    """Reference to an entity (kind:namespace/name format)."""

    kind: str
    namespace: str = "default"
    name: str

    def __str__(self) -> str:
        return f"{self.kind.lower()}:{self.namespace}/{self.name}"


class EntityMetadata(BaseModel):
    """Common metadata for all entities."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., title="Name", description="Unique entity name")
    namespace: str = Field(default="default", title="Namespace")
    title: str | None = Field(default=None, title="Title")
    description: str | None = Field(default=None, title="Description")
    labels: dict[str, str] = Field(default_factory=dict, title="Labels")
    annotations: dict[str, str] = Field(default_factory=dict, title="Annotations")
    tags: list[str] = Field(default_factory=list, title="Tags")


class BaseEntity(BaseModel):
    """Base class for all Backstage entities."""

    model_config = ConfigDict(extra="allow")

    apiVersion: str = "backstage.io/v1alpha1"
    kind: str
    metadata: EntityMetadata
    status: EntityStatus | None = None

    @property
    def ref(self) -> EntityRef:
        """Get entity reference."""
        return EntityRef(
            kind=self.kind,
            namespace=self.metadata.namespace,
            name=self.metadata.name,
        )

    @property
    def entity_id(self) -> str:
        """Get unique entity ID."""
        return str(self.ref)


class GenericEntity(BaseEntity):
    """Any entity kind without a dedicated model."""

    spec: dict[str, Any] = Field(default_factory=dict)

    @field_validator("kind")
    @classmethod
    def _not_api_kind(cls, value: str) -> str:
        """API entities must use ApiEntity."""
        if value == "API":
            raise ValueError("kind 'API' must be parsed as ApiEntity")
        return value
