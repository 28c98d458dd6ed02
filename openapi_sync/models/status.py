"""Entity status models used for processing diagnostics."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ENTITY_STATUS_CATALOG_PROCESSING_TYPE = "backstage.io/catalog-processing"


class SerializedError(BaseModel):
    """Serialized form of an error, safe to store on an entity.

    Besides name and message, error-specific fields (e.g. statusCode) are
    kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    message: str


class EntityStatusItem(BaseModel):
    """A single status entry attached to an entity."""

    type: str = Field(..., description="Status category tag")
    level: Literal["info", "warning", "error"] = Field(..., description="Severity")
    message: str
    error: SerializedError | None = None


class EntityStatus(BaseModel):
    """Status section of an entity."""

    items: list[EntityStatusItem] = Field(default_factory=list)
