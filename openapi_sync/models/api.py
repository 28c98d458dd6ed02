"""API entity model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .base import BaseEntity


class APISpec(BaseModel):
    """Spec for API entity."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(
        ..., title="Type", description="API type (openapi, asyncapi, graphql, grpc)"
    )
    lifecycle: str = Field(..., title="Lifecycle")
    owner: str = Field(..., title="Owner")
    system: str | None = Field(default=None, title="System")
    definition: str = Field(
        ..., title="Definition", description="API specification document"
    )


class ApiEntity(BaseEntity):
    """API interface entity."""

    kind: Literal["API"] = "API"
    spec: APISpec
