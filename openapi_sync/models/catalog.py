"""Entity union and kind dispatch."""

from typing import Any, Union

from .api import ApiEntity
from .base import GenericEntity

Entity = Union[ApiEntity, GenericEntity]


def parse_entity(data: dict[str, Any]) -> Entity:
    """Validate a raw entity mapping into its model.

    Raises:
        ValueError: If the data is not a valid entity (pydantic's
            ValidationError is a ValueError).
    """
    if data.get("kind") == "API":
        return ApiEntity.model_validate(data)
    return GenericEntity.model_validate(data)
