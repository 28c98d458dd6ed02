"""Catalog processor that refreshes OpenAPI definitions from a live URL."""

from __future__ import annotations

import logging

from .fetcher import DefinitionFetcher, FetchFailure, FetchSuccess
from .models import (
    ENTITY_STATUS_CATALOG_PROCESSING_TYPE,
    APISpec,
    ApiEntity,
    Entity,
    EntityStatus,
    EntityStatusItem,
)

OPENAPI_DOC_URL_ANNOTATION = "tw.com/openapi-doc-url"

PROCESSOR_NAME = "tw.OpenApiEntityProcessor"

logger = logging.getLogger(__name__)


def error_status_item(failure: FetchFailure) -> EntityStatusItem:
    """Build the catalog-processing error status item for a failed fetch."""
    return EntityStatusItem(
        type=ENTITY_STATUS_CATALOG_PROCESSING_TYPE,
        level="error",
        message=failure.message,
        error=failure.error,
    )


def with_error_status(entity: Entity, item: EntityStatusItem) -> Entity:
    """Return a copy of entity with item placed first in its status items."""
    existing = entity.status.items if entity.status else []
    if existing:
        logger.debug(
            f"'{entity.ref}' already has {len(existing)} status item(s), keeping them"
        )
    return entity.model_copy(update={"status": EntityStatus(items=[item, *existing])})


class OpenApiEntityProcessor:
    """Replaces the definition of openapi API entities with the live document.

    The document URL is read from the ``tw.com/openapi-doc-url`` annotation.
    Other entities pass through untouched. Fetch failures never propagate;
    they come back as an error status item on the returned entity.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        fetcher: DefinitionFetcher | None = None,
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._fetcher = fetcher or DefinitionFetcher()

    def get_processor_name(self) -> str:
        return PROCESSOR_NAME

    async def post_process_entity(self, entity: Entity) -> Entity:
        match entity:
            case ApiEntity(spec=APISpec(type="openapi")):
                pass
            case _:
                return entity

        api_doc_url = entity.metadata.annotations.get(OPENAPI_DOC_URL_ANNOTATION)
        if not api_doc_url:
            return entity

        result = await self._fetcher.fetch(api_doc_url)
        match result:
            case FetchSuccess(text=text):
                entity.spec.definition = text
                self._logger.info(f"Updated API definition for '{entity.ref}'")
                return entity
            case FetchFailure():
                self._logger.warning(
                    f"Can't fetch the latest API definition for '{entity.ref}': "
                    f"{result.error.name}: {result.error.message}",
                    extra={"error": result.error.model_dump()},
                )
                return with_error_status(entity, error_status_item(result))

    process = post_process_entity
