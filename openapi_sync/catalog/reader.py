"""Parse catalog documents into entity models."""

import logging
from pathlib import Path
from typing import Any

from ..models import Entity, parse_entity

logger = logging.getLogger(__name__)


class EntityReader:
    """Parse raw catalog documents into entities."""

    def parse_entity(self, data: dict[str, Any], source: Path | str = "") -> Entity | None:
        """Parse dict to the matching Entity type, or None if invalid."""
        if not data.get("kind"):
            return None

        try:
            return parse_entity(data)
        except ValueError as e:
            logger.warning(f"Failed to validate entity in {source}: {e}")
            return None

    def parse_documents(
        self, path: Path, documents: list[dict[str, Any]]
    ) -> list[tuple[int, Entity]]:
        """Parse every document of a file, keeping its index in the file."""
        results = []
        for index, data in enumerate(documents):
            entity = self.parse_entity(data, path)
            if entity:
                results.append((index, entity))
        return results
