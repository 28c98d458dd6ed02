"""Run the OpenAPI processor over a local catalog directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .catalog import CatalogScanner, EntityReader, EntityWriter
from .models import ApiEntity, EntityStatusItem
from .processor import OpenApiEntityProcessor

logger = logging.getLogger(__name__)


@dataclass
class CatalogRunResult:
    """Outcome of one pass over a catalog directory."""

    processed: int = 0
    updated: list[str] = field(default_factory=list)
    failed: dict[str, EntityStatusItem] = field(default_factory=dict)
    written_files: list[Path] = field(default_factory=list)
    unwritten_files: list[Path] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed and not self.unwritten_files


class CatalogRunner:
    """Refreshes API definitions in catalog YAML files.

    Each entity is handed to the processor once. Files are rewritten only when
    a definition actually changed; error status items are reported, not
    persisted.
    """

    def __init__(
        self,
        processor: OpenApiEntityProcessor,
        scanner: CatalogScanner,
        reader: EntityReader | None = None,
        writer: EntityWriter | None = None,
    ):
        self._processor = processor
        self._scanner = scanner
        self._reader = reader or EntityReader()
        self._writer = writer or EntityWriter()

    async def run(self) -> CatalogRunResult:
        result = CatalogRunResult()

        for path, documents in self._scanner.scan():
            changed = False

            for index, entity in self._reader.parse_documents(path, documents):
                before = entity.spec.definition if isinstance(entity, ApiEntity) else None
                processed = await self._processor.post_process_entity(entity)
                result.processed += 1

                if processed.status and processed.status != entity.status:
                    result.failed[entity.entity_id] = processed.status.items[0]
                    continue

                if isinstance(processed, ApiEntity) and processed.spec.definition != before:
                    documents[index].setdefault("spec", {})["definition"] = (
                        processed.spec.definition
                    )
                    result.updated.append(entity.entity_id)
                    changed = True

            if changed:
                try:
                    self._writer.write_documents(documents, path)
                except OSError as e:
                    logger.warning(f"Failed to write {path}: {e}")
                    result.unwritten_files.append(path)
                    continue
                result.written_files.append(path)
                logger.info(f"Wrote {path}")

        return result
