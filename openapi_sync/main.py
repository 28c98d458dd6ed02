"""Entry point for openapi-sync."""

import asyncio
import logging
import sys
from pathlib import Path

from .catalog import CatalogScanner
from .config import load_config
from .fetcher import DefinitionFetcher
from .processor import OpenApiEntityProcessor
from .runner import CatalogRunner

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Refresh OpenAPI definitions in a local catalog directory."""
    args = sys.argv[1:] if argv is None else argv

    config = load_config(Path.cwd())
    settings = config.settings
    configure_logging(settings.log_level)

    # Catalog path from command line, else from config
    catalog_path = Path(args[0] if args else settings.catalog_path).resolve()
    if not catalog_path.exists():
        logger.error(f"Catalog path does not exist: {catalog_path}")
        return 2

    fetcher = DefinitionFetcher(
        timeout_seconds=settings.timeout_seconds,
        verify_ssl=settings.verify_ssl,
    )
    runner = CatalogRunner(
        processor=OpenApiEntityProcessor(fetcher=fetcher),
        scanner=CatalogScanner(catalog_path),
    )
    result = asyncio.run(runner.run())

    for entity_id, item in result.failed.items():
        logger.error(f"{entity_id}: {item.message}")
    for path in result.unwritten_files:
        logger.error(f"Not written: {path}")
    logger.info(
        f"Processed {result.processed} entities, updated {len(result.updated)}, "
        f"failed {len(result.failed)}"
    )
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
