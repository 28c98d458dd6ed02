"""Local catalog YAML files."""

from .reader import EntityReader
from .scanner import CatalogScanner
from .writer import EntityWriter

__all__ = [
    "CatalogScanner",
    "EntityReader",
    "EntityWriter",
]
