"""Scan a catalog directory for YAML entity files."""

import logging
from pathlib import Path
from typing import Iterator

import yaml

logger = logging.getLogger(__name__)


class CatalogScanner:
    """Scan catalog directory for YAML entity files."""

    PATTERNS = ("*.yaml", "*.yml")

    # Directories never holding catalog entities
    SKIP_DIRS = {".git", "node_modules", ".venv"}

    def __init__(self, root_path: str | Path):
        self.root = Path(root_path)

    def iter_files(self) -> Iterator[Path]:
        """Yield YAML files under the root, sorted per pattern."""
        if self.root.is_file():
            yield self.root
            return

        for pattern in self.PATTERNS:
            for yaml_file in sorted(self.root.rglob(pattern)):
                if any(skip_dir in yaml_file.parts for skip_dir in self.SKIP_DIRS):
                    continue
                yield yaml_file

    def scan(self) -> Iterator[tuple[Path, list[dict]]]:
        """Yield (file_path, documents) for every readable YAML file.

        A file may hold several entities separated by ``---``. Documents
        that are not mappings are dropped.
        """
        for yaml_file in self.iter_files():
            try:
                with open(yaml_file, encoding="utf-8") as f:
                    documents = [
                        doc for doc in yaml.safe_load_all(f) if isinstance(doc, dict)
                    ]
            except (yaml.YAMLError, OSError) as e:
                logger.warning(f"Failed to parse {yaml_file}: {e}")
                continue

            if documents:
                yield yaml_file, documents
