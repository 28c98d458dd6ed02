"""Write catalog YAML files."""

from pathlib import Path
from typing import Any

import yaml


class _CatalogDumper(yaml.SafeDumper):
    """Dumper that keeps multi-line strings (API definitions) readable."""


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_CatalogDumper.add_representer(str, _represent_str)


class EntityWriter:
    """Write catalog documents back to YAML files."""

    def write_documents(self, documents: list[dict[str, Any]], path: Path) -> None:
        """Write documents to a YAML file, separated by ``---``."""
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.write_documents_str(documents))

    def write_documents_str(self, documents: list[dict[str, Any]]) -> str:
        """Convert documents to a YAML string."""
        return yaml.dump_all(
            documents,
            Dumper=_CatalogDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
