"""Tests for the catalog runner and command line entry point."""

import logging

import httpx
import pytest
import yaml

from openapi_sync.catalog import CatalogScanner, EntityWriter
from openapi_sync.config import ConfigLoader
from openapi_sync.main import main
from openapi_sync.processor import OpenApiEntityProcessor
from openapi_sync.runner import CatalogRunner


def _write_catalog(tmp_path, *documents):
    path = tmp_path / "catalog-info.yaml"
    path.write_text(yaml.safe_dump_all(documents, sort_keys=False))
    return path


class TestCatalogRunner:
    @pytest.mark.asyncio
    async def test_rewrites_changed_definitions(
        self, tmp_path, entity_data_factory, fetcher_factory
    ):
        component = entity_data_factory(kind="Component")
        path = _write_catalog(tmp_path, component, entity_data_factory())
        fetcher, _ = fetcher_factory(
            lambda request: httpx.Response(200, text="openapi: 3.1.0\n")
        )
        runner = CatalogRunner(
            processor=OpenApiEntityProcessor(fetcher=fetcher),
            scanner=CatalogScanner(tmp_path),
        )

        result = await runner.run()

        assert result.success
        assert result.processed == 2
        assert result.updated == ["api:default/example-openapi-api"]
        assert result.written_files == [path]
        documents = list(yaml.safe_load_all(path.read_text()))
        assert documents[0] == component
        assert documents[1]["spec"]["definition"] == "openapi: 3.1.0\n"

    @pytest.mark.asyncio
    async def test_unchanged_definition_leaves_file_alone(
        self, tmp_path, entity_data_factory, fetcher_factory, initial_definition
    ):
        path = _write_catalog(tmp_path, entity_data_factory())
        before = path.read_text()
        fetcher, _ = fetcher_factory(
            lambda request: httpx.Response(200, text=initial_definition)
        )
        runner = CatalogRunner(
            processor=OpenApiEntityProcessor(fetcher=fetcher),
            scanner=CatalogScanner(tmp_path),
        )

        result = await runner.run()

        assert result.updated == []
        assert result.written_files == []
        assert path.read_text() == before

    @pytest.mark.asyncio
    async def test_reports_failures(self, tmp_path, entity_data_factory, fetcher_factory):
        path = _write_catalog(tmp_path, entity_data_factory())
        before = path.read_text()
        fetcher, _ = fetcher_factory(lambda request: httpx.Response(500))
        runner = CatalogRunner(
            processor=OpenApiEntityProcessor(fetcher=fetcher),
            scanner=CatalogScanner(tmp_path),
        )

        result = await runner.run()

        assert not result.success
        item = result.failed["api:default/example-openapi-api"]
        assert item.message == "Request failed with 500 Internal Server Error"
        assert path.read_text() == before


    @pytest.mark.asyncio
    async def test_write_failure_does_not_abort_run(
        self, tmp_path, entity_data_factory, fetcher_factory
    ):
        class FailingWriter(EntityWriter):
            def write_documents(self, documents, path):
                if path.parent.name == "locked":
                    raise PermissionError(f"read-only: {path}")
                super().write_documents(documents, path)

        locked = tmp_path / "locked"
        locked.mkdir()
        locked_path = _write_catalog(locked, entity_data_factory())
        open_path = _write_catalog(
            tmp_path, entity_data_factory(metadata={"name": "other-api"})
        )
        fetcher, _ = fetcher_factory(
            lambda request: httpx.Response(200, text="openapi: 3.1.0\n")
        )
        runner = CatalogRunner(
            processor=OpenApiEntityProcessor(fetcher=fetcher),
            scanner=CatalogScanner(tmp_path),
            writer=FailingWriter(),
        )

        result = await runner.run()

        assert not result.success
        assert result.unwritten_files == [locked_path]
        assert result.written_files == [open_path]
        assert yaml.safe_load(open_path.read_text())["spec"]["definition"] == "openapi: 3.1.0\n"


class TestMain:
    def test_missing_catalog_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert main([str(tmp_path / "missing")]) == 2

    def test_catalog_without_annotated_apis(self, tmp_path, monkeypatch, entity_data_factory):
        monkeypatch.chdir(tmp_path)
        data = entity_data_factory()
        data["metadata"]["annotations"] = {}
        _write_catalog(tmp_path, data)

        assert main([str(tmp_path)]) == 0

    def test_lowercase_log_level_from_config(self, tmp_path, monkeypatch, entity_data_factory):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", tmp_path / "home")
        monkeypatch.chdir(tmp_path)
        (tmp_path / "openapi-sync.yaml").write_text("settings:\n  log_level: info\n")
        data = entity_data_factory()
        data["metadata"]["annotations"] = {}
        _write_catalog(tmp_path, data)

        previous_level = root.level
        try:
            assert main([str(tmp_path)]) == 0
            assert root.level == logging.INFO
        finally:
            root.setLevel(previous_level)
