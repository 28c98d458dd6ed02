"""Shared fixtures for openapi-sync tests."""

import copy
from typing import Any, Callable

import httpx
import pytest

from openapi_sync.fetcher import DefinitionFetcher
from openapi_sync.models import parse_entity

DOC_URL = "http://service.com/v3/api-docs.yaml"

INITIAL_DEFINITION = (
    "openapi: 3.0.1\ninfo:\n  title: OpenAPI definition\n  version: v0\n"
    "servers: []\npaths: {}\ncomponents:\n  schemas: {}\n"
)

DEFAULT_ENTITY: dict[str, Any] = {
    "apiVersion": "backstage.io/v1alpha1",
    "kind": "API",
    "metadata": {
        "namespace": "default",
        "annotations": {"tw.com/openapi-doc-url": DOC_URL},
        "name": "example-openapi-api",
    },
    "relations": [],
    "spec": {
        "type": "openapi",
        "lifecycle": "experimental",
        "owner": "guests",
        "system": "examples",
        "definition": INITIAL_DEFINITION,
    },
}


def _merge(base: dict, overrides: dict) -> dict:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def entity_data(**overrides: Any) -> dict[str, Any]:
    """A fresh copy of the default API entity with overrides deep-merged."""
    return _merge(copy.deepcopy(DEFAULT_ENTITY), overrides)


def make_entity(**overrides: Any):
    return parse_entity(entity_data(**overrides))


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def transport_factory():
    def _factory(handler):
        return RecordingTransport(handler)

    return _factory


@pytest.fixture
def fetcher_factory(transport_factory):
    def _factory(handler):
        transport = transport_factory(handler)
        return DefinitionFetcher(transport=transport), transport

    return _factory


@pytest.fixture
def doc_url() -> str:
    return DOC_URL


@pytest.fixture
def initial_definition() -> str:
    return INITIAL_DEFINITION


@pytest.fixture
def entity_factory():
    return make_entity


@pytest.fixture
def entity_data_factory():
    return entity_data
