"""Refresh OpenAPI definitions of Backstage API entities from a live URL."""

from .processor import OPENAPI_DOC_URL_ANNOTATION, OpenApiEntityProcessor

__all__ = [
    "OPENAPI_DOC_URL_ANNOTATION",
    "OpenApiEntityProcessor",
]
