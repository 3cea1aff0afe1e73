"""Static catalogs consulted by the detectors."""

from botlint.catalog.error_catalog import (
    ErrorCatalog,
    get_error_catalog,
    load_error_catalog,
)
from botlint.catalog.metadata import get_metadata, load_metadata
from botlint.catalog.schemas import ErrorCatalogEntry, MetadataTable, doc_link

__all__ = [
    "ErrorCatalog",
    "ErrorCatalogEntry",
    "MetadataTable",
    "doc_link",
    "get_error_catalog",
    "get_metadata",
    "load_error_catalog",
    "load_metadata",
]
