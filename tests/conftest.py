"""Shared test fixtures: packaged catalogs, small metadata tables."""

from __future__ import annotations

import pytest

from botlint.catalog.error_catalog import (
    ErrorCatalog,
    get_error_catalog,
    load_error_catalog,
)
from botlint.catalog.metadata import get_metadata, load_metadata
from botlint.catalog.schemas import ErrorCatalogEntry, MetadataTable
from botlint.enrichment.examples import DocExample, get_examples, load_examples


@pytest.fixture(autouse=True)
def _clear_caches(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop memoized catalogs and isolate from a developer's .env."""
    for name in (
        "ENABLE_ANALYZER",
        "METADATA_PATH",
        "ERROR_CATALOG_PATH",
        "EXAMPLES_PATH",
        "DISCORDJS_SOURCE_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    get_metadata.cache_clear()
    get_error_catalog.cache_clear()
    get_examples.cache_clear()


@pytest.fixture
def metadata() -> MetadataTable:
    """The packaged discord.js metadata artifact."""
    return load_metadata()


@pytest.fixture
def empty_metadata() -> MetadataTable:
    return MetadataTable()


@pytest.fixture
def catalog() -> ErrorCatalog:
    """The packaged error catalog artifact."""
    return load_error_catalog()


@pytest.fixture
def small_catalog() -> ErrorCatalog:
    return ErrorCatalog(
        [
            ErrorCatalogEntry(
                code="InteractionAlreadyReplied",
                message=(
                    "The reply to this interaction has already been "
                    "sent or deferred."
                ),
            ),
            ErrorCatalogEntry(
                code="TokenInvalid",
                message="An invalid token was provided.",
            ),
            ErrorCatalogEntry(code="SomethingObscure", message=""),
        ]
    )


@pytest.fixture
def examples() -> dict[str, DocExample]:
    """The packaged documentation example catalog."""
    return load_examples()
