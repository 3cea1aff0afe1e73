"""Known error identifiers and their descriptions."""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from botlint.catalog.extraction import (
    build_catalog_entries,
    merge_catalog_passes,
    read_catalog_artifact,
)
from botlint.catalog.schemas import ErrorCatalogEntry
from botlint.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = (
    Path(__file__).resolve().parent.parent / "data" / "error_catalog.json"
)


class ErrorCatalog:
    """Immutable, insertion-ordered map of error code → entry.

    Later entries with an already-seen code overwrite the earlier
    entry in place.
    """

    def __init__(self, entries: Iterable[ErrorCatalogEntry] = ()) -> None:
        by_code: dict[str, ErrorCatalogEntry] = {}
        for entry in entries:
            by_code[entry.code] = entry
        self._entries = by_code
        self._patterns = tuple(
            (
                code.lower(),
                re.compile(
                    rf"(?<!\w){re.escape(code)}(?!\w)", re.IGNORECASE
                ),
                entry,
            )
            for code, entry in by_code.items()
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __iter__(self) -> Iterator[ErrorCatalogEntry]:
        return iter(self._entries.values())

    def entries(self) -> list[ErrorCatalogEntry]:
        return list(self._entries.values())

    def lookup(self, code: str) -> ErrorCatalogEntry | None:
        """Exact, case-sensitive lookup."""
        return self._entries.get(code)

    def find_identifiers_in(self, text: str) -> list[ErrorCatalogEntry]:
        """Entries whose code appears in ``text`` as a whole word.

        Case-insensitive. A code never matches inside a longer
        identifier: ``Foo`` matches ``Foo()`` but not ``FooBar``.
        """
        if not text:
            return []
        lowered = text.lower()
        return [
            entry
            for needle, pattern, entry in self._patterns
            if needle in lowered and pattern.search(text)
        ]


def load_error_catalog(
    artifact_path: Path | None = None,
    source_dir: Path | None = None,
) -> ErrorCatalog:
    """Load the JSON artifact, optionally merged with a live extraction.

    Extraction results from ``source_dir`` are merged after the
    artifact, so freshly extracted messages win.
    """
    path = artifact_path or DEFAULT_CATALOG_PATH
    entries = read_catalog_artifact(path)

    if source_dir is not None:
        entries = merge_catalog_passes(
            entries, build_catalog_entries(source_dir)
        )

    if not entries:
        logger.warning("event=error_catalog_empty path=%s", path)
    return ErrorCatalog(entries)


@functools.cache
def get_error_catalog() -> ErrorCatalog:
    """Settings-driven catalog, computed once per process."""
    settings = Settings()
    return load_error_catalog(
        settings.error_catalog_path, settings.discordjs_source_dir
    )
