"""Load the discord.js metadata artifact."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from botlint.catalog.schemas import MetadataTable
from botlint.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_METADATA_PATH = (
    Path(__file__).resolve().parent.parent
    / "data"
    / "discord_metadata.json"
)


def load_metadata(path: Path | None = None) -> MetadataTable:
    """Read the metadata artifact.

    A missing or unparsable file gives an empty table. When only some
    fields are malformed, those fall back to their defaults and the
    valid ones are kept.
    """
    target = path or DEFAULT_METADATA_PATH
    try:
        raw = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("event=metadata_unreadable path=%s", target)
        return MetadataTable()

    if not isinstance(raw, dict):
        logger.warning("event=metadata_malformed path=%s", target)
        return MetadataTable()

    return parse_metadata(raw)


def parse_metadata(raw: dict[str, Any]) -> MetadataTable:
    """Validate ``raw``, salvaging each field independently on error."""
    try:
        return MetadataTable.model_validate(raw)
    except ValidationError:
        logger.warning("event=metadata_partial_fallback")

    salvaged: dict[str, Any] = {}
    for name, field in MetadataTable.model_fields.items():
        key = next(
            (k for k in (field.alias, name) if k and k in raw), None
        )
        if key is None:
            continue
        try:
            MetadataTable.model_validate({key: raw[key]})
        except ValidationError:
            logger.debug("event=metadata_field_dropped field=%s", key)
            continue
        salvaged[key] = raw[key]
    return MetadataTable.model_validate(salvaged)


@functools.cache
def get_metadata() -> MetadataTable:
    """Settings-driven metadata table, loaded once per process."""
    return load_metadata(Settings().metadata_path)
