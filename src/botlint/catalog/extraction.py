"""Build-time extraction of error identifiers from a discord.js checkout.

Two passes feed the error catalog:

(a) ``extract_from_messages_file`` reads ``src/errors/Messages.js``
    literally and yields exact messages keyed by error code.
(b) ``extract_from_source_files`` walks ``src/`` for thrown error
    literals and ``if (!param) throw`` guards, synthesizing a code per
    match.

Every pass degrades to an empty result when its input is missing or
unreadable; nothing here raises to the caller.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import ValidationError

from botlint.catalog.schemas import ErrorCatalogEntry
from botlint.constants import THROWN_MESSAGE_CODE_CHARS

logger = logging.getLogger(__name__)

_MESSAGES_RELPATH = Path("src") / "errors" / "Messages.js"
_SOURCE_SUFFIXES = (".js", ".ts")

# [DjsErrorCodes.TokenInvalid]: 'An invalid token was provided.',
# [DjsErrorCodes.ClientInvalidOption]: (prop, must) => `The ${prop} ...`,
_MESSAGE_ENTRY_RE = re.compile(
    r"\[DjsErrorCodes\.(\w+)\]:\s*"
    r"(?:\([^)]*\)\s*=>\s*|\w+\s*=>\s*)?"
    r"(?:'([^'\n]*)'|\"([^\"\n]*)\"|`([^`]*)`)?"
)
_THROW_RE = re.compile(
    r"throw new (?:Error|TypeError|RangeError)\(['\"`]([^'\"`]+)['\"`]\)"
)
_GUARD_RE = re.compile(r"if\s*\(\s*!(\w+)\s*\)\s*(?:throw|\{[^}]*throw)")
_EXAMPLE_RE = re.compile(
    r"@example\s*\n\s*(?:\*\s*)?(?://\s*)?```(?:ts|js|typescript|javascript)?\n"
    r"(.*?)\n\s*(?:\*\s*)?```",
    re.DOTALL,
)


def extract_from_messages_file(
    package_dir: Path,
) -> list[ErrorCatalogEntry]:
    """Pass (a): exact messages from discord.js ``Messages.js``."""
    messages_path = package_dir / _MESSAGES_RELPATH
    try:
        content = messages_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.warning(
            "event=catalog_pass_unavailable pass=messages path=%s",
            messages_path,
        )
        return []

    entries: list[ErrorCatalogEntry] = []
    for match in _MESSAGE_ENTRY_RE.finditer(content):
        message = match.group(2) or match.group(3) or match.group(4) or ""
        entries.append(
            ErrorCatalogEntry(
                code=match.group(1),
                message=message,
                source="Messages.js",
            )
        )
    return entries


def extract_from_source_files(
    package_dir: Path,
) -> list[ErrorCatalogEntry]:
    """Pass (b): thrown-error literals and guard clauses under ``src/``."""
    src_dir = package_dir / "src"
    if not src_dir.is_dir():
        logger.warning(
            "event=catalog_pass_unavailable pass=source path=%s",
            src_dir,
        )
        return []

    entries: list[ErrorCatalogEntry] = []
    for path in _walk_source_files(src_dir):
        content = _read_or_none(path)
        if content is None:
            continue

        for match in _THROW_RE.finditer(content):
            message = match.group(1)
            entries.append(
                ErrorCatalogEntry(
                    code=message[:THROWN_MESSAGE_CODE_CHARS],
                    message=message,
                    source=path.name,
                )
            )

        for match in _GUARD_RE.finditer(content):
            param = match.group(1)
            entries.append(
                ErrorCatalogEntry(
                    code=f"Invalid_{param}",
                    message=f"{param} must be provided and valid",
                    source=path.name,
                )
            )
    return entries


def extract_examples_from_source(package_dir: Path) -> dict[str, str]:
    """JSDoc ``@example`` blocks keyed by source file stem.

    A file with several examples keeps the last one.
    """
    src_dir = package_dir / "src"
    if not src_dir.is_dir():
        return {}

    examples: dict[str, str] = {}
    for path in _walk_source_files(src_dir):
        content = _read_or_none(path)
        if content is None:
            continue
        for match in _EXAMPLE_RE.finditer(content):
            examples[path.stem] = match.group(1)
    return examples


def merge_catalog_passes(
    *passes: Iterable[ErrorCatalogEntry],
) -> list[ErrorCatalogEntry]:
    """Merge passes by code; later passes overwrite earlier ones."""
    merged: dict[str, ErrorCatalogEntry] = {}
    for entries in passes:
        for entry in entries:
            merged[entry.code] = entry
    return list(merged.values())


def build_catalog_entries(package_dir: Path) -> list[ErrorCatalogEntry]:
    """Run both passes; the named Messages.js table wins on conflict."""
    from_source = extract_from_source_files(package_dir)
    from_messages = extract_from_messages_file(package_dir)
    merged = merge_catalog_passes(from_source, from_messages)
    logger.info(
        "event=catalog_extracted messages=%d source=%d merged=%d",
        len(from_messages),
        len(from_source),
        len(merged),
    )
    return merged


def write_catalog_artifact(
    entries: Iterable[ErrorCatalogEntry], path: Path
) -> None:
    """Write entries as the JSON artifact consumed at load time."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [e.model_dump(mode="json") for e in entries]
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def read_catalog_artifact(path: Path) -> list[ErrorCatalogEntry]:
    """Read a catalog artifact; missing or malformed gives ``[]``.

    Individually invalid records are skipped.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("event=catalog_artifact_unreadable path=%s", path)
        return []

    if not isinstance(raw, list):
        logger.warning("event=catalog_artifact_malformed path=%s", path)
        return []

    entries: list[ErrorCatalogEntry] = []
    for item in raw:
        try:
            entries.append(ErrorCatalogEntry.model_validate(item))
        except ValidationError:
            logger.debug("event=catalog_record_skipped record=%r", item)
    return entries


def _walk_source_files(root: Path) -> Iterator[Path]:
    """Yield .js/.ts files, skipping hidden directories."""
    try:
        children = sorted(root.iterdir())
    except OSError:
        return
    for child in children:
        if child.is_dir():
            if not child.name.startswith("."):
                yield from _walk_source_files(child)
        elif child.is_file() and child.suffix in _SOURCE_SUFFIXES:
            yield child


def _read_or_none(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("event=source_unreadable path=%s", path)
        return None
