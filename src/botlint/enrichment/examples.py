"""Reference snippets keyed by topic, loaded from YAML."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from botlint.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_EXAMPLES_PATH = (
    Path(__file__).resolve().parent.parent / "data" / "doc_examples.yaml"
)

# Lower-case text pattern → example key, checked in this order.
TOPIC_PATTERNS: tuple[tuple[str, str], ...] = (
    ("textinput", "text-input-builder"),
    ("label", "label-builder"),
    ("modal", "modal-builder"),
    ("button", "button-builder"),
    ("slash", "slash-command-builder"),
    ("interaction", "interaction-handling"),
    ("error", "error-handling"),
    ("collection", "collection-usage"),
    ("embed", "embed-builder"),
    ("client", "client-intents"),
    ("intents", "client-intents"),
    ("required field", "text-input-builder"),
    ("customid", "text-input-builder"),
    ("actionrow", "modal-builder"),
    ("addcomponents", "modal-builder"),
)


class DocExample(BaseModel):
    """A titled, runnable snippet with its documentation page.

    Serialized with camelCase keys (``codeSnippet``, ``docLink``); the
    YAML catalog may use either spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    title: str = Field(min_length=1)
    description: str = ""
    code_snippet: str = Field(min_length=1)
    doc_link: str | None = None
    required: list[str] = Field(default_factory=lambda: list[str]())
    optional: list[str] = Field(default_factory=lambda: list[str]())

    @property
    def haystack(self) -> str:
        """Lower-cased title, description and snippet for matching."""
        return (
            f"{self.title} {self.description} {self.code_snippet}"
        ).lower()


def load_examples(path: Path | None = None) -> dict[str, DocExample]:
    """Load the example catalog, preserving file order.

    A missing file gives an empty catalog. Raises ``ValueError`` if
    the document is not a mapping or an entry is malformed.
    """
    target = path or DEFAULT_EXAMPLES_PATH
    if not target.exists():
        logger.warning("event=examples_missing path=%s", target)
        return {}

    raw: Any = yaml.safe_load(target.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = f"Example catalog must be a mapping: {target}"
        raise ValueError(msg)

    examples: dict[str, DocExample] = {}
    for key, entry in raw.items():
        if not isinstance(entry, dict):
            msg = f"Invalid example '{key}' in {target}: expected a mapping"
            raise ValueError(msg)
        try:
            examples[str(key)] = DocExample.model_validate(entry)
        except ValidationError as exc:
            msg = f"Invalid example '{key}' in {target}: {exc}"
            raise ValueError(msg) from exc

    logger.debug("event=examples_loaded count=%d", len(examples))
    return examples


@functools.cache
def get_examples() -> dict[str, DocExample]:
    """Settings-driven example catalog, loaded once per process."""
    return load_examples(Settings().examples_path)


def relevant_examples_for_text(
    text: str,
    examples: dict[str, DocExample] | None = None,
) -> dict[str, DocExample]:
    """Examples whose topic pattern occurs in ``text``.

    Keys come out in pattern order without repeats.
    """
    catalog = get_examples() if examples is None else examples
    lowered = text.lower()
    result: dict[str, DocExample] = {}
    for pattern, key in TOPIC_PATTERNS:
        if pattern in lowered and key not in result and key in catalog:
            result[key] = catalog[key]
    return result


def find_relevant_examples(
    message: str,
    examples: dict[str, DocExample] | None = None,
) -> list[DocExample]:
    return list(relevant_examples_for_text(message, examples).values())


def get_doc_example(key: str) -> DocExample | None:
    return get_examples().get(key)


def all_examples() -> list[DocExample]:
    return list(get_examples().values())
