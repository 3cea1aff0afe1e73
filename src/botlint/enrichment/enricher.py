"""Attach reference snippets to diagnostics that lack one."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from botlint.analysis.schemas import Diagnostic
from botlint.enrichment.examples import (
    DocExample,
    get_examples,
    relevant_examples_for_text,
)

logger = logging.getLogger(__name__)


def diagnostic_text(diagnostics: Sequence[Diagnostic]) -> str:
    """One ``message details`` line per diagnostic."""
    return "\n".join(
        f"{d.message} {d.details or ''}" for d in diagnostics
    )


def _pick_example(
    text: str, examples: Mapping[str, DocExample]
) -> DocExample | None:
    """First candidate whose key is in ``text`` or whose own text
    contains the first word of ``text``; else the first candidate.
    """
    first_word = text.split(" ")[0]
    for key, example in examples.items():
        if key in text or first_word in example.haystack:
            return example
    return next(iter(examples.values()), None)


def attach_examples(
    diagnostics: Sequence[Diagnostic],
    examples: Mapping[str, DocExample],
) -> list[Diagnostic]:
    """Fill ``code_snippet``/``doc_link`` from ``examples``.

    Diagnostics that already carry a snippet are returned as-is. The
    result has the same length and order as the input.
    """
    if not examples:
        return list(diagnostics)

    enriched: list[Diagnostic] = []
    for diagnostic in diagnostics:
        if diagnostic.code_snippet:
            enriched.append(diagnostic)
            continue
        text = f"{diagnostic.message} {diagnostic.details or ''}".lower()
        example = _pick_example(text, examples)
        if example is None:
            enriched.append(diagnostic)
            continue
        enriched.append(
            diagnostic.model_copy(
                update={
                    "code_snippet": example.code_snippet,
                    "doc_link": example.doc_link or diagnostic.doc_link,
                }
            )
        )
    return enriched


def enrich_locally(
    diagnostics: Sequence[Diagnostic],
    examples: Mapping[str, DocExample] | None = None,
) -> list[Diagnostic]:
    """Select examples for the diagnostics' text and attach them."""
    catalog = get_examples() if examples is None else dict(examples)
    relevant = relevant_examples_for_text(
        diagnostic_text(diagnostics), catalog
    )
    logger.debug("event=examples_selected keys=%s", list(relevant))
    return attach_examples(diagnostics, relevant)
