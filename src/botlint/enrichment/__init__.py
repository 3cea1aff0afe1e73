"""Attach reference examples and documentation links to diagnostics."""

from botlint.enrichment.client import DocsClient, enrich_via_service
from botlint.enrichment.enricher import (
    attach_examples,
    diagnostic_text,
    enrich_locally,
)
from botlint.enrichment.examples import (
    TOPIC_PATTERNS,
    DocExample,
    all_examples,
    find_relevant_examples,
    get_doc_example,
    get_examples,
    load_examples,
    relevant_examples_for_text,
)

__all__ = [
    "TOPIC_PATTERNS",
    "DocExample",
    "DocsClient",
    "all_examples",
    "attach_examples",
    "diagnostic_text",
    "enrich_locally",
    "enrich_via_service",
    "find_relevant_examples",
    "get_doc_example",
    "get_examples",
    "load_examples",
    "relevant_examples_for_text",
]
