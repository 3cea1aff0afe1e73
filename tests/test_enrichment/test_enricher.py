"""Tests for attaching reference snippets to diagnostics."""

from __future__ import annotations

from botlint.analysis.schemas import Diagnostic
from botlint.constants import DiagnosticKind
from botlint.enrichment.enricher import (
    attach_examples,
    diagnostic_text,
    enrich_locally,
)
from botlint.enrichment.examples import DocExample


def _diag(message: str, **kwargs: object) -> Diagnostic:
    return Diagnostic(kind=DiagnosticKind.ERROR, message=message, **kwargs)


class TestDiagnosticText:
    def test_one_line_per_diagnostic(self) -> None:
        text = diagnostic_text(
            [_diag("First", details="more"), _diag("Second")]
        )
        assert text == "First more\nSecond "


class TestEnrichLocally:
    def test_modal_diagnostic_gets_modal_example(
        self, examples: dict[str, DocExample]
    ) -> None:
        diagnostic = _diag("Modal missing required fields")
        [enriched] = enrich_locally([diagnostic], examples)
        modal = examples["modal-builder"]
        assert enriched.code_snippet == modal.code_snippet
        assert enriched.doc_link == modal.doc_link
        assert enriched.message == diagnostic.message

    def test_existing_snippet_untouched(
        self, examples: dict[str, DocExample]
    ) -> None:
        diagnostic = _diag(
            "Modal missing required fields", code_snippet="mine()"
        )
        assert enrich_locally([diagnostic], examples) == [diagnostic]

    def test_length_and_order_preserved(
        self, examples: dict[str, DocExample]
    ) -> None:
        diagnostics = [
            _diag("ButtonBuilder requires customId or URL"),
            _diag("Unrelated finding", code_snippet="x()"),
            _diag("Missing error event handler"),
        ]
        enriched = enrich_locally(diagnostics, examples)
        assert [d.message for d in enriched] == [
            d.message for d in diagnostics
        ]
        assert enriched[1] is diagnostics[1]

    def test_nothing_relevant_is_identity(
        self, examples: dict[str, DocExample]
    ) -> None:
        diagnostic = _diag("Nothing relevant")
        assert enrich_locally([diagnostic], examples) == [diagnostic]

    def test_empty_catalog(self) -> None:
        diagnostic = _diag("Modal missing required fields")
        assert enrich_locally([diagnostic], {}) == [diagnostic]


class TestAttachExamples:
    def test_key_in_text_wins(self) -> None:
        examples = {
            "alpha": DocExample(title="A", code_snippet="a()"),
            "beta": DocExample(title="B", code_snippet="b()"),
        }
        [enriched] = attach_examples([_diag("Use beta here")], examples)
        assert enriched.code_snippet == "b()"

    def test_falls_back_to_first_candidate(self) -> None:
        examples = {
            "alpha": DocExample(title="A", code_snippet="a()"),
            "beta": DocExample(title="B", code_snippet="b()"),
        }
        [enriched] = attach_examples([_diag("Something else")], examples)
        assert enriched.code_snippet == "a()"

    def test_keeps_own_doc_link_when_example_has_none(self) -> None:
        examples = {"alpha": DocExample(title="A", code_snippet="a()")}
        [enriched] = attach_examples(
            [_diag("Anything", doc_link="https://example.test/doc")],
            examples,
        )
        assert enriched.code_snippet == "a()"
        assert enriched.doc_link == "https://example.test/doc"
