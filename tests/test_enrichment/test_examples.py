"""Tests for the documentation example catalog."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from botlint.enrichment.examples import (
    DocExample,
    all_examples,
    find_relevant_examples,
    get_doc_example,
    load_examples,
    relevant_examples_for_text,
)


class TestLoadExamples:
    def test_packaged_catalog_order(
        self, examples: dict[str, DocExample]
    ) -> None:
        assert list(examples) == [
            "client-intents",
            "text-input-builder",
            "label-builder",
            "modal-builder",
            "button-builder",
            "slash-command-builder",
            "interaction-handling",
            "error-handling",
            "collection-usage",
            "embed-builder",
        ]
        assert all(e.code_snippet.strip() for e in examples.values())

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_examples(tmp_path / "nope.yaml") == {}

    def test_empty_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "examples.yaml"
        path.write_text("")
        assert load_examples(path) == {}

    def test_top_level_list_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "examples.yaml"
        path.write_text("- title: A\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_examples(path)

    def test_entry_without_snippet_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "examples.yaml"
        path.write_text(
            dedent("""\
                broken:
                  title: Broken
                  description: no code here
            """)
        )
        with pytest.raises(ValueError, match="Invalid example 'broken'"):
            load_examples(path)

    def test_scalar_entry_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "examples.yaml"
        path.write_text("broken: just text\n")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_examples(path)

    def test_settings_path_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "examples.yaml"
        path.write_text(
            dedent("""\
                custom:
                  title: Custom
                  code_snippet: |
                    console.log('hi');
            """)
        )
        monkeypatch.setenv("EXAMPLES_PATH", str(path))
        example = get_doc_example("custom")
        assert example is not None
        assert example.code_snippet == "console.log('hi');\n"
        assert get_doc_example("modal-builder") is None
        assert [e.title for e in all_examples()] == ["Custom"]


class TestRelevantExamples:
    def test_patterns_in_order_without_repeats(
        self, examples: dict[str, DocExample]
    ) -> None:
        found = relevant_examples_for_text(
            "TextInputBuilder missing required fields (customId, label)",
            examples,
        )
        assert list(found) == ["text-input-builder", "label-builder"]

    def test_case_insensitive(self, examples: dict[str, DocExample]) -> None:
        assert "embed-builder" in relevant_examples_for_text(
            "EMBED", examples
        )

    def test_no_match(self, examples: dict[str, DocExample]) -> None:
        assert relevant_examples_for_text("nothing relevant", examples) == {}

    def test_keys_missing_from_catalog_skipped(self) -> None:
        only = {
            "modal-builder": DocExample(title="Modal", code_snippet="m()")
        }
        assert list(relevant_examples_for_text("button modal", only)) == [
            "modal-builder"
        ]

    def test_find_returns_list(self, examples: dict[str, DocExample]) -> None:
        found = find_relevant_examples("Missing error event handler", examples)
        assert [e.title for e in found] == ["Error Handling"]


class TestWireShape:
    def test_dumps_camel_case(self, examples: dict[str, DocExample]) -> None:
        dumped = examples["modal-builder"].model_dump(by_alias=True)
        assert {"codeSnippet", "docLink"} <= dumped.keys()
        assert "code_snippet" not in dumped

    def test_accepts_either_spelling(self) -> None:
        camel = DocExample.model_validate(
            {"title": "A", "codeSnippet": "a()", "docLink": "https://x.test"}
        )
        snake = DocExample.model_validate(
            {"title": "A", "code_snippet": "a()", "doc_link": "https://x.test"}
        )
        assert camel == snake
