"""Tests for catalog identifiers, phrase aliases and API error codes."""

from __future__ import annotations

import time

from botlint.analysis.analyzer import create_analyzer
from botlint.analysis.detectors.known_errors import (
    ApiErrorCodeDetector,
    KnownErrorDetector,
)
from botlint.catalog.error_catalog import ErrorCatalog
from botlint.catalog.remediations import REMEDIATIONS
from botlint.catalog.schemas import ErrorCatalogEntry
from botlint.constants import DOCS_HOME_URL, DiagnosticKind, Severity


class TestKnownErrorDetector:
    def test_curated_remediation(self, small_catalog: ErrorCatalog) -> None:
        code = "catch (e) {\n  // InteractionAlreadyReplied\n}"
        [diag] = KnownErrorDetector(small_catalog).detect(code)

        remediation = REMEDIATIONS["InteractionAlreadyReplied"]
        assert diag.kind == DiagnosticKind.ERROR
        assert diag.severity == Severity.HIGH
        assert diag.message == f"discord.js Error: {remediation.summary}"
        assert diag.details == remediation.render()
        assert diag.line == 2

    def test_catalog_message_without_remediation(self) -> None:
        catalog = ErrorCatalog(
            [ErrorCatalogEntry(code="ShardingNoShards", message="No shards.")]
        )
        [diag] = KnownErrorDetector(catalog).detect("ShardingNoShards")
        assert diag.message == "discord.js Error: No shards."
        assert diag.details == (
            "**ShardingNoShards**\n\nNo shards.\n\n"
            f"[Discord.js Documentation]({DOCS_HOME_URL})"
        )

    def test_entry_without_message_uses_generic_text(
        self, small_catalog: ErrorCatalog
    ) -> None:
        [diag] = KnownErrorDetector(small_catalog).detect("SomethingObscure")
        assert diag.message == "discord.js Error: SomethingObscure"
        assert "Check the discord.js documentation." in (diag.details or "")

    def test_case_insensitive_line(self, small_catalog: ErrorCatalog) -> None:
        code = "first\nsecond tokeninvalid here"
        [diag] = KnownErrorDetector(small_catalog).detect(code)
        assert diag.line == 2

    def test_no_match_inside_longer_identifier(
        self, small_catalog: ErrorCatalog
    ) -> None:
        assert KnownErrorDetector(small_catalog).detect(
            "const TokenInvalidated = 1;"
        ) == []

    def test_phrase_alias(self, small_catalog: ErrorCatalog) -> None:
        code = "Error: The reply to this interaction has already been sent or deferred."
        diags = KnownErrorDetector(small_catalog).detect(code)
        assert [d.message for d in diags] == [
            "discord.js Error: "
            + REMEDIATIONS["InteractionAlreadyReplied"].summary
        ]

    def test_identifier_and_phrase_report_once(
        self, small_catalog: ErrorCatalog
    ) -> None:
        code = (
            "DiscordjsError [InteractionAlreadyReplied]: The reply to this "
            "interaction has already been sent or deferred."
        )
        assert len(KnownErrorDetector(small_catalog).detect(code)) == 1

    def test_phrase_for_code_outside_catalog(self) -> None:
        code = "TypeError: interaction.foo is not a function"
        diags = KnownErrorDetector(ErrorCatalog()).detect(code)
        assert [d.message for d in diags] == [
            "discord.js Error: " + REMEDIATIONS["IsNotAFunction"].summary
        ]
        assert diags[0].line == 1

    def test_empty_input(self, catalog: ErrorCatalog) -> None:
        assert KnownErrorDetector(catalog).detect("") == []

    def test_phrase_fragments_on_one_line(self) -> None:
        detector = KnownErrorDetector(ErrorCatalog())
        assert detector.detect("option\nnot found") == []
        [diag] = detector.detect("ok\nOption 'user' NOT FOUND")
        assert diag.message == (
            "discord.js Error: "
            + REMEDIATIONS["CommandInteractionOptionNotFound"].summary
        )
        assert diag.line == 2

    def test_long_line_stays_fast(self) -> None:
        code = "option " * 70_000
        started = time.perf_counter()
        create_analyzer(True).analyze(code)
        assert time.perf_counter() - started < 2.0


class TestApiErrorCodeDetector:
    def test_known_code(self) -> None:
        log = "first line\nDiscordAPIError[50013]: Missing Permissions"
        [diag] = ApiErrorCodeDetector().detect(log)
        assert diag.message == (
            "Discord API error 50013: Missing required permissions"
        )
        assert diag.kind == DiagnosticKind.ERROR
        assert diag.line == 2
        assert diag.details

    def test_unknown_code_ignored(self) -> None:
        assert ApiErrorCodeDetector().detect("DiscordAPIError[99999]") == []

    def test_repeated_code_reported_once(self) -> None:
        log = "DiscordAPIError[10062]\nDiscordAPIError[10062]"
        assert len(ApiErrorCodeDetector().detect(log)) == 1
