"""Tests for client event-handling rules."""

from __future__ import annotations

from botlint.analysis.detectors.errors import ErrorDetector
from botlint.constants import DiagnosticKind, Severity


class TestErrorDetector:
    def test_missing_error_handler(self) -> None:
        [diag] = ErrorDetector().detect("client.on('ready', () => {});")
        assert diag.message == "Missing error event handler"
        assert diag.kind == DiagnosticKind.WARNING
        assert diag.severity == Severity.HIGH
        assert diag.line is None

    def test_error_handler_present(self) -> None:
        code = "client.on('ready', f);\nclient.on('error', console.error);"
        assert ErrorDetector().detect(code) == []

    def test_commands_without_collection(self) -> None:
        diags = ErrorDetector().detect("client.commands = new Map();")
        assert [d.message for d in diags] == [
            "Consider using Discord.js Collection for command storage"
        ]
        assert diags[0].kind == DiagnosticKind.INFO
        assert diags[0].severity == Severity.MEDIUM

    def test_commands_with_collection(self) -> None:
        assert ErrorDetector().detect(
            "client.commands = new Collection();"
        ) == []

    def test_empty_input(self) -> None:
        assert ErrorDetector().detect("") == []
