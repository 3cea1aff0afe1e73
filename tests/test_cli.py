"""Tests for CLI argument parsing and commands."""

from __future__ import annotations

import json
from pathlib import Path
from textwrap import dedent

import pytest

from botlint import __version__
from botlint.cli import _build_parser, main


class TestArgParser:
    def test_version_flag(self) -> None:
        args = _build_parser().parse_args(["--version"])
        assert args.version is True

    def test_analyze_defaults(self) -> None:
        args = _build_parser().parse_args(["analyze", "bot.js"])
        assert args.command == "analyze"
        assert args.file == "bot.js"
        assert args.format == "text"
        assert args.enrich is False
        assert args.remote is False
        assert args.enable is False
        assert args.verbose is False

    def test_serve_defaults(self) -> None:
        args = _build_parser().parse_args(["serve"])
        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.reload is False

    def test_no_command(self) -> None:
        assert _build_parser().parse_args([]).command is None

    def test_bad_format_exits(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["analyze", "bot.js", "-f", "xml"])


class TestMain:
    def test_version_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--version"])
        assert capsys.readouterr().out.strip() == f"botlint {__version__}"

    def test_analyze_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "bot.js"
        source.write_text("const client = new Client({});\n")
        main(["analyze", str(source), "--enable", "--format", "json"])
        payload = json.loads(capsys.readouterr().out)
        messages = [d["message"] for d in payload["diagnostics"]]
        assert "Client created without intents" in messages

    def test_analyze_disabled_warns(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "bot.js"
        source.write_text("new Client({})\n")
        main(["analyze", str(source)])
        captured = capsys.readouterr()
        assert "Analyzer is disabled" in captured.err
        assert "No issues found." in captured.out

    def test_analyze_text_enriched(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "bot.js"
        source.write_text("new Client({})\n")
        main(["analyze", str(source), "--enable", "--enrich"])
        out = capsys.readouterr().out
        assert "1: error [critical] Client created without intents" in out
        assert "issue(s) found" in out

    def test_remote_enrichment_failure_keeps_output(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("DOCS_SERVICE_URL", "http://127.0.0.1:9")
        monkeypatch.setenv("DOCS_TIMEOUT_SECONDS", "0.5")
        source = tmp_path / "bot.js"
        source.write_text("new Client({})\n")
        main(["analyze", str(source), "--enable", "--enrich", "--remote"])
        assert "Client created without intents" in capsys.readouterr().out

    def test_missing_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["analyze", str(tmp_path / "nope.js"), "--enable"])
        assert exc.value.code == 1

    def test_extract_catalog(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        errors = tmp_path / "pkg" / "src" / "errors"
        errors.mkdir(parents=True)
        (errors / "Messages.js").write_text(
            dedent("""\
                const Messages = {
                  [DjsErrorCodes.TokenInvalid]: 'An invalid token was provided.',
                };
            """)
        )
        output = tmp_path / "out" / "catalog.json"
        main(["extract-catalog", str(tmp_path / "pkg"), "-o", str(output)])

        entries = json.loads(output.read_text())
        assert entries == [
            {
                "code": "TokenInvalid",
                "message": "An invalid token was provided.",
                "source": "Messages.js",
            }
        ]
        assert "catalog entries" in capsys.readouterr().out

    def test_extract_metadata_missing_dir(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["extract-metadata", str(tmp_path / "nope")])
