"""Tests for build-time error catalog extraction."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from textwrap import dedent

import pytest

from botlint.catalog.extraction import (
    build_catalog_entries,
    extract_examples_from_source,
    extract_from_messages_file,
    extract_from_source_files,
    merge_catalog_passes,
    read_catalog_artifact,
    write_catalog_artifact,
)
from botlint.catalog.schemas import ErrorCatalogEntry


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """A minimal discord.js-shaped package tree."""
    root = tmp_path / "discord.js"
    (root / "src" / "errors").mkdir(parents=True)
    (root / "src" / "client").mkdir()
    (root / "src" / "util").mkdir()
    (root / "src" / ".hidden").mkdir()

    (root / "src" / "errors" / "Messages.js").write_text(
        dedent("""\
            const Messages = {
              [DjsErrorCodes.TokenInvalid]: 'An invalid token was provided.',
              [DjsErrorCodes.ClientInvalidOption]: (prop, must) => `The ${prop} option must be ${must}`,
              [DjsErrorCodes.ClientNotReady]: action => `The client needs to be logged in to ${action}.`,
              [DjsErrorCodes.ShardingNoShards]: "No shards have been spawned.",
            };
        """)
    )
    (root / "src" / "client" / "Client.js").write_text(
        dedent("""\
            /**
             * The main hub.
             * @example
             * ```js
             * const client = new Client({ intents: [] });
             * ```
             */
            class Client {
              login(token) {
                if (!token) throw new DiscordjsError(ErrorCodes.TokenMissing);
                throw new Error('Something went wrong');
              }
            }
        """)
    )
    (root / "src" / "util" / "Util.js").write_text(
        "throw new TypeError('TokenInvalid');\n"
    )
    (root / "src" / ".hidden" / "Secret.js").write_text(
        "throw new Error('should be skipped');\n"
    )
    return root


class TestMessagesPass:
    def test_all_literal_forms(self, package_dir: Path) -> None:
        entries = extract_from_messages_file(package_dir)
        by_code = {e.code: e.message for e in entries}
        assert by_code == {
            "TokenInvalid": "An invalid token was provided.",
            "ClientInvalidOption": "The ${prop} option must be ${must}",
            "ClientNotReady": "The client needs to be logged in to ${action}.",
            "ShardingNoShards": "No shards have been spawned.",
        }
        assert all(e.source == "Messages.js" for e in entries)

    def test_missing_file(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(
            logging.WARNING, logger="botlint.catalog.extraction"
        ):
            assert extract_from_messages_file(tmp_path) == []
        assert "event=catalog_pass_unavailable pass=messages" in caplog.text


class TestSourcePass:
    def test_throws_and_guards(self, package_dir: Path) -> None:
        codes = {e.code: e for e in extract_from_source_files(package_dir)}
        assert codes["Something went wrong"].source == "Client.js"
        assert codes["Invalid_token"].message == (
            "token must be provided and valid"
        )
        assert "should be skipped" not in codes

    def test_long_message_code_truncated(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        message = "x" * 80
        (src / "a.ts").write_text(f"throw new RangeError('{message}');")
        [entry] = extract_from_source_files(tmp_path)
        assert entry.code == "x" * 50
        assert entry.message == message

    def test_missing_src(self, tmp_path: Path) -> None:
        assert extract_from_source_files(tmp_path) == []

    def test_examples(self, package_dir: Path) -> None:
        examples = extract_examples_from_source(package_dir)
        assert "new Client" in examples["Client"]


class TestMerge:
    def test_later_pass_wins(self) -> None:
        merged = merge_catalog_passes(
            [ErrorCatalogEntry(code="A", message="source")],
            [ErrorCatalogEntry(code="A", message="named")],
        )
        assert [e.message for e in merged] == ["named"]

    def test_messages_table_wins_over_source(self, package_dir: Path) -> None:
        entries = build_catalog_entries(package_dir)
        by_code = {e.code: e for e in entries}
        assert by_code["TokenInvalid"].message == (
            "An invalid token was provided."
        )
        assert "Invalid_token" in by_code


class TestArtifact:
    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "catalog.json"
        entries = [
            ErrorCatalogEntry(code="A", message="a", source="x.js"),
            ErrorCatalogEntry(code="B"),
        ]
        write_catalog_artifact(entries, path)
        assert read_catalog_artifact(path) == entries

    def test_invalid_records_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"code": "A"}, {"code": ""}, "junk"]))
        assert [e.code for e in read_catalog_artifact(path)] == ["A"]

    def test_not_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"code": "A"}))
        assert read_catalog_artifact(path) == []

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("[{")
        assert read_catalog_artifact(path) == []
