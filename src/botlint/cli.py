"""CLI entry point: ``botlint analyze``, extraction commands, ``serve``."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from botlint import __version__
from botlint.analysis.analyzer import create_analyzer
from botlint.analysis.schemas import AnalysisResult, Diagnostic
from botlint.catalog.extraction import (
    build_catalog_entries,
    extract_examples_from_source,
    write_catalog_artifact,
)
from botlint.catalog.metadata_extraction import (
    extract_metadata,
    write_metadata,
)
from botlint.config import Settings
from botlint.enrichment.client import DocsClient, enrich_via_service
from botlint.enrichment.enricher import enrich_locally
from botlint.logging_config import setup_logging


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"botlint {__version__}")
        return

    setup_logging("DEBUG" if getattr(args, "verbose", False) else "WARNING")

    if args.command == "analyze":
        _run_analyze(args)
    elif args.command == "extract-catalog":
        _run_extract_catalog(args)
    elif args.command == "extract-metadata":
        _run_extract_metadata(args)
    elif args.command == "serve":
        _run_serve(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="botlint",
        description="Static analysis for discord.js bot code.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    analyze = sub.add_parser(
        "analyze",
        help="Analyze a JavaScript/TypeScript source file",
    )
    analyze.add_argument(
        "file",
        type=str,
        help="Path to the source file, or - for stdin",
    )
    analyze.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    analyze.add_argument(
        "--enrich",
        action="store_true",
        help="Attach reference examples to the diagnostics",
    )
    analyze.add_argument(
        "--remote",
        action="store_true",
        help="With --enrich, fetch examples from DOCS_SERVICE_URL",
    )
    analyze.add_argument(
        "--enable",
        action="store_true",
        help="Run even if ENABLE_ANALYZER is not set",
    )
    analyze.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    catalog = sub.add_parser(
        "extract-catalog",
        help="Build the error catalog from a discord.js package",
    )
    catalog.add_argument(
        "package_dir",
        type=str,
        help="Path to the discord.js package (contains src/)",
    )
    catalog.add_argument(
        "--output",
        "-o",
        default="error_catalog.json",
        help="Output file (default: error_catalog.json)",
    )
    catalog.add_argument(
        "--examples",
        default=None,
        help="Also write JSDoc @example blocks to this JSON file",
    )

    metadata = sub.add_parser(
        "extract-metadata",
        help="Build the metadata table from a node_modules directory",
    )
    metadata.add_argument(
        "node_modules",
        type=str,
        help="Path to node_modules",
    )
    metadata.add_argument(
        "--output",
        "-o",
        default="discord_metadata.json",
        help="Output file (default: discord_metadata.json)",
    )

    serve = sub.add_parser(
        "serve",
        help="Start the HTTP API",
    )
    serve.add_argument(
        "--host",
        default="127.0.0.1",
        help="Bind address (default: 127.0.0.1)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port (default: 8000)",
    )
    serve.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes",
    )

    return parser


def _read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    path = Path(file)
    if not path.is_file():
        print(f"Error: {path} does not exist", file=sys.stderr)
        sys.exit(1)
    return path.read_text(encoding="utf-8")


def _run_analyze(args: argparse.Namespace) -> None:
    """Execute the analyze command."""
    code = _read_source(args.file)

    settings = Settings()
    analyzer = create_analyzer(args.enable or settings.enable_analyzer)
    if not analyzer.enabled:
        print(
            "Analyzer is disabled. Set ENABLE_ANALYZER=1 or pass --enable.",
            file=sys.stderr,
        )

    result = analyzer.analyze(code)
    if args.enrich and result.diagnostics:
        result = AnalysisResult(
            diagnostics=_enrich(result.diagnostics, settings, args.remote),
            timestamp=result.timestamp,
        )

    if args.format == "json":
        print(json.dumps(result.to_wire(), indent=2))
    else:
        _print_text(result.diagnostics)


def _enrich(
    diagnostics: list[Diagnostic], settings: Settings, remote: bool
) -> list[Diagnostic]:
    if not remote:
        return enrich_locally(diagnostics)
    client = DocsClient(
        settings.docs_service_url, timeout=settings.docs_timeout_seconds
    )
    try:
        return enrich_via_service(diagnostics, client)
    finally:
        client.close()


def _print_text(diagnostics: list[Diagnostic]) -> None:
    if not diagnostics:
        print("No issues found.")
        return
    for d in diagnostics:
        where = f"{d.line}" if d.line else "-"
        tier = f" [{d.severity}]" if d.severity else ""
        print(f"{where}: {d.kind}{tier} {d.message}")
        if d.doc_link:
            print(f"    {d.doc_link}")
    print(f"\n{len(diagnostics)} issue(s) found")


def _run_extract_catalog(args: argparse.Namespace) -> None:
    """Run both extraction passes and write the catalog artifact."""
    package_dir = Path(args.package_dir).resolve()
    if not package_dir.is_dir():
        print(f"Error: {package_dir} does not exist", file=sys.stderr)
        sys.exit(1)

    entries = build_catalog_entries(package_dir)
    output = Path(args.output)
    write_catalog_artifact(entries, output)
    print(f"Wrote {len(entries)} catalog entries to {output}")

    if args.examples:
        examples = extract_examples_from_source(package_dir)
        examples_path = Path(args.examples)
        examples_path.parent.mkdir(parents=True, exist_ok=True)
        examples_path.write_text(
            json.dumps(examples, indent=2) + "\n", encoding="utf-8"
        )
        print(f"Wrote {len(examples)} examples to {examples_path}")


def _run_extract_metadata(args: argparse.Namespace) -> None:
    """Read installed typings and write the metadata artifact."""
    node_modules = Path(args.node_modules).resolve()
    if not node_modules.is_dir():
        print(f"Error: {node_modules} does not exist", file=sys.stderr)
        sys.exit(1)

    table = extract_metadata(node_modules)
    output = Path(args.output)
    write_metadata(table, output)
    print(
        f"Wrote metadata to {output} "
        f"({len(table.gateway_intents)} intents, "
        f"{len(table.builder_methods)} builders)"
    )


def _run_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI app under uvicorn."""
    import uvicorn

    uvicorn.run(
        "botlint.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
