"""Structured JSON logger for analysis request tracking."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from botlint.constants import ERROR_TRUNCATION_CHARS
from botlint.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["AnalysisLogger", "LOG_FORMAT", "LOG_DATEFMT"]


class AnalysisLogger:
    """Structured JSON logger with request_id correlation."""

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger("botlint.requests")
        self._logger.setLevel(getattr(logging, level.upper()))

        if not self._logger.handlers:
            handler = logging.FileHandler(log_dir / "analysis.log")
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    def log_analysis(
        self,
        request_id: str,
        code_length: int,
        diagnostic_count: int,
        detectors: list[str],
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "analysis",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "code_length": code_length,
                "diagnostic_count": diagnostic_count,
                "detectors": detectors,
                "duration_ms": duration_ms,
            })
        )

    def log_enrichment(
        self,
        request_id: str,
        text_length: int,
        example_keys: list[str],
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "enrichment",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "text_length": text_length,
                "example_keys": example_keys,
            })
        )

    def log_error(
        self,
        request_id: str,
        component: str,
        error: str,
    ) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "component": component,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )
