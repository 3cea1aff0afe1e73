"""FastAPI dependency injection for app-scoped services."""

from __future__ import annotations

from fastapi import Request

from botlint.analysis.analyzer import Analyzer
from botlint.config import Settings
from botlint.logger import AnalysisLogger


def get_analyzer(request: Request) -> Analyzer:
    """Get the Analyzer built at startup from app.state."""
    return request.app.state.analyzer  # type: ignore[no-any-return]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def get_request_logger(request: Request) -> AnalysisLogger:
    return request.app.state.logger  # type: ignore[no-any-return]
