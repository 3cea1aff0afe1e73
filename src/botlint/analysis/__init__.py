"""Static analysis of discord.js bot code."""

from botlint.analysis.analyzer import (
    Analyzer,
    analyze_code,
    create_analyzer,
    create_default_detectors,
)
from botlint.analysis.schemas import AnalysisResult, Diagnostic

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "Diagnostic",
    "analyze_code",
    "create_analyzer",
    "create_default_detectors",
]
