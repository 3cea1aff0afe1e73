"""Rule-based static analysis for discord.js bot code."""

__version__ = "0.1.0"

from botlint.analysis.analyzer import (  # noqa: E402
    Analyzer,
    analyze_code,
    create_analyzer,
)
from botlint.analysis.schemas import AnalysisResult, Diagnostic  # noqa: E402

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "Diagnostic",
    "__version__",
    "analyze_code",
    "create_analyzer",
]
