"""Built-in detectors, in default registration order."""

from botlint.analysis.detectors.base import Detector, first_line_containing
from botlint.analysis.detectors.best_practices import BestPracticesDetector
from botlint.analysis.detectors.builders import BuilderDetector
from botlint.analysis.detectors.errors import ErrorDetector
from botlint.analysis.detectors.intents import IntentsDetector
from botlint.analysis.detectors.known_errors import (
    ApiErrorCodeDetector,
    KnownErrorDetector,
)

__all__ = [
    "ApiErrorCodeDetector",
    "BestPracticesDetector",
    "BuilderDetector",
    "Detector",
    "ErrorDetector",
    "IntentsDetector",
    "KnownErrorDetector",
    "first_line_containing",
]
