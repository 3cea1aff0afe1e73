"""Run the registered detectors and merge their diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from botlint.analysis.detectors import (
    ApiErrorCodeDetector,
    BestPracticesDetector,
    BuilderDetector,
    Detector,
    ErrorDetector,
    IntentsDetector,
    KnownErrorDetector,
)
from botlint.analysis.schemas import AnalysisResult, Diagnostic
from botlint.catalog.error_catalog import ErrorCatalog
from botlint.catalog.schemas import MetadataTable

logger = logging.getLogger(__name__)


class Analyzer:
    """Ordered registry of detectors.

    The registry is meant to be configured once at startup.
    Re-registering a name replaces the detector but keeps its slot.
    """

    def __init__(
        self,
        detectors: Iterable[Detector] = (),
        *,
        enabled: bool = True,
    ) -> None:
        self._enabled = enabled
        self._detectors: dict[str, Detector] = {}
        for detector in detectors:
            self.register(detector)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def detector_names(self) -> list[str]:
        return list(self._detectors)

    def register(self, detector: Detector) -> None:
        self._detectors[detector.name] = detector

    def unregister(self, name: str) -> None:
        self._detectors.pop(name, None)

    def analyze(self, code: str) -> AnalysisResult:
        """Run every detector, isolate failures, drop duplicates.

        Diagnostics keep detector registration order. Of two
        diagnostics with the same message and line, the first wins.
        """
        if not self._enabled or not isinstance(code, str):
            return AnalysisResult()

        collected: list[Diagnostic] = []
        for name, detector in self._detectors.items():
            try:
                collected.extend(detector.detect(code))
            except Exception:  # noqa: BLE001
                logger.warning(
                    "event=detector_failed detector=%s",
                    name,
                    exc_info=True,
                )

        unique: dict[tuple[str, int], Diagnostic] = {}
        for diagnostic in collected:
            unique.setdefault(diagnostic.dedup_key, diagnostic)

        logger.debug(
            "event=analysis_complete raw=%d unique=%d",
            len(collected),
            len(unique),
        )
        return AnalysisResult(diagnostics=list(unique.values()))


def create_default_detectors(
    metadata: MetadataTable | None = None,
    catalog: ErrorCatalog | None = None,
) -> list[Detector]:
    """Built-in detectors in registration order.

    ``None`` catalogs fall back to the packaged, settings-driven ones.
    """
    return [
        IntentsDetector(metadata),
        ErrorDetector(),
        KnownErrorDetector(catalog),
        ApiErrorCodeDetector(),
        BestPracticesDetector(),
        BuilderDetector(metadata),
    ]


def create_analyzer(
    enabled: bool,
    *,
    metadata: MetadataTable | None = None,
    catalog: ErrorCatalog | None = None,
) -> Analyzer:
    """Analyzer for the given feature-flag value.

    A disabled analyzer is built without loading any catalog or
    constructing any detector.
    """
    if not enabled:
        return Analyzer(enabled=False)
    return Analyzer(create_default_detectors(metadata, catalog))


def analyze_code(code: str, analyzer: Analyzer | None) -> list[Diagnostic]:
    """Diagnostics for ``code``; ``None`` means analysis is switched off."""
    if analyzer is None:
        return []
    return analyzer.analyze(code).diagnostics
