"""Pydantic models for analyzer output."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from botlint.constants import DiagnosticKind, Severity

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
)


class Diagnostic(BaseModel):
    """One finding produced by a detector.

    ``line`` is 1-based; ``None`` (or 0) means the whole file.
    Serialized with camelCase keys (``codeSnippet``, ``docLink``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    kind: DiagnosticKind
    message: str = Field(min_length=1)
    details: str | None = None
    line: int | None = None
    code_snippet: str | None = None
    doc_link: str | None = None
    severity: Severity | None = None

    @property
    def dedup_key(self) -> tuple[str, int]:
        """Two diagnostics are duplicates iff these keys match."""
        return (self.message, self.line or 0)

    def to_wire(self) -> dict[str, object]:
        """JSON-ready dict with camelCase keys and unset fields dropped."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True
        )


class AnalysisResult(BaseModel):
    """Deduplicated diagnostics plus the capture time."""

    model_config = _WIRE_CONFIG

    diagnostics: list[Diagnostic] = Field(
        default_factory=lambda: list[Diagnostic]()
    )
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def to_wire(self) -> dict[str, object]:
        return {
            "diagnostics": [d.to_wire() for d in self.diagnostics],
            "timestamp": self.timestamp.isoformat(),
        }
