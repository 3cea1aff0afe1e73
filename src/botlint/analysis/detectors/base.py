"""Detector protocol and shared helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from botlint.analysis.schemas import Diagnostic


@runtime_checkable
class Detector(Protocol):
    """A named, stateless rule set run against one source file."""

    name: str

    def detect(self, code: str) -> list[Diagnostic]: ...


def first_line_containing(
    lines: Sequence[str], *needles: str
) -> int | None:
    """1-based number of the first line containing any of ``needles``."""
    for idx, line in enumerate(lines):
        if any(needle in line for needle in needles):
            return idx + 1
    return None
