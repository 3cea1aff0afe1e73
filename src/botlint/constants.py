"""Shared constants: single source of truth for cross-module values.

StrEnum members are str-compatible, so diagnostics serialize to the
plain strings the HTTP API and the CLI emit.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class DiagnosticKind(StrEnum):
    """Category of a diagnostic, independent of its severity tier."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUGGESTION = "suggestion"


class Severity(StrEnum):
    """Finer-grained severity tier attached to a diagnostic."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MetadataCategory(StrEnum):
    """Value sets exposed by the metadata table."""

    GATEWAY_INTENT = "gateway_intent"
    COMPONENT_BUILDER = "component_builder"


class DocKind(StrEnum):
    """Symbol kinds used in discord.js documentation URLs."""

    CLASS = "class"
    ENUM = "enum"
    INTERFACE = "interface"
    FUNCTION = "function"


# ── Documentation ────────────────────────────────────────

DOCS_BASE_URL = "https://discord.js.org/docs/packages"
DOCS_HOME_URL = "https://discord.js.org/docs"
DEVELOPER_PORTAL_URL = "https://discord.com/developers/applications"

# ── Detector Tuning ──────────────────────────────────────

# Lines scanned before/after a component builder for its container
COMPONENT_WINDOW_BEFORE = 2
COMPONENT_WINDOW_AFTER = 10

# Code identifiers synthesized from thrown messages are truncated
THROWN_MESSAGE_CODE_CHARS = 50

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200
ID_HEX_LENGTH = 12
