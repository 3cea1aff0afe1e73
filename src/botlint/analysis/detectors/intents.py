"""Gateway intent configuration rules."""

from __future__ import annotations

import re

from botlint.analysis.detectors.base import first_line_containing
from botlint.analysis.schemas import Diagnostic
from botlint.catalog.metadata import get_metadata
from botlint.catalog.schemas import MetadataTable, doc_link
from botlint.constants import DiagnosticKind, DocKind, Severity

_STRING_INTENTS_RE = re.compile(r"intents:\s*\[['\"`]")
_INTENT_REF_RE = re.compile(r"GatewayIntentBits\.(\w+)")

_INTENTS_DOC = doc_link("GatewayIntentBits", kind=DocKind.ENUM)

_MISSING_INTENTS_DETAILS = """\
Add intents when creating a Client instance:
```typescript
import { Client, GatewayIntentBits } from 'discord.js';

const client = new Client({
  intents: [
    GatewayIntentBits.Guilds,
    GatewayIntentBits.GuildMessages,
    GatewayIntentBits.MessageContent, // Required to read message.content
  ],
});
```"""

_STRING_INTENTS_DETAILS = """\
Use GatewayIntentBits enum instead of strings:
```typescript
// Old way (deprecated)
intents: ['GUILDS', 'GUILD_MESSAGES']

// New way (v14+)
intents: [GatewayIntentBits.Guilds, GatewayIntentBits.GuildMessages]
```"""


def _privileged_details(intent: str, comment: str) -> str:
    return (
        f"Add GatewayIntentBits.{intent} to your client intents:\n"
        "```typescript\n"
        "intents: [\n"
        "  GatewayIntentBits.Guilds,\n"
        f"  GatewayIntentBits.{intent}, // <- {comment}\n"
        "],\n"
        "```\n\n"
        f"**Note**: {intent} is a privileged intent. Enable it in the "
        "Discord Developer Portal under Bot → Privileged Gateway Intents."
    )


# (intent, triggers, message, inline comment)
_PRIVILEGED_RULES: tuple[tuple[str, tuple[str, ...], str, str], ...] = (
    (
        "MessageContent",
        ("message.content",),
        "Accessing message.content without MessageContent intent",
        "Add this",
    ),
    (
        "GuildMembers",
        ("guild.members", "guildMember"),
        "Accessing guild members without GuildMembers intent",
        "Add this for member events",
    ),
    (
        "GuildPresences",
        ("presence", ".status"),
        "Accessing presence data without GuildPresences intent",
        "Add this for presence data",
    ),
)


class IntentsDetector:
    """Missing, privileged, deprecated and unknown gateway intents.

    A privileged-intent rule is suppressed when the metadata knows the
    installed intent set and that intent is absent from it. An empty
    set means "unknown" and never suppresses.
    """

    name = "IntentsDetector"

    def __init__(self, metadata: MetadataTable | None = None) -> None:
        self._metadata = metadata if metadata is not None else get_metadata()

    def detect(self, code: str) -> list[Diagnostic]:
        lines = code.split("\n")
        known = self._metadata.available_intents()
        diagnostics: list[Diagnostic] = []

        if "new Client" in code and "intents:" not in code:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.ERROR,
                    message="Client created without intents",
                    details=_MISSING_INTENTS_DETAILS,
                    severity=Severity.CRITICAL,
                    line=first_line_containing(lines, "new Client"),
                    doc_link=doc_link("Client"),
                )
            )

        for intent, triggers, message, comment in _PRIVILEGED_RULES:
            if known and intent not in known:
                continue
            if intent in code or not any(t in code for t in triggers):
                continue
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.WARNING,
                    message=message,
                    details=_privileged_details(intent, comment),
                    severity=Severity.HIGH,
                    line=first_line_containing(lines, *triggers),
                    doc_link=_INTENTS_DOC,
                )
            )

        if "intents: [" in code and _STRING_INTENTS_RE.search(code):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.WARNING,
                    message="Using deprecated string-based intents",
                    details=_STRING_INTENTS_DETAILS,
                    severity=Severity.MEDIUM,
                    line=first_line_containing(lines, "intents:"),
                    doc_link=_INTENTS_DOC,
                )
            )

        if known:
            diagnostics.extend(self._unknown_intents(lines, known))
        return diagnostics

    def _unknown_intents(
        self, lines: list[str], known: frozenset[str]
    ) -> list[Diagnostic]:
        found: list[Diagnostic] = []
        seen: set[str] = set()
        for idx, line in enumerate(lines):
            for match in _INTENT_REF_RE.finditer(line):
                intent = match.group(1)
                if intent in known or intent in seen:
                    continue
                seen.add(intent)
                found.append(
                    Diagnostic(
                        kind=DiagnosticKind.WARNING,
                        message=(
                            f"Unknown gateway intent: "
                            f"GatewayIntentBits.{intent}"
                        ),
                        details=(
                            f"`{intent}` is not a member of "
                            "GatewayIntentBits in the installed discord.js "
                            "version. Check the spelling against the "
                            "enum documentation."
                        ),
                        severity=Severity.MEDIUM,
                        line=idx + 1,
                        doc_link=_INTENTS_DOC,
                    )
                )
        return found
