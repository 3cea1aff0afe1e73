"""Client event-handling rules."""

from __future__ import annotations

from botlint.analysis.schemas import Diagnostic
from botlint.catalog.schemas import doc_link
from botlint.constants import DiagnosticKind, Severity

_ERROR_HANDLER_DETAILS = """\
Add error handling to prevent unhandled rejections:
```typescript
client.on('error', error => {
  console.error('Client error:', error);
});

process.on('unhandledRejection', error => {
  console.error('Unhandled promise rejection:', error);
});
```"""

_COLLECTION_DETAILS = """\
Use Collection for storing commands:
```typescript
import { Collection } from 'discord.js';

client.commands = new Collection();
```"""


class ErrorDetector:
    """Missing client error listener and ad-hoc command storage."""

    name = "ErrorDetector"

    def detect(self, code: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []

        if "client.on" in code and "client.on('error'" not in code:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.WARNING,
                    message="Missing error event handler",
                    details=_ERROR_HANDLER_DETAILS,
                    severity=Severity.HIGH,
                    doc_link=doc_link("Client"),
                )
            )

        if "client.commands" in code and "Collection" not in code:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INFO,
                    message=(
                        "Consider using Discord.js Collection for "
                        "command storage"
                    ),
                    details=_COLLECTION_DETAILS,
                    severity=Severity.MEDIUM,
                    doc_link=doc_link("Collection"),
                )
            )

        return diagnostics
