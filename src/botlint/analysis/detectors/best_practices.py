"""Best-practice and modern-pattern suggestions."""

from __future__ import annotations

import re

from botlint.analysis.detectors.base import first_line_containing
from botlint.analysis.schemas import Diagnostic
from botlint.catalog.schemas import doc_link
from botlint.constants import (
    COMPONENT_WINDOW_AFTER,
    COMPONENT_WINDOW_BEFORE,
    DiagnosticKind,
    DocKind,
    Severity,
)

_CONTAINER_RE = re.compile(r"ActionRowBuilder|addComponents|components\s*:\s*\[")
_COMPONENT_BUILDERS = ("ButtonBuilder", "SelectMenuBuilder")

_CACHE_DETAILS = """\
Check cache first to reduce API calls:
```typescript
// Check cache first
let guild = client.guilds.cache.get(guildId);
if (!guild) {
  guild = await client.guilds.fetch(guildId);
}

// Or use .resolve() which checks cache automatically
const cached = client.guilds.resolve(guildId);
```"""

_PERMISSION_DETAILS = """\
Verify user permissions to prevent unauthorized actions:
```typescript
import { PermissionFlagsBits } from 'discord.js';

if (!interaction.member.permissions.has(PermissionFlagsBits.ManageMessages)) {
  return interaction.reply({
    content: 'You need Manage Messages permission!',
    ephemeral: true,
  });
}
```"""

_EPHEMERAL_DETAILS = """\
Make error messages private with ephemeral:
```typescript
try {
  // Command logic
} catch (error) {
  await interaction.reply({
    content: 'An error occurred!',
    ephemeral: true, // Only visible to user
  });
}
```"""

_DEFER_DETAILS = """\
Use deferReply() for operations taking >3 seconds:
```typescript
await interaction.deferReply();

const result = await someAsyncOperation();

await interaction.editReply({
  content: `Result: ${result}`,
});
```

Interactions expire after 3 seconds if not responded to."""

_ACTION_ROW_DETAILS = """\
Components need to be in an ActionRow:
```typescript
import { ActionRowBuilder, ButtonBuilder, ButtonStyle } from 'discord.js';

const row = new ActionRowBuilder()
  .addComponents(
    new ButtonBuilder()
      .setCustomId('button1')
      .setLabel('Click me!')
      .setStyle(ButtonStyle.Primary)
  );

await interaction.reply({
  content: 'Here are some buttons:',
  components: [row],
});
```"""

_RATE_LIMIT_DETAILS = """\
Handle Discord API errors gracefully:
```typescript
try {
  await channel.send('Hello!');
} catch (error) {
  if (error.code === 50013) {
    console.error('Missing permissions');
  } else if (error.code === 10008) {
    console.error('Unknown message');
  } else {
    console.error('Error:', error);
  }
}
```"""

_READY_DETAILS = """\
Wait for the ready event before using client.user:
```typescript
client.once('ready', () => {
  console.log(`Logged in as ${client.user.tag}`);
});
```"""

_EVENTS_ENUM_DETAILS = """\
Use the Events enum for type safety:
```typescript
import { Events } from 'discord.js';

client.on(Events.MessageCreate, message => { ... });
client.on(Events.InteractionCreate, interaction => { ... });

// instead of string names, which are prone to typos
client.on('messageCreate', message => { ... });
```"""

_TOKEN_DETAILS = """\
Load the token from the environment instead of committing it:
```typescript
client.login(process.env.DISCORD_TOKEN);
```

If a token was ever pushed to a repository, regenerate it in the \
Discord Developer Portal."""


class BestPracticesDetector:
    """Heuristic suggestions for common discord.js pitfalls.

    Every rule is a substring test over the whole file, so false
    positives are expected.
    """

    name = "BestPracticesDetector"

    def detect(self, code: str) -> list[Diagnostic]:
        lines = code.split("\n")
        diagnostics: list[Diagnostic] = []

        if (
            ".fetch(" in code or ".fetchWebhook" in code
        ) and ".cache" not in code:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INFO,
                    message="Consider using cache before fetching from API",
                    details=_CACHE_DETAILS,
                    severity=Severity.LOW,
                    doc_link=doc_link("BaseManager"),
                )
            )

        if (
            "message.member" in code or "interaction.member" in code
        ) and "permissions" not in code and "hasPermission" not in code:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INFO,
                    message=(
                        "Consider checking permissions before executing "
                        "commands"
                    ),
                    details=_PERMISSION_DETAILS,
                    severity=Severity.LOW,
                    doc_link=doc_link(
                        "PermissionFlagsBits", kind=DocKind.ENUM
                    ),
                )
            )

        if (
            "interaction.reply" in code
            and "error" in code
            and "ephemeral: true" not in code
        ):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INFO,
                    message=(
                        "Consider using ephemeral replies for error messages"
                    ),
                    details=_EPHEMERAL_DETAILS,
                    severity=Severity.LOW,
                    doc_link=doc_link(
                        "InteractionReplyOptions", kind=DocKind.INTERFACE
                    ),
                )
            )

        long_running = (
            "await" in code and "interaction.reply" in code
        ) or "setTimeout" in code
        if (
            long_running
            and "deferReply" not in code
            and "deferUpdate" not in code
        ):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.WARNING,
                    message="Long operations should defer the interaction",
                    details=_DEFER_DETAILS,
                    severity=Severity.MEDIUM,
                    doc_link=doc_link("CommandInteraction") + "#deferReply",
                )
            )

        uncontained = self._uncontained_component_line(lines)
        if uncontained is not None:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.ERROR,
                    message="Components must be wrapped in ActionRowBuilder",
                    details=_ACTION_ROW_DETAILS,
                    severity=Severity.CRITICAL,
                    line=uncontained,
                    doc_link=doc_link("ActionRowBuilder", "builders"),
                )
            )

        if (
            any(call in code for call in (".send(", ".edit(", ".delete("))
            and "catch" not in code
            and "try" not in code
        ):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.WARNING,
                    message="Add error handling for rate limits and API errors",
                    details=_RATE_LIMIT_DETAILS,
                    severity=Severity.MEDIUM,
                    doc_link=doc_link("DiscordAPIError"),
                )
            )

        if "client.user" in code and "client.on('ready'" not in code:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.WARNING,
                    message="Access client.user only after ready event",
                    details=_READY_DETAILS,
                    severity=Severity.MEDIUM,
                    doc_link=doc_link("Client") + "#ready",
                )
            )

        if "Events." in code and (
            "client.on('" in code or 'client.on("' in code
        ):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INFO,
                    message="Consider using Events enum for event names",
                    details=_EVENTS_ENUM_DETAILS,
                    severity=Severity.LOW,
                    doc_link=doc_link("Events", kind=DocKind.ENUM),
                )
            )

        if (
            ".login(" in code
            and "process.env" not in code
            and "TOKEN" not in code
            and "'" in code
            and '"' in code
        ):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.ERROR,
                    message="Avoid hardcoding your bot token",
                    details=_TOKEN_DETAILS,
                    severity=Severity.CRITICAL,
                    line=first_line_containing(lines, ".login("),
                    code_snippet="client.login(process.env.DISCORD_TOKEN);",
                    doc_link=doc_link("Client") + "#login",
                )
            )

        return diagnostics

    @staticmethod
    def _uncontained_component_line(lines: list[str]) -> int | None:
        """Line of the first component builder with no container nearby."""
        line = first_line_containing(lines, *_COMPONENT_BUILDERS)
        if line is None:
            return None
        idx = line - 1
        window = "\n".join(
            lines[
                max(0, idx - COMPONENT_WINDOW_BEFORE) :
                idx + COMPONENT_WINDOW_AFTER
            ]
        )
        if _CONTAINER_RE.search(window):
            return None
        return line
