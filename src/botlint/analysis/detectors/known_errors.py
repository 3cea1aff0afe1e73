"""Known discord.js error identifiers and Discord API error codes."""

from __future__ import annotations

import re

from botlint.analysis.schemas import Diagnostic
from botlint.catalog.error_catalog import ErrorCatalog, get_error_catalog
from botlint.catalog.remediations import ERROR_PHRASES, REMEDIATIONS
from botlint.catalog.schemas import ErrorCatalogEntry, doc_link
from botlint.constants import DOCS_HOME_URL, DiagnosticKind, Severity

_FALLBACK_MESSAGE = "Check the discord.js documentation."


class KnownErrorDetector:
    """Report catalog identifiers and well-known error phrases.

    Each code is reported at most once per input: whole-word catalog
    matches come first, in catalog order, then phrase aliases for codes
    not yet seen.
    """

    name = "KnownErrorDetector"

    def __init__(self, catalog: ErrorCatalog | None = None) -> None:
        self._catalog = catalog if catalog is not None else get_error_catalog()

    def detect(self, code: str) -> list[Diagnostic]:
        lowered = code.lower().split("\n")
        reported: set[str] = set()
        diagnostics: list[Diagnostic] = []

        for entry in self._catalog.find_identifiers_in(code):
            reported.add(entry.code)
            needle = entry.code.lower()
            line = next(
                (
                    idx + 1
                    for idx, text in enumerate(lowered)
                    if needle in text
                ),
                None,
            )
            diagnostics.append(self._diagnostic(entry.code, entry, line))

        for phrase in ERROR_PHRASES:
            error_code = phrase.code
            if error_code in reported:
                continue
            line = next(
                (
                    idx + 1
                    for idx, text in enumerate(lowered)
                    if phrase.matches(text)
                ),
                None,
            )
            if line is None:
                continue
            reported.add(error_code)
            diagnostics.append(
                self._diagnostic(
                    error_code, self._catalog.lookup(error_code), line
                )
            )

        return diagnostics

    @staticmethod
    def _diagnostic(
        error_code: str,
        entry: ErrorCatalogEntry | None,
        line: int | None,
    ) -> Diagnostic:
        message = entry.message if entry is not None else ""
        remediation = REMEDIATIONS.get(error_code)
        if remediation is not None:
            summary = remediation.summary
            details = remediation.render()
            link = remediation.doc_link
        else:
            summary = message or error_code
            details = (
                f"**{error_code}**\n\n{message or _FALLBACK_MESSAGE}\n\n"
                f"[Discord.js Documentation]({DOCS_HOME_URL})"
            )
            link = DOCS_HOME_URL
        return Diagnostic(
            kind=DiagnosticKind.ERROR,
            message=f"discord.js Error: {summary}",
            details=details,
            severity=Severity.HIGH,
            line=line,
            doc_link=link,
        )


# RESTJSONErrorCodes value → (message, solution)
API_ERROR_SOLUTIONS: dict[int, tuple[str, str]] = {
    10001: (
        "Unknown account",
        "This error typically occurs with invalid authentication. Verify "
        "your bot token is correct and not revoked.",
    ),
    10002: (
        "Unknown application",
        "The application ID is invalid. Verify the application ID from "
        "the Discord Developer Portal.",
    ),
    10003: (
        "Unknown channel",
        "The channel was deleted or the ID is incorrect. Verify the "
        "channel ID and ensure the channel exists.",
    ),
    10004: (
        "Unknown guild",
        "The guild was deleted or the ID is incorrect. Verify the guild "
        "ID and ensure the bot is in that guild.",
    ),
    10005: (
        "Unknown integration",
        "The integration was removed or does not exist. Check if the "
        "integration is still connected.",
    ),
    10006: (
        "Unknown invite",
        "The invite code is invalid or expired. Verify the invite code "
        "and try again.",
    ),
    10007: (
        "Unknown member",
        "The user is not a member of the guild. Verify the user ID and "
        "ensure they have joined the guild.",
    ),
    10008: (
        "Unknown message",
        "The message was deleted or the ID is incorrect. Verify the "
        "message ID is valid.",
    ),
    10009: (
        "Unknown permission overwrite",
        "The permission overwrite does not exist. Verify the overwrite "
        "ID and ensure it is still valid.",
    ),
    10011: (
        "Unknown role",
        "The role was deleted or does not exist. Verify the role ID and "
        "ensure the role still exists in the guild.",
    ),
    10012: (
        "Unknown token",
        "The token is invalid or has been revoked. Regenerate your bot "
        "token in the Developer Portal.",
    ),
    10013: (
        "Unknown user",
        "The user does not exist or the ID is incorrect. Verify the user "
        "ID is valid.",
    ),
    10014: (
        "Unknown emoji",
        "The emoji was deleted or does not exist. Verify the emoji ID and "
        "ensure it is still valid.",
    ),
    10015: (
        "Unknown webhook",
        "The webhook was deleted or does not exist. Verify the webhook ID "
        "is correct.",
    ),
    10062: (
        "Unknown interaction - The interaction token may have expired "
        "(>3 seconds) or was already used",
        "Call interaction.deferReply() immediately for long operations, "
        "then use interaction.editReply(). Check interaction.replied "
        "before replying.",
    ),
    30002: (
        "Maximum number reached",
        "You have reached a limit. Remove some items and try again.",
    ),
    30007: (
        "Maximum number of webhooks reached",
        "The channel has reached the maximum webhook limit. Delete unused "
        "webhooks before creating new ones.",
    ),
    50001: (
        "Missing access to guild/channel",
        "The bot lacks permissions to access this resource. Verify the "
        "bot has the required role/permissions.",
    ),
    50002: (
        "Invalid account type",
        "The account type is invalid for this operation. Use the correct "
        "account type.",
    ),
    50003: (
        "Cannot execute action on a DM channel",
        "This action cannot be performed in DMs. Use a guild channel "
        "instead.",
    ),
    50004: (
        "Guild widget disabled",
        "The widget is not enabled for this guild. Enable it in server "
        "settings.",
    ),
    50005: (
        "Cannot edit a message authored by another user",
        "You can only edit your own messages. Ensure the message was sent "
        "by the bot.",
    ),
    50006: (
        "Cannot send an empty message",
        "Message must have content, embeds, files, or other content. Add "
        "content before sending.",
    ),
    50007: (
        "Cannot send messages to this user",
        "The user has DMs disabled. Inform them to enable DMs from server "
        "members.",
    ),
    50008: (
        "Cannot send messages in a voice channel",
        "Voice channels cannot receive text messages. Use a text channel "
        "instead.",
    ),
    50013: (
        "Missing required permissions",
        "Grant the bot the permissions it needs (SendMessages, "
        "ManageRoles, ...) and ensure the role hierarchy is correct.",
    ),
    50014: (
        "Invalid authentication token",
        "The bot token is invalid or missing. Verify the token in the "
        "Developer Portal.",
    ),
    50025: (
        "Invalid OAuth2 access token",
        "The OAuth2 token is invalid. Use a valid token.",
    ),
    50027: (
        "Invalid webhook token",
        "The webhook token is invalid or expired. Regenerate the webhook.",
    ),
}

_API_ERROR_RE = re.compile(r"DiscordAPIError\[(\d+)\]")


class ApiErrorCodeDetector:
    """Explain ``DiscordAPIError[<code>]`` occurrences (pasted logs)."""

    name = "ApiErrorCodeDetector"

    def detect(self, code: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        seen: set[int] = set()
        for idx, line in enumerate(code.split("\n")):
            for match in _API_ERROR_RE.finditer(line):
                api_code = int(match.group(1))
                known = API_ERROR_SOLUTIONS.get(api_code)
                if known is None or api_code in seen:
                    continue
                seen.add(api_code)
                message, solution = known
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.ERROR,
                        message=f"Discord API error {api_code}: {message}",
                        details=solution,
                        severity=Severity.HIGH,
                        line=idx + 1,
                        doc_link=doc_link("DiscordAPIError"),
                    )
                )
        return diagnostics
