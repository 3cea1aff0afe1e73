"""Curated remediation text for known discord.js error identifiers.

Keyed by catalog code. Entries here take precedence over the raw
catalog message when a known-error diagnostic is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass

from botlint.catalog.schemas import doc_link
from botlint.constants import DEVELOPER_PORTAL_URL, DocKind

_MDN = "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference"


@dataclass(frozen=True)
class Remediation:
    """Short summary, markdown fix, and reference link for one code."""

    summary: str
    solution: str
    doc_link: str

    def render(self) -> str:
        return f"**{self.summary}**\n\n{self.solution}"


REMEDIATIONS: dict[str, Remediation] = {
    # ── Client ──────────────────────────────────────────
    "ClientInvalidToken": Remediation(
        summary="Invalid token provided to client",
        solution=(
            "Ensure your bot token is correct. Regenerate it in the "
            "Discord Developer Portal if needed."
        ),
        doc_link=doc_link("Client"),
    ),
    "ClientInvalidIntents": Remediation(
        summary="Invalid intents provided to client",
        solution=(
            "Use valid GatewayIntentBits values. Check that every intent "
            "is imported from discord.js."
        ),
        doc_link=doc_link("GatewayIntentBits", kind=DocKind.ENUM),
    ),
    "ClientMissingIntents": Remediation(
        summary="Missing required intents for this operation",
        solution=(
            "You must provide intents when creating the Client:\n\n"
            "```typescript\n"
            "const client = new Client({\n"
            "  intents: [GatewayIntentBits.Guilds, "
            "GatewayIntentBits.MessageContent],\n"
            "});\n"
            "```"
        ),
        doc_link=doc_link("GatewayIntentBits", kind=DocKind.ENUM),
    ),
    "ClientInvalidOption": Remediation(
        summary="Invalid option provided to client",
        solution=(
            "Check that your Client constructor options are valid. "
            "Review the Client API documentation."
        ),
        doc_link=doc_link("Client"),
    ),
    "ClientNotReady": Remediation(
        summary="Client is not ready yet",
        solution=(
            "Wait for the 'ready' event before using client methods:\n\n"
            "```typescript\n"
            "client.on('ready', () => {\n"
            "  console.log('Ready as', client.user.tag);\n"
            "});\n"
            "```"
        ),
        doc_link=doc_link("Client") + "#ready",
    ),
    "TokenInvalid": Remediation(
        summary="Invalid token",
        solution=(
            "Regenerate your token from the "
            f"[Discord Developer Portal]({DEVELOPER_PORTAL_URL})."
        ),
        doc_link=DEVELOPER_PORTAL_URL,
    ),
    "TokenMissing": Remediation(
        summary="Missing token",
        solution=(
            "Call `client.login()` with your token:\n\n"
            "```typescript\n"
            "client.login(process.env.DISCORD_TOKEN);\n"
            "```"
        ),
        doc_link=doc_link("Client") + "#login",
    ),
    "InvalidToken": Remediation(
        summary="Invalid token provided",
        solution=(
            "Regenerate your bot token in the Discord Developer Portal "
            "and make sure it is copied correctly."
        ),
        doc_link=DEVELOPER_PORTAL_URL,
    ),
    # ── Interactions ────────────────────────────────────
    "InteractionAlreadyReplied": Remediation(
        summary=(
            "The reply to this interaction has already been sent or "
            "deferred"
        ),
        solution=(
            "Check if already replied before responding:\n\n"
            "```typescript\n"
            "if (!interaction.replied && !interaction.deferred) {\n"
            "  await interaction.reply('...');\n"
            "} else {\n"
            "  await interaction.editReply('...');\n"
            "}\n"
            "```"
        ),
        doc_link=doc_link("BaseInteraction") + "#replied",
    ),
    "InteractionNotReplied": Remediation(
        summary="The interaction has not been replied to",
        solution=(
            "Call interaction.reply() or interaction.deferReply() first "
            "before using editReply() or deleteReply()."
        ),
        doc_link=doc_link("CommandInteraction") + "#reply",
    ),
    "InteractionEphemeralReplied": Remediation(
        summary="Cannot modify an ephemeral interaction response",
        solution=(
            "Ephemeral messages cannot be edited or deleted after "
            "sending. Use a non-ephemeral reply if you need to modify "
            "it later."
        ),
        doc_link=doc_link("CommandInteraction") + "#reply",
    ),
    "InteractionFieldsMethodError": Remediation(
        summary="interaction.fields method not found",
        solution=(
            "`interaction.fields.getStringSelectValue()` (singular) does "
            "not exist; the method is `getStringSelectValues()` "
            "(plural) and returns an array.\n\n"
            "Available modal field methods:\n"
            "- `getTextInputValue(customId)`\n"
            "- `getStringSelectValues(customId)`\n"
            "- `getSelectedUsers(customId, required?)`\n"
            "- `getSelectedRoles(customId, required?)`\n"
            "- `getSelectedChannels(customId, required?, channelTypes?)`\n"
            "- `getSelectedMembers(customId)`\n"
            "- `getSelectedMentionables(customId, required?)`\n"
            "- `getUploadedFiles(customId, required?)`\n"
            "- `getField(customId, type)`\n\n"
            "```javascript\n"
            "if (interaction.isModalSubmit()) {\n"
            "  const username = "
            "interaction.fields.getTextInputValue('username_input');\n"
            "  const selections = "
            "interaction.fields.getStringSelectValues('select_menu');\n"
            "  console.log(selections[0]);\n"
            "}\n"
            "```"
        ),
        doc_link=doc_link("ModalSubmitInteraction") + "#fields",
    ),
    # ── Commands ────────────────────────────────────────
    "CommandInteractionOptionNotFound": Remediation(
        summary="The option for this interaction command was not found",
        solution=(
            "Verify the option name matches what was defined in the "
            "SlashCommandBuilder. Check spelling."
        ),
        doc_link=doc_link("CommandInteraction") + "#options",
    ),
    "CommandInteractionOptionNotType": Remediation(
        summary="The option provided was not the correct type",
        solution=(
            "Verify the option type matches what was expected "
            "(user, string, integer, boolean, etc.)."
        ),
        doc_link=doc_link("CommandInteraction") + "#options",
    ),
    "ApplicationCommandOptionMissing": Remediation(
        summary="Application command option is missing",
        solution="Define all required options in your slash command builder.",
        doc_link=doc_link("SlashCommandBuilder", "builders"),
    ),
    "ApplicationCommandSubcommandInvalid": Remediation(
        summary="Invalid subcommand structure",
        solution=(
            "Ensure subcommands are properly nested and only used at "
            "the correct levels."
        ),
        doc_link=doc_link("SlashCommandBuilder", "builders"),
    ),
    # ── Builders ────────────────────────────────────────
    "ValidationError": Remediation(
        summary=(
            "Builder validation error - missing required fields or "
            "invalid values"
        ),
        solution=(
            "Ensure all required builder fields are set before calling "
            ".toJSON(). ButtonBuilder: customId and label. EmbedBuilder: "
            "description. SelectMenuBuilder: customId and at least one "
            "option."
        ),
        doc_link=doc_link("ButtonBuilder", "builders"),
    ),
    "SectionAccessoryError": Remediation(
        summary="Your section has no accessory",
        solution=(
            "Ensure all required builder fields are set. ButtonBuilder "
            "needs customId + label. ThumbnailBuilder needs a URL. "
            "SelectMenuBuilder needs customId + options."
        ),
        doc_link=doc_link("SectionBuilder", "builders"),
    ),
    "ButtonLabel": Remediation(
        summary="Button missing label",
        solution=(
            "```typescript\n"
            "new ButtonBuilder().setLabel('Click me!');\n"
            "```"
        ),
        doc_link=doc_link("ButtonBuilder", "builders"),
    ),
    "ButtonCustomId": Remediation(
        summary="Button missing custom ID",
        solution=(
            "```typescript\n"
            "new ButtonBuilder().setCustomId('my_button');\n"
            "```"
        ),
        doc_link=doc_link("ButtonBuilder", "builders"),
    ),
    "SelectMenuCustomId": Remediation(
        summary="Select menu missing custom ID",
        solution=(
            "```typescript\n"
            "new StringSelectMenuBuilder().setCustomId('my_menu');\n"
            "```"
        ),
        doc_link=doc_link("StringSelectMenuBuilder", "builders"),
    ),
    # ── Error classes ───────────────────────────────────
    "DiscordJSError": Remediation(
        summary="A general discord.js error occurred",
        solution="Check the full error message for more details.",
        doc_link=doc_link("DiscordjsError"),
    ),
    "DiscordAPIError": Remediation(
        summary="A Discord API error occurred",
        solution=(
            "Check the error code in the message and look up the "
            "specific code for the solution."
        ),
        doc_link=doc_link("DiscordAPIError"),
    ),
    "DiscordRangeError": Remediation(
        summary="discord.js value out of acceptable range",
        solution=(
            "Check parameter constraints: message length < 2000, embed "
            "description < 4096, embed total < 6000, choices 1-25, "
            "color 0-16777215."
        ),
        doc_link=doc_link("DiscordjsRangeError"),
    ),
    "DiscordTypeError": Remediation(
        summary="Type error in discord.js code",
        solution=(
            "Verify all types are correct. Check if objects are properly "
            "initialized before use."
        ),
        doc_link=doc_link("DiscordjsTypeError"),
    ),
    "InvalidType": Remediation(
        summary="Invalid type provided",
        solution="Check that the type matches expected values.",
        doc_link=doc_link("DiscordjsTypeError"),
    ),
    "RangeError": Remediation(
        summary="Value out of range",
        solution="Check parameter constraints and value bounds.",
        doc_link=doc_link("DiscordjsRangeError"),
    ),
    "TypeError": Remediation(
        summary="Type error",
        solution="Verify all types are correct.",
        doc_link=doc_link("DiscordjsTypeError"),
    ),
    # ── Guilds, channels, members ───────────────────────
    "GuildMembersTimeout": Remediation(
        summary="Members didn't arrive in time",
        solution=(
            "Add the GatewayIntentBits.GuildMembers intent if missing, or "
            "increase the timeout: "
            "`guild.members.fetch({ time: 60000 })`."
        ),
        doc_link=doc_link("GuildMemberManager") + "#fetch",
    ),
    "GuildChannelResolveError": Remediation(
        summary="Guild channel could not be resolved",
        solution=(
            "Verify the channel ID is correct and the channel still "
            "exists in the guild."
        ),
        doc_link=doc_link("Guild") + "#channels",
    ),
    "GuildMemberResolveError": Remediation(
        summary="Guild member could not be resolved",
        solution=(
            "Verify the user ID is correct and the user is a member of "
            "the guild."
        ),
        doc_link=doc_link("GuildMemberManager"),
    ),
    "GuildRoleResolveError": Remediation(
        summary="Guild role could not be resolved",
        solution=(
            "Verify the role ID is correct and the role still exists in "
            "the guild."
        ),
        doc_link=doc_link("Guild") + "#roles",
    ),
    "GuildEmojiResolveError": Remediation(
        summary="Guild emoji could not be resolved",
        solution=(
            "Verify the emoji ID is correct and the emoji still exists "
            "in the guild."
        ),
        doc_link=doc_link("Guild") + "#emojis",
    ),
    "GuildStickerResolveError": Remediation(
        summary="Guild sticker could not be resolved",
        solution=(
            "Verify the sticker ID is correct and the sticker still "
            "exists in the guild."
        ),
        doc_link=doc_link("Guild") + "#stickers",
    ),
    "CollectionError": Remediation(
        summary="Error with discord.js Collection",
        solution=(
            "Verify you're using Collection methods correctly and that "
            "the key/value types match."
        ),
        doc_link=doc_link("Collection"),
    ),
    # ── Permissions ─────────────────────────────────────
    "PermissionError": Remediation(
        summary="Missing required permissions",
        solution=(
            "Ensure the bot has the required permissions in the guild "
            "or channel. Check role hierarchy."
        ),
        doc_link=doc_link("PermissionFlagsBits", kind=DocKind.ENUM),
    ),
    "PermissionsFlagsBitsInvalid": Remediation(
        summary="Invalid permissions flags provided",
        solution="Use valid PermissionFlagsBits values.",
        doc_link=doc_link("PermissionFlagsBits", kind=DocKind.ENUM),
    ),
    # ── Messages and embeds ─────────────────────────────
    "MessageBulkDeleteRateLimited": Remediation(
        summary="Bulk delete was rate limited",
        solution=(
            "Add a delay between bulk delete operations or delete fewer "
            "messages at once."
        ),
        doc_link=doc_link("TextChannel") + "#bulkDelete",
    ),
    "MessageEmbedDescription": Remediation(
        summary="Embed description too long",
        solution="Keep embed descriptions under 4096 characters.",
        doc_link=doc_link("EmbedBuilder", "builders"),
    ),
    # ── Voice ───────────────────────────────────────────
    "VoiceChannelJoinFailed": Remediation(
        summary="Failed to join voice channel",
        solution=(
            "Ensure the bot has permission to connect and speak, and "
            "that the channel is a voice channel."
        ),
        doc_link=doc_link("VoiceChannel"),
    ),
    "VoiceConnectionNotConnected": Remediation(
        summary="Voice connection is not connected",
        solution=(
            "Call joinVoiceChannel() before using the voice connection."
        ),
        doc_link=doc_link("VoiceChannel"),
    ),
    # ── REST ────────────────────────────────────────────
    "RESTInvalidVersion": Remediation(
        summary="Invalid REST API version",
        solution="Use a valid Discord API version (e.g. 10).",
        doc_link=doc_link("REST"),
    ),
    "RESTInvalidMethod": Remediation(
        summary="Invalid HTTP method",
        solution="Use valid HTTP methods (GET, POST, PUT, PATCH, DELETE).",
        doc_link=doc_link("REST"),
    ),
    # ── JavaScript runtime ──────────────────────────────
    "CannotReadUndefined": Remediation(
        summary="Cannot read properties of undefined",
        solution=(
            "1. Use optional chaining (?.) to access properties safely:\n"
            "```\n"
            "const desc = "
            "interaction.options?.getString('option') ?? 'default'\n"
            "```\n\n"
            "2. Add null checks before accessing nested values."
        ),
        doc_link=f"{_MDN}/Operators/Optional_chaining",
    ),
    "CannotReadNull": Remediation(
        summary="Cannot read properties of null",
        solution=(
            "1. Add null checks:\n"
            "```\n"
            "if (value !== null) {\n"
            "  const prop = value.property\n"
            "}\n"
            "```\n\n"
            "2. Use optional chaining: `value?.property`."
        ),
        doc_link=f"{_MDN}/Global_Objects/null",
    ),
    "CannotSetPropertyOfUndefined": Remediation(
        summary="Cannot set properties of undefined",
        solution=(
            "Initialize the object first:\n"
            "```\n"
            "(obj ??= {}).property = value\n"
            "```"
        ),
        doc_link=f"{_MDN}/Global_Objects/undefined",
    ),
    "CannotSetPropertyOfNull": Remediation(
        summary="Cannot set properties of null",
        solution=(
            "Initialize the object if it is null:\n"
            "```\n"
            "if (!obj) {\n"
            "  obj = {}\n"
            "}\n"
            "obj.property = value\n"
            "```"
        ),
        doc_link=f"{_MDN}/Global_Objects/null",
    ),
    "IsNotAFunction": Remediation(
        summary="is not a function",
        solution=(
            "Check that the method exists on the object and that its "
            "name matches your discord.js version (e.g. `addComponents` "
            "vs `addTextDisplayComponents`). Builder methods differ "
            "between major versions."
        ),
        doc_link=doc_link("SectionBuilder", "builders"),
    ),
}


@dataclass(frozen=True)
class ErrorPhrase:
    """Error text as it shows up in pasted logs, mapped to a catalog code.

    Each alternative is a sequence of lower-case fragments that must
    occur in order on a single line. Matching is a left-to-right
    ``str.find`` scan, so it stays linear in the line length.
    """

    code: str
    alternatives: tuple[tuple[str, ...], ...]

    def matches(self, lowered_line: str) -> bool:
        return any(
            _in_order(lowered_line, fragments)
            for fragments in self.alternatives
        )


def _in_order(text: str, fragments: tuple[str, ...]) -> bool:
    pos = 0
    for fragment in fragments:
        idx = text.find(fragment, pos)
        if idx == -1:
            return False
        pos = idx + len(fragment)
    return True


def _phrase(code: str, *alternatives: str | tuple[str, ...]) -> ErrorPhrase:
    return ErrorPhrase(
        code=code,
        alternatives=tuple(
            (alt,) if isinstance(alt, str) else alt for alt in alternatives
        ),
    )


ERROR_PHRASES: tuple[ErrorPhrase, ...] = (
    _phrase("InteractionAlreadyReplied", "already been sent or deferred"),
    _phrase("CommandInteractionOptionNotFound", ("option", "not found")),
    _phrase(
        "SectionAccessoryError",
        "expectedvalidationerror",
        "your section has no accessory",
    ),
    _phrase(
        "ValidationError",
        ("expected:", "received:"),
        "s.instance(v)",
        "combinederror",
    ),
    _phrase("GuildMembersTimeout", "members didn't arrive in time"),
    _phrase("GuildMemberResolveError", ("guild member", "not found")),
    _phrase("GuildRoleResolveError", ("role", "not found")),
    _phrase("GuildEmojiResolveError", ("emoji", "not found")),
    _phrase("GuildStickerResolveError", ("sticker", "not found")),
    _phrase("PermissionError", ("missing", "permission")),
    _phrase(
        "MessageEmbedDescription", ("embed", "description", "long")
    ),
    _phrase("VoiceChannelJoinFailed", ("failed", "join", "voice")),
    _phrase(
        "VoiceConnectionNotConnected", ("voice", "not", "connected")
    ),
    _phrase("InvalidType", ("invalid", "type")),
    _phrase("RangeError", ("out of", "range"), ("invalid", "range")),
    _phrase(
        "CannotReadUndefined",
        ("cannot read properties of undefined", "reading"),
        ("cannot read property of undefined", "reading"),
    ),
    _phrase(
        "CannotReadNull",
        ("cannot read properties of null", "reading"),
        ("cannot read property of null", "reading"),
    ),
    _phrase(
        "CannotSetPropertyOfUndefined",
        ("cannot set propert", "of undefined"),
    ),
    _phrase("CannotSetPropertyOfNull", ("cannot set propert", "of null")),
    _phrase("IsNotAFunction", "is not a function"),
    _phrase(
        "InteractionFieldsMethodError",
        "interaction.fields.getstringselectvalue",
        "getstringselectvalue is not a function",
        "getstringselectvalues is not a function",
    ),
)
