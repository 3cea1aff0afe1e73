"""Offline extraction of the metadata artifact from installed typings.

Scans TypeScript declaration files as text: enum members and
class/interface method names are found by brace matching, not by a
TypeScript parser. Run via ``botlint extract-metadata``.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from botlint.catalog.schemas import MetadataTable

logger = logging.getLogger(__name__)

BUILDER_TARGETS: tuple[str, ...] = (
    "SlashCommandBuilder",
    "ButtonBuilder",
    "ModalBuilder",
    "TextInputBuilder",
    "ActionRowBuilder",
    "StringSelectMenuBuilder",
    "UserSelectMenuBuilder",
    "RoleSelectMenuBuilder",
    "ChannelSelectMenuBuilder",
    "MentionableSelectMenuBuilder",
)

# Declarations whose methods live on a shared mixin
BUILDER_ALIASES: dict[str, str] = {
    "SlashCommandBuilder": "SharedNameAndDescription",
}

_ENUM_MEMBER_RE = re.compile(r"^\s*(\w+)\s*(?:=|,|$)", re.MULTILINE)
_METHOD_RE = re.compile(
    r"^\s*(?:(?:public|protected|static|abstract|readonly)\s+)*"
    r"(\w+)\s*(?:<[^>\n]*>)?\s*\(",
    re.MULTILINE,
)
_NOT_METHODS = frozenset({"constructor", "if", "for", "while", "return"})


def extract_metadata(node_modules: Path) -> MetadataTable:
    """Build a :class:`MetadataTable` from a ``node_modules`` directory.

    Missing packages leave their fields empty.
    """
    discord_typings = _read(
        node_modules / "discord.js" / "typings" / "index.d.ts"
    )
    api_typings = _read(
        node_modules / "discord-api-types" / "gateway" / "v10.d.ts"
    ) or _read(node_modules / "discord-api-types" / "v10.d.ts")
    builders_typings = _read(
        node_modules / "@discordjs" / "builders" / "dist" / "index.d.ts"
    )

    intents = collect_enum_members(discord_typings, "GatewayIntentBits")
    if not intents:
        intents = collect_enum_members(api_typings, "GatewayIntentBits")

    builder_methods = {
        name: collect_class_methods(
            builders_typings, BUILDER_ALIASES.get(name, name)
        )
        for name in BUILDER_TARGETS
    }

    return MetadataTable(
        version=_package_version(node_modules / "discord.js"),
        gateway_intents=intents,
        builder_methods=builder_methods,
        component_builders=[
            name for name in BUILDER_TARGETS if name != "ActionRowBuilder"
        ],
    )


def collect_enum_members(source: str, enum_name: str) -> list[str]:
    """Member names of ``enum <enum_name> { ... }`` in declaration order."""
    body = _declaration_body(
        source, rf"\benum\s+{re.escape(enum_name)}\b[^{{]*\{{"
    )
    if body is None:
        return []
    members: list[str] = []
    for line in body.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith(("//", "/*", "*")):
            continue
        match = _ENUM_MEMBER_RE.match(stripped)
        if match and match.group(1) not in members:
            members.append(match.group(1))
    return members


def collect_class_methods(source: str, class_name: str) -> list[str]:
    """Method names declared directly in a class or interface body."""
    body = _declaration_body(
        source,
        rf"\b(?:class|interface)\s+{re.escape(class_name)}\b[^{{]*\{{",
    )
    if body is None:
        return []
    methods: list[str] = []
    for match in _METHOD_RE.finditer(_top_level(body)):
        name = match.group(1)
        if name not in _NOT_METHODS and name not in methods:
            methods.append(name)
    return methods


def write_metadata(table: MetadataTable, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(table.to_wire(), indent=2) + "\n", encoding="utf-8"
    )


def _declaration_body(source: str, header_pattern: str) -> str | None:
    """Text between the header's opening brace and its matching close."""
    if not source:
        return None
    match = re.search(header_pattern, source)
    if match is None:
        return None
    depth = 1
    start = match.end()
    for i in range(start, len(source)):
        char = source[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return source[start:i]
    return source[start:]


def _top_level(body: str) -> str:
    """Drop nested ``{...}`` blocks so only member signatures remain."""
    out: list[str] = []
    depth = 0
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(0, depth - 1)
        elif depth == 0:
            out.append(char)
    return "".join(out)


def _package_version(package_dir: Path) -> str | None:
    try:
        pkg = json.loads((package_dir / "package.json").read_text("utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    version = pkg.get("version") if isinstance(pkg, dict) else None
    return str(version) if version else None


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.info("event=typings_unavailable path=%s", path)
        return ""
