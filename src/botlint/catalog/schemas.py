"""Pydantic models for the static catalogs."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from botlint.constants import DOCS_BASE_URL, DocKind, MetadataCategory


class ErrorCatalogEntry(BaseModel):
    """A known error identifier and its description."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    message: str = ""
    source: str | None = None  # provenance: file or heuristic name


class MetadataTable(BaseModel):
    """Facts about the installed discord.js surface.

    JSON shape: ``{version, gatewayIntents, builderMethods,
    componentBuilders}``. Every field defaults to empty so a partial
    artifact still loads.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    version: str | None = None
    gateway_intents: list[str] = Field(default_factory=lambda: list[str]())
    builder_methods: dict[str, list[str]] = Field(
        default_factory=lambda: dict[str, list[str]]()
    )
    component_builders: list[str] = Field(
        default_factory=lambda: list[str]()
    )

    def available_intents(self) -> frozenset[str]:
        return frozenset(self.gateway_intents)

    def methods_for(self, builder: str) -> frozenset[str]:
        """Known method names of ``builder``; empty if unknown."""
        return frozenset(self.builder_methods.get(builder, ()))

    def has_builder_method(self, builder: str, method: str) -> bool:
        return method in self.methods_for(builder)

    def is_component_builder(self, name: str) -> bool:
        return name in self.component_builders

    def is_recognized_value(
        self, category: MetadataCategory | str, value: str
    ) -> bool:
        """Check ``value`` against one of the recognized value sets.

        Unknown categories recognize nothing.
        """
        if category == MetadataCategory.GATEWAY_INTENT:
            return value in self.gateway_intents
        if category == MetadataCategory.COMPONENT_BUILDER:
            return value in self.component_builders
        return False

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


def doc_link(
    symbol: str,
    package: str = "discord.js",
    kind: DocKind | str = DocKind.CLASS,
) -> str:
    """Documentation URL for a discord.js symbol.

    Always points at the ``main`` docs tree. ``package`` is the docs
    package folder (``discord.js`` or ``builders``).
    """
    pkg = "builders" if package == "builders" else "discord.js"
    return f"{DOCS_BASE_URL}/{pkg}/main/{quote(symbol, safe='')}:{kind}"
