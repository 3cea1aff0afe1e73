"""Component and command builder setup rules."""

from __future__ import annotations

from botlint.analysis.detectors.base import first_line_containing
from botlint.analysis.schemas import Diagnostic
from botlint.catalog.metadata import get_metadata
from botlint.catalog.schemas import MetadataTable, doc_link
from botlint.constants import DiagnosticKind


class BuilderDetector:
    """Builders used without the setters discord.js requires.

    Required setters are narrowed to the ones the installed version
    actually exposes. A builder the metadata knows nothing about is
    checked against the full list.
    """

    name = "BuilderDetector"

    def __init__(self, metadata: MetadataTable | None = None) -> None:
        self._metadata = metadata if metadata is not None else get_metadata()

    def _missing(self, code: str, builder: str, *methods: str) -> bool:
        """True if any applicable required setter is absent from ``code``."""
        known = self._metadata.methods_for(builder)
        required = [m for m in methods if not known or m in known]
        return any(f".{m}" not in code for m in required)

    def detect(self, code: str) -> list[Diagnostic]:
        lines = code.split("\n")
        diagnostics: list[Diagnostic] = []

        if "TextInputBuilder" in code or "textInput" in code:
            if self._missing(
                code, "TextInputBuilder", "setCustomId", "setLabel"
            ):
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.ERROR,
                        message=(
                            "TextInputBuilder missing required fields "
                            "(customId, label)"
                        ),
                        details=(
                            "TextInputBuilder requires customId, label, "
                            "and style. Ensure all required fields are set "
                            "before the modal is shown."
                        ),
                        line=first_line_containing(
                            lines, "TextInputBuilder", "textInput"
                        ),
                        code_snippet=(
                            "new TextInputBuilder()\n"
                            '  .setCustomId("my_input")\n'
                            '  .setLabel("Label")\n'
                            "  .setStyle(TextInputStyle.Short)"
                        ),
                        doc_link=doc_link("TextInputBuilder", "builders"),
                    )
                )

        if "ModalBuilder" in code or "Modal" in code:
            if self._missing(code, "ModalBuilder", "setCustomId", "setTitle"):
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.ERROR,
                        message=(
                            "Modal missing required fields "
                            "(customId, title, components)"
                        ),
                        details=(
                            "Modals require customId, title, and at least "
                            "one LabelComponent with a TextInputBuilder "
                            "inside."
                        ),
                        line=first_line_containing(
                            lines, "ModalBuilder", "Modal"
                        ),
                        code_snippet=(
                            "new ModalBuilder()\n"
                            '  .setCustomId("my_modal")\n'
                            '  .setTitle("Modal Title")\n'
                            "  .addLabelComponents(new LabelBuilder()"
                            '.setLabel("Question")'
                            ".setTextInputComponent(textInput))"
                        ),
                        doc_link=doc_link("ModalBuilder", "builders"),
                    )
                )

            modal_methods = self._metadata.methods_for("ModalBuilder")
            uses_label_components = (
                not modal_methods or "addLabelComponents" in modal_methods
            )
            if (
                uses_label_components
                and "ModalBuilder" in code
                and "ActionRowBuilder" in code
                and "addComponents(" in code
            ):
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.ERROR,
                        message=(
                            "ModalBuilder uses addLabelComponents(), "
                            "not ActionRowBuilder"
                        ),
                        details=(
                            "discord.js v14 modals use LabelBuilder and "
                            "addLabelComponents(), not ActionRowBuilder. "
                            "Wrap each TextInputBuilder in a LabelBuilder."
                        ),
                        line=first_line_containing(lines, "addComponents"),
                        code_snippet=(
                            "const label = new LabelBuilder()\n"
                            '  .setLabel("Question")\n'
                            "  .setTextInputComponent(textInput);\n\n"
                            "modal.addLabelComponents(label);"
                        ),
                        doc_link=doc_link("LabelBuilder", "builders"),
                    )
                )

        if "ButtonBuilder" in code or "button" in code:
            if ".setCustomId" not in code and ".setURL" not in code:
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.ERROR,
                        message="ButtonBuilder requires customId or URL",
                        details=(
                            "Buttons need either a customId (for "
                            "interactive buttons) or URL (for link buttons)."
                        ),
                        line=first_line_containing(
                            lines, "ButtonBuilder", "button"
                        ),
                        code_snippet=(
                            "new ButtonBuilder()\n"
                            '  .setCustomId("my_button")\n'
                            '  .setLabel("Click me")\n'
                            "  .setStyle(ButtonStyle.Primary)"
                        ),
                        doc_link=doc_link("ButtonBuilder", "builders"),
                    )
                )

        if "SlashCommandBuilder" in code and self._missing(
            code, "SlashCommandBuilder", "setName", "setDescription"
        ):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.ERROR,
                    message=(
                        "SlashCommandBuilder missing required fields "
                        "(name, description)"
                    ),
                    details=(
                        "SlashCommandBuilder requires name and description. "
                        "Description must be 1-100 characters."
                    ),
                    line=first_line_containing(lines, "SlashCommandBuilder"),
                    code_snippet=(
                        "new SlashCommandBuilder()\n"
                        '  .setName("mycommand")\n'
                        '  .setDescription("Command description")'
                    ),
                    doc_link=doc_link("SlashCommandBuilder", "builders"),
                )
            )

        if (
            "interaction." in code
            and "interaction.replied" not in code
            and "defer" not in code
            and "interaction.reply(" in code
            and "interaction.editReply(" in code
        ):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.WARNING,
                    message=(
                        "Check interaction.replied before replying or "
                        "deferring"
                    ),
                    details=(
                        "Always check if an interaction has been replied to "
                        "before attempting to reply or defer."
                    ),
                    code_snippet=(
                        "if (!interaction.replied) {\n"
                        '  await interaction.reply({ content: "..." });\n'
                        "} else {\n"
                        '  await interaction.editReply({ content: "..." });\n'
                        "}"
                    ),
                    doc_link=doc_link("CommandInteraction") + "#replied",
                )
            )

        return diagnostics
