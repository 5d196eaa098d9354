"""Rich components for the CLI.

Why separate components:
- Keeps command logic apart from presentation.
- The same tables are reused by `decode` and `query`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.constants import UIMessageType
from core.domain.models import Entity, ExceptionMessage, MaltegoMessage, UIMessage

_MESSAGE_STYLES: dict[str, str] = {
    UIMessageType.FATAL.value: "bold red",
    UIMessageType.PARTIAL_ERROR.value: "yellow",
    UIMessageType.INFORM.value: "green",
    UIMessageType.DEBUG.value: "dim",
}


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive commands only)."""

    title = Text("trxwire", style="bold cyan")
    subtitle = Text("Maltego transform messages • encode • decode • inspect", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_entities_table(entities: list[Entity], *, title: str = "Entities") -> Table:
    table = Table(title=title)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Weight", style="magenta", justify="right")
    table.add_column("Fields", style="dim")

    for entity in entities:
        fields = "\n".join(
            f"{field.name} = {field.text}" + (f" ({field.matching_rule})" if field.matching_rule else "")
            for field in entity.fields or ()
        )
        table.add_row(entity.type, entity.value, entity.weight, fields)
    return table


def build_ui_messages_table(messages: list[UIMessage]) -> Table:
    table = Table(title="UI Messages")
    table.add_column("Type", no_wrap=True)
    table.add_column("Text", style="white")
    for message in messages:
        style = _MESSAGE_STYLES.get(message.message_type, "white")
        table.add_row(Text(message.message_type, style=style), message.text)
    return table


def build_exceptions_panel(payload: ExceptionMessage) -> Panel:
    body = Text()
    for exception in payload.exceptions:
        if exception.code:
            body.append(f"[{exception.code}] ", style="bold")
        body.append(exception.text + "\n")
    return Panel(body, title=Text("Exceptions", style="bold red"), border_style="red")


def build_message_view(message: MaltegoMessage) -> Group | Text:
    """Render whichever payload the envelope carries."""

    if message.request is not None and message.response is None and message.exception is None:
        request = message.request
        limits = Text(
            f"Limits: soft={request.limits.soft_limit or '-'} hard={request.limits.hard_limit or '-'}",
            style="dim",
        )
        parts: list = [build_entities_table(request.entities, title="Request entities"), limits]
        if request.transform_fields:
            fields = Table(title="Transform fields")
            fields.add_column("Name", style="cyan")
            fields.add_column("Value")
            for field in request.transform_fields:
                fields.add_row(field.name, field.text)
            parts.append(fields)
        return Group(*parts)

    if message.response is not None:
        return Group(
            build_entities_table(message.response.entities, title="Response entities"),
            build_ui_messages_table(message.response.ui_messages),
        )

    if message.exception is not None:
        return Group(build_exceptions_panel(message.exception))

    return Text("Empty message (no payload).", style="yellow")
