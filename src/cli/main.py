"""Command line interface (Typer).

Commands:
- `decode`: inspect a wire message from a file or stdin.
- `echo`: local transform; parses client arguments and answers on stdout.
- `query`: send a single-entity request to a remote transform server.
- `routes` / `dispatch`: list and run the built-in transforms offline.
- `doctor`: configuration and environment checks.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import httpx
import typer
from rich.console import Console

from adapters.http_client import build_request, run_remote_transform
from adapters.local_output import die, emit
from cli import doctor
from cli.ui_components import build_message_view, print_banner
from core.config import AppSettings
from core.domain import entity_types
from core.domain.constants import UIMessageType
from core.domain.models import MaltegoMessage
from core.errors import MessageDecodeError, RemoteTransformError
from core.logging_setup import configure_logging
from core.services.builtin_transforms import build_registry
from core.services.local_args import parse_local_arguments
from core.wire.decoder import decode as decode_message
from core.wire.encoder import render

app = typer.Typer(no_args_is_help=True, help="Maltego transform message toolkit.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        raise typer.BadParameter(f"file not found: {source}")
    return path.read_bytes()


def _parse_pairs(pairs: list[str] | None) -> dict[str, str]:
    out: dict[str, str] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise typer.BadParameter(f"expected key=value, got {pair!r}")
        key, value = pair.split("=", 1)
        out[key.strip()] = value
    return out


@app.command()
def decode(
    source: str = typer.Argument(..., help="Message file, or '-' for stdin."),
    raw: bool = typer.Option(False, "--raw", help="Print the re-encoded wire text instead of tables."),
) -> None:
    """Decode a MaltegoMessage and show its payload."""

    try:
        message = decode_message(_read_input(source))
    except MessageDecodeError as exc:
        _err_console.print(f"[red]Decode failed:[/red] {exc}")
        raise typer.Exit(code=1)

    if raw:
        typer.echo(render(message))
        return
    _console.print(build_message_view(message))


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def echo(
    value: str = typer.Argument(..., help="Entity value passed by the client."),
    args: list[str] = typer.Argument(None, help="Client property arguments (key=value#key=value)."),
    entity_type: str = typer.Option(entity_types.PHRASE, "--entity-type", "-t", help="Type of the returned entity."),
) -> None:
    """Local transform: return the input as an entity with its properties."""

    local = parse_local_arguments([value, *(args or [])])
    if not local.value.strip():
        die("empty value", "invalid input")

    message = MaltegoMessage()
    entity = message.add_entity(entity_types.qualify(entity_type), local.value)
    for name, text in local.values.items():
        if name:
            entity.add_prop(name, text)
    message.add_ui_message("complete", UIMessageType.INFORM)
    emit(message)


@app.command()
def query(
    url: str = typer.Argument(..., help="Transform endpoint, e.g. http://localhost:8081/run/lookupIP"),
    value: str = typer.Argument(..., help="Value of the input entity."),
    entity_type: str = typer.Option(entity_types.DNS_NAME, "--entity-type", "-t"),
    field: list[str] = typer.Option(None, "--field", "-f", help="Transform field key=value (repeatable)."),
    prop: list[str] = typer.Option(None, "--prop", "-p", help="Entity property key=value (repeatable)."),
) -> None:
    """Send a request to a remote transform server and show the reply."""

    settings = AppSettings()
    request = build_request(
        entity_types.qualify(entity_type),
        value,
        settings=settings,
        fields=_parse_pairs(field),
        properties=_parse_pairs(prop),
    )

    try:
        reply = asyncio.run(run_remote_transform(url, request, settings=settings))
    except (RemoteTransformError, httpx.HTTPError) as exc:
        _err_console.print(f"[red]Transform failed:[/red] {exc}")
        raise typer.Exit(code=1)

    _console.print(build_message_view(reply))


@app.command()
def routes() -> None:
    """List the routes of the built-in transforms."""

    print_banner(_console)
    for route in build_registry().routes():
        _console.print(route)


@app.command()
def dispatch(
    name: str = typer.Argument(..., help="Built-in transform name (see `routes`)."),
    source: str = typer.Argument(..., help="Request message file, or '-' for stdin."),
) -> None:
    """Run a built-in transform on a request message and print the reply."""

    settings = AppSettings()
    result = build_registry(dump_messages=settings.dump_messages).dispatch(name, _read_input(source))
    if not result.ok:
        _err_console.print(f"[red]HTTP {result.status}:[/red] {result.body}")
        raise typer.Exit(code=1)
    typer.echo(result.body)


def run() -> None:
    app()
