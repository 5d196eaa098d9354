"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file
from core.domain import entity_types
from core.domain.models import MaltegoMessage
from core.wire.decoder import decode
from core.wire.encoder import render

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


def _check_codec() -> tuple[bool, str]:
    """Encode a sample response and decode it back."""

    message = MaltegoMessage()
    entity = message.add_entity(entity_types.DNS_NAME, "doctor.example")
    entity.add_prop("fqdn", "doctor.example")
    wire = render(message)
    decoded = decode(wire)
    if decoded.response is None or render(decoded) != wire:
        return False, "re-encoded message differs"
    return True, f"{len(wire)} bytes"


@app.command()
def run(
    server: str = typer.Option(None, "--server", "-s", help="Transform server to probe (GET)."),
) -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()

    table = Table(title="trxwire Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Limits", "OK", f"soft={settings.default_soft_limit} hard={settings.default_hard_limit}")
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds}s")

    ok_codec, detail_codec = _check_codec()
    table.add_row("Wire codec", "OK" if ok_codec else "FAIL", detail_codec)

    if server:
        ok_http, detail_http = asyncio.run(_check_http(server, settings))
        table.add_row("Transform server", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
