"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.dog_ceo import DogCeoClient
from adapters.http_client import build_client
from adapters.rpc_client import normalize_target
from core.config import AppSettings, get_user_env_file
from core.errors import UpstreamError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_upstream(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with DogCeoClient(settings) as client:
            breeds = await client.list_breeds()
        return True, f"{len(breeds)} breeds"
    except UpstreamError as exc:
        return False, str(exc)


def _check_server(settings: AppSettings) -> tuple[bool, str]:
    target = normalize_target(settings.client_target)
    try:
        with build_client(settings, base_url=target, timeout_seconds=settings.client_timeout_seconds) as client:
            response = client.get("/health")
        return response.is_success, f"HTTP {response.status_code} from {target}"
    except httpx.HTTPError as exc:
        return False, f"{target}: {exc}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="DogService Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Upstream base URL", "OK", settings.upstream_base_url)
    table.add_row("Upstream timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Listen address", "OK", f"{settings.server_host}:{settings.server_port}")
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity
    ok_upstream, detail_upstream = asyncio.run(_check_upstream(settings))
    table.add_row("Upstream API", "OK" if ok_upstream else "FAIL", detail_upstream)

    ok_server, detail_server = _check_server(settings)
    table.add_row("RPC server", "OK" if ok_server else "OPTIONAL", detail_server)

    _console.print(table)

    if not ok_upstream:
        _console.print(
            "\n[yellow]Note:[/yellow] every RPC call will fail with INTERNAL until the upstream API is reachable."
        )
