"""DogService CLI.

Commands:
- `serve`: run the RPC server (FastAPI under uvicorn).
- `client ...`: call a running server.
- `doctor run`: configuration and connectivity checks.
"""

from typing import Optional

import typer
import uvicorn
from rich.console import Console

from api.app import create_app
from cli import client, doctor
from cli.ui_components import print_banner
from core.config import AppSettings
from core.logging_config import setup_logging

app = typer.Typer(no_args_is_help=True, help="Typed RPC proxy for the dog.ceo image API.")
app.add_typer(client.app, name="client")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address. Defaults to DOGAPI_SERVER_HOST."),
    port: Optional[int] = typer.Option(
        None, "--port", min=1, max=65535, help="The server port. Defaults to DOGAPI_SERVER_PORT."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING..."),
) -> None:
    """Start the DogService server."""

    overrides = {"server_host": host, "server_port": port, "log_level": log_level}
    settings = AppSettings().model_copy(update={k: v for k, v in overrides.items() if v is not None})
    setup_logging(settings.log_level)

    print_banner(_console)
    _console.print(f"Server listening at [cyan]{settings.server_host}:{settings.server_port}[/cyan]")
    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
