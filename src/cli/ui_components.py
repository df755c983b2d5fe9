"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables/panels are reused by the client and doctor commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ListAllBreedsResponse
from core.errors import RemoteCallError


def print_banner(console: Console, *, subtitle: str = "Typed RPC proxy for dog.ceo") -> None:
    """Print the welcome banner (server start, demo run)."""

    title = Text("DogService", style="bold cyan")
    body = Align.center(Text.assemble(title, "\n", Text(subtitle, style="dim")), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_breeds_table(response: ListAllBreedsResponse) -> Table:
    """Breeds sorted by name, one row each, sub-breeds comma separated."""

    table = Table(title=f"Breeds ({len(response.breeds)})")
    table.add_column("Breed", style="cyan", no_wrap=True)
    table.add_column("Sub-breeds", style="white")
    for breed in sorted(response.breeds):
        table.add_row(breed, ", ".join(response.breeds[breed].sub_breeds))
    return table


def build_names_table(title: str, names: list[str]) -> Table:
    table = Table(title=f"{title} ({len(names)})")
    table.add_column("Name", style="cyan")
    for name in names:
        table.add_row(name)
    return table


def build_images_table(title: str, urls: list[str]) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Image URL", style="magenta")
    for index, url in enumerate(urls, start=1):
        table.add_row(str(index), url)
    return table


def print_remote_error(console: Console, error: RemoteCallError) -> None:
    console.print(f"[red]{error.code}[/red] {error.message}")
    if error.detail:
        console.print(f"[dim]{error.detail}[/dim]")
