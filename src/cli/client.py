"""Client commands: call a running DogService server."""

from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console

from adapters.rpc_client import DogServiceClient
from cli.ui_components import (
    build_breeds_table,
    build_images_table,
    build_names_table,
    print_banner,
    print_remote_error,
)
from core.config import AppSettings
from core.errors import RemoteCallError

app = typer.Typer(no_args_is_help=True, help="Call a running DogService server.")

_console = Console()

T = TypeVar("T")


@app.callback()
def main(
    ctx: typer.Context,
    addr: Optional[str] = typer.Option(
        None, "--addr", help="Server address (host:port or URL). Defaults to DOGAPI_CLIENT_TARGET."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.1, help="Per-call deadline in seconds, propagated to the server."
    ),
) -> None:
    ctx.obj = {"addr": addr, "timeout": timeout}


def _connect(ctx: typer.Context) -> DogServiceClient:
    options = ctx.obj or {}
    return DogServiceClient(
        options.get("addr"),
        settings=AppSettings(),
        timeout_seconds=options.get("timeout"),
    )


def _call(ctx: typer.Context, call: Callable[[DogServiceClient], T]) -> T:
    with _connect(ctx) as client:
        try:
            return call(client)
        except RemoteCallError as exc:
            print_remote_error(_console, exc)
            raise typer.Exit(code=1) from exc


@app.command()
def demo(ctx: typer.Context) -> None:
    """Random image, all breeds, three husky images, one cocker spaniel."""

    print_banner(_console, subtitle="client demo")
    with _connect(ctx) as client:
        try:
            _console.print("Getting a random dog image...")
            image = client.get_random_image()
            _console.print(f"Random image URL: [magenta]{image.image_url}[/magenta]\n")

            _console.print("Listing all breeds...")
            catalog = client.list_all_breeds()
            _console.print(build_breeds_table(catalog))

            _console.print("Getting 3 random husky images...")
            huskies = client.get_random_breed_images("husky", 3)
            _console.print(build_images_table("husky", huskies.image_urls))

            _console.print("Getting a random cocker spaniel image...")
            cocker = client.get_random_sub_breed_image("spaniel", "cocker")
            _console.print(f"Cocker Spaniel image: [magenta]{cocker.image_url}[/magenta]")
        except RemoteCallError as exc:
            print_remote_error(_console, exc)
            raise typer.Exit(code=1) from exc


@app.command("all-breeds")
def all_breeds(ctx: typer.Context) -> None:
    """List every breed with its sub-breeds."""

    response = _call(ctx, lambda client: client.list_all_breeds())
    _console.print(build_breeds_table(response))


@app.command()
def breeds(ctx: typer.Context) -> None:
    """List breed names."""

    response = _call(ctx, lambda client: client.list_breeds())
    _console.print(build_names_table("Breeds", response.breeds))


@app.command("sub-breeds")
def sub_breeds(ctx: typer.Context, breed: str = typer.Argument(..., help="Breed name.")) -> None:
    """List the sub-breeds of BREED."""

    response = _call(ctx, lambda client: client.list_sub_breeds(breed))
    _console.print(build_names_table(f"{breed} sub-breeds", response.sub_breeds))


@app.command("random-image")
def random_image(ctx: typer.Context) -> None:
    response = _call(ctx, lambda client: client.get_random_image())
    _console.print(response.image_url)


@app.command("random-images")
def random_images(ctx: typer.Context, count: int = typer.Argument(..., help="1..50")) -> None:
    response = _call(ctx, lambda client: client.get_random_images(count))
    _console.print(build_images_table("Random images", response.image_urls))


@app.command("breed-images")
def breed_images(ctx: typer.Context, breed: str = typer.Argument(...)) -> None:
    """Every image of BREED."""

    response = _call(ctx, lambda client: client.get_breed_images(breed))
    _console.print(build_images_table(breed, response.image_urls))


@app.command("random-breed-image")
def random_breed_image(ctx: typer.Context, breed: str = typer.Argument(...)) -> None:
    response = _call(ctx, lambda client: client.get_random_breed_image(breed))
    _console.print(response.image_url)


@app.command("random-breed-images")
def random_breed_images(
    ctx: typer.Context,
    breed: str = typer.Argument(...),
    count: int = typer.Argument(..., help="1..50"),
) -> None:
    response = _call(ctx, lambda client: client.get_random_breed_images(breed, count))
    _console.print(build_images_table(breed, response.image_urls))


@app.command("sub-breed-images")
def sub_breed_images(
    ctx: typer.Context,
    breed: str = typer.Argument(...),
    sub_breed: str = typer.Argument(...),
) -> None:
    """Every image of SUB_BREED within BREED."""

    response = _call(ctx, lambda client: client.get_sub_breed_images(breed, sub_breed))
    _console.print(build_images_table(f"{sub_breed} {breed}", response.image_urls))


@app.command("random-sub-breed-image")
def random_sub_breed_image(
    ctx: typer.Context,
    breed: str = typer.Argument(...),
    sub_breed: str = typer.Argument(...),
) -> None:
    response = _call(ctx, lambda client: client.get_random_sub_breed_image(breed, sub_breed))
    _console.print(response.image_url)
