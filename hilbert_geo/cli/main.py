"""
Main CLI entry point for Hilbert Geo.

Provides the `hgeo` command group for encoding, decoding and inspecting
Hilbert geohashes from the shell.
"""

import json
import logging
import sys
from typing import Any, Dict, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import settings
from ..shared import (
    decode_exactly,
    encode,
    get_cell_size_km,
    hilbert_curve,
    neighbors,
    rectangle,
)

console = Console()
logger = logging.getLogger(__name__)

DIRECTION_ORDER = [
    "north-west",
    "north",
    "north-east",
    "west",
    "east",
    "south-west",
    "south",
    "south-east",
]


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Setup logging with rich handler."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def fail(error: Exception) -> NoReturn:
    """Report an invalid input and exit with status 1."""
    logger.warning(f"Rejected input: {error}")
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


def print_json(data: Dict[str, Any]) -> None:
    click.echo(json.dumps(data, indent=2))


bits_per_char_option = click.option(
    "--bits-per-char",
    "-b",
    type=click.Choice(["2", "4", "6"]),
    default=str(settings.default_bits_per_char),
    show_default=True,
    help="Bits encoded by each character (alphabet of 4, 16 or 64)",
)


@click.group(invoke_without_command=True)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress all output except errors",
)
@click.option(
    "--version",
    is_flag=True,
    help="Show version and exit",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, version: bool) -> None:
    """
    Hilbert Geo - geohashes on a Hilbert space-filling curve.
    """
    if version:
        console.print(f"Hilbert Geo version {__version__}")
        sys.exit(0)

    setup_logging(verbose, quiet)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("encode")
@click.option("--lng", type=float, required=True, help="Longitude (-180 to 180)")
@click.option("--lat", type=float, required=True, help="Latitude (-90 to 90)")
@click.option(
    "--precision",
    "-p",
    type=int,
    default=settings.default_precision,
    show_default=True,
    help="Number of characters in the geohash",
)
@bits_per_char_option
def encode_cmd(lng: float, lat: float, precision: int, bits_per_char: str) -> None:
    """Encode a longitude/latitude pair."""
    try:
        code = encode(lng, lat, precision, int(bits_per_char))
    except ValueError as e:
        fail(e)

    logger.debug(f"Encoded ({lng}, {lat}) at precision {precision} -> {code}")
    click.echo(code)


@cli.command("decode")
@click.argument("code")
@bits_per_char_option
@click.option(
    "--exact",
    is_flag=True,
    help="Also show the error margins and cell size",
)
def decode_cmd(code: str, bits_per_char: str, exact: bool) -> None:
    """
    Decode a geohash to the center of its cell.

    CODE: Geohash to decode
    """
    bpc = int(bits_per_char)
    try:
        cell = decode_exactly(code, bpc)
    except ValueError as e:
        fail(e)

    table = Table(title=f"Geohash {code}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("lng", repr(cell.lng))
    table.add_row("lat", repr(cell.lat))

    if exact:
        width_km, height_km = get_cell_size_km(len(code), bpc)
        table.add_row("lng_err", repr(cell.lng_err))
        table.add_row("lat_err", repr(cell.lat_err))
        table.add_row("cell size", f"{width_km:.3f} x {height_km:.3f} km")

    console.print(table)


@cli.command("neighbors")
@click.argument("code")
@bits_per_char_option
def neighbors_cmd(code: str, bits_per_char: str) -> None:
    """
    Show the neighboring cells of a geohash.

    CODE: Geohash whose neighbors are wanted
    """
    try:
        found = neighbors(code, int(bits_per_char))
    except ValueError as e:
        fail(e)

    table = Table(title=f"Neighbors of {code}")
    table.add_column("Direction", style="cyan")
    table.add_column("Geohash", style="bold")
    for direction in DIRECTION_ORDER:
        if direction in found:
            table.add_row(direction, found[direction])

    console.print(table)


@cli.command("rectangle")
@click.argument("code")
@bits_per_char_option
def rectangle_cmd(code: str, bits_per_char: str) -> None:
    """
    Print the cell of a geohash as a GeoJSON Feature.

    CODE: Geohash to draw
    """
    try:
        feature = rectangle(code, int(bits_per_char))
    except ValueError as e:
        fail(e)

    print_json(feature)


@cli.command("curve")
@click.argument("precision", type=int)
@bits_per_char_option
def curve_cmd(precision: int, bits_per_char: str) -> None:
    """
    Print the Hilbert curve at PRECISION as a GeoJSON LineString.

    PRECISION: Geohash length whose cells the curve visits
    """
    try:
        feature = hilbert_curve(precision, int(bits_per_char))
    except ValueError as e:
        fail(e)

    print_json(feature)


@cli.command("serve")
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload for development",
)
def serve_cmd(host: str, port: int, reload: bool) -> None:
    """Launch the HTTP API."""
    import uvicorn

    console.print(f"\n[bold cyan]Hilbert Geo API[/bold cyan] [dim]v{__version__}[/dim]\n")
    console.print(f"Listening on http://{host}:{port}")

    uvicorn.run(
        "hilbert_geo.api.app:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    cli()
