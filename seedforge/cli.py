"""SeedForge command-line interface."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from seedforge.alerts import LoggingAlertSink
from seedforge.codec import decode_checked, encode, load_seed, save_seed
from seedforge.config import settings
from seedforge.normalize import SeedAlgorithm, SeedMaterial, generate_seed
from seedforge.sampling import SeedStream
from seedforge.utils.io import log_path, resolve_seed_path

app = typer.Typer(help="Derive, inspect, and replay testbench random seeds.")
console = Console()
logging.basicConfig(level=settings.log_level)


def _parse_material(material: str, integer: bool, vector: bool) -> SeedMaterial:
    if integer and vector:
        raise typer.BadParameter("Use either --integer or --vector, not both.")
    try:
        if integer:
            return int(material)
        if vector:
            values: List[int] = [int(part) for part in material.split(",") if part.strip()]
            return values
    except ValueError as exc:
        raise typer.BadParameter(f"Not an integer seed: {material!r}") from exc
    return material


@app.command()
def generate(
    material: str = typer.Argument(
        ..., help='Seed material, e.g. an instance path. Pass negative integers after "--".'
    ),
    integer: bool = typer.Option(False, "--integer", help="Treat material as a single integer."),
    vector: bool = typer.Option(False, "--vector", help="Treat material as comma-separated integers."),
    legacy: Optional[bool] = typer.Option(None, "--legacy/--current", help="Select the seed algorithm."),
    out: Optional[Path] = typer.Option(None, "--out", help="Write the seed to this file."),
    name: Optional[str] = typer.Option(None, "--name", help="Write the seed under the seed directory."),
) -> None:
    """Normalize seed material and print the encoded seed.

    Negative integers look like options, so separate them with ``--``:
    ``seedforge generate --integer -- -5``.
    """
    if legacy is None:
        algorithm = SeedAlgorithm(settings.algorithm)
    else:
        algorithm = SeedAlgorithm.LEGACY if legacy else SeedAlgorithm.CURRENT

    sink = LoggingAlertSink(stop_on_failure=settings.stop_on_failure)
    seed = generate_seed(_parse_material(material, integer, vector), algorithm=algorithm, alert=sink)
    if sink.failures:
        console.print("[yellow]No seed material supplied; using fallback seed[/]")
    typer.echo(encode(seed))

    targets = [out] if out is not None else []
    if name:
        targets.append(resolve_seed_path(name))
    for target in targets:
        log_path(save_seed(target, seed))


@app.command()
def draw(
    seed: str = typer.Argument(..., help='Encoded seed, e.g. "1 2".'),
    count: int = typer.Option(1, min=0, help="Number of uniform draws."),
) -> None:
    """Draw uniform values from an encoded seed and print the final state."""
    state, good = decode_checked(seed)
    if not good or not state.is_valid():
        console.print(f"[bold red]Invalid seed:[/] {seed!r}")
        raise typer.Exit(code=1)

    stream = SeedStream(state)
    for value in stream.uniform_array(count):
        typer.echo(f"{value:.10f}")
    console.print(f"[cyan]Final seed:[/] {stream.to_string()}")


@app.command()
def check(path: Path = typer.Argument(..., exists=True, readable=True, help="Saved seed file.")) -> None:
    """Verify that a saved seed file holds a usable seed."""
    sink = LoggingAlertSink()
    try:
        state = load_seed(path, alert=sink)
    except UnicodeDecodeError:
        console.print(f"[bold red]Malformed seed file:[/] {path} is not UTF-8 text")
        raise typer.Exit(code=1)
    if sink.failures:
        console.print(f"[bold red]Malformed seed file:[/] {path}")
        raise typer.Exit(code=1)
    if not state.is_valid():
        console.print(f"[bold red]Seed out of range:[/] {encode(state)}")
        raise typer.Exit(code=2)
    console.print(f"[bold green]OK[/] {encode(state)}")


def main() -> None:  # pragma: no cover - CLI entrypoint
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
