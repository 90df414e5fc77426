"""Capsule composer CLI application.

This module provides the command-line interface for composing two-game
capsule images, previewing them, probing hit-test targets and managing
configuration files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from capsulegen.constants import OUTPUT_FORMATS
from capsulegen.controller import TEST_CONFIG_YAML, CapsuleGenerator
from capsulegen.errors import CapsuleGenError
from capsulegen.models.geometry import Point
from capsulegen.settings.user import UserSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Two-game capsule composer", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "capsulegen.cli"

# Options for the main commands
CONFIG_OPTION = typer.Option(..., "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Output PNG path")
OPEN_OPTION = typer.Option(False, "--open", help="Open the preview in a browser")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")

__all__ = ["TEST_CONFIG_YAML", "CapsuleGenerator", "app"]


def _load_generator(config: Path, debug: bool) -> CapsuleGenerator:
    try:
        generator = CapsuleGenerator(config, debug=debug)
        generator.load_rasters()
    except (RuntimeError, FileNotFoundError, CapsuleGenError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    return generator


def _echo_boxes(generator: CapsuleGenerator) -> None:
    for entity, box in sorted(generator.bounding_boxes.items(), key=lambda kv: kv[0].value):
        typer.echo(
            f"{entity.value} logo: x={box.x:.1f} y={box.y:.1f} "
            f"w={box.width:.1f} h={box.height:.1f}"
        )


@app.command()
def render(
    config: Path = CONFIG_OPTION,
    output: Path | None = OUTPUT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Compose the capsule and write it as PNG."""
    generator = _load_generator(config, debug)
    path = generator.save(output)
    typer.echo(f"Wrote {path}")
    _echo_boxes(generator)


@app.command()
def preview(
    config: Path = CONFIG_OPTION,
    open_browser: bool = OPEN_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Write the PNG plus an HTML preview page."""
    generator = _load_generator(config, debug)
    html_path = generator.write_preview(open_browser=open_browser)
    typer.echo(f"Preview written to {html_path}")


@app.command()
def formats() -> None:
    """List the output presets."""
    for fmt in OUTPUT_FORMATS.values():
        typer.echo(f"{fmt.key:<16} {fmt.width}x{fmt.height}  {fmt.label}")


@app.command("hit-test")
def hit_test_command(
    x: float = typer.Argument(..., help="X in frame pixels"),
    y: float = typer.Argument(..., help="Y in frame pixels"),
    config: Path = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show what a drag starting at (X, Y) would move."""
    generator = _load_generator(config, debug)
    generator.render()
    target = generator.target_at(Point(x, y))
    typer.echo(f"{target.mode.value} {target.entity.value}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "format": typer.prompt("Format", default="main-capsule"),
            "game1": {
                "name": typer.prompt("First game name"),
                "background": typer.prompt("First game background image"),
                "logo": typer.prompt("First game logo image"),
            },
            "game2": {
                "name": typer.prompt("Second game name"),
                "background": typer.prompt("Second game background image"),
                "logo": typer.prompt("Second game logo image"),
            },
            "split": {
                "style": typer.prompt("Split [horizontal|vertical|diagonal]", default="diagonal"),
            },
        }
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                loc = ".".join(str(part) for part in e["loc"])
                typer.secho(f"  • {loc} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(
        yaml.safe_dump(cfg.model_dump(mode="json"), sort_keys=False), encoding="utf-8"
    )
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
