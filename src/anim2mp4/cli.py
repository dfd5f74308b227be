"""CLI entry point for anim2mp4.

Usage:
    anim2mp4 -i anim.webp                        # auto: direct, then extraction
    anim2mp4 -i anim.webp -o out.mp4 -fps 15 -b 5M
    anim2mp4 -method extract -i anim.webp -v     # frame extraction only, live tool output
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from anim2mp4.core.contracts import ConversionMethod, ConversionRequest
from anim2mp4.core.logging import setup_logging
from anim2mp4.core.preflight import check_dependencies
from anim2mp4.core.settings import load_settings
from anim2mp4.core.strategy import run_conversion

app = typer.Typer(name="anim2mp4", help="Convert animated images (WebP, GIF) to MP4", add_completion=False)
console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"Error: {message}", style="red", markup=False, soft_wrap=True)
    raise typer.Exit(1)


@app.command()
def convert(
    ctx: typer.Context,
    input_path: Path = typer.Option(None, "-i", "--input", help="Input animated image file (required)"),
    output_path: Path = typer.Option(
        None, "-o", "--output", help="Output MP4 file (defaults to input name with .mp4)"
    ),
    fps: int = typer.Option(None, "-fps", "--fps", min=1, help="Frame rate for output video [default: 30]"),
    bitrate: str = typer.Option(None, "-b", "--bitrate", help="Video bitrate, e.g. 2M, 5M [default: 2M]"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
    method: ConversionMethod = typer.Option(ConversionMethod.AUTO, "-method", "--method", help="Conversion method"),
    config: Path = typer.Option(None, "-c", "--config", help="YAML settings file"),
) -> None:
    """Convert an animated image into an MP4 video."""
    try:
        settings = load_settings(config)
    except (OSError, yaml.YAMLError, ValidationError) as err:
        _fail(f"invalid settings file {config}: {err}")

    setup_logging("INFO" if verbose else settings.log_level)

    report = check_dependencies(settings.tools)
    if not report.ok:
        _fail(f"{report.error}\nPlease install {report.transcoder} first.")

    if input_path is None:
        typer.echo(f"Usage: {ctx.command_path} -i input.webp [-o output.mp4] [-fps 30] [-b 2M] [-v]", err=True)
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(1)

    try:
        request = ConversionRequest.for_input(
            input_path,
            output_path,
            fps=fps if fps is not None else settings.encode.fps,
            bitrate=bitrate if bitrate is not None else settings.encode.bitrate,
            verbose=verbose,
            method=method,
        )
    except ValidationError as err:
        _fail(f"invalid arguments: {err}")

    outcome = run_conversion(request, settings)
    if not outcome.succeeded:
        _fail(str(outcome.error))

    console.print(
        f"Successfully converted {request.input_path} to {request.output_path}",
        style="green",
        markup=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    app()
