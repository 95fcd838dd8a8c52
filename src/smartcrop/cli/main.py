"""smartcrop CLI - content-aware image cropping.

Command-line interface wiring image files to the crop engine.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from smartcrop import __version__
from smartcrop.config import settings
from smartcrop.exceptions import SmartCropError
from smartcrop.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="smartcrop",
    help="smartcrop: content-aware image cropping",
    add_completion=False,
)

SIZE_HELP = "Output size, e.g. 800x600. Use 'square' to crop to a square"


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"smartcrop {__version__}")


@app.command()
def crop(  # noqa: PLR0913
    input_path: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Image to crop",
        ),
    ],
    output_path: Annotated[
        Path, typer.Option("--output", "-o", help="Where to write the cropped image")
    ],
    size: Annotated[str, typer.Option("--size", "-s", help=SIZE_HELP)],
    quality: Annotated[
        int,
        typer.Option(
            "--quality", min=1, max=100, help="Encoder quality for lossy formats"
        ),
    ] = settings.JPEG_QUALITY,
    workers: Annotated[
        int,
        typer.Option("--workers", "-w", min=1, help="Threads used to score windows"),
    ] = settings.SCORING_WORKERS,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Crop an image to its most interesting region."""
    from smartcrop.cli.runners import run_crop  # noqa: PLC0415

    _configure_logging(verbose)
    logger = get_logger(__name__)

    logger.info("Starting crop", input=str(input_path), size=size)

    try:
        result = run_crop(
            input_path=input_path,
            output_path=output_path,
            size=size,
            quality=quality,
            workers=workers,
        )
    except SmartCropError as e:
        logger.debug("Crop failed", error=str(e))
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None
    except Exception as e:
        logger.exception("Crop failed")
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        region = result.region
        typer.echo(
            f"Cropped {region.width}x{region.height} at ({region.x}, {region.y}) "
            f"-> {result.output_path}"
        )


@app.command()
def region(
    input_path: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Image to inspect",
        ),
    ],
    size: Annotated[str, typer.Option("--size", "-s", help=SIZE_HELP)],
    workers: Annotated[
        int,
        typer.Option("--workers", "-w", min=1, help="Threads used to score windows"),
    ] = settings.SCORING_WORKERS,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Print the region a crop would keep, without writing an image."""
    from smartcrop.cli.runners import run_find_region  # noqa: PLC0415

    _configure_logging(verbose)
    logger = get_logger(__name__)

    try:
        result = run_find_region(input_path=input_path, size=size, workers=workers)
    except SmartCropError as e:
        logger.debug("Region lookup failed", error=str(e))
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None
    except Exception as e:
        logger.exception("Region lookup failed")
        _echo_error(e, json_output=json_output)
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        x, y, width, height = result.region.to_tuple()
        typer.echo(f"Region: x={x} y={y} width={width} height={height}")
        typer.echo(f"Entropy: {result.score:.4f} bits")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """smartcrop: content-aware image cropping."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


def _echo_error(error: Exception, *, json_output: bool) -> None:
    if json_output:
        typer.echo(json.dumps({"error": str(error)}))
    else:
        typer.echo(f"Error: {error}", err=True)


if __name__ == "__main__":  # pragma: no cover
    app()
