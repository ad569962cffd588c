"""CLI application entry point for calligraglyph.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from calligraglyph import __version__
from calligraglyph.cli.output import (
    console,
    print_error,
    print_glyph_info,
    print_header,
    print_step,
    print_success,
    print_violations,
    print_warning,
)
from calligraglyph.config import (
    AttributionConfig,
    ConverterSettings,
    GlyphConfig,
    LoggingConfig,
    MetricsConfig,
    NibConfig,
    TimingConfig,
)
from calligraglyph.core import GlyphConverter
from calligraglyph.exceptions import (
    CalligraGlyphError,
    InputError,
    OutputError,
    SchemaValidationError,
)

# Create the Typer app
app = typer.Typer(
    name="calligraglyph",
    help="Convert an ordered SVG of per-stroke paths into calligraglyph JSON.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Calligraglyph[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Input SVG file, one <path> per stroke",
            show_default=False,
        ),
    ],
    out: Annotated[
        Path | None,
        typer.Option(
            "--out",
            "-o",
            help="Output JSON path (default: {input}.json)",
        ),
    ] = None,
    style: Annotated[str, typer.Option("--style", help="Style name (e.g., gothic)")] = "gothic",
    char: Annotated[str, typer.Option("--char", help="Character (e.g., C)")] = "C",
    case: Annotated[str, typer.Option("--case", help="Case: upper|lower")] = "upper",
    nib_width: Annotated[
        float, typer.Option("--nib-width", help="Nib width (logical units)")
    ] = 60.0,
    nib_angle: Annotated[
        float, typer.Option("--nib-angle", help="Nib angle in degrees")
    ] = 35.0,
    nib_type: Annotated[
        str | None,
        typer.Option("--nib-type", help="Nib type (broad|pointed|chisel|split)"),
    ] = None,
    baseline: Annotated[
        float, typer.Option("--baseline", help="Baseline Y in viewBox units")
    ] = 800.0,
    x_height: Annotated[float, typer.Option("--xheight", help="xHeight Y")] = 500.0,
    ascender: Annotated[float, typer.Option("--ascender", help="Ascender Y")] = 900.0,
    descender: Annotated[
        float, typer.Option("--descender", help="Descender depth")
    ] = 150.0,
    speed: Annotated[
        float, typer.Option("--speed", help="ms per unit length multiplier")
    ] = 1.2,
    min_dur: Annotated[
        int, typer.Option("--min-dur", help="Minimum per-stroke duration (ms)")
    ] = 280,
    max_dur: Annotated[
        int, typer.Option("--max-dur", help="Maximum per-stroke duration (ms)")
    ] = 1600,
    delay: Annotated[int, typer.Option("--delay", help="Inter-stroke delay (ms)")] = 60,
    alt: Annotated[
        list[str] | None,
        typer.Option("--alt", help="Alternate variant id (repeatable)"),
    ] = None,
    license_name: Annotated[
        str | None, typer.Option("--license", help="License of the source drawing")
    ] = None,
    author: Annotated[
        str | None, typer.Option("--author", help="Author of the source drawing")
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert an SVG with one <path> per stroke into a calligraglyph/v1 record.

    Stroke order comes from data-stroke-order attributes, numeric prefixes on
    ids or labels (e.g. "01_stem"), or document order when neither is present.

    Example:
        calligraglyph C.svg --style gothic --char C

    This will create C.json with per-stroke paths, draw order and timing.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG file.",
        )
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    try:
        settings = ConverterSettings(
            glyph=GlyphConfig(style=style, char=char, case=case, alternates=alt or []),
            nib=NibConfig(width=nib_width, angle_deg=nib_angle, type=nib_type),
            metrics=MetricsConfig(
                baseline=baseline,
                x_height=x_height,
                ascender=ascender,
                descender=descender,
            ),
            timing=TimingConfig(
                speed_factor=speed,
                min_duration_ms=min_dur,
                max_duration_ms=max_dur,
                delay_ms=delay,
            ),
            attribution=AttributionConfig(license=license_name, author=author),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else None,
            ),
        )
    except ValidationError as e:
        print_error("Invalid options")
        for detail in e.errors():
            field = ".".join(str(part) for part in detail["loc"])
            print_error(f"{field}: {detail['msg']}" if field else detail["msg"])
        raise typer.Exit(code=1) from None

    # Print header
    if not quiet:
        print_header(__version__)
        print_step("Converting drawing")

    try:
        converter = GlyphConverter(settings)
        result = converter.convert(input_svg, out)
    except InputError as e:
        print_error(f"Could not read drawing: {e.reason}", details=e.path)
        raise typer.Exit(code=1) from None
    except SchemaValidationError as e:
        print_error(str(e))
        print_violations(e.violations)
        raise typer.Exit(code=1) from None
    except OutputError as e:
        print_error(f"Could not write glyph: {e.reason}", details=e.path)
        raise typer.Exit(code=1) from None
    except CalligraGlyphError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1) from None

    stats = result.stats
    if quiet:
        return

    if verbose:
        print_glyph_info(
            result.glyph.id,
            stats.stroke_count,
            stats.ordered_count,
            stats.used_document_order,
        )

    for warning in stats.warnings:
        print_warning(warning)

    print_success(
        output_path=str(result.output_path),
        strokes=stats.stroke_count,
        total_time_s=stats.duration_seconds,
        warnings=len(stats.warnings),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
