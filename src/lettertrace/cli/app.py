"""CLI application entry point for lettertrace.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from lettertrace import __version__
from lettertrace.catalog import TRACING_LETTERS, build_catalog, find_catalog_errors
from lettertrace.cli.output import (
    console,
    print_coverage_grid,
    print_error,
    print_header,
    print_letter_complete,
    print_letter_info,
    print_letter_table,
    print_step,
    print_stroke_complete,
    print_success,
    print_validation_result,
)
from lettertrace.config import (
    GridConfig,
    LoggingConfig,
    SessionConfig,
    TracingSettings,
    ZoneConfig,
)
from lettertrace.core import CoverageGrid, TouchOutcome, sweep_points
from lettertrace.domain import TracingLetter
from lettertrace.exceptions import CatalogLoadError, LetterTraceError
from lettertrace.io import CatalogReader, CatalogWriter
from lettertrace.session import TracingSession
from lettertrace.utils import SessionLogger, configure_console_logging, configure_logging

# Create the Typer app
app = typer.Typer(
    name="lettertrace",
    help="Trace letters by sweeping wide, forgiving stroke zones.",
    add_completion=False,
    no_args_is_help=True,
)

CatalogOption = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        "-c",
        help="JSON catalog file (default: built-in A-Z catalog)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Lettertrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Stroke-activation letter tracing engine."""


def _load_catalog(
    catalog: Path | None,
    grid_config: GridConfig | None = None,
    zone_config: ZoneConfig | None = None,
) -> tuple[TracingLetter, ...]:
    """Load a catalog file, or build the built-in catalog.

    Args:
        catalog: Path to a JSON catalog, or None for the built-in one
        grid_config: Grid the letters will be traced on
        zone_config: Zone settings for the built-in catalog

    Returns:
        Letters in catalog order
    """
    if catalog is None:
        return TRACING_LETTERS if zone_config is None else build_catalog(zone_config)

    try:
        with CatalogReader(catalog, grid_config) as reader:
            return reader.letters
    except FileNotFoundError as e:
        raise CatalogLoadError(str(catalog), "file not found") from e


@app.command("letters")
def list_letters(catalog: CatalogOption = None) -> None:
    """List the letters available for tracing."""
    try:
        letters = _load_catalog(catalog)
    except LetterTraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_letter_table(letters)


@app.command()
def validate(
    catalog: CatalogOption = None,
    resolution: Annotated[
        int,
        typer.Option(
            "--resolution",
            "-r",
            help="Coverage grid cells per side (2-100)",
            min=2,
            max=100,
        ),
    ] = 12,
) -> None:
    """Check every letter for authoring defects.

    Reports zones with fewer than 3 points or no area, thresholds outside
    (0, 1], zones covering no grid cells, and duplicate identifiers.
    """
    grid_config = GridConfig(resolution=resolution)

    if catalog is None:
        letters: tuple[TracingLetter, ...] = TRACING_LETTERS
    else:
        if not catalog.is_file():
            print_error(f"Catalog file not found: {catalog}")
            raise typer.Exit(code=1)
        try:
            reader = CatalogReader(catalog, grid_config)
            reader.load(validate=False)
            letters = reader.letters
        except LetterTraceError as e:
            print_error(str(e))
            raise typer.Exit(code=1)

    errors = find_catalog_errors(letters, grid_config)
    print_validation_result(len(letters), errors)
    if errors:
        raise typer.Exit(code=1)


@app.command()
def export(
    output: Annotated[
        Path,
        typer.Argument(
            help="Where to write the JSON catalog",
            show_default=False,
        ),
    ],
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing file",
        ),
    ] = False,
) -> None:
    """Write the built-in catalog to a JSON file."""
    if output.exists() and not force:
        print_error(
            f"Output file already exists: {output}",
            details="Use --force to overwrite it.",
        )
        raise typer.Exit(code=1)

    try:
        CatalogWriter(output).save(TRACING_LETTERS)
    except LetterTraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_success(f"Exported {len(TRACING_LETTERS)} letters", details=str(output))


@app.command()
def trace(
    letter: Annotated[
        str | None,
        typer.Argument(
            help="Letter to trace (default: random)",
            show_default=False,
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed for picking the letter",
        ),
    ] = None,
    catalog: CatalogOption = None,
    resolution: Annotated[
        int,
        typer.Option(
            "--resolution",
            "-r",
            help="Coverage grid cells per side (2-100)",
        ),
    ] = 12,
    radius: Annotated[
        float,
        typer.Option(
            "--radius",
            help="Cells activated around each touch sample",
        ),
    ] = 8.0,
    stroke_width: Annotated[
        float,
        typer.Option(
            "--stroke-width",
            help="Band width of the built-in letters' stroke zones",
        ),
    ] = 25.0,
    show_grid: Annotated[
        bool,
        typer.Option(
            "--grid/--no-grid",
            help="Show each stroke's coverage grid",
        ),
    ] = True,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Run a simulated tracing session.

    A synthetic finger sweeps each stroke from its start indicator until
    the stroke is revealed, then moves on to the next one.

    Example:
        lettertrace trace A --seed 7
    """
    try:
        settings = TracingSettings(
            grid=GridConfig(resolution=resolution, touch_radius=radius),
            zone=ZoneConfig(stroke_width=stroke_width),
            session=SessionConfig(seed=seed, letter=letter),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if settings.logging.log_file is not None:
        structured = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        session_logger = SessionLogger(structured)
    else:
        configure_console_logging(settings.logging.log_level)
        session_logger = SessionLogger()

    finished: list[tuple[int, CoverageGrid]] = []

    try:
        letters = _load_catalog(catalog, settings.grid, settings.zone)
        session = TracingSession.start(
            letters,
            settings=settings,
            logger=session_logger,
            on_stroke_complete=lambda index, grid: finished.append((index, grid)),
        )

        if not quiet:
            print_header(__version__)
            print_step("Tracing")
            print_letter_info(session.letter)
            console.print()

        while not session.is_complete:
            stroke = session.letter.strokes[session.controller.current_stroke_index]
            samples = 0
            for point in sweep_points(stroke, settings.grid):
                samples += 1
                outcome = session.handle_touch(point)
                if outcome in (TouchOutcome.STROKE_COMPLETE, TouchOutcome.LETTER_COMPLETE):
                    break
            else:
                raise LetterTraceError(f"Stroke '{stroke.id}' could not be completed")

            index, grid = finished[-1]
            if not quiet:
                print_stroke_complete(index, stroke.id, grid.coverage, samples)
                if show_grid:
                    print_coverage_grid(grid)

        stats = session.logger.stats
        if quiet:
            console.print(f"{session.letter.char} {session.letter.word}")
        else:
            print_letter_complete(session.letter, stats.samples_received, stats.samples_accepted)

    except LetterTraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
