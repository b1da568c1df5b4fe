"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, coverage grids, and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from lettertrace.core import CoverageGrid
from lettertrace.domain import TracingLetter
from lettertrace.exceptions import CatalogError

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

CELL_ACTIVE = "■"
CELL_VALID = "□"
CELL_OUTSIDE = "·"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Lettertrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_letter_table(letters: Sequence[TracingLetter]) -> None:
    """Print a table of catalog letters.

    Args:
        letters: Letters to list, in catalog order
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Letter")
    table.add_column("Strokes", justify="right")
    table.add_column("Sound")
    table.add_column("Word")
    table.add_column("Reward")

    for letter in letters:
        table.add_row(
            letter.char,
            str(letter.stroke_count),
            letter.sound,
            letter.word,
            letter.emoji,
        )

    console.print(table)
    console.print(f"\n  {len(letters)} letters")


def print_letter_info(letter: TracingLetter) -> None:
    """Print the letter a session is tracing.

    Args:
        letter: Letter being traced
    """
    console.print(f"  [bold]{letter.char}[/bold] {SYM_DOT} {letter.cue}")
    stroke_ids = f" {SYM_DOT} ".join(stroke.id for stroke in letter.strokes)
    console.print(f"  {letter.stroke_count} strokes: {stroke_ids}")
    console.print(f"  {letter.prompt}")


def print_coverage_grid(grid: CoverageGrid) -> None:
    """Print a coverage grid as text, one character per cell.

    Args:
        grid: Grid to render
    """
    for row in range(grid.resolution):
        line = Text("    ")
        for col in range(grid.resolution):
            if grid.is_activated(row, col):
                line.append(CELL_ACTIVE, style="green")
            elif grid.is_valid(row, col):
                line.append(CELL_VALID, style="yellow")
            else:
                line.append(CELL_OUTSIDE, style="dim")
            line.append(" ")
        console.print(line)


def print_stroke_complete(index: int, stroke_id: str, coverage: float, samples: int) -> None:
    """Print a stroke completion line.

    Args:
        index: Stroke index within the letter
        stroke_id: Stroke identifier
        coverage: Coverage ratio when the stroke completed
        samples: Touch samples it took
    """
    console.print(
        f"  [green]{SYM_OK}[/green] stroke {index + 1} [bold]{stroke_id}[/bold] "
        f"{SYM_DOT} {coverage:.0%} covered {SYM_DOT} {samples} samples"
    )


def print_letter_complete(letter: TracingLetter, samples: int, accepted: int) -> None:
    """Print the reward once the letter is traced.

    Args:
        letter: Letter that was traced
        samples: Total touch samples received
        accepted: Samples that fell inside a live zone
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]  {letter.emoji}  {letter.word}!")
    console.print(f"  {letter.praise}")
    console.print(f"  {samples} samples {SYM_DOT} {accepted} accepted")


def print_validation_result(letter_count: int, errors: Sequence[CatalogError]) -> None:
    """Print the outcome of catalog validation.

    Args:
        letter_count: Number of letters checked
        errors: Defects found
    """
    if not errors:
        console.print(f"\n[bold green]{SYM_OK} Valid[/bold green] {SYM_DOT} {letter_count} letters")
        return

    console.print(f"\n[bold red]{SYM_ERR} {len(errors)} defects[/bold red] in {letter_count} letters")
    for error in errors:
        console.print(f"  {escape(str(error))}")


def print_success(message: str, details: str | None = None) -> None:
    """Print success message.

    Args:
        message: Main success message
        details: Optional detail line
    """
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")
    if details:
        console.print(f"  {escape(details)}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
