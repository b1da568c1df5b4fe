"""Load-time validation of letter definitions.

Tracing has no user-facing failure mode, so every defect that could make a
stroke impossible to finish must be caught when a catalog is built or
loaded, never at touch time.
"""

from collections.abc import Iterable

from lettertrace.config import GridConfig
from lettertrace.core.coverage import CoverageGrid
from lettertrace.core.geometry import signed_area
from lettertrace.domain import StrokeZone, TracingLetter
from lettertrace.exceptions import CatalogError, CatalogValidationError


def validate_stroke(
    letter: str,
    stroke: StrokeZone,
    grid_config: GridConfig | None = None,
) -> None:
    """Check one stroke against the authoring invariants.

    Args:
        letter: Glyph of the owning letter (for error messages)
        stroke: Stroke to check
        grid_config: Grid the stroke will be tracked on (defaults if None)

    Raises:
        CatalogValidationError: If the zone has fewer than 3 points or no
            area, the threshold lies outside (0, 1], or no grid cell center
            falls inside the zone
    """
    if len(stroke.zone) < 3:
        raise CatalogValidationError(
            letter, f"zone has {len(stroke.zone)} points, needs at least 3", stroke.id
        )

    if abs(signed_area(stroke.zone)) < 1e-9:
        raise CatalogValidationError(letter, "zone has no area", stroke.id)

    threshold = stroke.completion_threshold
    if not 0.0 < threshold <= 1.0:
        raise CatalogValidationError(
            letter, f"completion threshold {threshold} is outside (0, 1]", stroke.id
        )

    grid = CoverageGrid(stroke, grid_config)
    if grid.valid_cells == 0:
        raise CatalogValidationError(
            letter,
            f"zone covers no cell centers on a {grid.resolution}x{grid.resolution} grid",
            stroke.id,
        )


def validate_letter(letter: TracingLetter, grid_config: GridConfig | None = None) -> None:
    """Check a letter and all of its strokes.

    Args:
        letter: Letter to check
        grid_config: Grid the strokes will be tracked on (defaults if None)

    Raises:
        CatalogValidationError: On the first defect found
    """
    if not letter.char:
        raise CatalogValidationError("?", "letter has no display glyph")

    if not letter.strokes:
        raise CatalogValidationError(letter.char, "letter has no strokes")

    seen: set[str] = set()
    for stroke in letter.strokes:
        if stroke.id in seen:
            raise CatalogValidationError(letter.char, "duplicate stroke id", stroke.id)
        seen.add(stroke.id)
        validate_stroke(letter.char, stroke, grid_config)


def find_catalog_errors(
    letters: Iterable[TracingLetter],
    grid_config: GridConfig | None = None,
) -> list[CatalogError]:
    """Validate every letter and collect all defects instead of stopping.

    Args:
        letters: Letters to check
        grid_config: Grid the strokes will be tracked on (defaults if None)

    Returns:
        One error per defective letter, plus one per repeated glyph
    """
    errors: list[CatalogError] = []
    seen: set[str] = set()

    for letter in letters:
        if letter.char in seen:
            errors.append(CatalogValidationError(letter.char, "glyph defined more than once"))
        seen.add(letter.char)
        try:
            validate_letter(letter, grid_config)
        except CatalogValidationError as e:
            errors.append(e)

    return errors


def validate_catalog(
    letters: Iterable[TracingLetter],
    grid_config: GridConfig | None = None,
) -> None:
    """Check a whole catalog.

    Args:
        letters: Letters to check
        grid_config: Grid the strokes will be tracked on (defaults if None)

    Raises:
        CatalogError: The first defect found
    """
    errors = find_catalog_errors(letters, grid_config)
    if errors:
        raise errors[0]
