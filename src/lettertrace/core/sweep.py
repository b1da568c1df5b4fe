"""Simulated pointer input for a stroke.

Produces an ordered list of touch samples that sweeps a stroke's zone the
way a finger would: starting at the cell nearest the start indicator and
always moving on to the nearest cell not yet visited. Used to drive demo
sessions and to check that every authored stroke can be finished.
"""

import math

from lettertrace.config import GridConfig
from lettertrace.core.coverage import CoverageGrid
from lettertrace.domain import Point, StrokeZone


def sweep_points(stroke: StrokeZone, grid_config: GridConfig | None = None) -> list[Point]:
    """Order the valid cell centers of a stroke into a sweeping path.

    Every valid cell center is visited exactly once, so feeding all samples
    to a coverage grid activates every valid cell.

    Args:
        stroke: Stroke to sweep
        grid_config: Grid the stroke is tracked on (defaults if None)

    Returns:
        Touch samples in sweep order (empty if the zone covers no cells)
    """
    grid = CoverageGrid(stroke, grid_config)
    remaining = [grid.cell_center(row, col) for row, col in grid.iter_valid_cells()]

    path: list[Point] = []
    cursor = stroke.start_indicator

    while remaining:
        nearest = min(
            range(len(remaining)),
            key=lambda i: math.hypot(remaining[i].x - cursor.x, remaining[i].y - cursor.y),
        )
        cursor = remaining.pop(nearest)
        path.append(cursor)

    return path
