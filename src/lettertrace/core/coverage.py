"""Per-stroke coverage tracking on a discretized grid.

A fixed N x N grid is laid over the whole 0-100 letter square. When a
stroke becomes active its grid classifies every cell once: a cell is
"valid" when its center falls inside the stroke's zone. Coverage is the
share of valid cells that touch samples have activated.

Each accepted touch sample stamps a disc of cells around the touched cell
rather than a single point, so sparse pointer-move events still produce
believable coverage and a child's sweep never has to be pixel accurate.
"""

import math
from collections.abc import Iterator

from lettertrace.config import GridConfig
from lettertrace.core.geometry import point_in_polygon
from lettertrace.domain import Point, StrokeZone


class CoverageGrid:
    """Coverage state for one stroke.

    The grid lives only as long as its stroke is active. Activation is
    monotonic: cells are never deactivated, and stamping an already
    activated cell leaves the counter unchanged.

    Example:
        grid = CoverageGrid(stroke)
        grid.stamp(Point(50.0, 20.0))
        if grid.is_satisfied:
            ...
    """

    def __init__(self, stroke: StrokeZone, config: GridConfig | None = None) -> None:
        """Classify every cell of the grid against the stroke's zone.

        Args:
            stroke: The stroke whose zone this grid tracks
            config: Grid resolution and touch radius (defaults if None)
        """
        self._stroke = stroke
        self._config = config or GridConfig()
        self._resolution = self._config.resolution
        self._cell_size = self._config.cell_size
        self._radius = self._config.touch_radius
        self._reach = int(math.floor(self._radius))

        self._valid = [
            [
                point_in_polygon(self.cell_center(row, col), stroke.zone)
                for col in range(self._resolution)
            ]
            for row in range(self._resolution)
        ]
        self._activated = [[False] * self._resolution for _ in range(self._resolution)]
        self._valid_count = sum(sum(1 for v in row if v) for row in self._valid)
        self._activated_count = 0

    @property
    def stroke(self) -> StrokeZone:
        """The stroke this grid tracks."""
        return self._stroke

    @property
    def resolution(self) -> int:
        """Cells per side."""
        return self._resolution

    @property
    def valid_cells(self) -> int:
        """Number of cells whose centers lie inside the zone."""
        return self._valid_count

    @property
    def activated_cells(self) -> int:
        """Number of valid cells activated so far."""
        return self._activated_count

    @property
    def coverage(self) -> float:
        """Share of valid cells activated, in [0, 1].

        A zone without valid cells reports 0.0; catalog validation rejects
        such zones before they reach a grid.
        """
        if self._valid_count == 0:
            return 0.0
        return self._activated_count / self._valid_count

    @property
    def is_satisfied(self) -> bool:
        """True once coverage has reached the stroke's completion threshold."""
        return self._valid_count > 0 and self.coverage >= self._stroke.completion_threshold

    def cell_center(self, row: int, col: int) -> Point:
        """Get the center of a cell in normalized space.

        Args:
            row: Cell row (0 = top)
            col: Cell column (0 = left)

        Returns:
            Center point of the cell
        """
        return Point((col + 0.5) * self._cell_size, (row + 0.5) * self._cell_size)

    def cell_of(self, point: Point) -> tuple[int, int]:
        """Get the (row, col) of the cell containing a point.

        Points outside the 0-100 square map to out-of-range indices.

        Args:
            point: Point in normalized space

        Returns:
            Tuple of (row, col)
        """
        return (
            int(math.floor(point.y / self._cell_size)),
            int(math.floor(point.x / self._cell_size)),
        )

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a cell index lies on the grid."""
        return 0 <= row < self._resolution and 0 <= col < self._resolution

    def is_valid(self, row: int, col: int) -> bool:
        """Check whether a cell's center lies inside the zone."""
        return self.in_bounds(row, col) and self._valid[row][col]

    def is_activated(self, row: int, col: int) -> bool:
        """Check whether a cell has been activated."""
        return self.in_bounds(row, col) and self._activated[row][col]

    def contains(self, point: Point) -> bool:
        """Check whether a touch sample falls inside the stroke's zone."""
        return point_in_polygon(point, self._stroke.zone)

    def iter_valid_cells(self) -> Iterator[tuple[int, int]]:
        """Iterate (row, col) of all valid cells in row-major order."""
        for row in range(self._resolution):
            for col in range(self._resolution):
                if self._valid[row][col]:
                    yield row, col

    def stamp(self, point: Point) -> int:
        """Activate valid cells around a touch sample.

        Samples outside the stroke's zone are ignored. Otherwise every valid,
        not yet activated cell within the touch radius of the touched cell
        (Euclidean distance in cells) is activated.

        Args:
            point: Touch sample in normalized space

        Returns:
            Number of cells newly activated by this sample
        """
        if not self.contains(point):
            return 0

        center_row, center_col = self.cell_of(point)
        newly_activated = 0

        for dy in range(-self._reach, self._reach + 1):
            row = center_row + dy
            if not 0 <= row < self._resolution:
                continue
            for dx in range(-self._reach, self._reach + 1):
                col = center_col + dx
                if not 0 <= col < self._resolution:
                    continue
                if self._activated[row][col] or not self._valid[row][col]:
                    continue
                if math.hypot(dx, dy) <= self._radius:
                    self._activated[row][col] = True
                    newly_activated += 1

        self._activated_count += newly_activated
        return newly_activated
