"""Core geometric types for stroke zones.

This module defines the fundamental types a letter is authored with:
- Point: A 2D point in normalized letter space (0-100 on both axes)
- StrokeZone: One unit of tracing work within a letter
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in normalized letter space.

    Letter geometry is authored on a fixed 0-100 square so the same
    definition scales to any render size. Coordinates are not clamped;
    points outside the square simply fail every containment test.

    Attributes:
        x: X coordinate (0 = left edge, 100 = right edge)
        y: Y coordinate (0 = top edge, 100 = bottom edge)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True)
class StrokeZone:
    """One stroke of a letter: a wide polygon the user sweeps to reveal it.

    Only ``zone`` and ``completion_threshold`` are consulted by the coverage
    algorithm. ``display_path`` and ``start_indicator`` are presentational
    and are carried through untouched for the renderer.

    Attributes:
        id: Stable identifier, unique within its letter
        zone: Touch-acceptance polygon in normalized space (at least 3 points)
        display_path: SVG path data for the "reveal" visual
        start_indicator: Where the "begin here" affordance is drawn
        completion_threshold: Fraction of valid grid cells, in (0, 1], that
            must be activated before the stroke counts as traced
    """

    id: str
    zone: tuple[Point, ...]
    display_path: str
    start_indicator: Point
    completion_threshold: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, preserving polygon point order.

        Returns:
            Dictionary representation of the stroke
        """
        return {
            "id": self.id,
            "zone": [p.to_dict() for p in self.zone],
            "display_path": self.display_path,
            "start_indicator": self.start_indicator.to_dict(),
            "completion_threshold": self.completion_threshold,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeZone":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a stroke

        Returns:
            StrokeZone instance
        """
        return cls(
            id=str(data["id"]),
            zone=tuple(Point.from_dict(p) for p in data["zone"]),
            display_path=data.get("display_path", ""),
            start_indicator=Point.from_dict(data["start_indicator"]),
            completion_threshold=float(data["completion_threshold"]),
        )
