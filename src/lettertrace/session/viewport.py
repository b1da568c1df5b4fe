"""Conversion between render pixels and normalized letter space."""

from dataclasses import dataclass

from lettertrace.domain import Point

NORMALIZED_SIZE = 100.0


@dataclass(frozen=True)
class Viewport:
    """A render area the 0-100 letter square is fitted into.

    The square is scaled uniformly to the shorter side and centered along
    the longer one, preserving aspect ratio.

    Attributes:
        width: Render area width in pixels
        height: Render area height in pixels
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must have positive size, got {self.width}x{self.height}")

    @property
    def scale(self) -> float:
        """Pixels per normalized unit."""
        return min(self.width, self.height) / NORMALIZED_SIZE

    @property
    def offset(self) -> tuple[float, float]:
        """Pixel offset of the letter square's top-left corner."""
        side = NORMALIZED_SIZE * self.scale
        return (self.width - side) / 2, (self.height - side) / 2

    def to_normalized(self, px: float, py: float) -> Point:
        """Convert a pixel position to normalized letter space.

        Positions outside the letter square map outside 0-100 and are not
        clamped.

        Args:
            px: X position in pixels, relative to the render area
            py: Y position in pixels, relative to the render area

        Returns:
            Point in normalized space
        """
        ox, oy = self.offset
        return Point((px - ox) / self.scale, (py - oy) / self.scale)

    def to_pixels(self, point: Point) -> tuple[float, float]:
        """Convert a normalized point to a pixel position.

        Args:
            point: Point in normalized space

        Returns:
            Tuple of (px, py)
        """
        ox, oy = self.offset
        return point.x * self.scale + ox, point.y * self.scale + oy
