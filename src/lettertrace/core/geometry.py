"""Geometric operations for stroke zones.

This module provides the mathematical utilities the tracing engine needs:
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Perpendicular vector computation
- Zone construction from a straight segment or an arc

Zone constructors are authoring-time helpers used to build the letter
catalog; only point_in_polygon runs at touch time.

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from lettertrace.domain import Point
from lettertrace.exceptions import ZoneError

DEFAULT_ARC_SAMPLES = 8


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction in a y-up frame:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Letter space is y-down, so on screen the visual sense is mirrored.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> signed_area(square)
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts crossings
    with polygon edges. Odd number of crossings = inside, even = outside.

    An edge only counts when exactly one endpoint lies strictly above the
    ray, so a shared vertex is never counted twice. The same test keeps
    horizontal edges (yi == yj) out of the intersection formula, so the
    division below never sees a zero denominator.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise. Polygons with
        fewer than 3 points contain nothing.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside



def perpendicular_direction(p1: Point, p2: Point) -> tuple[float, float]:
    """Calculate the unit perpendicular vector to a line from p1 to p2.

    The perpendicular is the direction vector (p2 - p1) rotated by 90
    degrees: (dx, dy) -> (-dy, dx).

    Args:
        p1: Start point of line
        p2: End point of line

    Returns:
        Tuple (px, py) representing the unit perpendicular vector

    Raises:
        ZoneError: If p1 and p2 are the same point (zero-length line)

    Examples:
        >>> perpendicular_direction(Point(0.0, 0.0), Point(1.0, 0.0))
        (-0.0, 1.0)
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y

    length = math.hypot(dx, dy)
    if length < 1e-10:
        raise ZoneError("Cannot calculate perpendicular of zero-length line")

    dx /= length
    dy /= length

    return -dy, dx


def straight_zone(start: Point, end: Point, width: float) -> tuple[Point, ...]:
    """Build a rectangular zone around a straight stroke.

    The rectangle is centered on the segment from start to end, with
    ``width / 2`` on each side of it, so the band is ``width`` wide in
    total. Corners are returned in a consistent order: start and end offset
    to one side, then end and start offset to the other.

    Args:
        start: Where the stroke begins
        end: Where the stroke ends
        width: Total width of the band

    Returns:
        Tuple of 4 points forming the rectangle

    Raises:
        ZoneError: If the segment has zero length or width is not positive
    """
    if width <= 0:
        raise ZoneError(f"Zone width must be positive, got {width}")

    px, py = perpendicular_direction(start, end)
    half = width / 2
    ox, oy = px * half, py * half

    return (
        Point(start.x + ox, start.y + oy),
        Point(end.x + ox, end.y + oy),
        Point(end.x - ox, end.y - oy),
        Point(start.x - ox, start.y - oy),
    )


def arc_zone(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    width: float,
    samples: int = DEFAULT_ARC_SAMPLES,
) -> tuple[Point, ...]:
    """Build an annular-sector zone around a curved stroke.

    Samples the outer arc forward from start_angle to end_angle, then the
    inner arc backward, each with ``samples`` equal angular steps. Angles
    are in radians; with y pointing down, increasing angles sweep clockwise
    on screen.

    A full turn (span of 2*pi) produces a ring whose seam is two coincident
    edges; the seam cancels out in the ray casting test.

    Args:
        center: Center of the arc
        radius: Radius of the stroke's centerline
        start_angle: Angle where the stroke begins
        end_angle: Angle where the stroke ends
        width: Total width of the band
        samples: Angular steps per arc (8 gives a visually smooth band)

    Returns:
        Tuple of 2 * (samples + 1) points forming the band

    Raises:
        ZoneError: If the span is empty, width or radius is not positive,
            or samples is below 2
    """
    if samples < 2:
        raise ZoneError(f"Arc zone needs at least 2 samples, got {samples}")
    if width <= 0:
        raise ZoneError(f"Zone width must be positive, got {width}")
    if radius <= 0:
        raise ZoneError(f"Arc radius must be positive, got {radius}")
    if math.isclose(start_angle, end_angle):
        raise ZoneError("Arc zone has an empty angular span")

    inner_radius = max(radius - width / 2, 0.0)
    outer_radius = radius + width / 2
    span = end_angle - start_angle
    angles = [start_angle + span * (i / samples) for i in range(samples + 1)]

    outer = [
        Point(center.x + outer_radius * math.cos(t), center.y + outer_radius * math.sin(t))
        for t in angles
    ]
    inner = [
        Point(center.x + inner_radius * math.cos(t), center.y + inner_radius * math.sin(t))
        for t in reversed(angles)
    ]

    return tuple(outer + inner)
