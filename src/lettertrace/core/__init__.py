"""Core tracing algorithms for lettertrace.

This module contains the tracing engine:

- Geometry operations (point-in-polygon, signed area, zone construction)
- Coverage tracking (per-stroke discretized grid)
- Stroke activation (sequencing strokes through to completion)
- Sweep simulation (synthetic pointer input for a stroke)

Everything here is synchronous and single-threaded: each touch sample is
fully applied before handle_touch returns.

Key functions:
- point_in_polygon: Test if point is inside polygon
- signed_area: Calculate polygon area using shoelace formula
- straight_zone: Rectangular band around a segment
- arc_zone: Annular-sector band around an arc
- sweep_points: Ordered touch samples covering a stroke

Key classes:
- CoverageGrid: Coverage state of one stroke
- ActivationController: Stroke sequencing state machine
"""

from lettertrace.core.activation import (
    ActivationController,
    ActivationPhase,
    ActivationSnapshot,
    ActivationState,
    StrokeCompleteCallback,
    TouchOutcome,
)
from lettertrace.core.coverage import CoverageGrid
from lettertrace.core.geometry import (
    arc_zone,
    perpendicular_direction,
    point_in_polygon,
    signed_area,
    straight_zone,
)
from lettertrace.core.sweep import sweep_points

__all__ = [
    # Activation classes
    "ActivationController",
    "ActivationPhase",
    "ActivationSnapshot",
    "ActivationState",
    "StrokeCompleteCallback",
    # Coverage classes
    "CoverageGrid",
    "TouchOutcome",
    # Geometry functions
    "arc_zone",
    "perpendicular_direction",
    "point_in_polygon",
    "signed_area",
    "straight_zone",
    "sweep_points",
]
