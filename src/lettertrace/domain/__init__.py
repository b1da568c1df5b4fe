"""Domain models for lettertrace.

This module contains the data model a tracing session consumes: points,
stroke zones and letters. All models are:

- Immutable (frozen dataclasses), so a catalog can be shared process-wide
- Serializable to plain dictionaries for the JSON catalog format
- Independent of any rendering or input toolkit

Key classes:
- Point: A 2D point in normalized 0-100 letter space
- StrokeZone: One stroke's touch polygon, reveal path and threshold
- TracingLetter: An ordered sequence of strokes plus display cues
"""

from lettertrace.domain.letter import TracingLetter
from lettertrace.domain.zone import Point, StrokeZone

__all__: list[str] = [
    "Point",
    "StrokeZone",
    "TracingLetter",
]
