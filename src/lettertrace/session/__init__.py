"""Tracing session host for lettertrace.

A host chooses the letter, converts raw pointer positions into the
letter's normalized space, forwards them to the engine, and reacts to
completion. This module provides a ready-made host for embedding.

Key classes:
- Viewport: Pixel <-> normalized conversion for a render area
- TracingSession: One letter being traced, with a completion callback
"""

from lettertrace.session.host import CompletionCallback, TracingSession
from lettertrace.session.viewport import Viewport

__all__ = [
    "CompletionCallback",
    "TracingSession",
    "Viewport",
]
