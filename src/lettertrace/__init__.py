"""Lettertrace - Stroke-activation letter tracing engine.

Lettertrace lets a child "trace" a letter by sweeping a finger or pointer
across wide, forgiving zones. Each stroke of the letter is revealed once
enough of its zone has been swept, in strict sequence, with no handwriting
recognition and no failure state.

Example:
    $ lettertrace trace A

This runs a simulated tracing session for the letter A and prints the
coverage of each stroke as it is revealed.
"""

__version__ = "0.1.0"
__author__ = "Lettertrace Developers"

__all__ = ["__author__", "__version__"]
