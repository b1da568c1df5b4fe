"""Letter catalog for lettertrace.

The catalog is static, read-only configuration: an ordered table of
letters, each an ordered list of strokes. This module provides lookup,
letter selection for a new session, and load-time validation.

Key functions:
- build_catalog: Build the A-Z table with custom zone settings
- get_letter: Look up a letter by its glyph
- choose_letter: Pick one letter uniformly at random
- validate_letter / validate_catalog: Reject authoring defects
"""

import random
from collections.abc import Sequence

from lettertrace.catalog.letters import STROKE_WIDTH, TRACING_LETTERS, build_catalog
from lettertrace.catalog.validation import (
    find_catalog_errors,
    validate_catalog,
    validate_letter,
    validate_stroke,
)
from lettertrace.domain import TracingLetter
from lettertrace.exceptions import CatalogError, LetterNotFoundError


def get_letter(char: str, catalog: Sequence[TracingLetter] = TRACING_LETTERS) -> TracingLetter:
    """Look up a letter by its glyph (case-insensitive).

    Args:
        char: Glyph to find
        catalog: Letters to search (built-in catalog by default)

    Returns:
        The matching letter

    Raises:
        LetterNotFoundError: If no letter has that glyph
    """
    wanted = char.upper()
    for letter in catalog:
        if letter.char.upper() == wanted:
            return letter
    raise LetterNotFoundError(char)


def choose_letter(
    catalog: Sequence[TracingLetter] = TRACING_LETTERS,
    rng: random.Random | None = None,
) -> TracingLetter:
    """Pick one whole letter uniformly at random.

    Args:
        catalog: Letters to choose from (built-in catalog by default)
        rng: Random source; pass a seeded Random for a repeatable choice

    Returns:
        The chosen letter

    Raises:
        CatalogError: If the catalog is empty
    """
    if not catalog:
        raise CatalogError("Cannot choose a letter from an empty catalog")
    return (rng or random).choice(list(catalog))


__all__ = [
    "STROKE_WIDTH",
    "TRACING_LETTERS",
    "build_catalog",
    "choose_letter",
    "find_catalog_errors",
    "get_letter",
    "validate_catalog",
    "validate_letter",
    "validate_stroke",
]
