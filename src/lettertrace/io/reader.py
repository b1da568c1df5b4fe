"""Catalog reader for loading letter definitions from JSON.

This module provides the CatalogReader class for loading a catalog file
and converting it into validated domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from lettertrace.catalog import get_letter, validate_catalog
from lettertrace.config import GridConfig
from lettertrace.domain import TracingLetter
from lettertrace.exceptions import CatalogLoadError

CATALOG_FORMAT = "lettertrace-catalog"
CATALOG_VERSION = 1


class CatalogReader:
    """Loads a JSON letter catalog and validates every letter.

    Stroke order and polygon point order are kept exactly as they appear
    in the file. A catalog with any authoring defect fails to load as a
    whole, so a session can never start on a letter it cannot finish.

    Example:
        reader = CatalogReader(Path("letters.json"))
        reader.load()
        for letter in reader.iter_letters():
            print(letter.char)
    """

    def __init__(self, catalog_path: Path, grid_config: GridConfig | None = None) -> None:
        """Initialize the catalog reader.

        Args:
            catalog_path: Path to the JSON catalog file
            grid_config: Grid the letters will be traced on (defaults if None)
        """
        self._catalog_path = catalog_path
        self._grid_config = grid_config
        self._letters: tuple[TracingLetter, ...] | None = None

    def load(self, validate: bool = True) -> None:
        """Load and validate the catalog file.

        Args:
            validate: Check every letter against the authoring invariants.
                Pass False to read a defective catalog for reporting; the
                file structure, format and version are always checked.

        Raises:
            FileNotFoundError: If catalog file does not exist
            CatalogLoadError: If the file is not a valid catalog
            CatalogValidationError: If a letter violates an authoring invariant
        """
        if not self._catalog_path.exists():
            raise FileNotFoundError(f"Catalog file not found: {self._catalog_path}")

        try:
            with self._catalog_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogLoadError(str(self._catalog_path), str(e)) from e

        letters = self._parse(data)
        if validate:
            validate_catalog(letters, self._grid_config)

        self._letters = letters

    def _parse(self, data: Any) -> tuple[TracingLetter, ...]:
        path = str(self._catalog_path)

        if not isinstance(data, dict) or not isinstance(data.get("letters"), list):
            raise CatalogLoadError(path, "expected an object with a 'letters' list")

        if data.get("format", CATALOG_FORMAT) != CATALOG_FORMAT:
            raise CatalogLoadError(path, f"unknown format '{data.get('format')}'")

        version = data.get("version", CATALOG_VERSION)
        if version != CATALOG_VERSION:
            raise CatalogLoadError(path, f"unsupported catalog version {version}")

        letters = []
        for index, entry in enumerate(data["letters"]):
            try:
                letters.append(TracingLetter.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                raise CatalogLoadError(path, f"letter #{index} is malformed: {e!r}") from e

        return tuple(letters)

    @property
    def letters(self) -> tuple[TracingLetter, ...]:
        """Return all loaded letters in file order.

        Raises:
            RuntimeError: If catalog has not been loaded yet
        """
        if self._letters is None:
            raise RuntimeError("Catalog not loaded. Call load() first.")
        return self._letters

    @property
    def letter_count(self) -> int:
        """Return number of letters in the catalog.

        Raises:
            RuntimeError: If catalog has not been loaded yet
        """
        return len(self.letters)

    def iter_letters(self) -> Iterator[TracingLetter]:
        """Iterate over letters in file order.

        Raises:
            RuntimeError: If catalog has not been loaded yet
        """
        yield from self.letters

    def get_letter(self, char: str) -> TracingLetter:
        """Get a specific letter by glyph.

        Raises:
            RuntimeError: If catalog has not been loaded yet
            LetterNotFoundError: If no letter has that glyph
        """
        return get_letter(char, self.letters)

    def close(self) -> None:
        """Drop the loaded letters."""
        self._letters = None

    def __enter__(self) -> "CatalogReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
