"""Catalog writer for saving letter definitions to JSON."""

import json
from collections.abc import Iterable
from pathlib import Path

from lettertrace.domain import TracingLetter
from lettertrace.exceptions import CatalogSaveError
from lettertrace.io.reader import CATALOG_FORMAT, CATALOG_VERSION


class CatalogWriter:
    """Writes letters in the JSON catalog format.

    Example:
        writer = CatalogWriter(Path("letters.json"))
        writer.save(TRACING_LETTERS)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the catalog writer.

        Args:
            output_path: Path where the catalog will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Path the catalog is written to."""
        return self._output_path

    def save(self, letters: Iterable[TracingLetter]) -> None:
        """Save letters to the output path, keeping their order.

        Args:
            letters: Letters to write

        Raises:
            CatalogSaveError: If the file cannot be written
        """
        document = {
            "format": CATALOG_FORMAT,
            "version": CATALOG_VERSION,
            "letters": [letter.to_dict() for letter in letters],
        }

        try:
            with self._output_path.open("w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
                f.write("\n")
        except OSError as e:
            raise CatalogSaveError(str(self._output_path), str(e)) from e
