"""Catalog I/O layer for lettertrace.

This module handles reading and writing letter catalogs as JSON. The file
schema is exactly the TracingLetter/StrokeZone data model, so a catalog
can be moved out of code into configuration without changing meaning.

Key responsibilities:
- Load catalogs and convert them to domain models
- Validate every loaded letter before it can be traced
- Write catalogs preserving stroke and polygon point order

Key classes:
- CatalogReader: Load and validate catalogs
- CatalogWriter: Save catalogs
"""

from lettertrace.io.reader import CatalogReader
from lettertrace.io.writer import CatalogWriter

__all__ = [
    "CatalogReader",
    "CatalogWriter",
]
