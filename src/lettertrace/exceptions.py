"""Exception hierarchy for Lettertrace."""


class LetterTraceError(Exception):
    """Base exception for all Lettertrace errors."""

    pass


class GeometryError(LetterTraceError):
    """Errors in geometric calculations."""

    pass


class ZoneError(GeometryError):
    """Error constructing a stroke zone polygon."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CatalogError(LetterTraceError):
    """Errors related to the letter catalog."""

    pass


class CatalogValidationError(CatalogError):
    """A letter definition violates an authoring invariant."""

    def __init__(self, letter: str, reason: str, stroke_id: str | None = None) -> None:
        self.letter = letter
        self.stroke_id = stroke_id
        self.reason = reason
        where = f"'{letter}'" if stroke_id is None else f"'{letter}' stroke '{stroke_id}'"
        super().__init__(f"Invalid letter {where}: {reason}")


class LetterNotFoundError(CatalogError):
    """Requested letter not found in catalog."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Letter '{char}' not found in catalog")


class CatalogLoadError(CatalogError):
    """Error loading a catalog file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load catalog '{path}': {reason}")


class CatalogSaveError(CatalogError):
    """Error saving a catalog file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save catalog '{path}': {reason}")
