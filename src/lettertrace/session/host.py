"""Tracing session host.

A session binds one letter to one activation controller for as long as a
child is tracing it. It picks the letter, converts pointer positions into
letter space, forwards samples, and announces completion exactly once.
Rewards and navigation stay with the caller via the completion callback.
"""

import random
from collections.abc import Callable, Sequence

from lettertrace.catalog import TRACING_LETTERS, choose_letter, get_letter, validate_letter
from lettertrace.config import TracingSettings
from lettertrace.core import (
    ActivationController,
    ActivationSnapshot,
    CoverageGrid,
    StrokeCompleteCallback,
    TouchOutcome,
)
from lettertrace.domain import Point, TracingLetter
from lettertrace.session.viewport import Viewport
from lettertrace.utils import SessionLogger

CompletionCallback = Callable[[TracingLetter], None]


class TracingSession:
    """One letter being traced.

    The session is single-threaded and expects the samples of a single
    active pointer. Dropping the instance or calling reset() is the only
    cancellation there is.

    Example:
        session = TracingSession.start(on_complete=show_reward)
        viewport = Viewport(640, 480)
        session.handle_pointer(312, 140, viewport)
    """

    def __init__(
        self,
        letter: TracingLetter,
        settings: TracingSettings | None = None,
        on_complete: CompletionCallback | None = None,
        logger: SessionLogger | None = None,
        on_stroke_complete: StrokeCompleteCallback | None = None,
    ) -> None:
        """Initialize a session at the first stroke of a letter.

        Args:
            letter: Letter to trace, fixed for the session's lifetime
            settings: Application settings (defaults if None)
            on_complete: Called with the letter once every stroke is traced
            logger: Session logger (a default structlog logger if None)
            on_stroke_complete: Called with each stroke's index and final grid

        Raises:
            CatalogValidationError: If the letter cannot be finished on the
                configured grid
        """
        self.settings = settings or TracingSettings()
        validate_letter(letter, self.settings.grid)
        self._letter = letter
        self._on_complete = on_complete
        self._on_stroke_complete = on_stroke_complete
        self._controller = ActivationController(
            letter.strokes,
            self.settings.grid,
            on_stroke_complete=self._stroke_completed,
        )
        self._logger = logger or SessionLogger()
        self._announced = False
        self._logger.log_session_start(letter.char, letter.stroke_count)

    @classmethod
    def start(
        cls,
        catalog: Sequence[TracingLetter] = TRACING_LETTERS,
        settings: TracingSettings | None = None,
        rng: random.Random | None = None,
        on_complete: CompletionCallback | None = None,
        logger: SessionLogger | None = None,
        on_stroke_complete: StrokeCompleteCallback | None = None,
    ) -> "TracingSession":
        """Start a session on a letter chosen from a catalog.

        The letter is ``settings.session.letter`` when set. Otherwise one
        letter is drawn uniformly at random, from ``rng`` if given, else
        from a Random seeded with ``settings.session.seed``.

        Args:
            catalog: Letters to choose from (built-in catalog by default)
            settings: Application settings (defaults if None)
            rng: Random source overriding the configured seed
            on_complete: Called with the letter once every stroke is traced
            logger: Session logger
            on_stroke_complete: Called with each stroke's index and final grid

        Returns:
            A new session

        Raises:
            LetterNotFoundError: If the configured letter is not in the catalog
            CatalogError: If the catalog is empty
            CatalogValidationError: If the chosen letter is invalid on the grid
        """
        settings = settings or TracingSettings()
        if settings.session.letter is not None:
            letter = get_letter(settings.session.letter, catalog)
        else:
            source = rng or random.Random(settings.session.seed)
            letter = choose_letter(catalog, source)
        return cls(
            letter,
            settings=settings,
            on_complete=on_complete,
            logger=logger,
            on_stroke_complete=on_stroke_complete,
        )

    @property
    def letter(self) -> TracingLetter:
        """Letter being traced."""
        return self._letter

    @property
    def controller(self) -> ActivationController:
        """Underlying activation controller."""
        return self._controller

    @property
    def logger(self) -> SessionLogger:
        """Session logger holding the running statistics."""
        return self._logger

    @property
    def is_complete(self) -> bool:
        """True once every stroke of the letter has been traced."""
        return self._controller.is_complete

    def snapshot(self) -> ActivationSnapshot:
        """Capture the state a renderer needs."""
        return self._controller.snapshot()

    def handle_touch(self, point: Point) -> TouchOutcome:
        """Forward one touch sample in normalized space.

        Args:
            point: Touch sample in 0-100 letter space

        Returns:
            What the sample did
        """
        outcome = self._controller.handle_touch(point)
        self._logger.log_sample(outcome is not TouchOutcome.IGNORED)

        if outcome is TouchOutcome.LETTER_COMPLETE and not self._announced:
            self._announced = True
            self._logger.log_letter_complete(self._letter.char)
            if self._on_complete is not None:
                self._on_complete(self._letter)

        return outcome

    def handle_pointer(self, px: float, py: float, viewport: Viewport) -> TouchOutcome:
        """Forward one pointer sample given in render pixels.

        Args:
            px: X position in pixels, relative to the render area
            py: Y position in pixels, relative to the render area
            viewport: Render area the letter is fitted into

        Returns:
            What the sample did
        """
        return self.handle_touch(viewport.to_normalized(px, py))

    def _stroke_completed(self, index: int, grid: CoverageGrid) -> None:
        self._logger.log_stroke_complete(
            self._letter.char, index, grid.stroke.id, grid.coverage
        )
        if self._on_stroke_complete is not None:
            self._on_stroke_complete(index, grid)

    def reset(self) -> None:
        """Restart the same letter from its first stroke."""
        self._controller.reset()
        self._announced = False
        self._logger.log_reset(self._letter.char)
