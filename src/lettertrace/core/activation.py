"""Stroke sequencing for a tracing session.

The activation controller decides which stroke is live, hands touch
samples to that stroke's coverage grid, and advances to the next stroke
when the grid reports its threshold reached. It only ever moves forward:
the one way back to the first stroke is an explicit reset.

States:
- IDLE at stroke i (0 <= i < N): stroke i is accumulating coverage
- ALL_COMPLETE: every stroke is traced; further touches are ignored
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from lettertrace.config import GridConfig
from lettertrace.core.coverage import CoverageGrid
from lettertrace.domain import Point, StrokeZone

StrokeCompleteCallback = Callable[[int, CoverageGrid], None]


class ActivationPhase(Enum):
    """Phase of the activation state machine."""

    IDLE = auto()
    ALL_COMPLETE = auto()


class TouchOutcome(Enum):
    """What a single touch sample did to the session.

    IGNORED covers out-of-zone samples and samples after completion.
    ACCEPTED means the sample fell inside the live zone but did not
    finish the stroke, whether or not it activated new cells.
    """

    IGNORED = auto()
    ACCEPTED = auto()
    STROKE_COMPLETE = auto()
    LETTER_COMPLETE = auto()


@dataclass
class ActivationState:
    """Mutable session state owned by one controller.

    Attributes:
        current_stroke_index: Index of the live stroke (stroke count once
            all strokes are complete)
        completed_strokes: Indices of completed strokes in completion order
        grid: Coverage grid of the live stroke, allocated on its first touch
        coverage: Live coverage ratio of the current stroke
    """

    current_stroke_index: int = 0
    completed_strokes: list[int] = field(default_factory=list)
    grid: CoverageGrid | None = None
    coverage: float = 0.0


@dataclass(frozen=True)
class ActivationSnapshot:
    """Read-only view of the controller for a renderer.

    Attributes:
        current_stroke_index: Index of the live stroke
        completed_strokes: Completed stroke indices, for drawing revealed strokes
        coverage: Live coverage ratio of the current stroke
        is_complete: True once every stroke is complete
    """

    current_stroke_index: int
    completed_strokes: tuple[int, ...]
    coverage: float
    is_complete: bool


class ActivationController:
    """Sequences the strokes of one letter through coverage tracking.

    Example:
        controller = ActivationController(letter.strokes)
        for point in samples:
            controller.handle_touch(point)
        if controller.is_complete:
            ...
    """

    def __init__(
        self,
        strokes: Sequence[StrokeZone],
        grid_config: GridConfig | None = None,
        on_stroke_complete: StrokeCompleteCallback | None = None,
    ) -> None:
        """Initialize the controller at the first stroke.

        Args:
            strokes: Ordered strokes of the letter being traced
            grid_config: Coverage grid settings (defaults if None)
            on_stroke_complete: Called with the stroke index and its final
                grid just before the grid is discarded
        """
        self._strokes = tuple(strokes)
        self._grid_config = grid_config or GridConfig()
        self._on_stroke_complete = on_stroke_complete
        self._state = ActivationState()

    @property
    def strokes(self) -> tuple[StrokeZone, ...]:
        """Strokes being traced, in order."""
        return self._strokes

    @property
    def stroke_count(self) -> int:
        """Number of strokes in the letter."""
        return len(self._strokes)

    @property
    def phase(self) -> ActivationPhase:
        """Current phase of the state machine."""
        if self.is_complete:
            return ActivationPhase.ALL_COMPLETE
        return ActivationPhase.IDLE

    @property
    def current_stroke_index(self) -> int:
        """Index of the live stroke."""
        return self._state.current_stroke_index

    @property
    def current_stroke(self) -> StrokeZone | None:
        """The live stroke, or None once the letter is complete."""
        index = self._state.current_stroke_index
        if index < len(self._strokes):
            return self._strokes[index]
        return None

    @property
    def completed_strokes(self) -> tuple[int, ...]:
        """Indices of completed strokes in completion order."""
        return tuple(self._state.completed_strokes)

    @property
    def coverage(self) -> float:
        """Live coverage ratio of the current stroke."""
        return self._state.coverage

    @property
    def grid(self) -> CoverageGrid | None:
        """Coverage grid of the live stroke, if it has been allocated."""
        return self._state.grid

    @property
    def is_complete(self) -> bool:
        """True once every stroke of the letter has been completed."""
        return len(self._state.completed_strokes) == len(self._strokes)

    def snapshot(self) -> ActivationSnapshot:
        """Capture the state a renderer needs."""
        return ActivationSnapshot(
            current_stroke_index=self._state.current_stroke_index,
            completed_strokes=tuple(self._state.completed_strokes),
            coverage=self._state.coverage,
            is_complete=self.is_complete,
        )

    def handle_touch(self, point: Point) -> TouchOutcome:
        """Feed one touch sample, in normalized space, to the live stroke.

        The whole update (grid, coverage, and a possible advance to the
        next stroke) happens before this returns. Samples outside the live
        zone, including samples aimed at later strokes, leave all state
        untouched apart from allocating the live stroke's grid.

        Args:
            point: Touch sample already converted to 0-100 letter space

        Returns:
            What the sample did
        """
        stroke = self.current_stroke
        if stroke is None:
            return TouchOutcome.IGNORED

        grid = self._ensure_grid(stroke)
        if grid.valid_cells == 0:
            return TouchOutcome.IGNORED

        # Out-of-zone samples are ignored without penalty
        if not grid.contains(point):
            return TouchOutcome.IGNORED

        grid.stamp(point)
        self._state.coverage = grid.coverage

        if not grid.is_satisfied:
            return TouchOutcome.ACCEPTED

        self._complete_current_stroke(grid)
        if self.is_complete:
            return TouchOutcome.LETTER_COMPLETE
        return TouchOutcome.STROKE_COMPLETE

    def reset(self) -> None:
        """Return to the first stroke with nothing completed."""
        self._state = ActivationState()

    def _ensure_grid(self, stroke: StrokeZone) -> CoverageGrid:
        if self._state.grid is None:
            self._state.grid = CoverageGrid(stroke, self._grid_config)
        return self._state.grid

    def _complete_current_stroke(self, grid: CoverageGrid) -> None:
        index = self._state.current_stroke_index
        self._state.completed_strokes.append(index)
        self._state.current_stroke_index += 1
        self._state.grid = None
        self._state.coverage = 0.0
        if self._on_stroke_complete is not None:
            self._on_stroke_complete(index, grid)
