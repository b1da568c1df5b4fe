"""Unit tests for the stroke activation controller."""

import pytest

from lettertrace.catalog import get_letter
from lettertrace.config import GridConfig
from lettertrace.core import (
    ActivationController,
    ActivationPhase,
    CoverageGrid,
    TouchOutcome,
    sweep_points,
)
from lettertrace.core.geometry import straight_zone
from lettertrace.domain import Point, StrokeZone

FINISHING = (TouchOutcome.STROKE_COMPLETE, TouchOutcome.LETTER_COMPLETE)


def line_stroke(stroke_id: str, start: Point, end: Point, threshold: float = 0.75) -> StrokeZone:
    """Build a 25-wide straight stroke."""
    return StrokeZone(
        id=stroke_id,
        zone=straight_zone(start, end, 25),
        display_path="",
        start_indicator=start,
        completion_threshold=threshold,
    )


def trace_current_stroke(controller: ActivationController) -> TouchOutcome:
    """Sweep the live stroke until it completes."""
    stroke = controller.current_stroke
    assert stroke is not None
    for point in sweep_points(stroke):
        outcome = controller.handle_touch(point)
        if outcome in FINISHING:
            return outcome
    raise AssertionError(f"stroke {stroke.id} did not complete")


@pytest.fixture
def controller() -> ActivationController:
    return ActivationController(get_letter("A").strokes)


class TestInitialState:
    """Tests for a freshly created controller."""

    def test_starts_at_first_stroke(self, controller):
        """Test the controller starts idle at stroke 0."""
        assert controller.current_stroke_index == 0
        assert controller.current_stroke is controller.strokes[0]
        assert controller.completed_strokes == ()
        assert controller.coverage == 0.0
        assert controller.phase is ActivationPhase.IDLE
        assert not controller.is_complete

    def test_grid_allocated_lazily(self, controller):
        """Test no grid exists before the first touch."""
        assert controller.grid is None

    def test_snapshot(self, controller):
        """Test the snapshot mirrors controller state."""
        snap = controller.snapshot()
        assert snap.current_stroke_index == 0
        assert snap.completed_strokes == ()
        assert snap.coverage == 0.0
        assert not snap.is_complete


class TestHandleTouch:
    """Tests for feeding touch samples."""

    def test_first_touch_allocates_grid(self, controller):
        """Test the live grid is allocated even by an out-of-zone touch."""
        assert controller.handle_touch(Point(95, 95)) is TouchOutcome.IGNORED
        assert isinstance(controller.grid, CoverageGrid)
        assert controller.grid.stroke.id == "left-leg"
        assert controller.coverage == 0.0

    def test_in_zone_touch_accepted(self):
        """Test a touch on the live stroke raises its coverage."""
        stroke = line_stroke("leg", Point(50, 10), Point(15, 90), threshold=1.0)
        controller = ActivationController([stroke], GridConfig(touch_radius=2))

        assert controller.handle_touch(Point(32.5, 50)) is TouchOutcome.ACCEPTED
        assert 0.0 < controller.coverage < 1.0
        assert controller.completed_strokes == ()

    def test_later_stroke_locked(self, controller):
        """Test touching a later stroke's zone does nothing."""
        assert controller.handle_touch(Point(80, 80)) is TouchOutcome.IGNORED
        assert controller.current_stroke_index == 0
        assert controller.coverage == 0.0
        assert controller.grid is not None
        assert controller.grid.activated_cells == 0

    def test_out_of_zone_no_penalty(self, controller):
        """Test stray touches do not reduce accumulated coverage."""
        controller.handle_touch(Point(48.25, 14))
        before = controller.coverage

        controller.handle_touch(Point(95, 95))
        controller.handle_touch(Point(-10, -10))

        assert controller.coverage == before

    def test_coverage_monotonic(self):
        """Test coverage never decreases while a stroke is live."""
        stroke = line_stroke("leg", Point(50, 10), Point(15, 90), threshold=1.0)
        controller = ActivationController([stroke, stroke])
        history = []

        for point in sweep_points(stroke):
            outcome = controller.handle_touch(point)
            if outcome in FINISHING:
                break
            history.append(controller.coverage)

        assert history
        assert history == sorted(history)


class TestThresholdGating:
    """Tests for stroke completion at the threshold."""

    def test_below_threshold_not_complete(self):
        """Test a stroke stays live until its threshold is reached."""
        stroke = line_stroke("leg", Point(50, 10), Point(15, 90), threshold=1.0)
        controller = ActivationController([stroke])

        assert controller.handle_touch(Point(48.25, 14)) is TouchOutcome.ACCEPTED
        assert 0.0 < controller.coverage < 1.0
        assert controller.current_stroke_index == 0
        assert controller.completed_strokes == ()

    def test_completion_advances(self):
        """Test reaching the threshold advances to the next stroke."""
        first = line_stroke("leg", Point(50, 10), Point(15, 90), threshold=1.0)
        second = line_stroke("bar", Point(25, 55), Point(75, 55))
        controller = ActivationController([first, second])

        assert trace_current_stroke(controller) is TouchOutcome.STROKE_COMPLETE
        assert controller.current_stroke_index == 1
        assert controller.completed_strokes == (0,)
        assert controller.coverage == 0.0
        assert controller.grid is None

    def test_completion_callback(self):
        """Test the callback receives the index and the finished grid."""
        calls = []
        controller = ActivationController(
            get_letter("L").strokes,
            on_stroke_complete=lambda index, grid: calls.append((index, grid)),
        )

        trace_current_stroke(controller)

        assert len(calls) == 1
        index, grid = calls[0]
        assert index == 0
        assert grid.stroke.id == "stem"
        assert grid.is_satisfied

    def test_zone_without_cells_never_completes(self):
        """Test a stroke whose zone covers no cells ignores every touch."""
        sliver = StrokeZone(
            id="sliver",
            zone=(Point(1, 1), Point(2, 1), Point(1, 2)),
            display_path="",
            start_indicator=Point(1, 1),
            completion_threshold=0.1,
        )
        controller = ActivationController([sliver])

        assert controller.handle_touch(Point(1.2, 1.2)) is TouchOutcome.IGNORED
        assert not controller.is_complete


class TestSequencing:
    """Tests for tracing a whole letter."""

    def test_strokes_complete_in_order(self, controller):
        """Test strokes complete strictly in authoring order."""
        outcomes = [trace_current_stroke(controller) for _ in range(controller.stroke_count)]

        assert outcomes == [
            TouchOutcome.STROKE_COMPLETE,
            TouchOutcome.STROKE_COMPLETE,
            TouchOutcome.LETTER_COMPLETE,
        ]
        assert controller.completed_strokes == (0, 1, 2)

    def test_all_complete_state(self, controller):
        """Test the terminal state after the last stroke."""
        for _ in range(controller.stroke_count):
            trace_current_stroke(controller)

        assert controller.is_complete
        assert controller.phase is ActivationPhase.ALL_COMPLETE
        assert controller.current_stroke_index == controller.stroke_count
        assert controller.current_stroke is None
        assert controller.snapshot().is_complete

    def test_touches_ignored_after_completion(self, controller):
        """Test samples after completion change nothing."""
        for _ in range(controller.stroke_count):
            trace_current_stroke(controller)
        before = controller.snapshot()

        assert controller.handle_touch(Point(50, 50)) is TouchOutcome.IGNORED
        assert controller.snapshot() == before

    def test_empty_letter_is_complete(self):
        """Test a controller with no strokes is complete from the start."""
        controller = ActivationController([])
        assert controller.is_complete
        assert controller.handle_touch(Point(50, 50)) is TouchOutcome.IGNORED


class TestReset:
    """Tests for resetting the controller."""

    def test_reset_after_progress(self, controller):
        """Test reset returns to the initial state."""
        trace_current_stroke(controller)
        controller.handle_touch(Point(80, 80))

        controller.reset()

        assert controller.current_stroke_index == 0
        assert controller.completed_strokes == ()
        assert controller.coverage == 0.0
        assert controller.grid is None

    def test_reset_after_completion(self, controller):
        """Test a completed letter can be traced again after reset."""
        for _ in range(controller.stroke_count):
            trace_current_stroke(controller)

        controller.reset()

        assert not controller.is_complete
        assert trace_current_stroke(controller) is TouchOutcome.STROKE_COMPLETE

    def test_reset_idempotent(self, controller):
        """Test resetting twice equals resetting once."""
        trace_current_stroke(controller)
        controller.reset()
        once = controller.snapshot()
        controller.reset()

        assert controller.snapshot() == once


class TestCenterlineScenario:
    """A 25-wide stroke from (50, 10) to (15, 90) traced along its centerline."""

    def test_ten_samples_complete_stroke(self):
        """Test ten evenly spaced centerline samples complete the stroke."""
        start, end = Point(50, 10), Point(15, 90)
        controller = ActivationController([line_stroke("leg", start, end)])
        outcomes = []

        for i in range(10):
            t = (i + 0.5) / 10
            sample = Point(start.x + (end.x - start.x) * t, start.y + (end.y - start.y) * t)
            outcomes.append(controller.handle_touch(sample))

        assert TouchOutcome.LETTER_COMPLETE in outcomes
        assert controller.completed_strokes == (0,)

    def test_far_sample_changes_nothing(self):
        """Test a sample at (95, 95) leaves coverage at 0 and state unchanged."""
        controller = ActivationController([line_stroke("leg", Point(50, 10), Point(15, 90))])
        before = controller.snapshot()

        assert controller.handle_touch(Point(95, 95)) is TouchOutcome.IGNORED
        assert controller.snapshot() == before
        assert controller.coverage == 0.0
