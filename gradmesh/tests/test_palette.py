"""Tests for the palette table and colour transition state machine."""
import pytest

from gradmesh._color import Color
from gradmesh._palette import (COLOR_COMBOS, PaletteCombo, TransitionState,
                               ease_out_quart)


class TestEasing:
    """Tests for the easing functions."""

    def test_end_points(self):
        assert ease_out_quart(0.0) == 0.0
        assert ease_out_quart(1.0) == 1.0

    def test_front_loaded(self):
        assert ease_out_quart(0.5) == pytest.approx(0.9375)
        assert ease_out_quart(0.25) > 0.25

    def test_monotonic(self):
        xs = [i / 100 for i in range(101)]
        ys = [ease_out_quart(x) for x in xs]
        assert all(b >= a for a, b in zip(ys, ys[1:]))


class TestPaletteTable:
    """Tests for the fixed palette table."""

    def test_nine_combos(self):
        assert len(COLOR_COMBOS) == 9

    def test_entries_are_pairs(self):
        for combo in COLOR_COMBOS:
            assert isinstance(combo, PaletteCombo)
            assert isinstance(combo.from_color, Color)
            assert isinstance(combo.to_color, Color)


class TestTransitionState:
    """Tests for TransitionState."""

    def test_initial_state(self):
        st = TransitionState()
        assert st.current_combo == 0
        assert not st.transitioning
        assert st.pending_combo is None
        assert st.from_color == COLOR_COMBOS[0].from_color
        assert st.to_color == COLOR_COMBOS[0].to_color

    def test_initial_colors_are_copies(self):
        st = TransitionState()
        st.from_color.r = 0.0
        assert COLOR_COMBOS[0].from_color.r == 158.0

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            TransitionState(initial=len(COLOR_COMBOS))
        with pytest.raises(ValueError):
            TransitionState(duration=0.0)
        with pytest.raises(ValueError):
            TransitionState(combos=())

    def test_request_starts_transition(self):
        st = TransitionState()
        assert st.request_combo(4)
        assert st.transitioning
        assert st.current_combo == 4

    @pytest.mark.parametrize("start", range(len(COLOR_COMBOS)))
    def test_converges_exactly_for_every_pair(self, start):
        """After completion both end points equal the target combo."""
        for target in range(len(COLOR_COMBOS)):
            st = TransitionState(initial=start)
            st.request_combo(target)
            st.finish(elapsed=1 / 60)
            assert not st.transitioning
            assert st.from_color == COLOR_COMBOS[target].from_color
            assert st.to_color == COLOR_COMBOS[target].to_color

    def test_eased_partial_progress(self):
        """Halfway through, 1 - 0.5**4 of the gap has been covered."""
        st = TransitionState(initial=2)
        st.request_combo(7)
        st.step(0.5)
        start = COLOR_COMBOS[2].from_color
        target = COLOR_COMBOS[7].from_color
        assert st.from_color.r == pytest.approx(start.r + (target.r - start.r) * 0.9375)
        assert st.from_color.b == pytest.approx(start.b + (target.b - start.b) * 0.9375)
        assert st.transitioning

    def test_incremental_steps_accumulate(self):
        a = TransitionState(initial=0)
        b = TransitionState(initial=0)
        a.request_combo(3)
        b.request_combo(3)
        a.step(0.5)
        for _ in range(5):
            b.step(0.1)
        assert a.from_color.r == pytest.approx(b.from_color.r)
        assert a.to_color.g == pytest.approx(b.to_color.g)

    def test_duration_scales_progress(self):
        st = TransitionState(duration=2.0)
        st.request_combo(1)
        st.step(1.0)
        assert st.progress == pytest.approx(0.5)
        st.step(1.0)
        assert not st.transitioning

    def test_step_when_idle_is_noop(self):
        st = TransitionState()
        st.step(1.0)
        assert st.from_color == COLOR_COMBOS[0].from_color

    def test_out_of_range_request_is_ignored(self):
        st = TransitionState()
        assert not st.request_combo(len(COLOR_COMBOS))
        assert not st.request_combo(-1)
        assert not st.transitioning
        assert st.current_combo == 0

    def test_out_of_range_request_does_not_replace_queue(self):
        st = TransitionState()
        st.request_combo(1)
        st.request_combo(2)
        st.request_combo(99)
        assert st.pending_combo == 2


class TestQueuedRequests:
    """A request made during a transition runs once, right after it."""

    def test_request_is_queued(self):
        st = TransitionState()
        st.request_combo(3)
        st.request_combo(5)
        assert st.current_combo == 3
        assert st.pending_combo == 5

    def test_queued_request_starts_on_completion(self):
        st = TransitionState()
        st.request_combo(3)
        st.request_combo(5)
        st.step(1.0)
        # 3 completed and snapped, 5 started from there
        assert st.current_combo == 5
        assert st.transitioning
        assert st.pending_combo is None
        assert st.from_color == COLOR_COMBOS[3].from_color
        assert st.to_color == COLOR_COMBOS[3].to_color

    def test_queued_request_applied_once(self):
        st = TransitionState()
        st.request_combo(3)
        st.request_combo(5)
        st.step(1.0)
        st.step(1.0)
        assert not st.transitioning
        assert st.current_combo == 5
        st.step(1.0)
        assert not st.transitioning
        assert st.from_color == COLOR_COMBOS[5].from_color

    def test_latest_request_wins(self):
        st = TransitionState()
        st.request_combo(1)
        st.request_combo(2)
        st.request_combo(4)
        st.finish()
        assert st.current_combo == 4
        assert st.to_color == COLOR_COMBOS[4].to_color

    def test_first_combo_can_be_queued(self):
        """Index 0 is a valid queued request."""
        st = TransitionState(initial=2)
        st.request_combo(1)
        st.request_combo(0)
        st.step(1.0)
        assert st.current_combo == 0
        assert st.transitioning
        st.finish()
        assert st.from_color == COLOR_COMBOS[0].from_color


class TestSampleGradient:
    """Tests for TransitionState.sample_gradient."""

    def test_end_points(self):
        st = TransitionState()
        assert st.sample_gradient(0.0) == st.from_color
        assert st.sample_gradient(1.0) == st.to_color

    def test_midpoint_is_exact(self):
        st = TransitionState()
        mid = st.sample_gradient(0.5)
        f, t = COLOR_COMBOS[0]
        assert mid == Color((f.r + t.r) / 2, (f.g + t.g) / 2, (f.b + t.b) / 2)

    def test_snapshot_is_detached(self):
        st = TransitionState()
        f, t = st.snapshot()
        st.request_combo(2)
        st.step(0.5)
        assert f == COLOR_COMBOS[0].from_color
        assert t == COLOR_COMBOS[0].to_color
