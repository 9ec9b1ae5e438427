"""
Tests for the step state machine

Tests cover:
- Clamping at both ends
- Direction tracking
- Slide offsets
- Resizing after a screen list replacement
"""
import pytest

from stepmodal.core.models import Direction
from stepmodal.core.sequencer import StepSequencer


class TestStepBounds:
    """Tests for moving between steps"""

    @pytest.mark.parametrize("count", [1, 2, 3, 7])
    def test_next_clamps_at_last_step(self, count):
        """Test next() past the last step leaves the sequencer on the last step"""
        sequencer = StepSequencer(count)

        for _ in range(count - 1):
            assert sequencer.next() is True

        assert sequencer.next() is False
        assert sequencer.step == count - 1

    def test_prev_clamps_at_first_step(self):
        """Test prev() from step 0 is a no-op"""
        sequencer = StepSequencer(3)

        assert sequencer.prev() is False
        assert sequencer.step == 0

    def test_no_wraparound(self):
        """Test moving off either end never wraps"""
        sequencer = StepSequencer(2)
        sequencer.next()
        sequencer.next()
        assert sequencer.step == 1

        sequencer.prev()
        sequencer.prev()
        assert sequencer.step == 0

    def test_negative_count_rejected(self):
        """Test a negative step count is refused"""
        with pytest.raises(ValueError):
            StepSequencer(-1)

    @pytest.mark.parametrize("step", [-1, 3, 5])
    def test_initial_step_out_of_range_rejected(self, step):
        """Test the starting step must be one of the steps"""
        with pytest.raises(ValueError):
            StepSequencer(3, step=step)

    def test_initial_step_in_range(self):
        """Test a sequencer can start on a later step"""
        assert StepSequencer(3, step=2).step == 2


class TestDirection:
    """Tests for direction tracking"""

    def test_initial_direction_is_neutral(self):
        """Test a fresh sequencer has no direction"""
        assert StepSequencer(3).direction is Direction.NEUTRAL

    def test_next_sets_forward(self):
        """Test next() sets direction to +1"""
        sequencer = StepSequencer(3)
        sequencer.next()
        assert sequencer.direction is Direction.FORWARD
        assert int(sequencer.direction) == 1

    def test_prev_sets_backward(self):
        """Test prev() sets direction to -1"""
        sequencer = StepSequencer(3)
        sequencer.next()
        sequencer.prev()
        assert sequencer.direction is Direction.BACKWARD
        assert int(sequencer.direction) == -1

    def test_clamped_next_keeps_direction(self):
        """Test a no-op next() at the last step does not flip direction"""
        sequencer = StepSequencer(2)
        sequencer.next()
        sequencer.prev()
        sequencer.next()
        assert sequencer.direction is Direction.FORWARD

        sequencer.next()
        assert sequencer.direction is Direction.FORWARD

    def test_clamped_prev_keeps_direction(self):
        """Test a no-op prev() at step 0 keeps the previous direction"""
        sequencer = StepSequencer(2)
        sequencer.next()
        sequencer.prev()
        sequencer.prev()
        assert sequencer.direction is Direction.BACKWARD

    def test_state_snapshot(self):
        """Test the state tuple reflects the sequencer"""
        sequencer = StepSequencer(4)
        sequencer.next()

        state = sequencer.state
        assert state.step_count == 4
        assert state.current_step == 1
        assert state.direction is Direction.FORWARD


class TestSlideOffsets:
    """Tests for the horizontal slide of the next transition"""

    def test_forward_slides_in_from_the_right(self):
        """Test forward moves enter from +5 units and leave toward -5 units"""
        sequencer = StepSequencer(3)
        sequencer.next()
        assert sequencer.slide_offsets(base_unit=2) == (10, -10)

    def test_backward_reverses_both(self):
        """Test backward moves enter from the left and leave to the right"""
        sequencer = StepSequencer(3)
        sequencer.next()
        sequencer.prev()
        assert sequencer.slide_offsets() == (-5, 5)

    def test_neutral_does_not_slide(self):
        """Test no move means no displacement"""
        assert StepSequencer(3).slide_offsets() == (0, 0)


class TestResize:
    """Tests for following a replaced screen list"""

    def test_resize_keeps_step(self):
        """Test shrinking the count does not move the current step"""
        sequencer = StepSequencer(3)
        sequencer.next()
        sequencer.next()

        sequencer.resize(1)

        assert sequencer.step == 2
        assert sequencer.next() is False

    def test_prev_walks_back_into_range(self):
        """Test prev() still works from a dangling step"""
        sequencer = StepSequencer(3)
        sequencer.next()
        sequencer.next()
        sequencer.resize(2)

        assert sequencer.prev() is True
        assert sequencer.step == 1

    def test_growing_allows_further_steps(self):
        """Test appending screens lets next() advance again"""
        sequencer = StepSequencer(2)
        sequencer.next()
        assert sequencer.next() is False

        sequencer.resize(3)
        assert sequencer.next() is True
        assert sequencer.step == 2
