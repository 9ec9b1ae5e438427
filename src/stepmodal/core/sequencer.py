"""Step state machine for multi-screen modals."""

from stepmodal.core.models import Direction, SequencerState

# Grid units a screen travels while sliding in or out.
SLIDE_DISTANCE = 5


class StepSequencer:
    """Tracks the active step and the direction of the last move.

    Moves past either end are silently ignored and leave the direction
    untouched.
    """

    def __init__(self, step_count: int, step: int = 0):
        if step_count < 0:
            raise ValueError(f"step_count must not be negative, got {step_count}")
        if not 0 <= step < max(step_count, 1):
            raise ValueError(f"step {step} is out of range for {step_count} steps")
        self._step_count = step_count
        self._step = step
        self._direction = Direction.NEUTRAL

    @property
    def step(self) -> int:
        return self._step

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def state(self) -> SequencerState:
        return SequencerState(self._step_count, self._step, self._direction)

    def next(self) -> bool:
        """Advance one step. Returns False when already on the last step."""
        if self._step < self._step_count - 1:
            self._step += 1
            self._direction = Direction.FORWARD
            return True
        return False

    def prev(self) -> bool:
        """Go back one step. Returns False when already on the first step."""
        if self._step > 0:
            self._step -= 1
            self._direction = Direction.BACKWARD
            return True
        return False

    def resize(self, step_count: int) -> None:
        """Follow a replaced screen list.

        The current step is kept even if it no longer exists; ``prev`` walks
        it back into range.
        """
        if step_count < 0:
            raise ValueError(f"step_count must not be negative, got {step_count}")
        self._step_count = step_count

    def slide_offsets(self, base_unit: int = 1) -> tuple[int, int]:
        """Horizontal offsets ``(enter_from, leave_to)`` for the next transition."""
        distance = SLIDE_DISTANCE * base_unit * int(self._direction)
        return distance, -distance
