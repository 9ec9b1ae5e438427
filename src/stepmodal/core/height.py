"""Height reconciliation between screens of a multi-screen modal.

The container normally sizes itself to its content. While a transition is
in flight it is pinned to a concrete height which is eased from the old
screen's height toward the measured height of the incoming screen, then
released back to automatic sizing once the incoming screen has settled.

    Auto --begin_transition--> Pinned (tweening) --settle--> Auto

Measurements come from the rendered layout of the incoming screen and may
arrive any number of times; each one retargets the tween.
"""

from typing import Callable, Optional

from stepmodal.core.gate import DeferredAnimationGate
from stepmodal.core.models import AnimationPhase
from stepmodal.core.springs import SpringConfig, Tween
from stepmodal.utils.logging import get_logger

logger = get_logger(__name__)


class HeightReconciler:
    """Owns the container height and decides when it is pinned."""

    def __init__(
        self,
        tween: Tween,
        gate: DeferredAnimationGate,
        spring: SpringConfig,
        on_pin_change: Optional[Callable[[bool], None]] = None,
    ):
        self._tween = tween
        self._gate = gate
        self._spring = spring
        self._on_pin_change = on_pin_change
        self._pinned = False
        self._measured: Optional[float] = None
        self._generation = 0
        self._phase = AnimationPhase.IDLE

    @property
    def pinned(self) -> bool:
        return self._pinned

    @property
    def measured_height(self) -> Optional[float]:
        return self._measured

    @property
    def height(self) -> float:
        """Current (possibly mid-tween) container height."""
        return self._tween.value

    @property
    def phase(self) -> AnimationPhase:
        return self._phase

    @property
    def generation(self) -> int:
        return self._generation

    def begin_transition(self) -> int:
        """Start a screen transition and return its generation number."""
        self._generation += 1

        if self._gate.animate_immediately:
            self._set_pinned(False)
            self._phase = AnimationPhase.IDLE
        else:
            # Already pinned means a transition is being interrupted: keep the
            # pin and let the next measurement retarget the running tween.
            self._set_pinned(True)
            self._phase = AnimationPhase.ENTERING

        logger.debug(
            f"Transition {self._generation} started "
            f"({'pinned' if self._pinned else 'auto'} at {self._tween.value:g})"
        )
        return self._generation

    def measure(self, height: float) -> None:
        """Feed the rendered height of the incoming screen."""
        self._measured = height

        if self._pinned:
            self._tween.animate_to(height, self._spring)
        else:
            self._tween.jump(height)

    def settle(self, generation: Optional[int] = None) -> bool:
        """Release the pin once the incoming screen is in place.

        Completions belonging to a superseded transition are ignored.
        Returns whether the notification was applied.
        """
        if generation is not None and generation != self._generation:
            logger.debug(f"Ignoring settle of stale transition {generation}")
            return False

        self._set_pinned(False)
        self._phase = AnimationPhase.SETTLED
        return True

    def _set_pinned(self, pinned: bool) -> None:
        if pinned == self._pinned:
            return
        self._pinned = pinned
        if self._on_pin_change is not None:
            self._on_pin_change(pinned)
