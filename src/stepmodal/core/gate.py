"""First-paint animation gate."""


class DeferredAnimationGate:
    """Says whether transitions should snap instead of animate.

    A fresh gate snaps, so the first screen does not slide in when the modal
    mounts. The first animation-start notification opens it for good.
    """

    def __init__(self):
        self._observed = False

    @property
    def animate_immediately(self) -> bool:
        return not self._observed

    def mark_animation_observed(self) -> None:
        self._observed = True
