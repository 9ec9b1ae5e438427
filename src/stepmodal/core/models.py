"""Data model shared by the modal's state machines and widgets."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Callable, Iterable, NamedTuple, Optional, Union

from stepmodal.utils.errors import InvalidScreenError

if TYPE_CHECKING:
    from textual.widget import Widget


class Direction(IntEnum):
    """Sign of the most recent step change."""

    BACKWARD = -1
    NEUTRAL = 0
    FORWARD = 1


class AnimationPhase(Enum):
    """Where the height/screen transition currently is."""

    IDLE = "idle"
    ENTERING = "entering"
    LEAVING = "leaving"
    SETTLED = "settled"


def _noop() -> None:
    return None


@dataclass(frozen=True)
class NavigationApi:
    """Callbacks handed to a screen's content so it can drive the modal."""

    prev_screen: Callable[[], None] = _noop
    next_screen: Callable[[], None] = _noop
    close_modal: Callable[[], None] = _noop


ScreenContent = Callable[[NavigationApi], Union["Widget", Iterable["Widget"]]]


@dataclass(frozen=True)
class ScreenDescriptor:
    """One step of a multi-screen modal."""

    title: str
    content: ScreenContent
    disable_close: bool = False
    width: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.title, str):
            raise InvalidScreenError(
                "Screen title must be a string", details={"title": repr(self.title)}
            )
        if not callable(self.content):
            raise InvalidScreenError(
                f"Content of screen '{self.title}' is not callable",
                details={"title": self.title},
            )
        if self.width is not None and (
            isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0
        ):
            raise InvalidScreenError(
                f"Width of screen '{self.title}' must be a positive integer",
                details={"title": self.title, "width": self.width},
            )


class SequencerState(NamedTuple):
    """Snapshot of a StepSequencer."""

    step_count: int
    current_step: int
    direction: Direction
