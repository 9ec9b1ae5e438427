"""Screen transitions inside a multi-screen modal.

``ModalShell`` owns the step state of a modal and renders the screen that is
entering along with, briefly, the one that is leaving. The leaving screen is
moved to its own layer so both start at the top-left of the body and overlap
during the cross-fade instead of stacking.
"""

from functools import partial
from typing import Callable, List, Optional, Sequence

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

from stepmodal.core.gate import DeferredAnimationGate
from stepmodal.core.height import HeightReconciler
from stepmodal.core.layout import is_small, screen_padding, screen_width
from stepmodal.core.models import AnimationPhase, NavigationApi, ScreenDescriptor
from stepmodal.core.registry import ScreenRegistry
from stepmodal.core.sequencer import StepSequencer
from stepmodal.core.springs import AttributeTween, SpringConfig
from stepmodal.utils.config_manager import ModalConfig
from stepmodal.utils.errors import ScreenRenderError, StepModalError
from stepmodal.utils.logging import get_logger, log_event

logger = get_logger(__name__)


def _noop() -> None:
    return None


class ScreenFrame(Vertical):
    """One rendered screen: its title followed by the host's content."""

    DEFAULT_CSS = """
    ScreenFrame {
        layer: base;
        height: auto;
    }

    ScreenFrame.-leaving {
        layer: leaving;
    }

    ScreenFrame > .screen-title {
        width: 100%;
        text-style: bold underline;
        margin-bottom: 1;
    }

    ScreenFrame.-small > .screen-title {
        text-style: bold;
        margin-bottom: 0;
    }
    """

    fade = reactive(1.0)
    shift = reactive(0.0)

    class Measured(Message):
        """Posted after layout with the frame's outer height."""

        def __init__(self, frame: "ScreenFrame", height: int) -> None:
            super().__init__()
            self.frame = frame
            self.height = height

    def __init__(
        self,
        descriptor: ScreenDescriptor,
        step_index: int,
        navigation: NavigationApi,
        *,
        width: int,
        padding: tuple[int, int],
        small_mode: bool = False,
        fade: float = 1.0,
        shift: float = 0.0,
    ) -> None:
        super().__init__()
        self.descriptor = descriptor
        self.step_index = step_index
        self._navigation = navigation
        self.phase = AnimationPhase.IDLE
        self._pending_entrance: Optional[tuple[SpringConfig, Optional[Callable[[], object]]]] = None
        self.set_reactive(ScreenFrame.fade, fade)
        self.set_reactive(ScreenFrame.shift, shift)
        self.watch_fade(fade)
        self.watch_shift(shift)
        self.apply_geometry(width, padding, small_mode)

    def compose(self) -> ComposeResult:
        yield Static(self.descriptor.title, classes="screen-title", markup=False)
        yield from self._render_content()

    def _render_content(self) -> List[Widget]:
        try:
            rendered = self.descriptor.content(self._navigation)
        except StepModalError:
            raise
        except Exception as e:
            raise ScreenRenderError(
                f"Content of screen '{self.descriptor.title}' failed to render: {e}",
                details={"title": self.descriptor.title, "step": self.step_index},
            ) from e

        if rendered is None:
            return []
        if isinstance(rendered, Widget):
            return [rendered]
        return list(rendered)

    def apply_geometry(self, width: int, padding: tuple[int, int], small_mode: bool) -> None:
        self.styles.width = width
        self.styles.padding = padding
        self.set_class(small_mode, "-small")

    def swap(self, descriptor: ScreenDescriptor) -> None:
        """Show another descriptor in place, without a transition."""
        self.descriptor = descriptor
        self.refresh(recompose=True)

    def watch_fade(self, fade: float) -> None:
        self.styles.opacity = fade

    def watch_shift(self, shift: float) -> None:
        self.styles.offset = (round(shift), 0)

    def on_mount(self) -> None:
        if self._pending_entrance is not None:
            spring, on_complete = self._pending_entrance
            self._pending_entrance = None
            self._tween_to(1.0, 0.0, spring, partial(self._entered, on_complete))

    def on_resize(self, event: events.Resize) -> None:
        self.post_message(self.Measured(self, self.outer_size.height))

    def enter(self, spring: SpringConfig, on_complete: Optional[Callable[[], object]] = None) -> None:
        """Fade and slide in from the current shift."""
        self.phase = AnimationPhase.ENTERING
        if not self.is_mounted:
            self._pending_entrance = (spring, on_complete)
            return
        self._tween_to(1.0, 0.0, spring, partial(self._entered, on_complete))

    def _entered(self, on_complete: Optional[Callable[[], object]]) -> None:
        if self.phase is AnimationPhase.ENTERING:
            self.phase = AnimationPhase.SETTLED
        if on_complete is not None:
            on_complete()

    def leave(self, offset: float, spring: SpringConfig, immediate: bool = False) -> None:
        """Fade and slide out by ``offset``, then remove the frame."""
        self._pending_entrance = None
        self.phase = AnimationPhase.LEAVING
        self.add_class("-leaving")
        if immediate or not self.is_mounted:
            self.remove()
            return
        self._tween_to(0.0, offset, spring, self.remove)

    def _tween_to(
        self,
        fade: float,
        shift: float,
        spring: SpringConfig,
        on_complete: Optional[Callable[[], object]],
    ) -> None:
        self.animate("fade", fade, duration=spring.duration, easing=spring.easing)
        self.animate(
            "shift",
            shift,
            duration=spring.duration,
            easing=spring.easing,
            on_complete=on_complete,
        )


class ShellBody(Container):
    """Container whose height is either automatic or pinned to a tweened value."""

    DEFAULT_CSS = """
    ShellBody {
        layers: base leaving;
        width: 100%;
        height: auto;
        overflow: hidden hidden;
    }
    """

    pinned_height = reactive(0.0)
    pinned = reactive(False)

    def set_pinned(self, pinned: bool) -> None:
        self.pinned = pinned

    def watch_pinned_height(self, pinned_height: float) -> None:
        if self.pinned:
            self.styles.height = max(0, round(pinned_height))

    def watch_pinned(self, pinned: bool) -> None:
        if pinned:
            self.styles.height = max(0, round(self.pinned_height))
        else:
            self.styles.height = "auto"


class ModalShell(Vertical):
    """Steps through screens with directional slide and cross-fade."""

    DEFAULT_CSS = """
    ModalShell {
        width: 100%;
        height: auto;
    }
    """

    def __init__(
        self,
        screens: Sequence[ScreenDescriptor],
        *,
        on_close: Optional[Callable[[], None]] = None,
        on_screen_change: Optional[Callable[[Optional[ScreenDescriptor], int], None]] = None,
        config: Optional[ModalConfig] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config or ModalConfig()
        self.registry = ScreenRegistry(screens)
        self.sequencer = StepSequencer(len(self.registry))
        self.gate = DeferredAnimationGate()
        self.body = ShellBody()
        self.reconciler = HeightReconciler(
            AttributeTween(self.body, "pinned_height"),
            self.gate,
            self.config.animation.swift,
            on_pin_change=self.body.set_pinned,
        )
        self.navigation = NavigationApi(
            prev_screen=self.prev,
            next_screen=self.next,
            close_modal=on_close or _noop,
        )
        self._on_screen_change = on_screen_change
        self._current_frame: Optional[ScreenFrame] = None
        self.viewport_width = self.config.default_width
        self.small_mode = is_small(self.viewport_width, self.config)

    @property
    def current_screen(self) -> Optional[ScreenDescriptor]:
        return self.registry.get_screen(self.sequencer.step)

    @property
    def current_frame(self) -> Optional[ScreenFrame]:
        return self._current_frame

    def compose(self) -> ComposeResult:
        yield self.body

    def on_mount(self) -> None:
        self._transition()

    def next(self) -> None:
        if self.sequencer.next():
            self._transition()

    def prev(self) -> None:
        if self.sequencer.prev():
            self._transition()

    def replace_screens(self, screens: Sequence[ScreenDescriptor]) -> None:
        """Adopt a new screen list; the current step index is kept as is."""
        if not self.registry.replace(screens):
            return

        self.sequencer.resize(len(self.registry))
        step = self.sequencer.step
        screen = self.registry.get_screen(step)
        frame = self._current_frame
        log_event(
            "modal.screens_replaced",
            f"Screens replaced ({len(self.registry)} screens)",
            step=step,
        )

        if frame is not None and screen is None:
            frame.remove()
            self._current_frame = None
        elif frame is None and screen is not None:
            self._current_frame = self._build_frame(screen, step)
            self.body.mount(self._current_frame)
        elif frame is not None and frame.descriptor is not screen:
            frame.swap(screen)

        self._notify_screen_change()

    def set_viewport(self, viewport_width: int) -> None:
        """Re-clamp every frame to a new available width."""
        self.viewport_width = viewport_width
        self.small_mode = is_small(viewport_width, self.config)
        padding = screen_padding(self.small_mode, self.config)

        for frame in self.body.query(ScreenFrame):
            frame.apply_geometry(
                screen_width(frame.descriptor, viewport_width, self.config),
                padding,
                self.small_mode,
            )

    def on_screen_frame_measured(self, event: ScreenFrame.Measured) -> None:
        event.stop()
        if event.frame is self._current_frame:
            self.reconciler.measure(event.height)

    def _transition(self) -> None:
        immediate = self.gate.animate_immediately
        generation = self.reconciler.begin_transition()
        self.gate.mark_animation_observed()

        animation = self.config.animation
        enter_from, leave_to = self.sequencer.slide_offsets(animation.base_unit)
        step = self.sequencer.step

        if self._current_frame is not None:
            self._current_frame.leave(leave_to, animation.instant, immediate=immediate)
            self._current_frame = None

        screen = self.registry.get_screen(step)
        if screen is None:
            self.reconciler.settle(generation)
        elif immediate:
            self._current_frame = self._build_frame(screen, step)
            self.body.mount(self._current_frame)
        else:
            self._current_frame = self._build_frame(screen, step, fade=0.0, shift=enter_from)
            self.body.mount(self._current_frame)
            self._current_frame.enter(
                animation.smooth, on_complete=partial(self.reconciler.settle, generation)
            )

        logger.debug(
            f"Step {step} ({'immediate' if immediate else self.sequencer.direction.name.lower()})"
        )
        self._notify_screen_change()

    def _build_frame(
        self, screen: ScreenDescriptor, step: int, fade: float = 1.0, shift: float = 0.0
    ) -> ScreenFrame:
        return ScreenFrame(
            screen,
            step,
            self.navigation,
            width=screen_width(screen, self.viewport_width, self.config),
            padding=screen_padding(self.small_mode, self.config),
            small_mode=self.small_mode,
            fade=fade,
            shift=shift,
        )

    def _notify_screen_change(self) -> None:
        if self._on_screen_change is not None:
            self._on_screen_change(self.current_screen, self.sequencer.step)
