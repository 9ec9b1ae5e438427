from typing import Callable, Optional, Sequence

from textual import events, on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button

from stepmodal.core.layout import available_width, screen_width
from stepmodal.core.models import ScreenDescriptor
from stepmodal.utils.config_manager import ModalConfig
from stepmodal.utils.logging import get_logger, log_event

from .modal_shell import ModalShell

logger = get_logger(__name__)

# Cells taken by the window border on each axis.
WINDOW_CHROME = 2


def _noop() -> None:
    return None


class MultiScreenModal(Widget, can_focus=True):
    """A modal that walks through a sequence of screens.

    The active screen decides whether the modal can be closed and how wide
    it is. Hiding the modal keeps its step, so showing it again resumes where
    the user left off.
    """

    DEFAULT_CSS = """
    MultiScreenModal {
        layer: overlay;
        width: 100%;
        height: 100%;
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }

    MultiScreenModal:focus {
        outline: none;
    }

    MultiScreenModal > #modal-window {
        height: auto;
        max-height: 100%;
        background: $panel;
        border: round $accent;
    }

    MultiScreenModal #modal-header {
        width: 100%;
        height: 1;
        align-horizontal: right;
    }

    MultiScreenModal #modal-close {
        width: auto;
        min-width: 3;
        height: 1;
        border: none;
        padding: 0 1;
    }
    """

    BINDINGS = [Binding("escape", "request_close", "Close", show=False)]

    shown = reactive(False)
    screens: reactive[Sequence[ScreenDescriptor]] = reactive(tuple, always_update=True, init=False)

    class ScreenChanged(Message):
        """Posted whenever the active screen changes."""

        def __init__(
            self, modal: "MultiScreenModal", descriptor: Optional[ScreenDescriptor], step: int
        ) -> None:
            super().__init__()
            self.modal = modal
            self.descriptor = descriptor
            self.step = step

        @property
        def control(self) -> "MultiScreenModal":
            return self.modal

    def __init__(
        self,
        screens: Sequence[ScreenDescriptor],
        on_close: Optional[Callable[[], None]] = None,
        *,
        visible: bool = False,
        config: Optional[ModalConfig] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.config = config or ModalConfig()
        self._on_close = on_close or _noop
        self.shell = ModalShell(
            screens,
            on_close=self._close_from_screen,
            on_screen_change=self._handle_screen_change,
            config=self.config,
        )
        self.current_screen: Optional[ScreenDescriptor] = self.shell.current_screen
        self.viewport_width = self.config.default_width
        self.set_reactive(MultiScreenModal.screens, screens)
        self.set_reactive(MultiScreenModal.shown, visible)
        self.display = visible

    @property
    def step(self) -> int:
        return self.shell.sequencer.step

    @property
    def closable(self) -> bool:
        return self.current_screen is None or not self.current_screen.disable_close

    def compose(self) -> ComposeResult:
        with Vertical(id="modal-window"):
            with Horizontal(id="modal-header"):
                yield Button("✕", id="modal-close")
            yield self.shell

    def on_mount(self) -> None:
        self._apply_viewport(self.app.size.width)

    def on_resize(self, event: events.Resize) -> None:
        self._apply_viewport(event.size.width)

    def watch_shown(self, shown: bool) -> None:
        self.display = shown
        self.set_class(shown, "-visible")
        logger.debug(f"Modal {'shown' if shown else 'hidden'} at step {self.step}")
        if shown:
            self.focus()

    def watch_screens(self, screens: Sequence[ScreenDescriptor]) -> None:
        self.shell.replace_screens(screens)

    def next_screen(self) -> None:
        self.shell.next()

    def prev_screen(self) -> None:
        self.shell.prev()

    def request_close(self) -> bool:
        """Close unless the active screen forbids it. Returns whether it closed."""
        title = self.current_screen.title if self.current_screen else None

        if not self.closable:
            log_event("modal.close_blocked", "Close request ignored", title=title, step=self.step)
            return False

        log_event("modal.closed", "Modal closed", title=title, step=self.step)
        self._on_close()
        return True

    def action_request_close(self) -> None:
        self.request_close()

    @on(Button.Pressed, "#modal-close")
    def _on_close_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.request_close()

    def _close_from_screen(self) -> None:
        title = self.current_screen.title if self.current_screen else None
        log_event("modal.closed", "Modal closed by screen", title=title, step=self.step)
        self._on_close()

    def _handle_screen_change(self, screen: Optional[ScreenDescriptor], step: int) -> None:
        self.current_screen = screen
        if self.is_mounted:
            self._apply_current_screen()

        log_event(
            "modal.screen_changed",
            f"Active screen: {screen.title if screen else '<none>'}",
            step=step,
        )
        self.post_message(self.ScreenChanged(self, screen, step))

    def _apply_viewport(self, container_width: int) -> None:
        self.viewport_width = max(0, available_width(container_width, self.config) - WINDOW_CHROME)
        self.shell.set_viewport(self.viewport_width)
        self._apply_current_screen()

    def _apply_current_screen(self) -> None:
        window = self.query_one("#modal-window", Vertical)
        window.styles.width = (
            screen_width(self.current_screen, self.viewport_width, self.config) + WINDOW_CHROME
        )
        self.query_one("#modal-header", Horizontal).display = self.closable
