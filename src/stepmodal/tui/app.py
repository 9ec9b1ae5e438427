from typing import Callable, List

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Input, Static

from stepmodal.core.models import NavigationApi, ScreenDescriptor
from stepmodal.utils.config_manager import ModalConfig
from stepmodal.utils.logging import get_logger

from .widgets.modals import MultiScreenModal

logger = get_logger(__name__)


class CallbackButton(Button):
    """Button that runs a plain callback when pressed."""

    def __init__(self, label: str, callback: Callable[[], None], **kwargs):
        super().__init__(label, **kwargs)
        self._callback = callback

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._callback()


def _welcome(nav: NavigationApi) -> Vertical:
    return Vertical(
        Static("This walkthrough cannot be dismissed until you move past this page."),
        Horizontal(CallbackButton("Next", nav.next_screen, variant="primary"), classes="nav-row"),
        classes="screen-body",
    )


def _details(nav: NavigationApi) -> Vertical:
    return Vertical(
        Static("Tell us who you are. This page is narrower than the others."),
        Input(placeholder="Name"),
        Horizontal(
            CallbackButton("Back", nav.prev_screen),
            CallbackButton("Next", nav.next_screen, variant="primary"),
            classes="nav-row",
        ),
        classes="screen-body",
    )


def _summary(nav: NavigationApi) -> Vertical:
    return Vertical(
        Static("All done. Finish closes the modal; Escape does too on this page."),
        Static("Press 'a' in the main view to append another page to the flow."),
        Horizontal(
            CallbackButton("Back", nav.prev_screen),
            CallbackButton("Finish", nav.close_modal, variant="success"),
            classes="nav-row",
        ),
        classes="screen-body",
    )


def _extra(nav: NavigationApi) -> Vertical:
    return Vertical(
        Static("An extra page appended while the modal was alive."),
        Horizontal(CallbackButton("Back", nav.prev_screen), classes="nav-row"),
        classes="screen-body",
    )


def demo_screens() -> List[ScreenDescriptor]:
    return [
        ScreenDescriptor("Welcome", _welcome, disable_close=True),
        ScreenDescriptor("Your details", _details, width=60),
        ScreenDescriptor("Summary", _summary),
    ]


class StepModalDemoApp(App):
    TITLE = "stepmodal demo"

    CSS = """
    Screen {
        layers: base overlay;
        align: center middle;
    }

    #background {
        width: auto;
        height: auto;
        color: $text-muted;
    }

    .screen-body {
        height: auto;
    }

    .nav-row {
        height: auto;
        margin-top: 1;
        align-horizontal: right;
    }

    .nav-row > Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding("o", "open_modal", "Open"),
        Binding("a", "append_screen", "Append page"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: ModalConfig | None = None, open_on_start: bool = True):
        super().__init__()
        self.modal_config = config or ModalConfig()
        self.open_on_start = open_on_start
        self.modal = MultiScreenModal(
            demo_screens(),
            on_close=self._close_modal,
            visible=open_on_start,
            config=self.modal_config,
            id="walkthrough",
        )

    def compose(self) -> ComposeResult:
        yield Static("Press 'o' to open the walkthrough.", id="background")
        yield Footer()
        yield self.modal

    def action_open_modal(self) -> None:
        self.modal.shown = True

    def action_append_screen(self) -> None:
        count = len(self.modal.screens) + 1
        self.modal.screens = [
            *self.modal.screens,
            ScreenDescriptor(f"Extra page {count}", _extra),
        ]

    def _close_modal(self) -> None:
        self.modal.shown = False

    def on_multi_screen_modal_screen_changed(self, event: MultiScreenModal.ScreenChanged) -> None:
        title = event.descriptor.title if event.descriptor else "<none>"
        self.sub_title = f"{title} ({event.step + 1}/{len(self.modal.screens)})"
