"""Multi-step modal dialogs for Textual applications."""

from stepmodal.core.models import NavigationApi, ScreenDescriptor
from stepmodal.tui.widgets.modals import MultiScreenModal
from stepmodal.utils.config_manager import ModalConfig

__version__ = "0.1.0"

__all__ = ["ModalConfig", "MultiScreenModal", "NavigationApi", "ScreenDescriptor"]
