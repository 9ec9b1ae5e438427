from .modal_shell import ModalShell, ScreenFrame, ShellBody
from .multi_screen_modal import MultiScreenModal

__all__ = ["ModalShell", "MultiScreenModal", "ScreenFrame", "ShellBody"]
