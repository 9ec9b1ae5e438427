"""Width and padding rules for the modal frame."""

from typing import Optional

from stepmodal.core.models import ScreenDescriptor
from stepmodal.utils.config_manager import ModalConfig


def available_width(container_width: int, config: ModalConfig) -> int:
    """Width a modal may use inside a container, after the gutter."""
    return max(0, container_width - config.viewport_gutter)


def screen_width(
    screen: Optional[ScreenDescriptor], viewport_width: int, config: ModalConfig
) -> int:
    """Width of a screen: its own width (or the default) clamped to the viewport."""
    preferred = screen.width if screen is not None and screen.width else config.default_width
    return min(viewport_width, preferred)


def is_small(viewport_width: int, config: ModalConfig) -> bool:
    return viewport_width < config.small_breakpoint


def screen_padding(small_mode: bool, config: ModalConfig) -> tuple[int, int]:
    return config.small_padding if small_mode else config.regular_padding
