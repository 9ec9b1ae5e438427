"""Ordered screen storage for multi-screen modals."""

from typing import Optional, Sequence

from stepmodal.core.models import ScreenDescriptor
from stepmodal.utils.errors import EmptyScreenListError


class ScreenRegistry:
    """Holds the caller's screen list and resolves steps to descriptors.

    The list is swapped wholesale when the caller hands over a different
    object; indices are not reconciled across a replacement.
    """

    def __init__(self, screens: Sequence[ScreenDescriptor]):
        self._screens = self._validated(screens)

    @staticmethod
    def _validated(screens: Sequence[ScreenDescriptor]) -> Sequence[ScreenDescriptor]:
        if not screens:
            raise EmptyScreenListError()
        return screens

    @property
    def screens(self) -> Sequence[ScreenDescriptor]:
        return self._screens

    def __len__(self) -> int:
        return len(self._screens)

    def replace(self, screens: Sequence[ScreenDescriptor]) -> bool:
        """Adopt a new screen list. Returns False if it is the list already held."""
        if screens is self._screens:
            return False
        self._screens = self._validated(screens)
        return True

    def get_screen(self, index: int) -> Optional[ScreenDescriptor]:
        if 0 <= index < len(self._screens):
            return self._screens[index]
        return None
