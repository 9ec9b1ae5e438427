"""Animation presets and the tween port the state machines drive."""

from typing import Callable, Optional, Protocol

from textual.widget import Widget

from stepmodal.utils.config_manager import SpringConfig

__all__ = ["AttributeTween", "SpringConfig", "Tween"]

Callback = Callable[[], None]


class Tween(Protocol):
    """A numeric value that can be eased toward a target."""

    @property
    def value(self) -> float: ...

    def jump(self, value: float) -> None:
        """Move to ``value`` at once, cancelling anything in flight."""

    def animate_to(
        self, value: float, spring: SpringConfig, on_complete: Optional[Callback] = None
    ) -> None:
        """Ease toward ``value``; a second call retargets the running tween."""


class AttributeTween:
    """Tween backed by Textual's animator on one attribute of a widget.

    Textual keeps a single animation per (widget, attribute), so starting a
    new one replaces whatever was running from the current value.
    """

    def __init__(self, widget: Widget, attribute: str):
        self._widget = widget
        self._attribute = attribute

    @property
    def value(self) -> float:
        return float(getattr(self._widget, self._attribute))

    def jump(self, value: float) -> None:
        if not self._widget.is_mounted:
            setattr(self._widget, self._attribute, value)
            return
        self._widget.animate(self._attribute, value, duration=0.0)

    def animate_to(
        self, value: float, spring: SpringConfig, on_complete: Optional[Callback] = None
    ) -> None:
        if not self._widget.is_mounted:
            setattr(self._widget, self._attribute, value)
            if on_complete is not None:
                on_complete()
            return
        self._widget.animate(
            self._attribute,
            value,
            duration=spring.duration,
            easing=spring.easing,
            on_complete=on_complete,
        )
