"""
Tests for screen descriptors and navigation callbacks
"""
import pytest

from stepmodal.core.models import NavigationApi, ScreenDescriptor
from stepmodal.utils.errors import InvalidScreenError


def _content(nav):
    return None


class TestScreenDescriptor:
    """Tests for descriptor validation"""

    def test_defaults(self):
        """Test closing is allowed and width unset by default"""
        screen = ScreenDescriptor("Intro", _content)
        assert screen.disable_close is False
        assert screen.width is None

    @pytest.mark.parametrize("width", [0, -10, 12.5, True, "80"])
    def test_invalid_width_rejected(self, width):
        """Test widths must be positive integers"""
        with pytest.raises(InvalidScreenError) as exc_info:
            ScreenDescriptor("Intro", _content, width=width)
        assert exc_info.value.details["title"] == "Intro"

    def test_content_must_be_callable(self):
        """Test content has to be a render callback"""
        with pytest.raises(InvalidScreenError):
            ScreenDescriptor("Intro", "not callable")

    def test_title_must_be_text(self):
        """Test titles have to be strings"""
        with pytest.raises(InvalidScreenError):
            ScreenDescriptor(42, _content)

    def test_descriptor_is_immutable(self):
        """Test descriptors cannot be changed after creation"""
        screen = ScreenDescriptor("Intro", _content)
        with pytest.raises(AttributeError):
            screen.title = "Other"


class TestNavigationApi:
    """Tests for the callbacks handed to screen content"""

    def test_defaults_are_noops(self):
        """Test an empty API can be called safely"""
        nav = NavigationApi()
        nav.prev_screen()
        nav.next_screen()
        nav.close_modal()

    def test_callbacks_forwarded(self):
        """Test the given callbacks are the ones invoked"""
        calls = []
        nav = NavigationApi(next_screen=lambda: calls.append("next"))
        nav.next_screen()
        assert calls == ["next"]
