"""
Tests for the demo application
"""
import pytest

from stepmodal.tui.app import StepModalDemoApp, demo_screens


def test_demo_screens():
    """Test the demo opens on a screen that cannot be dismissed"""
    screens = demo_screens()
    assert screens[0].disable_close is True
    assert screens[1].width == 60


class TestStepModalDemoApp:
    """Pilot tests for the demo app"""

    @pytest.mark.asyncio
    async def test_open_on_start(self):
        app = StepModalDemoApp()
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert app.modal.display is True
            assert app.sub_title == "Welcome (1/3)"

    @pytest.mark.asyncio
    async def test_closed_until_opened(self):
        app = StepModalDemoApp(open_on_start=False)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert app.modal.display is False

            await pilot.press("o")
            await pilot.pause()
            assert app.modal.display is True

    @pytest.mark.asyncio
    async def test_append_screen(self):
        app = StepModalDemoApp(open_on_start=False)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.pause()

            assert len(app.modal.screens) == 4
            assert app.modal.screens[-1].title == "Extra page 4"
