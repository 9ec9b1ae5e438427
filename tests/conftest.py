"""
Shared test fixtures and configuration for pytest
"""
from typing import List

import pytest

from stepmodal.core.models import ScreenDescriptor
from stepmodal.utils.config_manager import AnimationConfig, ConfigManager, ModalConfig, SpringConfig
from stepmodal.utils.logging import reset_logging

from .test_helpers import FakeTween, make_screen


@pytest.fixture
def fake_tween():
    return FakeTween()


@pytest.fixture
def three_screens() -> List[ScreenDescriptor]:
    """Screens A, B and C with default settings"""
    return [make_screen("A"), make_screen("B"), make_screen("C")]


@pytest.fixture
def fast_config() -> ModalConfig:
    """Modal config with short tweens so pilot tests settle quickly"""
    return ModalConfig(
        animation=AnimationConfig(
            swift=SpringConfig(duration=0.02, easing="linear"),
            smooth=SpringConfig(duration=0.05, easing="linear"),
            instant=SpringConfig(duration=0.0, easing="linear"),
        )
    )


@pytest.fixture(autouse=True)
def reset_config_manager():
    """Give each test a fresh ConfigManager singleton"""
    ConfigManager.reset()
    yield
    ConfigManager.reset()


@pytest.fixture
def restore_logging():
    """Hand the stepmodal logger back to the host after a test configures it"""
    yield
    reset_logging()
