"""
Tests for configuration management

Tests cover:
- Configuration loading and defaults
- Configuration validation
- Dotted key access and updates
- Persistence
"""
import json

import pytest

from stepmodal.utils.config_manager import AppConfig, ConfigManager, ModalConfig, SpringConfig
from stepmodal.utils.errors import InvalidConfigError, MissingConfigError


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


class TestConfigManagerInitialization:
    """Tests for ConfigManager initialization"""

    def test_defaults_without_file(self, config_path):
        """Test ConfigManager falls back to defaults when no file exists"""
        manager = ConfigManager(config_path)
        assert manager.config == AppConfig()
        assert not config_path.exists()

    def test_singleton(self, config_path):
        """Test ConfigManager is shared across constructions"""
        first = ConfigManager(config_path)
        second = ConfigManager()
        assert first is second
        assert second.path == config_path

    def test_load_from_file(self, config_path):
        """Test values from the config file override defaults"""
        config_path.write_text(json.dumps({"modal": {"default_width": 64, "viewport_gutter": 2}}))

        manager = ConfigManager(config_path)

        assert manager.config.modal.default_width == 64
        assert manager.config.modal.viewport_gutter == 2
        assert manager.config.modal.small_breakpoint == 100


class TestConfigurationDefaults:
    """Tests for default configuration values"""

    def test_modal_geometry(self):
        """Test default modal geometry"""
        modal = ModalConfig()
        assert modal.default_width == 80
        assert modal.viewport_gutter == 4
        assert modal.small_breakpoint == 100
        assert modal.small_padding == (1, 3)
        assert modal.regular_padding == (2, 5)

    def test_animation_presets(self):
        """Test the instant preset is immediate and the others are not"""
        animation = ModalConfig().animation
        assert animation.instant.immediate is True
        assert animation.smooth.immediate is False
        assert animation.swift.duration < animation.smooth.duration
        assert animation.base_unit == 1

    def test_logging_defaults(self):
        """Test file logging is opt-in"""
        assert AppConfig().logging.file_logging is False
        assert AppConfig().logging.log_level == "INFO"


class TestConfigurationValidation:
    """Tests for configuration validation"""

    def test_invalid_json(self, config_path):
        """Test a malformed file raises InvalidConfigError"""
        config_path.write_text("{not json")
        with pytest.raises(InvalidConfigError):
            ConfigManager(config_path)

    def test_schema_mismatch(self, config_path):
        """Test values of the wrong type raise InvalidConfigError"""
        config_path.write_text(json.dumps({"modal": {"default_width": "wide"}}))
        with pytest.raises(InvalidConfigError):
            ConfigManager(config_path)

    def test_negative_duration_rejected(self):
        """Test spring durations cannot be negative"""
        with pytest.raises(ValueError):
            SpringConfig(duration=-1)


class TestConfigAccess:
    """Tests for dotted key access"""

    def test_get_nested_value(self, config_path):
        """Test reading a nested value by key path"""
        manager = ConfigManager(config_path)
        assert manager.get_config("modal.animation.base_unit") == 1

    def test_get_unknown_key(self, config_path):
        """Test unknown key paths raise MissingConfigError"""
        manager = ConfigManager(config_path)
        with pytest.raises(MissingConfigError):
            manager.get_config("modal.height")

    def test_set_without_persist(self, config_path):
        """Test updates can stay in memory only"""
        manager = ConfigManager(config_path)
        manager.set_config("modal.default_width", 72, persist=False)

        assert manager.config.modal.default_width == 72
        assert not config_path.exists()

    def test_set_invalid_value(self, config_path):
        """Test invalid values are rejected and the old value kept"""
        manager = ConfigManager(config_path)
        with pytest.raises(InvalidConfigError):
            manager.set_config("modal.default_width", 0, persist=False)
        assert manager.config.modal.default_width == 80

    def test_set_unknown_key(self, config_path):
        """Test setting an unknown key raises MissingConfigError"""
        manager = ConfigManager(config_path)
        with pytest.raises(MissingConfigError):
            manager.set_config("modal.colour", "red", persist=False)

    def test_set_persists_and_reloads(self, config_path):
        """Test persisted values survive a reload"""
        manager = ConfigManager(config_path)
        manager.set_config("modal.small_breakpoint", 90)

        ConfigManager.reset()
        reloaded = ConfigManager(config_path)

        assert reloaded.config.modal.small_breakpoint == 90
        assert reloaded.config.modal.small_padding == (1, 3)
