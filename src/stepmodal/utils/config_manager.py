"""Configuration manager for modal settings stored as JSON."""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import (
    ConfigurationError,
    FileSystemError,
    InvalidConfigError,
    MissingConfigError,
    StepModalError,
)
from .logging import get_logger, log_call
from .paths import CONFIG_PATH, LOGS_DIR

logger = get_logger(__name__)


class SpringConfig(BaseModel):
    """A named easing preset handed to the animation primitive."""

    model_config = ConfigDict(frozen=True)

    duration: float = Field(default=0.3, ge=0)  # in seconds
    easing: str = "out_cubic"

    @property
    def immediate(self) -> bool:
        return self.duration == 0


class AnimationConfig(BaseModel):
    """Pydantic model for animation presets."""

    swift: SpringConfig = Field(
        default_factory=lambda: SpringConfig(duration=0.25, easing="out_cubic")
    )
    smooth: SpringConfig = Field(
        default_factory=lambda: SpringConfig(duration=0.4, easing="out_cubic")
    )
    instant: SpringConfig = Field(
        default_factory=lambda: SpringConfig(duration=0.0, easing="linear")
    )
    base_unit: int = Field(default=1, ge=1)  # cells per grid unit


class ModalConfig(BaseModel):
    """Pydantic model for modal geometry."""

    default_width: int = Field(default=80, gt=0)  # in cells
    viewport_gutter: int = Field(default=4, ge=0)
    small_breakpoint: int = Field(default=100, gt=0)
    small_padding: tuple[int, int] = (1, 3)
    regular_padding: tuple[int, int] = (2, 5)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)


class LoggingConfig(BaseModel):
    """Pydantic model for logging settings."""

    log_level: str = "INFO"
    file_logging: bool = False
    log_dir: str = str(LOGS_DIR)


class AppConfig(BaseModel):
    """Pydantic model for overall application configuration."""

    version: str = "0.1.0"
    modal: ModalConfig = Field(default_factory=ModalConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages persistent application configuration."""

    _instance = None
    _initialized = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None):
        if not ConfigManager._initialized:
            self.path = Path(config_path) if config_path else CONFIG_PATH
            self.config = self._load_config()
            ConfigManager._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next construction reloads from disk."""
        cls._instance = None
        cls._initialized = False

    def _load_config(self) -> AppConfig:
        """Load configuration from file, falling back to defaults."""

        if not self.path.exists():
            logger.debug(f"No config file at {self.path}, using defaults.")
            return AppConfig()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            config = AppConfig(**data)
            logger.info(f"Configuration loaded from {self.path}")
            return config

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise InvalidConfigError(f"Configuration file is not valid JSON: {str(e)}") from e
        except ValidationError as e:
            logger.error(f"Failed to validate config file: {e}")
            raise InvalidConfigError(f"Configuration data does not match expected schema: {str(e)}") from e
        except OSError as e:
            raise FileSystemError(f"Failed to read configuration file {self.path}: {str(e)}") from e

    @log_call
    def save(self) -> None:
        """Save the current configuration to file."""

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self.config.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
            logger.debug("Configuration successfully saved.")
        except OSError as e:
            raise FileSystemError(f"Failed to write configuration file: {str(e)}") from e

    @log_call
    def get_config(self, key_path: str) -> Any:
        """Read a configuration value using a dot-separated key path."""

        obj: Any = self.config
        for key in key_path.split("."):
            if not isinstance(obj, BaseModel) or key not in type(obj).model_fields:
                raise MissingConfigError(f"Configuration path '{key_path}' is invalid: '{key}' not found")
            obj = getattr(obj, key)
        return obj

    @log_call
    def set_config(self, key_path: str, value: Any, persist: bool = True) -> None:
        """Set a configuration value using dot-separated key path."""

        keys = key_path.split(".")
        parent = self.get_config(".".join(keys[:-1])) if len(keys) > 1 else self.config

        if not isinstance(parent, BaseModel) or keys[-1] not in type(parent).model_fields:
            raise MissingConfigError(f"Configuration key '{keys[-1]}' does not exist in path '{key_path}'")

        try:
            data = self.config.model_dump()
            target = data
            for key in keys[:-1]:
                target = target[key]
            target[keys[-1]] = value
            self.config = AppConfig(**data)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for '{key_path}': {str(e)}") from e
        except StepModalError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to set configuration key '{key_path}': {str(e)}") from e

        if persist:
            self.save()

        logger.info(f"Config key '{key_path}' updated.")
