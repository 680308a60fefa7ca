from dataclasses import dataclass, field, is_dataclass
from pathlib import Path
import sys
import tomllib
from typing import Any, ClassVar, TypeVar

from loguru import logger

from ringdeque.deque import DEFAULT_CAPACITY

# --- Constants ---
APP_NAME = "ringdeque"
# Use a platform-agnostic user config directory
if sys.platform == "win32":
    CONFIG_DIR = Path.home() / "AppData" / "Roaming" / APP_NAME
else:
    CONFIG_DIR = Path.home() / ".config" / APP_NAME

CONFIG_FILE = CONFIG_DIR / "config.toml"

# --- Dataclass Models for Settings ---
T = TypeVar("T")


@dataclass
class GeneralSettings:
    """Logging settings used by the demo entry point."""

    log_level_console: str = "INFO"
    log_level_file: str = "DEBUG"
    # An empty string disables file logging.
    log_directory: str = str(CONFIG_DIR / "logs")


@dataclass
class DequeSettings:
    """Defaults applied to deques built with ``RingDeque.from_settings``."""

    default_capacity: int = DEFAULT_CAPACITY


@dataclass
class Settings:
    """Root container for all settings."""

    general: GeneralSettings = field(default_factory=GeneralSettings)
    deque: DequeSettings = field(default_factory=DequeSettings)

    _instance: ClassVar["Settings | None"] = None

    @classmethod
    def get_instance(cls) -> "Settings":
        """Returns the singleton instance, loading it on first use."""
        if cls._instance is None:
            cls._instance = load_config()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drops the cached singleton so the next access reloads it."""
        cls._instance = None


def _update_dataclass(dc_instance: T, data: dict[str, Any]) -> T:
    """Recursively updates a dataclass instance from a dictionary."""
    for f in field_names(dc_instance):
        if f in data:
            field_value = getattr(dc_instance, f)
            if is_dataclass(field_value):
                if isinstance(data[f], dict):
                    _update_dataclass(field_value, data[f])
                else:
                    logger.warning(f"Ignoring non-table value for section '{f}'.")
            else:
                setattr(dc_instance, f, data[f])
    return dc_instance


def field_names(dc_instance: Any) -> list[str]:
    """Helper to get field names from a dataclass instance."""
    return [f.name for f in dc_instance.__dataclass_fields__.values()]


def _validate(settings_obj: Settings) -> None:
    capacity = settings_obj.deque.default_capacity
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
        logger.error(
            f"Invalid deque.default_capacity {capacity!r}; "
            f"falling back to {DEFAULT_CAPACITY}."
        )
        settings_obj.deque.default_capacity = DEFAULT_CAPACITY


def load_config(path: Path = CONFIG_FILE) -> Settings:
    """Loads settings from a TOML file, merging them with defaults.

    A missing or unreadable file is not fatal: the defaults are returned
    and the problem is logged. Nothing is written to disk.

    Args:
        path: The path to the configuration file.

    Returns:
        A populated Settings object.
    """
    settings_obj = Settings()
    logger.info(f"Loading configuration from '{path}'...")

    if not path.exists():
        logger.warning(f"Configuration file not found at '{path}'. Using defaults.")
        return settings_obj

    try:
        with path.open("rb") as f:
            user_config = tomllib.load(f)
        _update_dataclass(settings_obj, user_config)
        logger.success("Successfully loaded user configuration.")
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding TOML from '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")
        return Settings()
    except OSError as e:
        logger.error(f"Could not read configuration file '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")
        return Settings()

    _validate(settings_obj)
    return settings_obj
