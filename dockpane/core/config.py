from typing import Any, Optional
import json
import os
from pydantic import BaseModel, Field, field_validator
from loguru import logger

from .dispatch import DispatcherPriority
from .events import Signal
from .exceptions import ConfigError


# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    file_logging: bool = False
    log_dir: str = "logs"


class PaneSettings(BaseModel):
    """Defaults applied to newly created DockPanes."""
    default_title: str = ""
    default_content_size: float = 225.0
    allow_close: bool = True
    activate_on_click: bool = True
    # Name of a DispatcherPriority member
    click_activation_priority: str = "INPUT"

    @field_validator("default_content_size")
    @classmethod
    def _positive_size(cls, value: float) -> float:
        if not value > 0:
            raise ValueError("default_content_size must be > 0")
        return value

    @field_validator("click_activation_priority")
    @classmethod
    def _known_priority(cls, value: str) -> str:
        return _priority_name(value)


class DispatchSettings(BaseModel):
    # Name of a DispatcherPriority member
    relayout_priority: str = "RENDER"

    @field_validator("relayout_priority")
    @classmethod
    def _known_priority(cls, value: str) -> str:
        return _priority_name(value)


def _priority_name(value: str) -> str:
    try:
        return DispatcherPriority.parse(value).name
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown dispatcher priority: {value}") from e


class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    pane: PaneSettings = Field(default_factory=PaneSettings)
    dispatch: DispatchSettings = Field(default_factory=DispatchSettings)


# --- Manager ---
class ConfigManager:
    """
    Manages docking configuration with persistence and reactivity.

    Settings are loaded from JSON or TOML, validated by pydantic and written
    back as JSON. Every successful `update` emits `on_changed(section, key, value)`.

    Example:
        config = ConfigManager("dockpane.json")
        config.update("pane", "allow_close", False)
        pane = DockPane(settings=config.data.pane)
    """
    def __init__(self, filepath: Optional[str] = "dockpane.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ConfigError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ConfigError(f"Invalid key: {key} in section {section}")

        candidate = section_obj.model_dump()
        candidate[key] = value
        try:
            validated = type(section_obj).model_validate(candidate)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {section}.{key}: {e}") from e

        setattr(self._data, section, validated)
        self._save()
        self.on_changed.emit(section, key, getattr(validated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if not self.filepath:
            return
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
                logger.debug(f"Loaded docking config from {self.filepath}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if not self.filepath or self.filepath.endswith('.toml'):
            # TOML files are treated as read-only input
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
