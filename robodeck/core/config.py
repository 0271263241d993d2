from typing import Any
import json
import os
from pydantic import BaseModel, Field, field_validator
from loguru import logger
from .events import ObserverEvent

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    log_dir: str = "logs"
    language: str = "en"

class ViewportSettings(BaseModel):
    item_height: int = 280
    overscan: int = 5
    default_container_size: int = 600
    search_debounce_ms: int = 300  # 0 applies search text immediately
    scroll_coalesce_ms: int = 16
    pool_size: int = 64

    @field_validator("item_height", "default_container_size")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be positive")
        return value

    @field_validator("overscan", "search_debounce_ms", "scroll_coalesce_ms", "pool_size")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must not be negative")
        return value

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    viewport: ViewportSettings = Field(default_factory=ViewportSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = ObserverEvent("ConfigChanged")
        self._file_invalid = False
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if not hasattr(section_obj, key):
            raise ValueError(f"Invalid key: {key} in section {section}")

        validated = section_obj.model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, validated)
        self._save()
        self.on_changed.emit(section, key, getattr(validated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML; a missing file is created with defaults."""
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
            except Exception as e:
                # Defaults stay in memory; the file is left for the user to fix
                logger.error(f"Failed to load config from {self.filepath}, using defaults: {e}")
                self._file_invalid = True
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # TOML is read-only here; the stdlib has no writer
            return
        if self._file_invalid:
            logger.warning(f"Not saving over unreadable config {self.filepath}")
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
