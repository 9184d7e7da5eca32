"""
Application configuration management for SwingSynth.

Handles default club/skill selection, seeding, and demo feed timing.
Settings are persisted to ~/.swingsynth/config.json.
"""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class Config:
    """Manages application settings with JSON file persistence."""

    _APP_DIR = Path.home() / ".swingsynth"
    _CONFIG_FILE = _APP_DIR / "config.json"

    _defaults = {
        "default_club": "7-Iron",
        "default_skill": "intermediate",
        "seed": None,               # None = fresh entropy every run
        "feed_interval": [3.0, 8.0],  # seconds between demo feed swings
        "json_indent": 2,
    }

    _instance: Optional["Config"] = None
    _settings: dict

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._settings = {}
            cls._instance._load()
        return cls._instance

    def _load(self):
        """Load settings from disk, merging with defaults."""
        if self._CONFIG_FILE.exists():
            try:
                with open(self._CONFIG_FILE) as f:
                    saved = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Ignoring unreadable config {self._CONFIG_FILE}: {e}")
                saved = {}
            if not isinstance(saved, dict):
                logger.warning(
                    f"Ignoring config {self._CONFIG_FILE}: expected a JSON object, "
                    f"got {type(saved).__name__}"
                )
                saved = {}
            # Merge: defaults first, then saved values override
            self._settings = {**self._defaults, **saved}
        else:
            self._settings = dict(self._defaults)

    def save(self):
        """Persist current settings to disk."""
        self.get_app_dir()
        with open(self._CONFIG_FILE, "w") as f:
            json.dump(self._settings, f, indent=2)

    def get(self, key: str, default=None):
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value):
        """Set a setting value and save."""
        self._settings[key] = value
        self.save()

    @classmethod
    def get_app_dir(cls) -> Path:
        """Get the application data directory."""
        instance = cls()
        instance._APP_DIR.mkdir(parents=True, exist_ok=True)
        return instance._APP_DIR
