"""Persisted user settings - window size across runs.

Stored as YAML in the per-user local data directory::

    <data dir>/neatpic/settings.yaml

Loading never fails (defaults are used instead) and saving is best-effort.
"""

from __future__ import annotations
import os
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .config import (
    APP_DIR_NAME, SETTINGS_FILE_NAME, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT,
    MAX_WINDOW_DIMENSION,
)
from .logging import log


@dataclass
class Settings:
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["Settings"]:
        """Build from a parsed document, or None if it is not a valid record."""
        if not isinstance(data, dict):
            return None
        w = data.get("window_width")
        h = data.get("window_height")
        for v in (w, h):
            if isinstance(v, bool) or not isinstance(v, int):
                return None
            if not 0 < v <= MAX_WINDOW_DIMENSION:
                return None
        return cls(window_width=w, window_height=h)


def user_data_dir() -> Path:
    """Per-user local data directory for the current platform."""
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA")
        if base:
            return Path(base)
        return Path("~/AppData/Local").expanduser()
    if sys.platform == "darwin":
        return Path("~/Library/Application Support").expanduser()
    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home).expanduser()
    return Path("~/.local/share").expanduser()


def app_dir() -> Path:
    """The app's data directory, created on demand (failure is only logged)."""
    path = user_data_dir() / APP_DIR_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log(f"[SETTINGS][ERR] Cannot create {path}: {e!r}")
    return path


class SettingsStore:
    """Loads and saves Settings at a fixed path."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = app_dir() / SETTINGS_FILE_NAME
        return self._path

    def load(self) -> Settings:
        """Read settings, falling back to defaults on any error."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log(f"[SETTINGS] No settings at {self.path}, using defaults")
            return Settings()
        except (OSError, UnicodeDecodeError) as e:
            log(f"[SETTINGS][ERR] Read failed: {e!r}")
            return Settings()

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            log(f"[SETTINGS][ERR] Parse failed: {e!r}")
            return Settings()

        settings = Settings.from_mapping(data)
        if settings is None:
            log(f"[SETTINGS][ERR] Malformed settings in {self.path}, using defaults")
            return Settings()
        log(f"[SETTINGS] Loaded {settings.window_width}x{settings.window_height}")
        return settings

    def save(self, settings: Settings) -> bool:
        """Write settings. Returns False (and logs) on failure."""
        text = yaml.safe_dump(asdict(settings), sort_keys=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            log(f"[SETTINGS][ERR] Write failed: {e!r}")
            return False
        log(f"[SETTINGS] Saved {settings.window_width}x{settings.window_height}")
        return True
