"""User preference management for gittr.

Handles the preference set stored in ~/.gittr/config.yaml:
- add_all_files: Stage all changes before committing
- emoji_format: Render emojis as shortcodes (markdown) or glyphs (unicode)
- sign_commit: Sign commits with -S
- udacity_style_commit: Compose messages in Udacity style
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError

from gittr.constants import (
    DEFAULT_PREFERENCES,
    PREFERENCE_KEYS,
    SETTINGS_ADD_ALL_KEY,
    SETTINGS_EMOJI_FORMAT_KEY,
    SETTINGS_SIGN_COMMIT_KEY,
    SETTINGS_UDACITY_STYLE_COMMIT_KEY,
    EmojiFormat,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for preference storage errors."""

    pass


class ConfigLoadError(ConfigError):
    """Raised when the preference file exists but cannot be read or parsed."""

    pass


class ConfigWriteError(ConfigError):
    """Raised when the preference file cannot be written."""

    pass


_CONFIG_DIR = Path.home() / ".gittr"


def get_config_dir() -> Path:
    """Get the gittr configuration directory.

    Returns:
        Path to ~/.gittr/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.gittr/config.yaml
    """
    return get_config_dir() / "config.yaml"


class PreferenceSet(BaseModel):
    """Snapshot of the user's preferences. None means the field is undefined."""

    add_all_files: Optional[bool] = None
    emoji_format: Optional[EmojiFormat] = None
    sign_commit: Optional[bool] = None
    udacity_style_commit: Optional[bool] = None

    def is_complete(self) -> bool:
        """Check whether every preference is defined."""
        return all(getattr(self, key) is not None for key in PREFERENCE_KEYS)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary suitable for YAML serialization."""
        return self.model_dump(mode="json")


def normalize_preferences(prefs: PreferenceSet) -> PreferenceSet:
    """Return a fully-defined copy of prefs.

    Defined fields are kept as they are; undefined fields take their
    default value. Calling it on its own output returns an equal snapshot.

    Args:
        prefs: A possibly incomplete preference snapshot.

    Returns:
        A new PreferenceSet with every field defined.
    """
    updates = {
        key: DEFAULT_PREFERENCES[key]
        for key in PREFERENCE_KEYS
        if getattr(prefs, key) is None
    }
    return prefs.model_copy(update=updates)


def load_preferences(path: Path) -> PreferenceSet:
    """Load preferences from a YAML file.

    Args:
        path: File to read.

    Returns:
        The stored preferences. An empty set if the file doesn't exist.

    Raises:
        ConfigLoadError: If the file is unreadable, not YAML, or not a mapping.
    """
    if not path.exists():
        return PreferenceSet()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigLoadError(f"Failed to load config from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config file {path} does not contain a mapping")

    # Unknown keys are ignored so older/newer files still load
    known = {key: data.get(key) for key in PREFERENCE_KEYS}
    try:
        return PreferenceSet(**known)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid values in {path}: {e}")


def save_preferences(path: Path, prefs: PreferenceSet) -> None:
    """Write the full preference record to path.

    The record is written to a temporary file first and moved into place,
    so readers never see a partially written file.

    Raises:
        ConfigWriteError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".config-", suffix=".yaml")
        try:
            with os.fdopen(fd, "w") as f:
                yaml.safe_dump(prefs.to_dict(), f, default_flow_style=False, sort_keys=False)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise ConfigWriteError(f"Failed to save config to {path}: {e}")


class ConfigStore:
    """Loads and persists the preference set.

    One instance is created per process by the dispatcher. Every set() call
    rewrites the whole record (read-modify-write) before returning. There is
    no file locking: gittr assumes a single interactive session per config
    file.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = path or get_config_file_path()
        try:
            self._prefs = load_preferences(self._path)
        except ConfigLoadError as e:
            logger.warning("%s; falling back to defaults", e)
            self._prefs = PreferenceSet()
        logger.debug("Loaded preferences from %s: %s", self._path, self._prefs.to_dict())

    @property
    def path(self) -> Path:
        """Path of the backing config file."""
        return self._path

    def get(self, key: str) -> Any:
        """Get a single preference value (None when undefined).

        Raises:
            KeyError: If key is not a recognized preference.
        """
        if key not in PREFERENCE_KEYS:
            raise KeyError(f"Unknown preference: {key}")
        return getattr(self._prefs, key)

    def set(self, key: str, value: Any) -> None:
        """Set a preference and persist the full record.

        Setting None leaves the stored value unchanged.

        Raises:
            KeyError: If key is not a recognized preference.
            ValueError: If value cannot be stored in that preference.
            ConfigWriteError: If the record cannot be persisted.
        """
        if key not in PREFERENCE_KEYS:
            raise KeyError(f"Unknown preference: {key}")
        if value is None:
            return

        # Re-validating coerces strings such as "unicode" into EmojiFormat
        updated = PreferenceSet(**{**self._prefs.model_dump(), key: value})
        save_preferences(self._path, updated)
        self._prefs = updated
        logger.debug("Saved preference %s=%r to %s", key, value, self._path)

    def snapshot(self) -> PreferenceSet:
        """Return a copy of the current preferences."""
        return self._prefs.model_copy()

    def get_all_values(self) -> Dict[str, Any]:
        """Return every preference keyed by name, for diagnostics."""
        return self._prefs.to_dict()

    def get_add_all(self) -> Optional[bool]:
        return self.get(SETTINGS_ADD_ALL_KEY)

    def set_add_all(self, value: Optional[bool]) -> None:
        self.set(SETTINGS_ADD_ALL_KEY, value)

    def get_emoji_format(self) -> Optional[EmojiFormat]:
        return self.get(SETTINGS_EMOJI_FORMAT_KEY)

    def set_emoji_format(self, value: Optional[EmojiFormat]) -> None:
        self.set(SETTINGS_EMOJI_FORMAT_KEY, value)

    def get_sign_commit(self) -> Optional[bool]:
        return self.get(SETTINGS_SIGN_COMMIT_KEY)

    def set_sign_commit(self, value: Optional[bool]) -> None:
        self.set(SETTINGS_SIGN_COMMIT_KEY, value)

    def get_udacity_style_commit(self) -> Optional[bool]:
        return self.get(SETTINGS_UDACITY_STYLE_COMMIT_KEY)

    def set_udacity_style_commit(self, value: Optional[bool]) -> None:
        self.set(SETTINGS_UDACITY_STYLE_COMMIT_KEY, value)


def apply_default_preferences(store: ConfigStore) -> PreferenceSet:
    """Write default values for every undefined preference in store.

    Fields that are already defined are not touched, so running this twice
    has the same effect as running it once.

    Returns:
        The fully-defined preferences now held by the store.
    """
    current = store.snapshot()
    if current.is_complete():
        return current

    normalized = normalize_preferences(current)
    for key in PREFERENCE_KEYS:
        if getattr(current, key) is None:
            store.set(key, getattr(normalized, key))
    return store.snapshot()
