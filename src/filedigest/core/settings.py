# ABOUTME: Persisted user settings for the filedigest shell (display case, algorithm, chunk size).
# ABOUTME: Stored as JSON and merged over defaults; a damaged file falls back to defaults.

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

from filedigest.core.engine import CHUNK_SIZE, DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".filedigest" / "settings.json"

_TRUE_WORDS = frozenset({"true", "yes", "1", "on"})
_FALSE_WORDS = frozenset({"false", "no", "0", "off"})


class SettingsError(Exception):
    """Raised when a setting name or value is invalid."""


@dataclass(frozen=True)
class Settings:
    """User preferences applied when hashing from the shell."""

    uppercase: bool = False
    algorithm: str = DEFAULT_ALGORITHM
    chunk_size: int = CHUNK_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.uppercase, bool):
            raise SettingsError(f"uppercase must be a boolean, got {self.uppercase!r}")
        if self.algorithm not in SUPPORTED_ALGORITHMS:
            raise SettingsError(
                f"Unsupported algorithm {self.algorithm!r}; "
                f"choose one of: {', '.join(SUPPORTED_ALGORITHMS)}"
            )
        if (
            isinstance(self.chunk_size, bool)
            or not isinstance(self.chunk_size, int)
            or self.chunk_size <= 0
        ):
            raise SettingsError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


SETTING_NAMES: tuple[str, ...] = tuple(f.name for f in fields(Settings))


def _parse_bool(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise SettingsError(f"Expected a boolean (true/false), got {raw!r}")


def _parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise SettingsError(f"Expected an integer, got {raw!r}") from exc


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, merged over the defaults.

    A missing file yields the defaults silently. A file that cannot be read
    or parsed is logged as a warning and the defaults are used instead.
    Unknown keys are ignored.

    Args:
        path: Settings file. Defaults to ~/.filedigest/settings.json.

    Raises:
        SettingsError: If a saved value is invalid.
    """
    settings_path = path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        return Settings()

    try:
        saved = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load settings from %s: %s", settings_path, exc)
        return Settings()

    if not isinstance(saved, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", settings_path)
        return Settings()

    known = {key: value for key, value in saved.items() if key in SETTING_NAMES}
    return replace(Settings(), **known)


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Write settings as JSON, creating parent directories. Returns the path written."""
    settings_path = path or DEFAULT_SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings.to_dict(), indent=2) + "\n", encoding="utf-8")
    return settings_path


def update_setting(settings: Settings, key: str, raw_value: str) -> Settings:
    """Return a copy of ``settings`` with one value parsed from a string."""
    if key not in SETTING_NAMES:
        raise SettingsError(f"Unknown setting {key!r}; choose one of: {', '.join(SETTING_NAMES)}")

    value: Any
    if key == "uppercase":
        value = _parse_bool(raw_value)
    elif key == "chunk_size":
        value = _parse_int(raw_value)
    else:
        value = raw_value.strip().lower()
    return replace(settings, **{key: value})


def reset_settings(path: Path | None = None) -> Settings:
    """Overwrite the settings file with the defaults and return them."""
    defaults = Settings()
    save_settings(defaults, path)
    return defaults
