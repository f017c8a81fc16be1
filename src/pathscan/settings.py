"""User settings for the pathscan command line."""

import json
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from pathscan.exceptions import SettingsValidationError
from pathscan.exceptions import SettingsVersionError
from pathscan.models import RootErrorMode

SETTINGS_VERSION = 1


@dataclass
class Settings:
    """Defaults applied to every scan started from the CLI."""

    version: int = SETTINGS_VERSION
    search_path: list[str] = field(default_factory=list)  # Empty means sys.path
    on_root_error: RootErrorMode = RootErrorMode.SKIP
    follow_symlinks: bool = False

    @classmethod
    def default_path(cls) -> Path:
        """Get default settings location using platformdirs."""
        return user_config_path("pathscan") / "config.json"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "version": self.version,
            "search_path": list(self.search_path),
            "on_root_error": self.on_root_error.value,
            "follow_symlinks": self.follow_symlinks,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        if "version" not in data:
            raise SettingsValidationError("Settings missing 'version' key")

        version = data["version"]
        if not isinstance(version, int):
            raise SettingsValidationError(f"Invalid settings version: {version!r}")
        if version > SETTINGS_VERSION:
            raise SettingsVersionError(
                f"Settings version {version} is newer than supported version {SETTINGS_VERSION}"
            )

        search_path = data.get("search_path", [])
        if not isinstance(search_path, list) or not all(
            isinstance(entry, str) for entry in search_path
        ):
            raise SettingsValidationError("'search_path' must be a list of strings")

        try:
            on_root_error = RootErrorMode(data.get("on_root_error", "skip"))
        except ValueError:
            raise SettingsValidationError(
                f"Invalid 'on_root_error': {data['on_root_error']!r}"
            )

        follow_symlinks = data.get("follow_symlinks", False)
        if not isinstance(follow_symlinks, bool):
            raise SettingsValidationError("'follow_symlinks' must be true or false")

        return cls(
            version=version,
            search_path=search_path,
            on_root_error=on_root_error,
            follow_symlinks=follow_symlinks,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load settings from JSON file. Returns defaults if it doesn't exist.

        Args:
            path: Path to settings file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsValidationError(f"Cannot read settings file {path}: {e}")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SettingsValidationError(f"Invalid JSON in settings: {e}")
        if not isinstance(data, dict):
            raise SettingsValidationError("Settings must be a JSON object")
        return cls.from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """Save settings to JSON file atomically.

        Args:
            path: Path to save settings. If None, uses default location.
        """
        if path is None:
            path = self.default_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file, then rename
        temp_path = path.with_suffix(".tmp")
        temp_path.write_text(json.dumps(self.to_dict(), indent=2))
        temp_path.replace(path)
