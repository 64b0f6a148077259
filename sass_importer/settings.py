"""Settings manager for importer settings.yaml files.

Manages three-scope settings system:
- User global (~/.sass-importer/settings.yaml)
- Project (.sass-importer/settings.yaml)
- Local (.sass-importer/settings.local.yaml)
"""

import logging
from pathlib import Path
from typing import Any
from typing import Literal

import yaml

logger = logging.getLogger(__name__)

ScopeType = Literal["user", "project", "local"]


class SettingsManager:
    """Manages settings across user/project/local scopes."""

    def __init__(self, settings_dir: Path | None = None, user_settings_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            settings_dir: Base directory for project/local settings (for testing).
                          If None, uses .sass-importer in current directory.
            user_settings_dir: Base directory for user settings (for testing).
                          If None, uses ~/.sass-importer.
        """
        if settings_dir is None:
            settings_dir = Path(".sass-importer")
        if user_settings_dir is None:
            user_settings_dir = Path.home() / ".sass-importer"

        self.user_settings_file = user_settings_dir / "settings.yaml"
        self.project_settings_file = settings_dir / "settings.yaml"
        self.local_settings_file = settings_dir / "settings.local.yaml"

    def get_load_paths(self) -> list[str]:
        """Get load paths from all scopes.

        Unlike other settings, load paths from every scope are kept. Order:
        1. Local settings
        2. Project settings
        3. User settings

        Duplicates keep their first (highest priority) position.

        Returns:
            Load path directories in search order
        """
        load_paths: list[str] = []
        for path in (self.local_settings_file, self.project_settings_file, self.user_settings_file):
            settings = self._read_settings(path)
            if not settings:
                continue
            for entry in self._load_paths_in(settings, path):
                entry = str(entry)
                if entry not in load_paths:
                    load_paths.append(entry)
        return load_paths

    def add_load_path(self, load_path: str, scope: ScopeType = "project") -> None:
        """Append a load path to a scope's settings.

        Args:
            load_path: Directory to search for imports
            scope: "user", "project", or "local"
        """
        target_file = self._scope_file(scope)
        settings = self._read_settings(target_file) or {}
        load_paths = self._load_paths_in(settings, target_file)
        if load_path in load_paths:
            return

        settings["load_paths"] = [*load_paths, load_path]
        self._write_settings(target_file, settings)
        logger.info(f"Added {scope} load path: {load_path}")

    def remove_load_path(self, load_path: str, scope: ScopeType = "project") -> bool:
        """Remove a load path from a scope's settings.

        Args:
            load_path: Directory to remove
            scope: "user", "project", or "local"

        Returns:
            True if removed, False if not found
        """
        target_file = self._scope_file(scope)
        settings = self._read_settings(target_file)

        if not settings or load_path not in self._load_paths_in(settings, target_file):
            return False

        settings["load_paths"].remove(load_path)

        # Clean up empty section
        if not settings["load_paths"]:
            del settings["load_paths"]

        self._write_settings(target_file, settings)
        logger.info(f"Removed {scope} load path: {load_path}")
        return True

    def get_logging_config(self) -> dict[str, str]:
        """Get the merged ``logging`` section (``path`` and/or ``level``)."""
        section = self.get_merged_settings().get("logging") or {}
        if not isinstance(section, dict):
            logger.warning(f"Ignoring logging settings: expected a mapping, got {type(section).__name__}")
            return {}
        return {key: str(section[key]) for key in ("path", "level") if section.get(key) is not None}

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings
        3. Local settings

        Returns:
            Merged settings dictionary
        """
        merged: dict[str, Any] = {}
        for path in (self.user_settings_file, self.project_settings_file, self.local_settings_file):
            settings = self._read_settings(path)
            if settings:
                merged = self._deep_merge(merged, settings)
        return merged

    def _load_paths_in(self, settings: dict[str, Any], path: Path) -> list[str]:
        """Return the load_paths list from one scope, ignoring values that aren't lists."""
        load_paths = settings.get("load_paths") or []
        if not isinstance(load_paths, list):
            logger.warning(f"Ignoring load_paths in {path}: expected a list, got {type(load_paths).__name__}")
            return []
        return load_paths

    def _scope_file(self, scope: ScopeType) -> Path:
        file_map = {
            "user": self.user_settings_file,
            "project": self.project_settings_file,
            "local": self.local_settings_file,
        }
        return file_map.get(scope, self.project_settings_file)

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Args:
            path: Path to settings file

        Returns:
            Settings dict or None if file doesn't exist or can't be parsed
        """
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings in {path}: expected a mapping, got {type(data).__name__}")
            return None
        return data

    def _write_settings(self, path: Path, settings: dict[str, Any]) -> None:
        """Write settings to YAML file.

        Args:
            path: Path to settings file
            settings: Settings dictionary
        """
        # Ensure directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, "w", encoding="utf-8") as f:
                yaml.dump(settings, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error(f"Failed to write settings to {path}: {e}")
            raise

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            overlay: Overlay dictionary (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
