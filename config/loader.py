"""Configuration loader.

Configuration priority (highest to lowest):
1. Programmatic overrides
2. Project config (.files/config.{json,yaml} in workspace)
3. User config (~/.files/config.{json,yaml})
4. Schema defaults (config.schema.FilesSettings)
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from config.schema import FilesSettings

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".files"
CONFIG_FILE_NAMES = ("config.json", "config.yaml", "config.yml")


class ConfigLoader:
    """Loader for files settings with a three-tier merge."""

    def __init__(self, workspace_root: str | Path | None = None):
        self.workspace_root = Path(workspace_root).resolve() if workspace_root else None

    def load(self, overrides: dict[str, Any] | None = None) -> FilesSettings:
        """Load configuration with three-tier merge."""
        user_config = self._load_user_config()
        project_config = self._load_project_config()

        final_config = self._deep_merge(user_config, project_config)
        if overrides:
            final_config = self._deep_merge(final_config, overrides)

        final_config = self._expand_env_vars(final_config)
        final_config = self._remove_none_values(final_config)

        return FilesSettings(**final_config)

    # ── Internal helpers ──

    def _load_user_config(self) -> dict[str, Any]:
        """Load user config from ~/.files/."""
        return self._load_first(Path.home() / CONFIG_DIR_NAME)

    def _load_project_config(self) -> dict[str, Any]:
        """Load project config from <workspace>/.files/."""
        if not self.workspace_root:
            return {}
        return self._load_first(self.workspace_root / CONFIG_DIR_NAME)

    def _load_first(self, config_dir: Path) -> dict[str, Any]:
        """Load the first config file found in a directory (JSON before YAML)."""
        for name in CONFIG_FILE_NAMES:
            path = config_dir / name
            if path.exists():
                if path.suffix == ".json":
                    return self._load_json(path)
                return self._load_yaml(path)
        return {}

    @staticmethod
    def _load_json(path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return {}
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _deep_merge(self, *dicts: dict[str, Any]) -> dict[str, Any]:
        """Deep merge multiple dictionaries. Later dicts override earlier ones."""
        result: dict[str, Any] = {}
        for d in dicts:
            for key, value in d.items():
                if key not in result:
                    result[key] = value
                elif value is None:
                    continue
                elif isinstance(value, dict) and isinstance(result[key], dict):
                    result[key] = self._deep_merge(result[key], value)
                else:
                    result[key] = value
        return result

    def _expand_env_vars(self, obj: Any) -> Any:
        """Recursively expand ${VAR} and ~ in string values."""
        if isinstance(obj, dict):
            return {k: self._expand_env_vars(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [self._expand_env_vars(v) for v in obj]
        if isinstance(obj, str):
            return os.path.expandvars(os.path.expanduser(obj))
        return obj

    def _remove_none_values(self, obj: Any) -> Any:
        """Recursively remove None values to allow Pydantic defaults."""
        if isinstance(obj, dict):
            return {k: self._remove_none_values(v) for k, v in obj.items() if v is not None}
        if isinstance(obj, list):
            return [self._remove_none_values(v) for v in obj if v is not None]
        return obj


def load_config(
    workspace_root: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> FilesSettings:
    """Convenience function to load configuration."""
    return ConfigLoader(workspace_root=workspace_root).load(overrides=overrides)
