"""Configuration file loader.

Loads a partial configuration from YAML with priority resolution:
1. An explicit path given by the caller (highest priority)
2. User config: ~/.config/tagsafe/config.yaml
3. Project config: .tagsafe/config.yaml in current directory

The first file found wins; files are not layered on top of each other.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from .config import Config, validate_config
from .errors import ConfigFileError
from .log import get_logger

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml
        _yaml = yaml
    return _yaml


class ConfigLoader:
    """Find, read and validate a tagsafe config file."""

    CONFIG_FILENAME = "config.yaml"

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        search_locations: Optional[list[Path]] = None,
    ):
        """Initialize the loader.

        Args:
            path: Explicit config file. It must exist when given.
            search_locations: Directories to search when no path is given.
                Defaults to the user and project config directories.
        """
        self.path = Path(path) if path is not None else None
        if search_locations is None:
            search_locations = self.default_locations()
        self.search_locations = search_locations

    @staticmethod
    def default_locations() -> list[Path]:
        """User config directory first, then the project directory."""
        return [
            Path.home() / ".config" / "tagsafe",  # User config
            Path.cwd() / ".tagsafe",              # Project config
        ]

    def find_config_file(self) -> Optional[Path]:
        """Return the config file to use, or None when there is none.

        Raises:
            ConfigFileError: An explicit path was given but does not exist.
        """
        if self.path is not None:
            if not self.path.is_file():
                raise ConfigFileError(f"Config file not found: {self.path}", path=str(self.path))
            return self.path

        for location in self.search_locations:
            candidate = location / self.CONFIG_FILENAME
            if candidate.is_file():
                return candidate

        return None

    def load_raw(self) -> dict[str, Any]:
        """Read the partial configuration mapping without validating it."""
        config_file = self.find_config_file()
        if config_file is None:
            get_logger().debug("No config file found")
            return {}

        get_logger().debug("Loading config from %s", config_file)
        yaml = _get_yaml()
        content = config_file.read_text(encoding="utf-8")

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigFileError(f"Could not parse {config_file}: {e}", path=str(config_file)) from e

        if data is None:
            return {}

        if not isinstance(data, Mapping):
            raise ConfigFileError(
                f"{config_file} must contain a mapping, not {type(data).__name__}.",
                path=str(config_file),
            )

        return dict(data)

    def load(self, overrides: Optional[Mapping] = None) -> Config:
        """Load the config file, apply ``overrides`` on top and validate.

        Scalar overrides replace file values; list overrides are appended to
        the file's lists.

        Raises:
            ConfigError: The file or the merged configuration is invalid.
        """
        raw = self.load_raw()
        if overrides:
            raw = _layer(raw, overrides)
        return validate_config(raw)


def _layer(base: dict, overrides: Mapping) -> dict:
    layered = dict(base)
    for key, value in overrides.items():
        existing = layered.get(key)
        if isinstance(existing, list) and isinstance(value, (list, tuple)):
            layered[key] = existing + list(value)
        else:
            layered[key] = value
    return layered
