"""Site configuration reader and base URL handling."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import toml
import yaml

from .exceptions import ConfigurationError
from .models import DEFAULT_BASE_URL, DEFAULT_MARKDOWN_EXTENSIONS


class SiteConfigReader:
    """Reads the optional site configuration file of a source tree."""

    CONFIG_FILENAMES = ["config.toml", "config.yml", "config.yaml"]

    @classmethod
    def find_config(cls, source_path: Path) -> Optional[Path]:
        """Return the first existing config file in the source directory."""
        for config_filename in cls.CONFIG_FILENAMES:
            config_path = source_path / config_filename
            if config_path.is_file():
                return config_path
        return None

    @classmethod
    def read_config(cls, config_path: Path) -> Dict[str, Any]:
        """Parse a TOML or YAML config file.

        Args:
            config_path: Path to the config file

        Returns:
            Configuration dictionary, empty for an empty file

        Raises:
            ConfigurationError: If the file can not be read or parsed
        """
        try:
            text = config_path.read_text(encoding="utf-8")
            if config_path.suffix == ".toml":
                config = toml.loads(text)
            else:
                config = yaml.safe_load(text)
        except (OSError, yaml.YAMLError, toml.TomlDecodeError) as e:
            raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
        return config

    @classmethod
    def load(cls, source_path: Path, config_path: Optional[Path] = None) -> Dict[str, Any]:
        """Read the explicit config file, or the one found in `source_path`."""
        if config_path is None:
            config_path = cls.find_config(source_path)
            if config_path is None:
                return {}
        elif not config_path.is_file():
            raise ConfigurationError(f"Config file not found: {config_path}")
        return cls.read_config(config_path)


def normalize_base_url(base_url: Optional[str]) -> str:
    """Strip surrounding slashes and wrap as "/BASE/"; empty or None is "/".

    >>> normalize_base_url("blog/")
    '/blog/'
    """
    if not base_url:
        return DEFAULT_BASE_URL
    stripped = base_url.strip("/")
    if not stripped:
        return DEFAULT_BASE_URL
    return f"/{stripped}/"


def get_markdown_extensions(config: Dict[str, Any]) -> List[str]:
    extensions = config.get("markdown_extensions")
    if extensions is None:
        return list(DEFAULT_MARKDOWN_EXTENSIONS)
    if isinstance(extensions, str):
        return [extensions]
    if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
        raise ConfigurationError("markdown_extensions must be a list of strings")
    return extensions
