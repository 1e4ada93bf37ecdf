#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for bbview.

Configuration files hold two optional tables, ``parser`` and ``viewer``,
whose keys are the fields of :class:`~bbview.options.BBCodeParserOptions`
and :class:`~bbview.options.ViewerOptions`::

    # .bbview.toml
    [parser]
    strict_mode = false

    [viewer]
    max_depth = 128
    apply_font_color = true
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from bbview.constants import CONFIG_FILENAMES
from bbview.exceptions import ConfigError, ValidationError
from bbview.options.bbcode import BBCodeParserOptions
from bbview.options.viewer import ViewerOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BBViewConfig:
    """Options loaded from a configuration file."""

    parser: BBCodeParserOptions = field(default_factory=BBCodeParserOptions)
    viewer: ViewerOptions = field(default_factory=ViewerOptions)
    source: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[Path] = None) -> BBViewConfig:
        """Build options from a loaded configuration mapping.

        Raises
        ------
        ConfigError
            If the mapping has unknown sections or invalid option values

        """
        unknown = set(data) - {"parser", "viewer"}
        if unknown:
            raise ConfigError(f"Unknown configuration section(s): {', '.join(sorted(unknown))}", str(source))
        try:
            return cls(
                parser=BBCodeParserOptions.from_mapping(_table(data, "parser", source)),
                viewer=ViewerOptions.from_mapping(_table(data, "viewer", source)),
                source=source,
            )
        except (ValidationError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {source or 'mapping'}: {e}", str(source), e) from e


def _table(data: Dict[str, Any], name: str, source: Optional[Path]) -> Dict[str, Any]:
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(table).__name__}", str(source))
    return table


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.bbview] section from pyproject.toml, or {} if absent."""
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get("bbview", {})
    if not isinstance(config, dict):
        raise ConfigError(f"[tool.bbview] in {pyproject_path} must be a table", str(pyproject_path))
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir`` (default: cwd).

    In each directory the dedicated files are checked first, then a
    pyproject.toml that has a [tool.bbview] section.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError:
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the cwd, its parents, then the home directory."""
    found = find_config_in_parents()
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration mapping from a JSON, TOML, YAML or pyproject.toml file.

    Raises
    ------
    ConfigError
        If the file is missing, unreadable or not a mapping

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(f"Unsupported config file format: {ext}. Use .json, .toml or .yaml", str(config_path))
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file must contain a mapping at root level, got {type(config).__name__}", str(config_path)
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> BBViewConfig:
    """Load configuration with priority: explicit path, env var path, auto-discovery.

    Returns default options when no file is found.
    """
    path: Optional[Path]
    if explicit_path:
        path = Path(explicit_path)
    elif env_var_path:
        path = Path(env_var_path)
    else:
        path = discover_config_file()

    if path is None:
        return BBViewConfig()

    logger.debug("Loading configuration from %s", path)
    return BBViewConfig.from_dict(load_config_file(path), source=path)
