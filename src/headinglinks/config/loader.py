"""Configuration loader for headinglinks.

This module provides the ConfigLoader class for loading, parsing, and
validating link list configuration from YAML files, environment variables
and explicit overrides.
"""

import copy
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from headinglinks.config.defaults import (
    CONFIG_FILE_NAMES,
    DEFAULT_LINK_LIST_CONFIG,
)
from headinglinks.config.env_loader import substitute_env_vars
from headinglinks.config.validator import flatten_pydantic_errors
from headinglinks.lib.errors import ConfigError, FileNotFoundError
from headinglinks.lib.logging_config import get_logger
from headinglinks.models.config import LinkListConfig

logger = get_logger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "repeater_field_name": "HEADINGLINKS_REPEATER_FIELD",
    "subfield_name": "HEADINGLINKS_SUBFIELD",
    "list_title": "HEADINGLINKS_LIST_TITLE",
    "heading_levels": "HEADINGLINKS_HEADING_LEVELS",
    "directive_tag": "HEADINGLINKS_DIRECTIVE_TAG",
}


def _env_overrides(env_vars: Mapping[str, str]) -> dict[str, Any]:
    """Collect configuration values set through environment variables.

    Heading levels stay strings here; the config model parses range syntax.

    Args:
        env_vars: Environment variables mapping

    Returns:
        Mapping of field name to raw value for every variable that is set
    """
    overrides: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name in env_vars:
            overrides[field_name] = env_vars[env_var_name]
    return overrides


def _read_yaml_with_env_substitution(
    path: Path, env_vars: Mapping[str, str] | None = None
) -> dict[str, Any] | None:
    """Read a YAML file with environment variable substitution.

    Args:
        path: Path to YAML file
        env_vars: Mapping used for ${VAR} references; defaults to os.environ

    Returns:
        Parsed dictionary or None if empty

    Raises:
        OSError: If file cannot be read
        yaml.YAMLError: If YAML parsing fails
        ConfigError: If env var substitution fails or the top level
            is not a mapping
    """
    raw_text = path.read_text(encoding="utf-8")
    content = yaml.safe_load(substitute_env_vars(raw_text, env_vars))
    if not content:
        return None
    if not isinstance(content, dict):
        raise ConfigError(
            "yaml_structure",
            f"Expected a mapping at the top of {path}, "
            f"got {type(content).__name__}",
        )
    return content


class ConfigLoader:
    """Loads and validates link list configuration.

    Configuration precedence (highest to lowest):
    1. Explicit overrides (CLI flags)
    2. Environment variables (HEADINGLINKS_*)
    3. Config file (explicit path, or headinglinks.yml|yaml in project dir)
    4. Built-in defaults (DEFAULT_LINK_LIST_CONFIG)
    """

    def __init__(self, env_vars: Mapping[str, str] | None = None) -> None:
        """Initialize the loader.

        Args:
            env_vars: Environment mapping used for HEADINGLINKS_* overrides
                and ${VAR} references in config files;
                defaults to ``os.environ``
        """
        self._env_vars = env_vars
        self._project_configs: dict[str, dict[str, Any] | None] = {}

    def parse_yaml(self, file_path: str) -> dict[str, Any]:
        """Parse a YAML file and return its contents as a dictionary.

        Args:
            file_path: Path to the YAML file to parse

        Returns:
            Parsed content, or an empty dict if the file is empty

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If YAML parsing fails
        """
        path = Path(file_path)
        try:
            return _read_yaml_with_env_substitution(path, self._env_vars) or {}
        except OSError as e:
            raise FileNotFoundError(
                file_path,
                f"Configuration file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

    def find_project_config(self, project_dir: str) -> Path | None:
        """Locate headinglinks.yml|headinglinks.yaml in a directory.

        The ``.yml`` file wins when both exist.
        """
        candidates = [Path(project_dir) / name for name in CONFIG_FILE_NAMES]
        existing = [path for path in candidates if path.is_file()]
        if not existing:
            return None
        if len(existing) > 1:
            logger.info(
                f"Both {existing[0]} and {existing[1]} exist. "
                f"Using {existing[0]} (prefer .yml extension)."
            )
        return existing[0]

    def load_project_config(self, project_dir: str) -> dict[str, Any] | None:
        """Load the raw project configuration, cached per directory.

        Args:
            project_dir: Directory searched for a config file

        Returns:
            Parsed mapping, or None if no config file exists
        """
        if project_dir in self._project_configs:
            return self._project_configs[project_dir]

        config_path = self.find_project_config(project_dir)
        result = None
        if config_path is not None:
            logger.debug(f"Loading project configuration from {config_path}")
            result = self.parse_yaml(str(config_path)) or None
        self._project_configs[project_dir] = result
        return result

    def load_config(
        self,
        config_path: str | None = None,
        project_dir: str | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> LinkListConfig:
        """Resolve the effective configuration.

        Args:
            config_path: Explicit config file; skips project discovery
            project_dir: Directory searched when no explicit file is given;
                defaults to the working directory
            overrides: Highest-precedence values; ``None`` values are ignored

        Returns:
            Validated LinkListConfig

        Raises:
            FileNotFoundError: If an explicit config file is missing
            ConfigError: If parsing or validation fails
        """
        merged: dict[str, Any] = copy.deepcopy(DEFAULT_LINK_LIST_CONFIG)

        if config_path is not None:
            file_config = self.parse_yaml(config_path)
            source = config_path
        else:
            search_dir = project_dir if project_dir is not None else str(Path.cwd())
            file_config = self.load_project_config(search_dir) or {}
            source = search_dir
        merged.update(file_config)

        env_vars = self._env_vars if self._env_vars is not None else os.environ
        env_config = _env_overrides(env_vars)
        if env_config:
            logger.debug(f"Applying environment overrides: {sorted(env_config)}")
        merged.update(env_config)

        if overrides:
            merged.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return LinkListConfig(**merged)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "config_validation",
                f"Invalid configuration from {source}:\n{error_text}",
            ) from e


def load_config(
    config_path: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> LinkListConfig:
    """One-call helper for CLI commands."""
    return ConfigLoader().load_config(config_path=config_path, overrides=overrides)
