"""Environment variable helpers for configuration files.

Supports ``${VAR_NAME}`` and ``${VAR_NAME:-default}`` references inside YAML
text and loading ``.env`` files through python-dotenv.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv

from headinglinks.lib.errors import ConfigError
from headinglinks.lib.logging_config import get_logger

logger = get_logger(__name__)

_ENV_REF_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


def get_env_var(
    name: str,
    default: str | None = None,
    env_vars: Mapping[str, str] | None = None,
) -> str | None:
    """Return an environment variable, or ``default`` when unset.

    Args:
        name: Variable name
        default: Value returned when the variable is unset
        env_vars: Mapping to read from; defaults to ``os.environ``
    """
    source = env_vars if env_vars is not None else os.environ
    return source.get(name, default)


def substitute_env_vars(text: str, env_vars: Mapping[str, str] | None = None) -> str:
    """Replace ``${VAR}`` references in text with environment values.

    Args:
        text: Raw configuration text
        env_vars: Mapping to resolve references from; defaults to ``os.environ``

    Returns:
        Text with every reference substituted

    Raises:
        ConfigError: If a referenced variable is unset and has no default
    """

    def _replace(match: re.Match[str]) -> str:
        name, default = match.group(1), match.group(2)
        value = get_env_var(name, env_vars=env_vars)
        if value is not None:
            return value
        if default is not None:
            return default
        raise ConfigError(
            name,
            f"Environment variable '{name}' is referenced in configuration "
            f"but not set. Set it or use ${{{name}:-default}}.",
        )

    return _ENV_REF_RE.sub(_replace, text)


def load_env_file(path: str | Path | None = None, override: bool = False) -> bool:
    """Load variables from a ``.env`` file if it exists.

    Args:
        path: Path to the file; defaults to ``.env`` in the working directory
        override: Whether file values replace variables already set

    Returns:
        True if a file was found and loaded
    """
    env_path = Path(path) if path is not None else Path.cwd() / ".env"
    if not env_path.is_file():
        logger.debug(f"No .env file at {env_path}")
        return False
    logger.debug(f"Loading environment from {env_path}")
    return load_dotenv(env_path, override=override)
