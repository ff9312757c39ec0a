"""Configuration loading, validation, and defaults for headinglinks.

Main components:
- ConfigLoader: Resolve LinkListConfig from files, env vars and overrides
- load_config: One-call helper for CLI commands
- Environment variable substitution (${VAR_NAME} pattern)
"""

from headinglinks.config.env_loader import get_env_var, load_env_file, substitute_env_vars
from headinglinks.config.loader import ConfigLoader, load_config

__all__ = [
    "ConfigLoader",
    "load_config",
    "substitute_env_vars",
    "get_env_var",
    "load_env_file",
]
