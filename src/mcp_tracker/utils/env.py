"""Environment variable utility functions for MCP Tracker."""

import os


def is_env_extended_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to an extended truthy value.

    Considers 'true', '1', 'yes', 'y', 'on' as truthy values (case-insensitive).
    Used for READ_ONLY_MODE and similar flags.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes", "y", "on")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to 'false', '0' or 'no'.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def getenv_first(*env_var_names: str) -> str | None:
    """Return the first non-empty value among several environment variables.

    Args:
        *env_var_names: Variable names in order of precedence

    Returns:
        The first non-empty value, or None if none of them is set
    """
    for name in env_var_names:
        value = os.getenv(name)
        if value:
            return value
    return None
