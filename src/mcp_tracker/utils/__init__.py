"""
Utility functions for the MCP Tracker integration.
"""

from .env import getenv_first, is_env_extended_truthy, is_env_ssl_verify
from .io import is_read_only_mode
from .logging import log_config_param, mask_sensitive

__all__ = [
    "getenv_first",
    "is_env_extended_truthy",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "log_config_param",
    "mask_sensitive",
]
