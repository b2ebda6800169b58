"""Logging helpers for configuration values."""

import logging


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping only a few characters at each end.

    Args:
        value: The secret to mask
        keep_chars: Number of characters to keep visible at each end

    Returns:
        The masked string, or "Not Provided" if value is empty
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    start = value[:keep_chars]
    end = value[-keep_chars:]
    middle = "*" * (len(value) - keep_chars * 2)
    return f"{start}{middle}{end}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log one configuration parameter, masking it when sensitive.

    Args:
        logger: The logger to use
        service: The service name (e.g. "Jira")
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value holds a secret
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
