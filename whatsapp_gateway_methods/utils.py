"""
Helper utilities for WhatsApp Gateway Methods SDK.
"""

import os
import logging
from typing import Optional

from .constants import EnvVars, LogConfig


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the SDK's logger.

    Args:
        level: Log level name (or WHATSAPP_LOG_LEVEL, default INFO)
        fmt: Log format (or WHATSAPP_LOG_FORMAT)

    Returns:
        The configured package logger
    """
    level = level or os.getenv(EnvVars.LOG_LEVEL, LogConfig.DEFAULT_LOG_LEVEL)
    fmt = fmt or os.getenv(EnvVars.LOG_FORMAT, LogConfig.DEFAULT_LOG_FORMAT)

    package_logger = logging.getLogger(LogConfig.MAIN_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Reconfiguring replaces the handler instead of stacking another one
    for handler in list(package_logger.handlers):
        if getattr(handler, "_whatsapp_gateway_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._whatsapp_gateway_handler = True
    package_logger.addHandler(handler)

    return package_logger


def mask_secret(value: str, visible: int = 4) -> str:
    """Mask all but the last ``visible`` characters of a secret."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return f"{'*' * (len(value) - visible)}{value[-visible:]}"
