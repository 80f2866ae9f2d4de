"""
Logging Utilities

Library-level logging setup. Mockli never configures the root logger; it only
adjusts the level of its own ``mockli`` logger namespace.
"""

import logging
from typing import Any, Dict, Optional

from mockli.config_factory import VALID_LOG_LEVELS, ConfigError, get_config_or_default

LIBRARY_LOGGER_NAME = 'mockli'


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Apply a log level to the library logger.

    Args:
        level: Level name such as 'debug'. Defaults to the configured log_level.

    Returns:
        The ``mockli`` logger

    Raises:
        ConfigError: If the level name is not a known log level
    """
    if level is None:
        level = get_config_or_default().log_level

    if not isinstance(level, str) or level.lower() not in VALID_LOG_LEVELS:
        raise ConfigError(f"Invalid log_level: {level!r}", {"valid": list(VALID_LOG_LEVELS)})

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(level.upper())
    if not library_logger.handlers:
        library_logger.addHandler(logging.NullHandler())
    return library_logger


def log_builder_action(logger: logging.Logger, builder_name: str, action: str,
                       context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log builder actions at debug level with consistent formatting.

    Args:
        logger: Module logger to write to
        builder_name: Name of the builder class
        action: Action being performed
        context: Optional context information
    """
    context_str = f" Context: {context}" if context else ""
    logger.debug(f"{builder_name}: {action}{context_str}")
