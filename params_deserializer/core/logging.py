"""Root logging configuration for the CLI and web integration.

Library modules only create module-level loggers; handlers are installed by
the entry points through configure_root_logging().
"""

import logging

from params_deserializer.core.config.schema import VALID_LOG_LEVELS

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def normalize_log_level(log_level: str | None) -> str:
    """Return an upper-case level name, falling back to INFO.

    Only the first word is used so values like "DEBUG  # verbose" still work.
    """
    if not log_level or not log_level.split():
        return "INFO"
    level = log_level.split()[0].upper()
    return level if level in VALID_LOG_LEVELS else "INFO"


def configure_root_logging(log_level: str | None = "INFO") -> logging.Handler:
    """Install a single stream handler on the root logger.

    Returns:
        The installed handler.
    """
    level = normalize_log_level(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))
    return handler
