"""Logging infrastructure for routeacl.

Library modules only call ``get_logger``; handlers are attached by the
embedding application or the command line entry point through
``setup_logger``.
"""

import logging
import logging.handlers
import os

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
MAX_LOG_BYTES = 10485760  # 10MB
LOG_BACKUP_COUNT = 5


def _parse_level(level: object) -> int:
    if not isinstance(level, str) or level.upper() not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level: {level!r}. Must be one of: {', '.join(VALID_LEVELS)}"
        )
    return getattr(logging, level.upper())


def setup_logger(
    name: str,
    log_dir: str = "/var/log/routeacl",
    level: str = "INFO",
    file_logging: bool = False,
    console_logging: bool = True,
) -> logging.Logger:
    """Set up a named logger.

    Calling it again for the same name only changes the level.

    Args:
        name: Logger name (acl_registry, acl_loader, ...)
        log_dir: Directory for the rotating ``<name>.log`` file
        level: Logging level name, case-insensitive
        file_logging: Write to ``log_dir``
        console_logging: Write to stderr

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is not a known level name
    """
    logger = logging.getLogger(name)
    logger.setLevel(_parse_level(level))

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{name}.log"),
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name."""
    return logging.getLogger(name)
