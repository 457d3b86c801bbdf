"""
Logging configuration using loguru.

The CLI calls setup_logging() at startup with the configured level and
optional log file; library modules just import loguru's logger directly.
"""

import sys

from loguru import logger

from kalendaryo.core.exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Replace loguru's handlers with a stderr sink and an optional rotating file sink.

    Args:
        level: Minimum log level name, case-insensitive (see ``LOG_LEVELS``).
        log_file: Path to log file. If None or empty, only logs to stderr.
        fmt: Loguru format string for the stderr sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.

    Raises:
        ConfigurationError: If ``level`` is not a known level name.
    """
    level = str(level).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")

    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
            rotation=rotation,
            retention=retention,
        )
