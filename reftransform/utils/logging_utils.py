"""
Logging setup for applications using reftransform.

The library itself only emits records through module loggers under the
"reftransform" namespace and never configures handlers on import.
"""

from typing import Optional
import logging

PACKAGE_LOGGER = "reftransform"


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    logger_name: str = PACKAGE_LOGGER
) -> logging.Logger:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file. If provided, logs will be written to file.
        logger_name: Logger to configure (the package logger by default)

    Returns:
        The configured logger
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG if log_file else level)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger
