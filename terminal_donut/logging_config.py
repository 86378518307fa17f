"""
Log handlers for the `terminal_donut` logger.

Standard output carries the animation frames, so records go to standard error, and
optionally to a file as well.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Route the package's log records to stderr and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call, so the CLI
    and tests can reconfigure freely without duplicating records.

    Args:
        level (int): Threshold for the package logger and its handlers.
        log_file (Optional[str]): Path of a log file, truncated on open.
    """
    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging to %s", "stderr and " + log_file if log_file else "stderr")
