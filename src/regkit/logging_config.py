"""
Logging configuration for the regkit namespace.

Library modules only create module-level loggers and log at DEBUG, e.g. for
skipped parameters, registered energy terms and released components.
Applications and scripts call :func:`setup_logging` to make these visible.
"""

import logging
import sys
from typing import List, Optional, TextIO

from regkit.constants import LOG_DATE_FORMAT, LOG_FORMAT, LOGGER_NAME

# Handlers installed by setup_logging, replaced on the next call
_installed_handlers: List[logging.Handler] = []


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the logger of the 'regkit' namespace.

    Calling the function again replaces the handlers of the previous call.
    Handlers attached to the logger by other code are left untouched.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING).
        log_file: Optional path to also write log records to. The file is
                  overwritten.
        stream: Stream of the console handler, stderr by default.

    Returns:
        The configured 'regkit' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: List[logging.Handler] = [
        logging.StreamHandler(stream if stream is not None else sys.stderr)
    ]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed_handlers.append(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
