"""
Logging utilities for the kpoints package.

Library modules only create loggers (``logging.getLogger(__name__)``);
nothing is configured on import. Applications and scripts call
setup_logger() to see the catalog build and dispatch messages.
"""

import logging
import sys
from typing import Optional, TextIO, Union


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = "kpoints",
                 level: Union[int, str] = logging.INFO,
                 stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Set up and return a configured logger.

    Calling it again for the same name keeps the existing handler and
    only updates the level.

    Args:
        name: Logger name (default: the package logger)
        level: Logging level, as a number or a name such as 'DEBUG'
        stream: Output stream (default: sys.stdout)

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
