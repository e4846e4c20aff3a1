"""
Logging helpers for cyclegraph.
"""

import logging
from typing import Union

__all__ = ["LOG_FORMAT", "setup_logger"]

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = 'cyclegraph', level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure a logger writing to the console.

    Calling it again for the same logger only updates the level.

    Args:
        name: Name of the logger
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, '_cyclegraph_handler', False):
            handler.setLevel(level)
            return logger

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._cyclegraph_handler = True

    logger.addHandler(console_handler)

    return logger
