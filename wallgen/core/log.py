"""Logging setup for the wallgen namespace."""

import logging
import sys

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the 'wallgen' logger to write to stderr.

    Safe to call more than once; existing handlers are replaced.
    """
    logger = logging.getLogger('wallgen')
    logger.setLevel(level)
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
