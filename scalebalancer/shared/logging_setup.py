"""
Logging configuration.

Diagnostics go to stderr so that stdout carries only the balancing report.
"""

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: str = "WARNING",
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Install a single stream handler on the package logger.
    
    Args:
        level: Logging level name
        fmt: Log record format
        stream: Target stream (default: stderr)
        
    Returns:
        The configured package logger
    """
    logger = logging.getLogger("scalebalancer")
    logger.setLevel(level.upper())
    
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    
    return logger
