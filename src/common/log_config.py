"""
Logging Configuration

Operator-facing log lines for a generator run. Every recovered
per-product failure (homepage fetch, favicon probe, download, content
write) surfaces here and nowhere else.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the 'src' logger hierarchy.

    Args:
        verbose: If True, set level to DEBUG (shows discovered asset URLs)
        quiet: If True, set level to WARNING (failures only)

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("src")
    logger.setLevel(level)

    # Safe to call more than once
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
