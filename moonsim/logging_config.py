"""
Logging configuration for the 'moonsim' logger, shared by the CLI and the API.
"""
import logging
import sys
from typing import Optional

from moonsim.constants import debug_enabled

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def default_level() -> int:
    """DEBUG when MOONSIM_DEBUG is set, WARNING otherwise."""
    return logging.DEBUG if debug_enabled() else logging.WARNING


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Attach a stderr handler (and optionally a file handler) to the package
    logger. Safe to call more than once.

    Args:
        level: Logging level; falls back to ``default_level()``.
        log_file: Optional path that receives the same records.
    """
    if level is None:
        level = default_level()

    logger = logging.getLogger("moonsim")
    logger.setLevel(level)
    # Records stop here so uvicorn's root configuration does not print them twice.
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized at %s.", logging.getLevelName(level))
