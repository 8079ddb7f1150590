"""Logging setup shared by the console programs."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "PARLOR_LOG_LEVEL"
DISABLE_LOGGING_ENV = "PARLOR_DISABLE_LOGGING"


def resolve_level(verbose: bool = False) -> int:
    """Pick the root level from the flag and the environment."""
    if os.environ.get(DISABLE_LOGGING_ENV, "").lower() in ("1", "true", "yes"):
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, "").upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the ``parlor`` logger.

    Game output goes to stdout, so log lines never interleave with prompts
    when stderr is redirected.
    """
    logger = logging.getLogger("parlor")
    logger.setLevel(resolve_level(verbose))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
