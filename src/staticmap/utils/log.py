"""Logger setup shared by the library, the CLI and benchmarks."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER = "staticmap"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time."""

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: Optional[int] = None,
) -> logging.Logger:
    """
    Get a logger, optionally mirroring its records to a file.

    Library modules call this with ``__name__`` and attach no handlers;
    scripts pass ``log_file`` and/or ``level`` to get output.

    Args:
        name: Logger name
        log_file: If given, append records to this file
        level: Logging level for this logger

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        resolved = str(log_file.resolve())
        already = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == resolved
            for h in logger.handlers
        )
        if not already:
            handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

    return logger


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package root logger (idempotent).

    Args:
        level: Level for the package root logger

    Returns:
        The package root logger
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    if not any(isinstance(h, StderrHandler) for h in root.handlers):
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root
