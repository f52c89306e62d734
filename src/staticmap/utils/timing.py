"""Timing utilities."""

import logging
import time
from contextlib import contextmanager
from typing import Generator, Optional

from .log import get_logger

logger = get_logger(__name__)


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, name: str = "Operation", log: Optional[logging.Logger] = None):
        """
        Initialize timer.

        Args:
            name: Name/description of the operation being timed
            log: Logger receiving the elapsed-time record (module logger if None)
        """
        self.name = name
        self.log = log if log is not None else logger
        self.start_time: Optional[float] = None
        self.elapsed_time: Optional[float] = None

    def __enter__(self) -> "Timer":
        """Start timing."""
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Stop timing and record elapsed time."""
        if self.start_time is not None:
            self.elapsed_time = time.perf_counter() - self.start_time
            self.log.info("%s took %.4f seconds", self.name, self.elapsed_time)

    @property
    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.elapsed_time is None:
            raise ValueError("Timer has not been used as context manager yet")
        return self.elapsed_time


@contextmanager
def timer(name: str = "Operation", log: Optional[logging.Logger] = None) -> Generator[Timer, None, None]:
    """
    Context manager for timing code blocks (convenience function).

    Args:
        name: Name/description of the operation being timed
        log: Logger receiving the elapsed-time record

    Yields:
        Timer instance
    """
    with Timer(name, log=log) as t:
        yield t
