"""Utilities module for staticmap."""

from staticmap.utils.log import configure_logging, get_logger
from staticmap.utils.timing import Timer, timer

__all__ = [
    "configure_logging",
    "get_logger",
    "Timer",
    "timer",
]
