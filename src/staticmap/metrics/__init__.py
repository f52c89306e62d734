"""Metrics module for staticmap."""

from staticmap.metrics.histogram import Histogram
from staticmap.metrics.stats import gini_coefficient, mean_ci95

__all__ = [
    "Histogram",
    "gini_coefficient",
    "mean_ci95",
]
