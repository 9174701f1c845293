"""Visualization of ROC area results."""

from .plot_roc import plot_roc_curve

__all__ = [
    "plot_roc_curve",
]
