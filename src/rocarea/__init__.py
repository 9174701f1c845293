"""Receiver-operator characteristic area for two samples.

This package computes the binned area under the ROC curve separating two
samples and assesses its significance with a permutation/bootstrap test.
"""

from . import methods, viz
from .methods import (
    ROCResult,
    bootstrap_significance,
    compute_roc,
    estimate_auc,
    percentile_of,
)

__all__ = [
    "ROCResult",
    "bootstrap_significance",
    "compute_roc",
    "estimate_auc",
    "methods",
    "percentile_of",
    "viz",
]
