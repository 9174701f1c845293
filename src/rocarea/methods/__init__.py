"""ROC area estimation and significance testing."""

from .auc_estimator import (
    AUCEstimate,
    Binning,
    auc_from_cdfs,
    compute_binning,
    empirical_cdf,
    estimate_auc,
)
from .percentile import percentile_of
from .roc_area import ROCResult, compute_roc, validate_inputs
from .significance import (
    SignificanceResult,
    Transform,
    apply_transform,
    bootstrap_distribution,
    bootstrap_significance,
)

__all__ = [
    "AUCEstimate",
    "Binning",
    "ROCResult",
    "SignificanceResult",
    "Transform",
    "apply_transform",
    "auc_from_cdfs",
    "bootstrap_distribution",
    "bootstrap_significance",
    "compute_binning",
    "compute_roc",
    "empirical_cdf",
    "estimate_auc",
    "percentile_of",
    "validate_inputs",
]
