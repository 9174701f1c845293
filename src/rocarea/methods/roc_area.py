"""Receiver-operator characteristic area for two samples.

``compute_roc`` is the single entry point: it validates its arguments,
estimates the area under the ROC curve, optionally runs the bootstrap
significance test, rescales the statistic and can draw the ROC curve.
"""

import numbers
import warnings
from dataclasses import dataclass

import numpy as np
import torch
from numpy.typing import ArrayLike, NDArray

from .auc_estimator import compute_binning, estimate_auc
from .significance import (
    DEFAULT_BATCH_SIZE,
    TRANSFORMS,
    Transform,
    apply_transform,
    bootstrap_significance,
)


@dataclass
class ROCResult:
    """Results of an ROC area computation.

    Attributes:
        d: Area under the ROC curve after the requested transform.
        p_value: Bootstrap p-value, None if no bootstrap was requested.
        sem: Standard deviation of the bootstrap distribution, None if no
            bootstrap was requested.
        cdf_x: Empirical CDF of the first sample.
        cdf_y: Empirical CDF of the second sample.
        distribution: Untransformed bootstrap values of D, None if no
            bootstrap was requested.
    """

    d: float
    p_value: float | None
    sem: float | None
    cdf_x: NDArray
    cdf_y: NDArray
    distribution: NDArray | None = None


def _validate_sample(values: ArrayLike, name: str) -> NDArray:
    arr = np.asarray(values)
    if arr.dtype.kind not in "biuf":
        raise TypeError(f"{name} must be numeric, got dtype {arr.dtype}")
    arr = arr.astype(np.float64).ravel()
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must contain only finite values")
    return arr


def validate_inputs(
    x: ArrayLike,
    y: ArrayLike,
    bootstrap: int = 0,
    transform: Transform = "none",
    display: bool = False,
) -> tuple[NDArray, NDArray]:
    """Check arguments of compute_roc.

    Args:
        x: First sample.
        y: Second sample.
        bootstrap: Number of bootstrap resamples.
        transform: Rescaling of the result.
        display: Whether to plot the ROC curve.

    Returns:
        Tuple of (x, y) flattened to 1-D float64 arrays.

    Raises:
        TypeError: If a sample is not numeric, bootstrap is not an integer or
            display is not boolean.
        ValueError: If a sample has non-finite values, bootstrap is negative
            or transform is unknown.
    """
    x = _validate_sample(x, "x")
    y = _validate_sample(y, "y")

    if isinstance(bootstrap, bool) or not isinstance(bootstrap, numbers.Integral):
        raise TypeError(f"bootstrap must be an integer, got {type(bootstrap).__name__}")
    if bootstrap < 0:
        raise ValueError(f"bootstrap must be non-negative, got {bootstrap}")

    if transform not in TRANSFORMS:
        raise ValueError(f"Unknown transform: {transform!r}. Expected one of {TRANSFORMS}")

    if not isinstance(display, (bool, np.bool_)) and display not in (0, 1):
        raise TypeError(f"display must be boolean, got {display!r}")

    return x, y


def compute_roc(
    x: ArrayLike,
    y: ArrayLike,
    bootstrap: int = 0,
    transform: Transform = "none",
    display: bool = False,
    rng: np.random.Generator | int | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    device: torch.device | str | None = None,
) -> ROCResult:
    """Compute the area under the ROC curve for samples x and y.

    D is 0.5 when the samples are not separated, approaches 1 when x lies
    entirely below y and 0 when x lies entirely above y.

    Args:
        x: First sample.
        y: Second sample.
        bootstrap: Number of bootstrap resamples for the permutation test;
            0 skips it.
        transform: 'none', 'swap' (rescale to [0.5, 1]) or 'scale'
            (rescale to [-1, 1]). Applied to D only.
        display: Plot the ROC curve.
        rng: Seed or numpy Generator for the resampling.
        batch_size: Resamples evaluated per tensor batch.
        device: Torch device for the bootstrap (defaults to CUDA if available).

    Returns:
        ROCResult with D, the p-value and SEM (None without bootstrap) and
        both empirical CDFs.
    """
    x, y = validate_inputs(x, y, bootstrap, transform, display)

    # Shared binning, reused by every bootstrap resample
    binning = compute_binning(x, y)
    estimate = estimate_auc(x, y, binning)

    significance = bootstrap_significance(
        x,
        y,
        bootstrap,
        rng=rng,
        binning=binning,
        batch_size=batch_size,
        device=device,
        estimate=estimate,
    )

    d = apply_transform(estimate.d, transform)

    if display:
        try:
            from ..viz import plot_roc_curve

            ax = plot_roc_curve(estimate.cdf_x, estimate.cdf_y, d)
            ax.figure.show()
        except ImportError:
            warnings.warn(
                "Visualization module not available. Install matplotlib to enable plotting.",
                stacklevel=2,
            )

    return ROCResult(
        d=d,
        p_value=significance.p_value,
        sem=significance.sem,
        cdf_x=estimate.cdf_x,
        cdf_y=estimate.cdf_y,
        distribution=significance.distribution,
    )
