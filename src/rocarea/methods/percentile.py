"""Interpolated percentile of a value within a sample."""

import warnings

import numpy as np
from numpy.typing import ArrayLike
from scipy import interpolate


def percentile_of(sample: ArrayLike, value: float) -> float:
    """Fraction of the sample distribution at or below value.

    The sorted sample is assigned mid-rank probabilities ``(i - 0.5) / L``.
    Runs of tied values are reduced to a single anchor so interpolation never
    crosses a flat run: every run followed by a larger value is anchored at
    its last element, the final run at its first. The value is interpolated
    linearly against the anchors, extrapolating past either end, and the
    result is clamped to [0, 1].

    Args:
        sample: Statistic values, e.g. a bootstrap distribution.
        value: Query value.

    Returns:
        Percentile in [0, 1], or NaN if the sample is empty, value or sample
        contain NaN, or interpolation fails.

    Examples:
        >>> percentile_of([5, 5, 5], 5)
        1.0
        >>> percentile_of([1, 2, 3, 4], 2.5)
        0.5
    """
    sample = np.asarray(sample, dtype=np.float64).ravel()
    if sample.size == 0:
        warnings.warn("Cannot compute a percentile of an empty sample.", RuntimeWarning, stacklevel=2)
        return np.nan
    if np.isnan(value) or np.any(np.isnan(sample)):
        warnings.warn("Cannot compute a percentile involving NaN values.", RuntimeWarning, stacklevel=2)
        return np.nan

    unique_values = np.unique(sample)
    if len(unique_values) == 1:
        # Legacy indicator for constant samples, not a true percentile:
        # 1 if value equals the constant, 0 otherwise.
        return float(unique_values[0] == value)

    sorted_sample = np.sort(sample)
    n = len(sorted_sample)
    probs = (np.arange(1, n + 1) - 0.5) / n

    change_idx = np.flatnonzero(np.diff(sorted_sample) != 0)
    anchors = np.append(change_idx, change_idx[-1] + 1)

    try:
        interpolator = interpolate.interp1d(
            sorted_sample[anchors],
            probs[anchors],
            kind="linear",
            fill_value="extrapolate",
            assume_sorted=True,
        )
        p = float(interpolator(value))
    except ValueError as exc:
        warnings.warn(f"Percentile interpolation failed: {exc}", RuntimeWarning, stacklevel=2)
        return np.nan

    return float(np.clip(p, 0.0, 1.0))
