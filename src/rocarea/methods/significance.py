"""Permutation/bootstrap significance test for the binned ROC area.

The null distribution of D is estimated by pooling both samples, drawing
resampled pairs of the original sizes with replacement, and recomputing D on
the bin edges of the observed samples. The observed D is then located within
that distribution to obtain a p-value oriented toward the tail it falls in.

Resamples are evaluated in batches with PyTorch; each row of a batch is an
independent iteration, so results depend only on the random draws.
"""

from dataclasses import dataclass
from typing import Literal

import numpy as np
import torch
from numpy.typing import ArrayLike, NDArray

from .auc_estimator import AUCEstimate, Binning, as_sample, compute_binning, estimate_auc
from .method_utils import as_tensor, resolve_device, torch_batched_cdf
from .percentile import percentile_of

# Type alias for rescaling of the final statistic
Transform = Literal["none", "swap", "scale"]

TRANSFORMS: tuple[str, ...] = ("none", "swap", "scale")

DEFAULT_BATCH_SIZE = 1024


@dataclass
class SignificanceResult:
    """Observed ROC area and its bootstrap significance.

    Attributes:
        d: Observed area under the ROC curve.
        p_value: Percentile of d within the bootstrap distribution, flipped to
            the upper tail when d exceeds the bootstrap mean. None without
            bootstrap.
        sem: Standard deviation of the bootstrap distribution. None without
            bootstrap.
        distribution: Bootstrap values of D. None without bootstrap.
    """

    d: float
    p_value: float | None = None
    sem: float | None = None
    distribution: NDArray | None = None


def apply_transform(d: float, transform: Transform = "none") -> float:
    """Rescale an ROC area.

    Args:
        d: Area under the ROC curve.
        transform: 'none' leaves d unchanged, 'swap' folds it around 0.5 into
            [0.5, 1], 'scale' maps [0, 1] onto [-1, 1].

    Returns:
        Transformed statistic.
    """
    if transform == "none":
        return d
    if transform == "swap":
        return abs(d - 0.5) + 0.5
    if transform == "scale":
        return 2 * (d - 0.5)
    raise ValueError(f"Unknown transform: {transform!r}. Expected one of {TRANSFORMS}")


def bootstrap_distribution(
    x: ArrayLike,
    y: ArrayLike,
    n_bootstrap: int,
    binning: Binning | None = None,
    rng: np.random.Generator | int | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    device: torch.device | str | None = None,
) -> NDArray:
    """Null distribution of D from resampling the pooled samples.

    Each iteration draws ``len(x) + len(y)`` indices into the pooled sample
    uniformly with replacement. The first ``len(x)`` values form the
    resampled x and the rest the resampled y.

    Args:
        x: First sample.
        y: Second sample.
        n_bootstrap: Number of resamples.
        binning: Shared binning; computed from x and y if omitted.
        rng: Seed or numpy Generator for the index draws.
        batch_size: Resamples evaluated per tensor batch.
        device: Torch device (defaults to CUDA if available).

    Returns:
        Array of n_bootstrap resampled D values.
    """
    x = as_sample(x)
    y = as_sample(y)
    if binning is None:
        binning = compute_binning(x, y)
    if n_bootstrap <= 0:
        return np.empty(0)
    if binning.is_degenerate:
        return np.full(n_bootstrap, np.nan)

    rng = np.random.default_rng(rng)
    device = resolve_device(device)

    n_x = len(x)
    n_total = n_x + len(y)
    pooled_t = as_tensor(np.concatenate([x, y]), device)
    edges_t = as_tensor(binning.edges, device)

    chunks = []
    for start in range(0, n_bootstrap, batch_size):
        n_batch = min(batch_size, n_bootstrap - start)
        indices = rng.integers(0, n_total, size=(n_batch, n_total))
        resampled = pooled_t[as_tensor(indices, device)]

        cdf_x = torch_batched_cdf(resampled[:, :n_x], edges_t)
        cdf_y = torch_batched_cdf(resampled[:, n_x:], edges_t)
        chunks.append(torch.trapezoid(cdf_x, x=cdf_y, dim=1).cpu().numpy())

    return np.concatenate(chunks).astype(np.float64)


def bootstrap_significance(
    x: ArrayLike,
    y: ArrayLike,
    n_bootstrap: int,
    rng: np.random.Generator | int | None = None,
    binning: Binning | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    device: torch.device | str | None = None,
    estimate: AUCEstimate | None = None,
) -> SignificanceResult:
    """Observed ROC area with a permutation-test p-value and standard error.

    Results vary between runs unless rng is fixed.

    Args:
        x: First sample.
        y: Second sample.
        n_bootstrap: Number of resamples; 0 skips the test.
        rng: Seed or numpy Generator for the resampling.
        binning: Shared binning; computed once from x and y if omitted.
        batch_size: Resamples evaluated per tensor batch.
        device: Torch device (defaults to CUDA if available).
        estimate: Observed estimate on the same binning, computed if omitted.

    Returns:
        SignificanceResult. p_value, sem and distribution are None when
        n_bootstrap <= 0.
    """
    x = as_sample(x)
    y = as_sample(y)
    if binning is None:
        binning = compute_binning(x, y)

    if estimate is None:
        estimate = estimate_auc(x, y, binning)
    d = estimate.d
    if n_bootstrap <= 0:
        return SignificanceResult(d=d)

    distribution = bootstrap_distribution(
        x, y, n_bootstrap, binning=binning, rng=rng, batch_size=batch_size, device=device
    )

    p_value = percentile_of(distribution, d)
    # Report the tail the observed statistic falls in
    if d > np.mean(distribution):
        p_value = 1 - p_value

    # Sample standard deviation; a single resample has no spread
    sem = float(np.std(distribution, ddof=1)) if distribution.size > 1 else 0.0

    return SignificanceResult(d=d, p_value=p_value, sem=sem, distribution=distribution)
