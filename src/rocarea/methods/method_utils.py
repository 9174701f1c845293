"""Shared utilities for PyTorch-based resampling."""

import numpy as np
import torch
from numpy.typing import NDArray
from torch import Tensor


def resolve_device(device: torch.device | str | None = None) -> torch.device:
    """Return the requested device, defaulting to CUDA if available."""
    if device is None:
        return torch.device("cuda" if torch.cuda.is_available() else "cpu")
    return torch.device(device)


def as_tensor(
    values: NDArray | Tensor,
    device: torch.device | str | None = None,
    dtype: torch.dtype | None = None,
) -> Tensor:
    """Place a sample, index array or bin edges on the resampling device.

    Numpy arrays share memory with the result on CPU; tensors are moved as
    needed. dtype is preserved unless given.
    """
    if isinstance(values, np.ndarray):
        values = np.ascontiguousarray(values)
    return torch.as_tensor(values, dtype=dtype, device=resolve_device(device))


def torch_batched_cdf(samples: Tensor, edges: Tensor) -> Tensor:
    """Empirical CDFs for a batch of equally sized samples on shared bin edges.

    Bin k collects values with ``edges[k] <= v < edges[k+1]``. Values below
    the first edge, or at or above the last edge, are not counted.

    Args:
        samples: (B, n) tensor, one sample per row.
        edges: (m,) increasing bin edges, m >= 2.

    Returns:
        (B, m - 1) tensor of cumulative counts divided by n. Rows are NaN
        when n == 0.
    """
    n_batch, n = samples.shape
    n_bins = len(edges) - 1

    # bucketize(right=True) returns i with edges[i-1] <= v < edges[i]
    bin_idx = torch.bucketize(samples.contiguous(), edges, right=True) - 1
    in_range = (bin_idx >= 0) & (bin_idx < n_bins)

    # Out-of-range values are routed to a scratch column that gets dropped
    bin_idx = bin_idx.masked_fill(~in_range, n_bins)
    counts = torch.zeros((n_batch, n_bins + 1), dtype=samples.dtype, device=samples.device)
    counts.scatter_add_(1, bin_idx, torch.ones_like(samples))

    return torch.cumsum(counts[:, :n_bins], dim=1) / n
