"""ROC curve plot built from the two empirical CDFs."""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from numpy.typing import ArrayLike


def plot_roc_curve(
    cdf_x: ArrayLike,
    cdf_y: ArrayLike,
    d: float,
    ax: Axes | None = None,
    color: str = "steelblue",
) -> Axes:
    """Plot the ROC curve traced by two empirical CDFs.

    cdf_y runs along the horizontal axis and cdf_x along the vertical one, so
    the area under the drawn curve is d. A black diagonal marks the curve of
    two identical samples.

    Args:
        cdf_x: Empirical CDF of the first sample.
        cdf_y: Empirical CDF of the second sample.
        d: Area under the curve, shown as the title.
        ax: Matplotlib axes object. If None, creates new figure.
        color: Color of the ROC curve.

    Returns:
        Matplotlib Axes object containing the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))

    ax.plot(np.asarray(cdf_y), np.asarray(cdf_x), "-", color=color, linewidth=2.0, label="ROC")
    ax.plot([0, 1], [0, 1], "k-", linewidth=1.0, label="Chance")

    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.set_aspect("equal")
    ax.set_xlabel("CDF of y")
    ax.set_ylabel("CDF of x")
    ax.set_title(f"{d:.4g}")

    return ax
