"""Unit tests for the ROC curve plot."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from rocarea.methods.auc_estimator import estimate_auc  # noqa: E402
from rocarea.viz import plot_roc_curve  # noqa: E402


@pytest.fixture
def estimate():
    return estimate_auc([1, 2, 3, 4, 5], [3, 5, 7, 9, 11])


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotROCCurve:
    def test_creates_axes(self, estimate):
        ax = plot_roc_curve(estimate.cdf_x, estimate.cdf_y, estimate.d)

        assert ax is not None
        assert ax.get_title() == f"{estimate.d:.4g}"

    def test_curve_and_reference_line(self, estimate):
        ax = plot_roc_curve(estimate.cdf_x, estimate.cdf_y, estimate.d)

        roc_line, chance_line = ax.get_lines()
        assert np.allclose(roc_line.get_xdata(), estimate.cdf_y)
        assert np.allclose(roc_line.get_ydata(), estimate.cdf_x)
        assert np.allclose(chance_line.get_xdata(), [0, 1])
        assert np.allclose(chance_line.get_ydata(), [0, 1])

    def test_area_under_drawn_curve_is_d(self, estimate):
        ax = plot_roc_curve(estimate.cdf_x, estimate.cdf_y, estimate.d)

        roc_line = ax.get_lines()[0]
        area = np.trapezoid(roc_line.get_ydata(), x=roc_line.get_xdata())
        assert area == pytest.approx(estimate.d)

    def test_uses_given_axes(self, estimate):
        fig, ax = plt.subplots()

        returned = plot_roc_curve(estimate.cdf_x, estimate.cdf_y, estimate.d, ax=ax)

        assert returned is ax
