"""
Unit tests for percentile module.

Critical behaviors tested:
1. Constant samples return the 0/1 indicator
2. Mid-rank interpolation with tie reduction
3. Extrapolation is clamped to [0, 1]
4. Monotonicity in the query value
5. Interpolation failures are reported and converted to NaN
"""

import numpy as np
import pytest

from rocarea.methods import percentile as percentile_module
from rocarea.methods.percentile import percentile_of


@pytest.fixture
def rng():
    """Fixed RNG for reproducible tests."""
    return np.random.default_rng(42)


class TestConstantSample:
    """Test the indicator returned for constant samples."""

    def test_value_equal_to_constant(self):
        assert percentile_of([5, 5, 5], 5) == 1.0

    @pytest.mark.parametrize("value", [3.0, 5.5, -np.inf])
    def test_value_different_from_constant(self, value):
        assert percentile_of([5, 5, 5], value) == 0.0

    def test_single_element(self):
        assert percentile_of([0.7], 0.7) == 1.0


class TestInterpolation:
    """Test interpolated percentiles of non-constant samples."""

    @pytest.mark.parametrize(
        "value,expected",
        [(1.0, 0.125), (2.0, 0.375), (2.5, 0.5), (4.0, 0.875)],
        ids=["first", "second", "midpoint", "last"],
    )
    def test_mid_rank_probabilities(self, value, expected):
        """Verify the i-th sorted value maps to (i - 0.5) / L."""
        assert percentile_of([4, 2, 3, 1], value) == pytest.approx(expected)

    def test_linear_extrapolation_inside_bounds(self):
        """Verify values just outside the sample range are extrapolated, not clamped."""
        # Slope 0.25 per unit beyond the first anchor
        assert percentile_of([1, 2, 3, 4], 0.75) == pytest.approx(0.0625)
        assert percentile_of([1, 2, 3, 4], 4.25) == pytest.approx(0.9375)

    @pytest.mark.parametrize("value,expected", [(-100.0, 0.0), (100.0, 1.0)])
    def test_result_clamped(self, value, expected):
        """Verify far extrapolation is clamped to [0, 1]."""
        assert percentile_of([1, 2, 3, 4], value) == expected

    def test_tied_runs_reduced_to_single_anchor(self):
        """Verify ties anchor at the end of each run and the start of the last run."""
        sample = [3, 1, 2, 1, 3, 2]

        # Anchors: (1, 1.5/6), (2, 3.5/6), (3, 4.5/6)
        assert percentile_of(sample, 1) == pytest.approx(1.5 / 6)
        assert percentile_of(sample, 2) == pytest.approx(3.5 / 6)
        assert percentile_of(sample, 3) == pytest.approx(4.5 / 6)
        assert percentile_of(sample, 2.5) == pytest.approx(4.0 / 6)

    def test_monotone_in_value(self, rng):
        """Verify the percentile never decreases as the value grows."""
        sample = rng.integers(0, 6, size=40).astype(float)
        values = np.linspace(-3, 9, 301)

        ps = np.array([percentile_of(sample, v) for v in values])

        assert np.all(np.diff(ps) >= 0)
        assert np.all((ps >= 0) & (ps <= 1))

    def test_matches_empirical_fraction(self, rng):
        """Verify large continuous samples give roughly the empirical CDF."""
        sample = rng.normal(size=5000)

        assert percentile_of(sample, 0.0) == pytest.approx(np.mean(sample <= 0.0), abs=0.01)


class TestFailures:
    """Test degenerate and failing inputs."""

    def test_empty_sample_warns(self):
        with pytest.warns(RuntimeWarning, match="empty sample"):
            assert np.isnan(percentile_of([], 1.0))

    def test_interpolation_error_gives_nan(self, monkeypatch):
        """Verify an interpolation error is reported and converted to NaN."""

        def failing_interp1d(*args, **kwargs):
            raise ValueError("bad anchors")

        monkeypatch.setattr(percentile_module.interpolate, "interp1d", failing_interp1d)

        with pytest.warns(RuntimeWarning, match="bad anchors"):
            assert np.isnan(percentile_of([1, 2, 3], 2.0))

    @pytest.mark.parametrize(
        "sample,value",
        [
            ([np.nan, np.nan, np.nan], np.nan),
            ([np.nan, np.nan, np.nan], 0.5),
            ([1.0, np.nan, 3.0], 2.0),
            ([5.0, 5.0, 5.0], np.nan),
            ([1.0, 2.0, 3.0], np.nan),
        ],
        ids=["all_nan_sample_nan_value", "all_nan_sample", "partial_nan", "constant_nan_value", "nan_value"],
    )
    def test_nan_input_gives_nan(self, sample, value):
        """Verify NaN in sample or value never collapses into a 0/1 percentile."""
        with pytest.warns(RuntimeWarning, match="NaN"):
            assert np.isnan(percentile_of(sample, value))
