"""Pin the quantile estimator to Hyndman & Fan type 7."""

import numpy as np
import pytest
from scipy.stats.mstats import mquantiles

from posterior_bands.stats import QUANTILE_METHOD, column_median, column_quantiles


def test_method_is_linear_interpolation():
    assert QUANTILE_METHOD == "linear"


def test_hand_computed_type7_values():
    draws = np.array([[4.0], [1.0], [3.0], [2.0]])
    # sorted [1, 2, 3, 4]; q=0.25 -> index 0.75 -> 1 + 0.75 * (2 - 1)
    out = column_quantiles(draws, [0.0, 0.25, 0.5, 0.9, 1.0])
    np.testing.assert_allclose(out[:, 0], [1.0, 1.75, 2.5, 3.7, 4.0])


@pytest.mark.parametrize("n_draws", [2, 7, 1000])
def test_matches_scipy_type7(n_draws):
    rng = np.random.default_rng(n_draws)
    draws = rng.gamma(shape=2.0, scale=3.0, size=(n_draws, 6))
    probs = [0.025, 0.1, 0.5, 0.9, 0.975]

    expected = np.asarray(mquantiles(draws, prob=probs, alphap=1, betap=1, axis=0))
    out = column_quantiles(draws, probs)

    assert out.shape == (len(probs), 6)
    np.testing.assert_allclose(out, expected, rtol=1e-12, atol=1e-12)


def test_median_matches_numpy_median():
    rng = np.random.default_rng(3)
    draws = rng.normal(size=(31, 4))
    np.testing.assert_allclose(column_median(draws), np.median(draws, axis=0))
