"""Provide column-wise empirical quantiles with a pinned estimator.

All quantiles use Hyndman & Fan type 7: for probability ``q`` and a sorted
sample of size ``S`` the estimate interpolates linearly between the order
statistics at ``floor(q*(S-1))`` and ``ceil(q*(S-1))``. This is numpy's
``method="linear"`` and the default of most statistics packages.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

QUANTILE_METHOD = "linear"


def column_quantiles(draws: np.ndarray, probs: Sequence[float]) -> np.ndarray:
    """Compute type-7 quantiles for every column of a draw matrix.

    Args:
        draws (numpy.ndarray): Finite 2-D array of shape ``(S, P)``; rows are
            posterior draws and columns are prediction points.
        probs (Sequence[float]): Probabilities in [0, 1].

    Returns:
        numpy.ndarray: Array of shape ``(len(probs), P)``; row ``k`` holds the
        quantile at ``probs[k]`` for each column.

    Note:
        Inputs are not validated here; callers check shape, finiteness and
        probability range first.

    References:
        Hyndman, R. J. and Fan, Y. (1996). Sample quantiles in statistical
        packages. The American Statistician, 50(4), 361-365.
    """
    arr = np.asarray(draws, dtype=float)
    q = np.asarray(probs, dtype=float)
    return np.quantile(arr, q, axis=0, method=QUANTILE_METHOD).reshape(len(q), arr.shape[1])


def column_median(draws: np.ndarray) -> np.ndarray:
    """Return the per-column median, identical to the type-7 quantile at 0.5."""
    return column_quantiles(draws, [0.5])[0]
