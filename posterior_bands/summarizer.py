"""Summarize an ensemble of posterior draws into per-point credible bands.

This is the computational core shared by every band in the analysis: the
credible band for the fitted mean and the posterior predictive band both pass
a draw matrix (rows = posterior draws, columns = prediction points) through
``summarize`` and receive one row per point with the median and a two-sided
credible interval, joined back to the point covariates.
"""

from __future__ import annotations

import logging
import math
import warnings

import numpy as np
import pandas as pd

from .config import DEFAULT_LOWER_PROB, DEFAULT_UPPER_PROB
from .errors import (
    DuplicateKeyError,
    InvalidProbabilityError,
    MissingDrawError,
    PosteriorSummaryError,
    ShapeMismatchError,
)
from .schema import COLUMNS
from .stats.quantiles import column_quantiles

logger = logging.getLogger(__name__)


def check_probabilities(lower_prob: float, upper_prob: float) -> tuple[float, float]:
    """Validate interval probabilities and return them as floats.

    Raises:
        InvalidProbabilityError: If either value is non-finite, outside
            [0, 1], or ``lower_prob > upper_prob``.
    """
    try:
        lo = float(lower_prob)
        hi = float(upper_prob)
    except (TypeError, ValueError) as exc:
        raise InvalidProbabilityError(
            [lower_prob, upper_prob], "probabilities must be numeric"
        ) from exc

    for p in (lo, hi):
        if not math.isfinite(p) or p < 0.0 or p > 1.0:
            raise InvalidProbabilityError([p], "probabilities must lie in [0, 1]")
    if lo > hi:
        raise InvalidProbabilityError(
            [lo, hi], "lower_prob must not exceed upper_prob"
        )
    if lo > 0.5 or hi < 0.5:
        warnings.warn(
            f"Interval [{lo}, {hi}] does not contain the median; "
            "lower <= median <= upper is not guaranteed.",
            UserWarning,
            stacklevel=3,
        )
    return lo, hi


def check_draw_matrix(draws) -> np.ndarray:
    """Return ``draws`` as a finite 2-D float array with at least one cell.

    Raises:
        PosteriorSummaryError: If the values cannot be read as numbers.
        ShapeMismatchError: If the array is not 2-D or has an empty axis.
        MissingDrawError: If any cell is NaN or infinite.
    """
    try:
        arr = np.asarray(draws, dtype=float)
    except (TypeError, ValueError) as exc:
        raise PosteriorSummaryError("Draw matrix must be numeric.") from exc

    if arr.ndim != 2:
        raise ShapeMismatchError(
            "a 2-D (draws x points) matrix", f"{arr.ndim}-D array of shape {arr.shape}"
        )
    if arr.shape[0] < 1 or arr.shape[1] < 1:
        raise ShapeMismatchError("at least one draw and one point", arr.shape)

    finite = np.isfinite(arr)
    if not finite.all():
        bad_cols = np.flatnonzero(~finite.all(axis=0))
        raise MissingDrawError(int(np.sum(~finite)), bad_cols)
    return arr


def check_point_table(
    point_table: pd.DataFrame, point_id_column: str, n_points: int
) -> None:
    """Validate the point table against the draw matrix column count.

    Raises:
        KeyError: If ``point_id_column`` is not a column of ``point_table``.
        ShapeMismatchError: If the row count differs from ``n_points``.
        DuplicateKeyError: If the point ids are not unique.
    """
    if point_id_column not in point_table.columns:
        raise KeyError(
            f"Point id column '{point_id_column}' not found in point table; "
            f"available columns: {list(point_table.columns)}"
        )
    if len(point_table) != n_points:
        raise ShapeMismatchError(
            f"{n_points} point table rows (one per draw matrix column)",
            f"{len(point_table)} rows",
        )
    ids = point_table[point_id_column]
    dupes = ids[ids.duplicated()]
    if not dupes.empty:
        raise DuplicateKeyError(point_id_column, pd.unique(dupes))


def summarize(
    draws,
    point_table: pd.DataFrame,
    point_id_column: str,
    lower_prob: float = DEFAULT_LOWER_PROB,
    upper_prob: float = DEFAULT_UPPER_PROB,
) -> pd.DataFrame:
    """Reduce a draw matrix to a per-point median and credible interval.

    Args:
        draws (numpy.ndarray | pandas.DataFrame): Draw matrix of shape
            ``(S, P)``; column ``j`` holds the ``S`` posterior draws for the
            point in row ``j`` of ``point_table``. No missing values allowed.
        point_table (pandas.DataFrame): Exactly ``P`` rows, in draw-matrix
            column order, with a unique ``point_id_column`` and any number of
            covariate columns.
        point_id_column (str): Name of the join key column.
        lower_prob (float, optional): Probability of the lower bound.
            Defaults to ``0.025``.
        upper_prob (float, optional): Probability of the upper bound.
            Defaults to ``0.975``.

    Returns:
        pandas.DataFrame: ``P`` rows in ``point_table`` order with columns
        ``point_id_column``, ``median``, ``lower``, ``upper`` followed by the
        remaining ``point_table`` columns.

    Raises:
        InvalidProbabilityError: If the probabilities are out of range or
            unordered.
        ShapeMismatchError: If the draw matrix is not a non-empty 2-D array
            or its column count differs from the point table row count.
        KeyError: If ``point_id_column`` is missing from ``point_table``.
        DuplicateKeyError: If point ids repeat.
        MissingDrawError: If the draw matrix holds non-finite values.
        ValueError: If the id column or a covariate column is named like a
            summary column.

    Note:
        Quantiles use type-7 linear interpolation between order statistics,
        so results are reproducible byte-for-byte for identical inputs.
    """
    lo, hi = check_probabilities(lower_prob, upper_prob)
    arr = check_draw_matrix(draws)
    check_point_table(point_table, point_id_column, arr.shape[1])

    stat_cols = [COLUMNS.median, COLUMNS.lower, COLUMNS.upper]
    if point_id_column in stat_cols:
        raise ValueError(
            f"Point id column '{point_id_column}' collides with summary column names."
        )
    clashes = [c for c in point_table.columns if c in stat_cols]
    if clashes:
        raise ValueError(
            f"Point table columns {clashes} collide with summary column names."
        )

    q = column_quantiles(arr, [lo, 0.5, hi])
    stats = pd.DataFrame(
        {
            point_id_column: point_table[point_id_column].to_numpy(),
            COLUMNS.median: q[1],
            COLUMNS.lower: q[0],
            COLUMNS.upper: q[2],
        }
    )

    covariates = [c for c in point_table.columns if c != point_id_column]
    out = point_table.reset_index(drop=True).merge(
        stats, on=point_id_column, how="left", sort=False, validate="one_to_one"
    )
    out = out[[point_id_column, *stat_cols, *covariates]]

    logger.debug(
        "Summarized %d points from %d draws at probabilities (%.4g, %.4g)",
        arr.shape[1],
        arr.shape[0],
        lo,
        hi,
    )
    return out
