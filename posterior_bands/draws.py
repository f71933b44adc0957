"""Generate and reshape draw matrices from posterior coefficient draws.

Model fitting happens elsewhere; this module consumes what a fitted Bayesian
linear model exports (one row of coefficients per posterior draw) and turns it
into draw matrices on a point table:

- fitted-mean (linear predictor) draws, the source of the credible band,
- posterior predictive draws, which add residual noise, and
- long-format draws for plotting individual regression lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

import numpy as np
import pandas as pd

from .config import DEFAULT_CONFIG, SummaryConfig
from .schema import COLUMNS
from .summarizer import check_draw_matrix, check_point_table, summarize

logger = logging.getLogger(__name__)

DRAW_KINDS = ("linpred", "predict")


class DrawSource(Protocol):
    """Anything that can simulate a draw matrix for a point table."""

    def linpred_draws(self, point_table: pd.DataFrame) -> np.ndarray:
        ...

    def predictive_draws(self, point_table: pd.DataFrame) -> np.ndarray:
        ...


@dataclass(frozen=True, eq=False)
class LinearPosterior:
    """Draw source backed by posterior draws of a Gaussian linear model.

    Attributes:
        coefficients: One row per posterior draw with the intercept, one slope
            per predictor (named like the predictor), and the residual scale.
        predictors: Covariate columns the slopes apply to.
        intercept_column: Column of ``coefficients`` holding the intercept.
        sigma_column: Column of ``coefficients`` holding the residual SD.
        seed: Seed for residual noise; each call starts a fresh generator so
            repeated calls are identical.
    """

    coefficients: pd.DataFrame
    predictors: Sequence[str]
    intercept_column: str = "(Intercept)"
    sigma_column: str = "sigma"
    seed: Optional[int] = None

    def __post_init__(self):
        required = [self.intercept_column, *self.predictors]
        missing = [c for c in required if c not in self.coefficients.columns]
        if missing:
            raise KeyError(f"Coefficient draws missing columns: {missing}")
        if len(self.coefficients) < 1:
            raise ValueError("Coefficient draws must contain at least one draw.")

    @property
    def n_draws(self) -> int:
        return int(len(self.coefficients))

    def linpred_draws(self, point_table: pd.DataFrame) -> np.ndarray:
        """Return fitted-mean draws, shape ``(n_draws, len(point_table))``."""
        missing = [c for c in self.predictors if c not in point_table.columns]
        if missing:
            raise KeyError(f"Point table missing predictor columns: {missing}")

        intercept = self.coefficients[self.intercept_column].to_numpy(dtype=float)
        betas = self.coefficients[list(self.predictors)].to_numpy(dtype=float)
        x = point_table[list(self.predictors)].to_numpy(dtype=float)
        return intercept[:, None] + betas @ x.T

    def predictive_draws(self, point_table: pd.DataFrame) -> np.ndarray:
        """Return posterior predictive draws including residual noise."""
        if self.sigma_column not in self.coefficients.columns:
            raise KeyError(
                f"Coefficient draws missing residual scale column '{self.sigma_column}'"
            )
        sigma = self.coefficients[self.sigma_column].to_numpy(dtype=float)
        if np.any(~np.isfinite(sigma)) or np.any(sigma < 0):
            raise ValueError("Residual scale draws must be finite and >= 0.")

        mu = self.linpred_draws(point_table)
        rng = np.random.default_rng(self.seed)
        return mu + rng.normal(0.0, 1.0, size=mu.shape) * sigma[:, None]


def summarize_draw_source(
    source: DrawSource,
    point_table: pd.DataFrame,
    point_id_column: str,
    kind: str = "linpred",
    config: SummaryConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """Simulate draws of the requested kind and summarize them per point.

    Args:
        source (DrawSource): Simulator for the fitted model.
        point_table (pandas.DataFrame): Points to summarize.
        point_id_column (str): Join key column of ``point_table``.
        kind (str, optional): ``"linpred"`` for the fitted-mean band or
            ``"predict"`` for the posterior predictive band.
        config (SummaryConfig, optional): Interval probabilities.

    Returns:
        pandas.DataFrame: Output of :func:`posterior_bands.summarizer.summarize`.

    Raises:
        ValueError: If ``kind`` is not one of ``DRAW_KINDS``.
    """
    if kind == "linpred":
        draws = source.linpred_draws(point_table)
    elif kind == "predict":
        draws = source.predictive_draws(point_table)
    else:
        raise ValueError(f"kind must be one of {DRAW_KINDS}, got {kind!r}")

    logger.info("Summarizing %s draws for %d points", kind, len(point_table))
    return summarize(
        draws,
        point_table,
        point_id_column,
        lower_prob=config.lower_prob,
        upper_prob=config.upper_prob,
    )


def draws_to_long(
    draws,
    point_table: pd.DataFrame,
    point_id_column: str,
    n_draws: Optional[int] = None,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Reshape a draw matrix into one row per (draw, point).

    Args:
        draws (numpy.ndarray | pandas.DataFrame): Draw matrix ``(S, P)``.
        point_table (pandas.DataFrame): ``P`` rows in draw-matrix column order.
        point_id_column (str): Join key column of ``point_table``.
        n_draws (int, optional): If given, keep a random subset of this many
            draws, sampled without replacement.
        seed (int, optional): Seed for the subset selection.

    Returns:
        pandas.DataFrame: Columns ``draw`` (row index in ``draws``),
        ``point_id_column``, ``value`` and the covariates, ordered by draw and
        then by point table order.

    Raises:
        ValueError: If ``n_draws`` is below 1 or exceeds the draw count.

    Note:
        Each draw's rows trace one simulated curve, which is what a
        spaghetti plot of posterior lines renders.
    """
    arr = check_draw_matrix(draws)
    check_point_table(point_table, point_id_column, arr.shape[1])

    n_total, n_points = arr.shape
    rows = np.arange(n_total)
    if n_draws is not None:
        if n_draws < 1 or n_draws > n_total:
            raise ValueError(f"n_draws must be between 1 and {n_total}, got {n_draws}")
        rng = np.random.default_rng(seed)
        rows = np.sort(rng.choice(n_total, size=int(n_draws), replace=False))

    points = point_table.reset_index(drop=True)
    clashes = [c for c in (COLUMNS.draw, COLUMNS.value) if c in points.columns]
    if clashes:
        raise ValueError(
            f"Point table columns {clashes} collide with long-format column names."
        )

    long_df = pd.DataFrame(
        {
            COLUMNS.draw: np.repeat(rows, n_points),
            point_id_column: np.tile(points[point_id_column].to_numpy(), len(rows)),
            COLUMNS.value: arr[rows].ravel(),
        }
    )
    covariates = points.drop(columns=[point_id_column])
    if not covariates.empty:
        tiled = pd.concat([covariates] * len(rows), ignore_index=True)
        long_df = pd.concat([long_df, tiled], axis=1)
    return long_df
