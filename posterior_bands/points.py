"""
Build point tables: the covariate grids at which draws are generated.
"""

# A band needs fitted or predicted draws on a regular grid spanning the
# observed predictor. ``seq_range`` produces that grid for one column and
# ``build_point_table`` crosses several columns into a table with ids.

from __future__ import annotations

from typing import Iterable, Mapping

import numpy as np
import pandas as pd


def seq_range(values: Iterable[float], n: int, expand: float = 0.0) -> np.ndarray:
    """Return ``n`` evenly spaced values spanning the finite range of ``values``.

    Args:
        values: Observed values of a numeric covariate.
        n (int): Number of grid points; must be at least 1.
        expand (float, optional): Fraction of the range added on each side.
            Defaults to ``0.0``.

    Returns:
        numpy.ndarray: Grid from ``min - expand*range`` to
        ``max + expand*range``. With ``n == 1`` only the lower end is returned.

    Raises:
        ValueError: If ``n < 1``, ``expand < 0``, or no finite values exist.
    """
    if int(n) < 1:
        raise ValueError("n must be >= 1")
    if expand < 0:
        raise ValueError("expand must be >= 0")

    arr = np.asarray(list(values), dtype=float)
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        raise ValueError("seq_range requires at least one finite value.")

    lo = float(np.min(arr))
    hi = float(np.max(arr))
    pad = expand * (hi - lo)
    return np.linspace(lo - pad, hi + pad, int(n))


def build_point_table(
    grid: Mapping[str, Iterable], point_id_column: str = "point_id"
) -> pd.DataFrame:
    """Cross covariate values into a point table with integer ids.

    Args:
        grid: Mapping of covariate column name to the values it takes. The
            first column varies slowest.
        point_id_column (str, optional): Name of the id column placed first.
            Defaults to ``"point_id"``.

    Returns:
        pandas.DataFrame: One row per combination, ids ``1..P``.

    Raises:
        ValueError: If ``grid`` is empty, any column has no values, or a
            covariate is named like the id column.
    """
    if not grid:
        raise ValueError("grid must name at least one covariate column.")
    if point_id_column in grid:
        raise ValueError(
            f"Covariate name '{point_id_column}' clashes with the point id column."
        )

    levels = {}
    for name, vals in grid.items():
        vals = list(vals)
        if not vals:
            raise ValueError(f"Grid column '{name}' has no values.")
        levels[name] = vals

    index = pd.MultiIndex.from_product(list(levels.values()), names=list(levels))
    table = index.to_frame(index=False)
    table.insert(0, point_id_column, np.arange(1, len(table) + 1))
    return table
