"""
Loads observation and coefficient-draw tables and applies log transforms.
"""

# The sleep/brain-mass relationship is modelled on log10 scales, so raw
# columns are transformed before a grid is built over the predictor. Rows
# with missing or non-positive inputs cannot be logged and are dropped.

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def load_table(filepath):
    """
    Load a table from a CSV file.

    Args:
        filepath (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Loaded DataFrame.
    """
    return pd.read_csv(filepath)


def add_log10_columns(df, columns, prefix="log10_"):
    """Add base-10 log columns, dropping rows that cannot be transformed.

    Args:
        df: Input :class:`pandas.DataFrame`.
        columns: Column names to transform.
        prefix: Prefix for the new column names.

    Returns:
        pd.DataFrame: Copy of ``df`` restricted to rows where every listed
        column is a positive number, with ``prefix + column`` columns added.

    Raises:
        KeyError: If any listed column is missing.
    """
    columns = list(columns)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not found for log transform: {missing}")

    out = df.copy()
    numeric = out[columns].apply(pd.to_numeric, errors="coerce")
    keep = (numeric > 0).all(axis=1)
    n_dropped = int((~keep).sum())
    if n_dropped:
        logger.info(
            "Dropped %d of %d rows with missing or non-positive values in %s",
            n_dropped,
            len(out),
            columns,
        )

    out = out.loc[keep].reset_index(drop=True)
    numeric = numeric.loc[keep].reset_index(drop=True)
    for col in columns:
        out[f"{prefix}{col}"] = np.log10(numeric[col].to_numpy(dtype=float))
    return out
