"""Format and validate summary tables for reporting.

This module is used after summarization to add human-readable interval
columns with a precision matched to each interval's width.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from .schema import COLUMNS

_SUMMARY_COLUMNS = (COLUMNS.median, COLUMNS.lower, COLUMNS.upper)
ZERO_WIDTH_DECIMALS = 2


def interval_decimal_places(width: float) -> int:
    """Return decimal places that resolve an interval width.

    The width is read to one significant figure, or two when its leading
    digit is 1, and the decimals needed to show that last figure are returned.

    Args:
        width (float): Interval width ``upper - lower`` in the units of the
            summarized outcome.

    Returns:
        int: Number of decimal places the median and bounds should use.
        Zero-width intervals (``lower == upper``) use ``ZERO_WIDTH_DECIMALS``.

    Raises:
        ValueError: If width is non-finite or negative.

    Note:
        Keeps the printed precision of a summary consistent with how much the
        posterior actually pins the value down.
    """
    w = float(width)
    if not np.isfinite(w) or w < 0:
        raise ValueError(f"Width must be finite and >= 0, got {width!r}")
    if w == 0.0:
        return ZERO_WIDTH_DECIMALS

    exponent = int(np.floor(np.log10(w)))
    leading = w / (10.0**exponent)
    if leading >= 10.0:
        exponent += 1
        leading /= 10.0
    sig_figs = 2 if leading < 2.0 else 1
    return max(0, sig_figs - 1 - exponent)


def format_interval(median: float, lower: float, upper: float, decimals: int) -> str:
    """Format a median and its interval as ``"median [lower, upper]"``."""
    return f"{median:.{decimals}f} [{lower:.{decimals}f}, {upper:.{decimals}f}]"


def validate_summary_columns(summary: pd.DataFrame) -> None:
    """Validate a summary table before it is reported.

    Args:
        summary (pandas.DataFrame): Output of
            :func:`posterior_bands.summarizer.summarize`.

    Returns:
        None: Raise on invalid content and otherwise return nothing.

    Raises:
        KeyError: If ``median``, ``lower`` or ``upper`` is missing.
        ValueError: If any of them is non-finite or a row has
            ``lower > median`` or ``median > upper``.
    """
    for col in _SUMMARY_COLUMNS:
        if col not in summary.columns:
            raise KeyError(f"Missing summary column '{col}' for reporting.")

    med = pd.to_numeric(summary[COLUMNS.median], errors="coerce").to_numpy(dtype=float)
    lo = pd.to_numeric(summary[COLUMNS.lower], errors="coerce").to_numpy(dtype=float)
    hi = pd.to_numeric(summary[COLUMNS.upper], errors="coerce").to_numpy(dtype=float)

    bad = ~(np.isfinite(med) & np.isfinite(lo) & np.isfinite(hi))
    bad |= (lo > med) | (med > hi)
    if bool(bad.any()):
        bad_rows = list(summary.index[bad][:5])
        raise ValueError(
            "Summary rows must be finite with lower <= median <= upper. "
            f"Example row indices: {bad_rows}."
        )


def add_interval_columns(
    summary: pd.DataFrame, decimals: Optional[int] = None
) -> pd.DataFrame:
    """Add ``width`` and formatted ``interval`` columns to a summary table.

    Args:
        summary (pandas.DataFrame): Validated summary table.
        decimals (int, optional): Fixed decimal places for every row. When
            omitted, each row uses the precision implied by its width.

    Returns:
        pandas.DataFrame: Copy of ``summary`` with the two columns appended.

    Raises:
        KeyError: If summary columns are absent.
        ValueError: If summary rows are invalid.
    """
    out = summary.copy()
    validate_summary_columns(out)

    out[COLUMNS.width] = out[COLUMNS.upper] - out[COLUMNS.lower]
    labels = []
    for med, lo, hi, w in zip(
        out[COLUMNS.median], out[COLUMNS.lower], out[COLUMNS.upper], out[COLUMNS.width]
    ):
        dp = decimals if decimals is not None else interval_decimal_places(w)
        labels.append(format_interval(med, lo, hi, dp))
    out[COLUMNS.interval] = labels
    return out
