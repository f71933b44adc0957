"""
Statistical utilities for posterior summaries.

This subpackage holds the numerical routines behind the summarizer. All
functions operate on arrays; no table or column logic is included.

Modules:
    quantiles:
        Column-wise empirical quantiles pinned to the type-7 (linear
        interpolation) estimator.

Design Principle:
    This subpackage has no dependencies on the table-level modules. It
    provides pure numerical utilities that can be independently tested.
"""

from .quantiles import QUANTILE_METHOD, column_median, column_quantiles

__all__ = [
    "QUANTILE_METHOD",
    "column_median",
    "column_quantiles",
]
