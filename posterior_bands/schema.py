"""Define standardized column names for summary and draw DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized column labels.

    These column names are used in every table produced by the package so
    summaries, long-format draws and exported CSVs stay consistent.

    Attributes:
        median: Column holding the per-point posterior median.

        lower: Column holding the lower credible bound, i.e. the empirical
            quantile at ``lower_prob``.

        upper: Column holding the upper credible bound, i.e. the empirical
            quantile at ``upper_prob``.

        width: Column holding ``upper - lower``; added at reporting time only.

        interval: Formatted ``"median [lower, upper]"`` label added at
            reporting time only.

        draw: Draw index (row of the draw matrix) in long-format tables.

        value: Simulated value in long-format tables.
    """

    median: str = "median"
    lower: str = "lower"
    upper: str = "upper"
    width: str = "width"
    interval: str = "interval"
    draw: str = "draw"
    value: str = "value"


COLUMNS = SummaryColumns()
