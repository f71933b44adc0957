"""Write summary tables to reproducible CSV files.

This module is the boundary between in-memory summaries and the tabular
artifacts handed to a renderer or a report.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import pandas as pd

from .reporting import add_interval_columns

logger = logging.getLogger(__name__)


def save_summary_to_csv(
    summary: pd.DataFrame,
    output_dir: str = "output",
    filename: str = "summary.csv",
    decimals: Optional[int] = None,
) -> str:
    """Save a summary table with reporting columns to CSV.

    Args:
        summary (pandas.DataFrame): Output from ``summarize``.
        output_dir (str): Directory where the CSV is written; created if
            missing.
        filename (str): File name inside ``output_dir``.
        decimals (int, optional): Fixed precision for the ``interval`` label.

    Returns:
        str: Path to the written CSV.

    Raises:
        KeyError: If summary columns are missing.
        ValueError: If summary rows are invalid; nothing is written.
    """
    report = add_interval_columns(summary, decimals=decimals)

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    report.to_csv(path, index=False)
    logger.info("Saved %d summary rows to %s", len(report), path)
    return path


def save_long_draws_to_csv(
    long_draws: pd.DataFrame,
    output_dir: str = "output",
    filename: str = "draws.csv",
) -> str:
    """Save long-format draws to CSV and return the path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    long_draws.to_csv(path, index=False)
    logger.info("Saved %d draw rows to %s", len(long_draws), path)
    return path
