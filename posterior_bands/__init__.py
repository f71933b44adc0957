"""
A Python package for summarizing Bayesian posterior draws into credible bands.

Turns matrices of posterior draws (rows = draws, columns = prediction points)
into per-point medians and credible intervals, for visualizing the uncertainty
of a fitted regression line and of its posterior predictions.

Modules:
    - summarizer: Reduces a draw matrix to a per-point median and interval.
    - points: Builds the covariate grids (point tables) draws are made on.
    - draws: Simulates draw matrices from posterior coefficient draws and
      reshapes draws for plotting individual lines.
    - data_processing: Loads CSV tables and applies log10 transforms.
    - reporting / output: Formats and exports summary tables.
"""

__version__ = "1.0.0"

from .config import DEFAULT_CONFIG, SummaryConfig
from .data_processing import add_log10_columns, load_table
from .draws import (
    DRAW_KINDS,
    DrawSource,
    LinearPosterior,
    draws_to_long,
    summarize_draw_source,
)
from .errors import (
    DuplicateKeyError,
    InvalidProbabilityError,
    MissingDrawError,
    PosteriorSummaryError,
    ShapeMismatchError,
)
from .output import save_long_draws_to_csv, save_summary_to_csv
from .points import build_point_table, seq_range
from .reporting import add_interval_columns, format_interval, validate_summary_columns
from .schema import COLUMNS, SummaryColumns
from .summarizer import summarize

__all__ = [
    # Core
    "summarize",
    # Errors
    "PosteriorSummaryError",
    "ShapeMismatchError",
    "DuplicateKeyError",
    "InvalidProbabilityError",
    "MissingDrawError",
    # Configuration and schema
    "SummaryConfig",
    "DEFAULT_CONFIG",
    "SummaryColumns",
    "COLUMNS",
    # Point tables
    "seq_range",
    "build_point_table",
    # Draws
    "DRAW_KINDS",
    "DrawSource",
    "LinearPosterior",
    "summarize_draw_source",
    "draws_to_long",
    # Data processing
    "load_table",
    "add_log10_columns",
    # Reporting and output
    "add_interval_columns",
    "format_interval",
    "validate_summary_columns",
    "save_summary_to_csv",
    "save_long_draws_to_csv",
]
