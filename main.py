#!/usr/bin/env python3
"""
Main script for building posterior credible bands from coefficient draws.
"""

# Pipeline overview (README-style):
# 1) Load posterior coefficient draws exported from a fitted linear model and
#    the observations the model was fit to.
# 2) Optionally log10-transform the predictor and outcome columns.
# 3) Build an evenly spaced grid over the observed predictor range.
# 4) Simulate fitted-mean and posterior predictive draws on the grid and
#    summarize each into a per-point median and credible interval.
# 5) Export both bands plus a subset of individual posterior lines to CSV.

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from posterior_bands.config import SummaryConfig
from posterior_bands.data_processing import add_log10_columns, load_table
from posterior_bands.draws import LinearPosterior, draws_to_long, summarize_draw_source
from posterior_bands.output import save_long_draws_to_csv, save_summary_to_csv
from posterior_bands.points import build_point_table, seq_range

POINT_ID = "point_id"


def build_parser():
    parser = argparse.ArgumentParser(
        description="Summarize posterior draws of a linear model into credible bands."
    )
    parser.add_argument("--coefficients", required=True, help="CSV of coefficient draws.")
    parser.add_argument("--observations", required=True, help="CSV of observed data.")
    parser.add_argument("--predictor", required=True, help="Predictor column name.")
    parser.add_argument("--outcome", default=None, help="Outcome column (for --log10).")
    parser.add_argument(
        "--log10",
        action="store_true",
        help="Model predictor/outcome on log10 scale (columns prefixed log10_).",
    )
    parser.add_argument("--n-points", type=int, default=80)
    parser.add_argument("--mass", type=float, default=0.95, help="Credible mass.")
    parser.add_argument("--n-lines", type=int, default=100, help="Posterior lines kept.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output-dir", default="output")
    parser.add_argument("--log-file", default="posterior_bands.log")
    return parser


def main(argv=None):
    """Main execution function with step timing logs."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(args.log_file, mode="w"),
        ],
    )

    start_time = time.time()
    logging.info("Initializing posterior band pipeline")

    for option, value in (("--n-points", args.n_points), ("--n-lines", args.n_lines)):
        if value < 1:
            logging.error("%s must be >= 1, got %d. Terminating execution.", option, value)
            return 1

    for path in (args.coefficients, args.observations):
        if not os.path.exists(path):
            logging.error("Input file not found: %s. Terminating execution.", path)
            return 1

    coefficients = load_table(args.coefficients)
    observations = load_table(args.observations)
    logging.info(
        "Loaded %d coefficient draws and %d observations",
        len(coefficients),
        len(observations),
    )

    predictor = args.predictor
    if args.log10:
        columns = [predictor] + ([args.outcome] if args.outcome else [])
        observations = add_log10_columns(observations, columns)
        predictor = f"log10_{predictor}"

    point_table = build_point_table(
        {predictor: seq_range(observations[predictor], args.n_points)},
        point_id_column=POINT_ID,
    )
    logging.info("Built %d-point grid over %s", len(point_table), predictor)

    source = LinearPosterior(coefficients, predictors=[predictor], seed=args.seed)
    config = SummaryConfig.from_mass(args.mass)

    step_start = time.time()
    linpred = summarize_draw_source(source, point_table, POINT_ID, "linpred", config)
    predictive = summarize_draw_source(source, point_table, POINT_ID, "predict", config)
    logging.info(
        "Band summaries completed in %.2f seconds", time.time() - step_start
    )

    n_lines = min(args.n_lines, source.n_draws)
    lines = draws_to_long(
        source.linpred_draws(point_table),
        point_table,
        POINT_ID,
        n_draws=n_lines,
        seed=args.seed,
    )

    os.makedirs(args.output_dir, exist_ok=True)
    linpred_csv = save_summary_to_csv(linpred, args.output_dir, "linpred_band.csv")
    predictive_csv = save_summary_to_csv(
        predictive, args.output_dir, "predictive_band.csv"
    )
    lines_csv = save_long_draws_to_csv(lines, args.output_dir, "spaghetti_draws.csv")

    total_duration = time.time() - start_time
    logging.info(f"Total execution time: {total_duration:.2f} seconds")
    logging.info("Generated output files:")
    logging.info("  - Fitted-mean band: %s", linpred_csv)
    logging.info("  - Posterior predictive band: %s", predictive_csv)
    logging.info("  - Posterior lines: %s", lines_csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
