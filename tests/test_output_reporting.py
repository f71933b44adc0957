"""Tests for export-layer behavior."""

import os

import numpy as np
import pandas as pd
import pytest

from posterior_bands.output import save_long_draws_to_csv, save_summary_to_csv
from posterior_bands.summarizer import summarize


def test_save_summary_round_trip(tmp_path, small_draws):
    draws, points = small_draws
    summary = summarize(draws, points, "id", lower_prob=0.0, upper_prob=1.0)

    path = save_summary_to_csv(summary, output_dir=str(tmp_path / "out"), filename="band.csv")

    assert path.endswith("band.csv")
    saved = pd.read_csv(path)
    assert list(saved.columns) == [
        "id",
        "median",
        "lower",
        "upper",
        "x",
        "width",
        "interval",
    ]
    np.testing.assert_allclose(saved["median"], [3.0, 30.0])
    assert saved["interval"].tolist() == ["3 [1, 5]", "30 [10, 50]"]


def test_save_summary_fails_without_writing(tmp_path):
    summary = pd.DataFrame({"id": [1], "median": [1.0], "lower": [2.0], "upper": [3.0]})
    with pytest.raises(ValueError):
        save_summary_to_csv(summary, output_dir=str(tmp_path))
    assert not os.path.exists(tmp_path / "summary.csv")


def test_save_long_draws(tmp_path):
    long_df = pd.DataFrame({"draw": [0, 0], "id": [1, 2], "value": [0.5, 0.7]})
    path = save_long_draws_to_csv(long_df, output_dir=str(tmp_path))
    pd.testing.assert_frame_equal(pd.read_csv(path), long_df)
