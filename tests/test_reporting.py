"""Tests for reporting-layer formatting and validation."""

import pandas as pd
import pytest

from posterior_bands.reporting import (
    add_interval_columns,
    format_interval,
    interval_decimal_places,
    validate_summary_columns,
)


def test_interval_decimal_places():
    assert interval_decimal_places(0.04) == 2
    assert interval_decimal_places(0.3) == 1
    assert interval_decimal_places(0.15) == 2
    assert interval_decimal_places(4.0) == 0
    assert interval_decimal_places(0.0) == 2


def test_format_interval():
    assert format_interval(3.0, 1.0, 5.0, 0) == "3 [1, 5]"
    assert format_interval(1.23456, 1.2, 1.3, 2) == "1.23 [1.20, 1.30]"


def test_add_interval_columns_per_row_precision():
    summary = pd.DataFrame(
        {
            "point_id": [1, 2],
            "median": [1.2345, 10.0],
            "lower": [1.21, 8.0],
            "upper": [1.25, 12.0],
        }
    )
    out = add_interval_columns(summary)

    assert out.loc[0, "interval"] == "1.23 [1.21, 1.25]"
    assert out.loc[1, "interval"] == "10 [8, 12]"
    assert out["width"].tolist() == pytest.approx([0.04, 4.0])
    assert "interval" not in summary.columns


def test_add_interval_columns_fixed_precision():
    summary = pd.DataFrame({"median": [2.0], "lower": [1.0], "upper": [3.0]})
    out = add_interval_columns(summary, decimals=1)
    assert out.loc[0, "interval"] == "2.0 [1.0, 3.0]"


def test_validate_rejects_unordered_rows():
    summary = pd.DataFrame({"median": [1.0, 2.0], "lower": [0.0, 2.5], "upper": [2.0, 3.0]})
    with pytest.raises(ValueError, match="lower <= median <= upper"):
        validate_summary_columns(summary)


def test_validate_rejects_missing_values():
    summary = pd.DataFrame({"median": [1.0], "lower": [None], "upper": [2.0]})
    with pytest.raises(ValueError):
        validate_summary_columns(summary)


def test_validate_requires_summary_columns():
    with pytest.raises(KeyError, match="upper"):
        validate_summary_columns(pd.DataFrame({"median": [1.0], "lower": [0.0]}))


def test_interval_decimal_places_resolves_tiny_widths():
    assert interval_decimal_places(1e-13) >= 13
    assert interval_decimal_places(3e-13) == 13
    assert interval_decimal_places(0.0999) == 2


def test_interval_decimal_places_rejects_invalid_width():
    with pytest.raises(ValueError):
        interval_decimal_places(-0.1)
    with pytest.raises(ValueError):
        interval_decimal_places(float("nan"))


def test_add_interval_columns_tiny_interval_keeps_precision():
    summary = pd.DataFrame({"median": [1e-13], "lower": [0.0], "upper": [3e-13]})
    out = add_interval_columns(summary)
    assert out.loc[0, "interval"] == "0.0000000000001 [0.0000000000000, 0.0000000000003]"
