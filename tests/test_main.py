"""End-to-end run of the pipeline script on synthetic sleep data."""

import os

import numpy as np
import pandas as pd
import pytest

import main


def _write_inputs(tmp_path):
    rng = np.random.default_rng(0)
    n = 400
    coefs = pd.DataFrame(
        {
            "(Intercept)": rng.normal(0.74, 0.04, n),
            "log10_brainwt": rng.normal(-0.13, 0.02, n),
            "sigma": np.abs(rng.normal(0.17, 0.01, n)),
        }
    )
    obs = pd.DataFrame(
        {
            "name": ["Cheetah", "Owl monkey", "Cow", "Little brown bat", "Human"],
            "brainwt": [np.nan, 0.0155, 0.423, 0.00025, 1.32],
            "sleep_total": [12.1, 17.0, 4.0, 19.9, 8.0],
        }
    )
    coef_path = tmp_path / "coefficients.csv"
    obs_path = tmp_path / "msleep.csv"
    coefs.to_csv(coef_path, index=False)
    obs.to_csv(obs_path, index=False)
    return str(coef_path), str(obs_path)


def test_main_writes_bands_and_lines(tmp_path):
    coef_path, obs_path = _write_inputs(tmp_path)
    out_dir = tmp_path / "output"

    code = main.main(
        [
            "--coefficients", coef_path,
            "--observations", obs_path,
            "--predictor", "brainwt",
            "--outcome", "sleep_total",
            "--log10",
            "--n-points", "12",
            "--n-lines", "25",
            "--seed", "1",
            "--output-dir", str(out_dir),
            "--log-file", str(tmp_path / "run.log"),
        ]
    )

    assert code == 0
    linpred = pd.read_csv(out_dir / "linpred_band.csv")
    predictive = pd.read_csv(out_dir / "predictive_band.csv")
    lines = pd.read_csv(out_dir / "spaghetti_draws.csv")

    assert len(linpred) == len(predictive) == 12
    assert np.isclose(linpred["log10_brainwt"].min(), np.log10(0.00025))
    assert np.isclose(linpred["log10_brainwt"].max(), np.log10(1.32))
    assert (predictive["width"] > linpred["width"]).all()
    assert lines["draw"].nunique() == 25
    assert len(lines) == 25 * 12


def test_main_missing_input_returns_error(tmp_path):
    code = main.main(
        [
            "--coefficients", str(tmp_path / "nope.csv"),
            "--observations", str(tmp_path / "nope.csv"),
            "--predictor", "brainwt",
            "--output-dir", str(tmp_path / "output"),
            "--log-file", str(tmp_path / "run.log"),
        ]
    )
    assert code == 1
    assert not os.path.exists(tmp_path / "output")


@pytest.mark.parametrize("option", ["--n-lines", "--n-points"])
def test_main_rejects_non_positive_counts(tmp_path, option):
    coef_path, obs_path = _write_inputs(tmp_path)
    out_dir = tmp_path / "output"
    code = main.main(
        [
            "--coefficients", coef_path,
            "--observations", obs_path,
            "--predictor", "brainwt",
            option, "0",
            "--output-dir", str(out_dir),
            "--log-file", str(tmp_path / "run.log"),
        ]
    )
    assert code == 1
    assert not os.path.exists(out_dir)
