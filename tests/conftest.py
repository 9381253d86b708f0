"""Shared fixtures for GOF plot tests."""

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for testing
import matplotlib.pyplot as plt
import polars as pl
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    """Start and end every test without open figures."""
    plt.close("all")
    yield
    plt.close("all")


# ============================================================================
# Observation tables
# ============================================================================


@pytest.fixture
def volume_observations():
    """Two strata (initial ages 10 and 30) of volume with variances."""
    return pl.DataFrame(
        {
            "OutputType": ["AliveVolume_AllSpecies"] * 6,
            "StratumAgeYr": [10, 10, 10, 30, 30, 30],
            "timeSinceInitialDateYr": [0, 5, 10, 0, 5, 10],
            "Estimate": [80.0, 120.0, 150.0, 200.0, 230.0, 250.0],
            "TotalVariance": [16.0, 25.0, 36.0, 49.0, 64.0, 81.0],
        }
    )


@pytest.fixture
def observations_without_variance():
    """Basal area observations without TotalVariance."""
    return pl.DataFrame(
        {
            "OutputType": ["BasalArea_AllSpecies"] * 3,
            "StratumAgeYr": [20, 20, 20],
            "timeSinceInitialDateYr": [0, 10, 20],
            "Estimate": [12.0, 18.0, 22.0],
        }
    )


@pytest.fixture
def mixed_output_observations():
    """Observations holding two different output types."""
    return pl.DataFrame(
        {
            "OutputType": ["AliveVolume_AllSpecies", "BasalArea_AllSpecies"],
            "StratumAgeYr": [10, 10],
            "timeSinceInitialDateYr": [0, 5],
            "Estimate": [80.0, 15.0],
        }
    )


# ============================================================================
# Prediction tables
# ============================================================================


@pytest.fixture
def volume_predictions():
    """Predictions from age 0 to 45, with large variance near the end."""
    return pl.DataFrame(
        {
            "AgeYr": [0, 15, 30, 45],
            "Pred": [0.0, 110.0, 210.0, 260.0],
            "Variance": [4.0, 100.0, 400.0, 900.0],
        }
    )
