"""Goodness-of-fit plots of observed stand growth against model predictions.

The plot layers, from back to front:
- 95% band of the observations, one per stratum (when variances are given)
- 95% band of the predictions (when predictions are given)
- observed trajectories, dashed, one per stratum
- predicted trajectory, solid and thicker
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import matplotlib.pyplot as plt
import polars as pl
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..core.constants import (
    AGE_COL,
    ESTIMATE_COL,
    LOWER95_COL,
    PRED_AGE_COL,
    PRED_COL,
    PRED_LOWER95_COL,
    PRED_UPPER95_COL,
    STRATUM_COL,
    UPPER95_COL,
)
from ..core.formatting import format_observations, format_predictions, unique_output_types
from ..core.output_types import X_AXIS_LABEL, resolve_y_label
from .theme import DEFAULT_TEXTSIZE, GOFTheme

logger = logging.getLogger(__name__)

BAND_COLOR: str = "0.2"
LINE_COLOR: str = "black"
OBS_BAND_ALPHA: float = 0.1
PRED_BAND_ALPHA: float = 0.5
OBS_LINEWIDTH: float = 1.0
PRED_LINEWIDTH: float = 3.0
FIGSIZE: tuple[float, float] = (10.0, 7.5)


def has_observation_bounds(dataset: pl.DataFrame) -> bool:
    return LOWER95_COL in dataset.columns and UPPER95_COL in dataset.columns


def y_axis_max(dataset: pl.DataFrame, predictions: Optional[pl.DataFrame] = None) -> float:
    """Largest value the y axis must show, before padding.

    Max over the observation upper bounds (if any), the observed estimates and
    the prediction upper bounds (if any).
    """
    candidates = [dataset.get_column(ESTIMATE_COL).max()]
    if has_observation_bounds(dataset):
        candidates.append(dataset.get_column(UPPER95_COL).max())
    if predictions is not None:
        candidates.append(predictions.get_column(PRED_UPPER95_COL).max())
    return float(max(c for c in candidates if c is not None))


def x_axis_max(dataset: pl.DataFrame) -> float:
    return float(dataset.get_column(AGE_COL).max())


def _single_output_type(dataset: pl.DataFrame) -> str:
    output_types = unique_output_types(dataset)
    if not output_types:
        raise ValueError("No observations to plot: the data holds no output type")
    if len(output_types) != 1:
        raise ValueError("There seems to be more than one output type in the data!")
    return str(output_types[0])


def _iter_strata(dataset: pl.DataFrame):
    """Yield (stratum, rows sorted by age), strata in order of appearance."""
    for (stratum,), group in dataset.group_by(STRATUM_COL, maintain_order=True):
        yield stratum, group.sort(AGE_COL)


def _draw_observation_bands(ax: Axes, dataset: pl.DataFrame) -> None:
    for _, group in _iter_strata(dataset):
        ax.fill_between(
            group.get_column(AGE_COL).to_numpy(),
            group.get_column(LOWER95_COL).to_numpy(),
            group.get_column(UPPER95_COL).to_numpy(),
            color=BAND_COLOR,
            alpha=OBS_BAND_ALPHA,
            linewidth=0,
        )


def _draw_prediction_band(ax: Axes, predictions: pl.DataFrame) -> None:
    predictions = predictions.sort(PRED_AGE_COL)
    ax.fill_between(
        predictions.get_column(PRED_AGE_COL).to_numpy(),
        predictions.get_column(PRED_LOWER95_COL).to_numpy(),
        predictions.get_column(PRED_UPPER95_COL).to_numpy(),
        color=BAND_COLOR,
        alpha=PRED_BAND_ALPHA,
        linewidth=0,
    )


def _draw_observation_lines(ax: Axes, dataset: pl.DataFrame) -> None:
    for stratum, group in _iter_strata(dataset):
        ax.plot(
            group.get_column(AGE_COL).to_numpy(),
            group.get_column(ESTIMATE_COL).to_numpy(),
            linestyle="dashed",
            linewidth=OBS_LINEWIDTH,
            color=LINE_COLOR,
            label=stratum,
        )


def _draw_prediction_line(ax: Axes, predictions: pl.DataFrame) -> None:
    predictions = predictions.sort(PRED_AGE_COL)
    ax.plot(
        predictions.get_column(PRED_AGE_COL).to_numpy(),
        predictions.get_column(PRED_COL).to_numpy(),
        linestyle="solid",
        linewidth=PRED_LINEWIDTH,
        color=LINE_COLOR,
        label=PRED_COL,
    )


def create_gof_plot(
    data: Any,
    predictions: Any = None,
    title: Optional[str] = None,
    textsize: float = DEFAULT_TEXTSIZE,
    *,
    strict: bool = True,
) -> Figure:
    """
    Create a plot of observed and, optionally, predicted values against age.

    Args:
        data: Observation table (OutputType, StratumAgeYr,
            timeSinceInitialDateYr, Estimate and optionally TotalVariance).
            Must hold a single OutputType.
        predictions: Optional prediction table (AgeYr, Pred, Variance)
        title: Plot title; defaults to the OutputType value
        textsize: Font size of every text element
        strict: Raise on an OutputType matching no known category. When
            False, the y label is left unset instead.

    Returns:
        The matplotlib Figure; the caller is responsible for closing it

    Raises:
        ValueError: If the observations hold more than one OutputType, or
            (strict only) an unknown one
    """
    dataset = format_observations(data)
    output_type = _single_output_type(dataset)

    y_label = resolve_y_label(output_type, strict=strict)
    if y_label is None:
        logger.warning(f"No axis label known for output type {output_type!r}")

    pred_df = format_predictions(predictions) if predictions is not None else None

    y_max = y_axis_max(dataset, pred_df)
    x_max = x_axis_max(dataset)
    theme = GOFTheme(textsize=textsize)

    fig, ax = plt.subplots(figsize=FIGSIZE)

    if has_observation_bounds(dataset):
        logger.debug("Drawing observation confidence bands")
        _draw_observation_bands(ax, dataset)
    if pred_df is not None:
        logger.debug("Drawing prediction confidence band")
        _draw_prediction_band(ax, pred_df)

    _draw_observation_lines(ax, dataset)
    if pred_df is not None:
        _draw_prediction_line(ax, pred_df)

    ax.set_xlabel(X_AXIS_LABEL)
    if y_label is not None:
        ax.set_ylabel(y_label)
    ax.set_ylim(0, y_max + 1)
    ax.set_xlim(0, x_max + 1)
    ax.set_title(title if title is not None else output_type, fontsize=theme.textsize)
    theme.apply(ax)

    logger.debug(f"GOF plot for {output_type}: xlim=(0, {x_max + 1}), ylim=(0, {y_max + 1})")
    return fig


def save_gof_plot(
    figure: Figure,
    path: Union[str, Path],
    dpi: int = 150,
) -> Path:
    """Write ``figure`` to ``path`` (format from the suffix) and close it.

    Returns:
        Path to the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        figure.savefig(str(path), dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(figure)
    logger.info(f"Saved GOF plot to {path}")
    return path
