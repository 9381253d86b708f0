"""
Formatting of observation and prediction tables prior to plotting.

Both functions return new frames and leave their input untouched. Missing
columns surface as polars ``ColumnNotFoundError``.
"""

from typing import Any

import polars as pl

from .constants import (
    AGE_COL,
    ESTIMATE_COL,
    LOWER95_COL,
    OUTPUT_TYPE_COL,
    PRED_COL,
    PRED_LOWER95_COL,
    PRED_UPPER95_COL,
    PRED_VARIANCE_COL,
    STRATUM_AGE_COL,
    STRATUM_COL,
    STRATUM_SEPARATOR,
    TIME_SINCE_INITIAL_COL,
    TOTAL_VARIANCE_COL,
    UPPER95_COL,
)
from .intervals import lower_bound, upper_bound


def as_frame(data: Any) -> pl.DataFrame:
    """Return ``data`` as a polars DataFrame, converting dicts and the like."""
    if isinstance(data, pl.DataFrame):
        return data
    return pl.DataFrame(data)


def has_variance(data: pl.DataFrame) -> bool:
    return TOTAL_VARIANCE_COL in data.columns


def _stratum_age_text(df: pl.DataFrame) -> pl.Expr:
    """StratumAgeYr as text, with whole float ages written without a decimal (10.0 -> "10")."""
    age = pl.col(STRATUM_AGE_COL)
    dtype = df.schema.get(STRATUM_AGE_COL)
    if dtype is None or not dtype.is_float():
        return age.cast(pl.Utf8)
    return (
        pl.when(age == age.floor())
        .then(age.cast(pl.Int64, strict=False).cast(pl.Utf8))
        .otherwise(age.cast(pl.Utf8))
    )


def format_observations(data: Any) -> pl.DataFrame:
    """
    Add the display fields used by the GOF plot to an observation table.

    Adds ``age`` (stratum age plus time since the initial date) and
    ``stratum`` (``<OutputType>_<StratumAgeYr>``, which keeps each growth
    trajectory on its own line). When ``TotalVariance`` is present, also adds
    the 95% bounds ``lower95`` (floored at 0) and ``upper95``.

    Parameters:
        data: Observation table with OutputType, StratumAgeYr,
            timeSinceInitialDateYr, Estimate and optionally TotalVariance

    Returns:
        A new DataFrame with the derived columns appended
    """
    df = as_frame(data)

    if has_variance(df):
        estimate = pl.col(ESTIMATE_COL)
        variance = pl.col(TOTAL_VARIANCE_COL)
        df = df.with_columns(
            lower_bound(estimate, variance).alias(LOWER95_COL),
            upper_bound(estimate, variance).alias(UPPER95_COL),
        )

    return df.with_columns(
        (pl.col(STRATUM_AGE_COL) + pl.col(TIME_SINCE_INITIAL_COL)).alias(AGE_COL),
        pl.concat_str(
            [
                pl.col(OUTPUT_TYPE_COL).cast(pl.Utf8),
                _stratum_age_text(df),
            ],
            separator=STRATUM_SEPARATOR,
        ).alias(STRATUM_COL),
    )


def format_predictions(predictions: Any) -> pl.DataFrame:
    """Add ``predL95`` (floored at 0) and ``predU95`` to a prediction table."""
    df = as_frame(predictions)
    pred = pl.col(PRED_COL)
    variance = pl.col(PRED_VARIANCE_COL)
    return df.with_columns(
        lower_bound(pred, variance).alias(PRED_LOWER95_COL),
        upper_bound(pred, variance).alias(PRED_UPPER95_COL),
    )


def unique_output_types(data: pl.DataFrame) -> list[str]:
    """Distinct OutputType values, in order of first appearance."""
    return data.get_column(OUTPUT_TYPE_COL).unique(maintain_order=True).to_list()
