"""Normal-approximation confidence bounds as polars expressions."""

import polars as pl
import scipy.stats as sps

# 97.5th percentile of the standard normal, for two-sided 95% bounds
Z_975: float = float(sps.norm.ppf(0.975))


def half_width(variance: pl.Expr, z: float = Z_975) -> pl.Expr:
    """Half width of the interval: sqrt(variance) * z."""
    return variance.sqrt() * z


def lower_bound(estimate: pl.Expr, variance: pl.Expr, z: float = Z_975) -> pl.Expr:
    """Lower bound, floored at zero since growth quantities are non-negative.

    Null estimates or variances give a null bound.
    """
    return (estimate - half_width(variance, z)).clip(lower_bound=0.0)


def upper_bound(estimate: pl.Expr, variance: pl.Expr, z: float = Z_975) -> pl.Expr:
    return estimate + half_width(variance, z)
