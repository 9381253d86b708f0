"""Tests for normal-approximation confidence bounds."""

import math

import polars as pl
import pytest

from standgrowth.core.intervals import Z_975, half_width, lower_bound, upper_bound


def test_z_975_value():
    assert Z_975 == pytest.approx(1.959964, abs=1e-6)


def test_bounds_are_symmetric_around_estimate():
    df = pl.DataFrame({"est": [120.0, 50.0], "var": [25.0, 4.0]})
    out = df.select(
        lower_bound(pl.col("est"), pl.col("var")).alias("lo"),
        upper_bound(pl.col("est"), pl.col("var")).alias("hi"),
    )

    assert out["lo"].to_list() == pytest.approx([120.0 - 5 * Z_975, 50.0 - 2 * Z_975])
    assert out["hi"].to_list() == pytest.approx([120.0 + 5 * Z_975, 50.0 + 2 * Z_975])


def test_lower_bound_floored_at_zero():
    df = pl.DataFrame({"est": [1.0, 0.0], "var": [25.0, 1.0]})
    out = df.select(lower_bound(pl.col("est"), pl.col("var")).alias("lo"))

    assert out["lo"].to_list() == [0.0, 0.0]


def test_upper_bound_not_floored():
    df = pl.DataFrame({"est": [-10.0], "var": [1.0]})
    out = df.select(upper_bound(pl.col("est"), pl.col("var")).alias("hi"))

    assert out["hi"][0] == pytest.approx(-10.0 + Z_975)


def test_null_variance_gives_null_bounds():
    df = pl.DataFrame({"est": [10.0, 20.0], "var": [None, 9.0]})
    out = df.select(
        lower_bound(pl.col("est"), pl.col("var")).alias("lo"),
        upper_bound(pl.col("est"), pl.col("var")).alias("hi"),
    )

    assert out["lo"][0] is None
    assert out["hi"][0] is None
    assert out["hi"][1] == pytest.approx(20.0 + 3 * Z_975)


def test_half_width_custom_z():
    df = pl.DataFrame({"var": [9.0]})
    out = df.select(half_width(pl.col("var"), z=1.0).alias("hw"))

    assert math.isclose(out["hw"][0], 3.0)
