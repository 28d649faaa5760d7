"""Percentile computation and x-axis domain strategies."""

from __future__ import annotations

import random
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from percentile_plotter.data_model import AxisDomain
from percentile_plotter.percentiles import (
    axis_domain,
    compute_percentiles,
    numeric_domain,
    percentile_range,
    quantile_probabilities,
    temporal_domain,
)


def test_percentile_range_is_shared_and_read_only() -> None:
    """The 0..99 table is built once and handed out as the same tuple."""

    first = percentile_range()
    assert first == tuple(range(100))
    assert percentile_range() is first
    assert len(quantile_probabilities()) == 99
    assert quantile_probabilities()[0] == pytest.approx(0.01)
    assert quantile_probabilities()[-1] == pytest.approx(0.99)


@pytest.mark.parametrize(
    "values",
    [
        [3, 1, 2],
        [42.0],
        [-5.5, 10, 0, 7.25, 7.25, 100],
        list(range(1000, 0, -7)),
    ],
)
def test_curve_has_101_points_from_min_to_max(values) -> None:
    """Percentile 0 is the minimum, percentile 100 the maximum."""

    points = compute_percentiles(values)
    assert len(points) == 101
    assert [p.percentile for p in points] == list(range(101))
    assert points[0].value == min(values)
    assert points[100].value == max(values)


def test_curve_is_non_decreasing_for_random_samples() -> None:
    """Values never decrease as the percentile rises."""

    rng = random.Random(7)
    for _ in range(20):
        n = rng.randint(1, 300)
        values = [rng.gauss(0, 1e3) for _ in range(n)]
        points = compute_percentiles(values)
        for lower, upper in zip(points, points[1:]):
            assert lower.value <= upper.value


def test_repeated_value_gives_flat_curve() -> None:
    """Every percentile of [5, 5, 5, 5] is 5."""

    points = compute_percentiles([5, 5, 5, 5])
    assert all(p.value == 5 for p in points)


def test_uniform_sample_maps_percentile_to_value_linearly() -> None:
    """For 1..100 the median sits between 50 and 51."""

    points = compute_percentiles(list(range(1, 101)))
    assert 50 <= points[50].value <= 51
    assert points[25].value == pytest.approx(25.75)
    assert points[1].value == pytest.approx(1.99)


def test_single_value_sample() -> None:
    """A one-element sample does not crash and is flat."""

    points = compute_percentiles([17.5])
    assert {p.value for p in points} == {17.5}


def test_temporal_percentiles_map_back_to_datetimes() -> None:
    """Dates are promoted to midnight datetimes and interpolated in time."""

    start = datetime(2026, 1, 1)
    values = [start + timedelta(days=d) for d in range(101)]
    points = compute_percentiles(values, "temporal")

    assert points[0].value == start
    assert points[100].value == start + timedelta(days=100)
    assert points[50].value == start + timedelta(days=50)
    assert all(isinstance(p.value, datetime) for p in points)

    dated = compute_percentiles([date(2026, 2, 1), date(2026, 2, 3)], "temporal")
    assert dated[0].value == datetime(2026, 2, 1)
    assert dated[50].value == datetime(2026, 2, 2)


@pytest.mark.parametrize(
    ("lower", "upper", "expected"),
    [
        (13, 77, (10, 80)),
        (20, 80, (20, 80)),
        (0.5, 9.5, (0, 10)),
        (-13, -2, (-20, 0)),
        (101, 101, (100, 110)),
    ],
)
def test_numeric_domain_rounds_outward_to_tens(lower, upper, expected) -> None:
    """Domain bounds snap outward to multiples of 10."""

    domain = numeric_domain(lower, upper)
    assert (domain.lower, domain.upper) == expected
    assert domain.kind == "numeric"


def test_numeric_domain_pads_zero_spread() -> None:
    """An exact multiple of 10 with no spread still gives a usable range."""

    domain = numeric_domain(20, 20)
    assert (domain.lower, domain.upper) == (10, 30)


def test_temporal_domain_is_unrounded_and_padded_when_flat() -> None:
    """Time domains keep the extremes; a single instant gets a day either side."""

    lo = datetime(2026, 1, 1, 8, 30)
    hi = datetime(2026, 1, 3, 17, 45)
    assert temporal_domain(lo, hi) == AxisDomain(lo, hi, "temporal")

    flat = temporal_domain(lo, lo)
    assert flat.lower == lo - timedelta(days=1)
    assert flat.upper == lo + timedelta(days=1)


def test_axis_domain_dispatches_on_kind() -> None:
    """The value kind selects the domain strategy."""

    assert axis_domain("numeric", 13, 77).lower == 10
    assert axis_domain("temporal", date(2026, 1, 1), date(2026, 1, 2)).kind == "temporal"
    with pytest.raises(ValueError):
        axis_domain("categorical", 0, 1)


def test_integers_beyond_float_precision_keep_exact_bounds() -> None:
    """Interior values never fall below the exact minimum or above the maximum."""

    v = 2**53 + 1
    points = compute_percentiles([v] * 4)
    assert all(p.value == v for p in points)

    wide = compute_percentiles([v, v + 2, v + 4])
    assert wide[0].value == v
    assert wide[100].value == v + 4
    for lower, upper in zip(wide, wide[1:]):
        assert lower.value <= upper.value


def test_decimal_sample() -> None:
    """Decimals are summarised like floats, with exact extremes kept."""

    points = compute_percentiles([Decimal("1.5"), Decimal("2.5"), Decimal("10")])
    assert points[0].value == Decimal("1.5")
    assert points[100].value == Decimal("10")
    assert points[50].value == pytest.approx(2.5)
    assert numeric_domain(points[0].value, points[100].value).upper == 10
