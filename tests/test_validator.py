"""Input validation: which samples can be turned into percentiles."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from percentile_plotter.validator import is_valid_sample, sample_kind


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3],
        [2.5],
        (0, -4.25, 1e9),
        [np.float64(1.5), np.int64(3)],
        [Fraction(1, 3), 2],
        [Decimal("0.1"), Decimal("2.75")],
        [Decimal("1.5"), 2, 3.25],
    ],
)
def test_numeric_samples_are_valid(values) -> None:
    """Finite numbers of any numeric type form a numeric sample."""

    assert is_valid_sample(values) is True
    assert sample_kind(values) == "numeric"


@pytest.mark.parametrize(
    "values",
    [
        None,
        [],
        (),
        ["a", "b"],
        [1, "2", 3],
        [1, None, 3],
        [1.0, float("nan")],
        [float("inf"), 1.0],
        [1.0, float("-inf")],
        [True, False],
        [1, True],
        [1, 10**400],
        [Fraction(10**400), 1],
        [Decimal("NaN"), Decimal("1")],
        [Decimal("1"), Decimal("Infinity")],
        [Decimal("1E+400")],
    ],
)
def test_bad_samples_are_rejected_whole(values) -> None:
    """Absent, empty, non-numeric or non-finite samples are invalid as a whole."""

    assert is_valid_sample(values) is False
    assert sample_kind(values) is None


def test_temporal_samples_are_valid() -> None:
    """Dates and naive datetimes mix into one temporal sample."""

    values = [date(2026, 1, 1), datetime(2026, 1, 2, 12, 0)]
    assert sample_kind(values) == "temporal"

    aware = [
        datetime(2026, 1, 1, tzinfo=timezone.utc),
        datetime(2026, 3, 1, tzinfo=timezone.utc),
    ]
    assert sample_kind(aware) == "temporal"


def test_mixed_kinds_are_rejected() -> None:
    """Numbers and dates, or naive and aware datetimes, do not compare."""

    assert sample_kind([1, date(2026, 1, 1)]) is None
    assert sample_kind([date(2026, 1, 1), 1]) is None
    assert sample_kind([
        datetime(2026, 1, 1),
        datetime(2026, 1, 2, tzinfo=timezone.utc),
    ]) is None
    assert sample_kind([
        datetime(2026, 1, 2, tzinfo=timezone.utc),
        date(2026, 1, 1),
    ]) is None
