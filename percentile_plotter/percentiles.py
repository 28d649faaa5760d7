"""
Percentile computation for the Percentile Chart Plotter.

Produces the 101 percentile points (0th through 100th) of a validated
sample and the x-axis domain for it.

The 99 interior points are type-7 linear-interpolation quantiles at
probabilities 1/100 … 99/100 (``numpy.quantile`` with
``method="linear"``).  Percentile 0 and 100 are definitional: the
sample minimum and maximum, not interpolated values.

Temporal samples are computed on seconds elapsed since the sample
minimum and mapped back to ``datetime``; plain ``date`` values are
promoted to midnight ``datetime`` first so the sample stays comparable.
"""

import functools
import math
from datetime import date, datetime, timedelta
from typing import Sequence, Tuple

import numpy as np

from .constants import (
    KIND_NUMERIC, KIND_TEMPORAL,
    PERCENTILE_RANGE_SIZE, PERCENTILE_COUNT,
    DOMAIN_ROUNDING_STEP, DOMAIN_ROUNDING_EPSILON,
    DEFAULT_NUMERIC_PADDING, DEFAULT_TEMPORAL_PADDING,
)
from .data_model import AxisDomain, PercentilePoint


# ── Shared read-only tables ──────────────────────────────────────────────

@functools.lru_cache(maxsize=None)
def percentile_range() -> Tuple[int, ...]:
    """The 0..99 output range shared by every chart (built once)."""
    return tuple(range(PERCENTILE_RANGE_SIZE))


@functools.lru_cache(maxsize=None)
def quantile_probabilities() -> Tuple[float, ...]:
    """Interior quantile probabilities 0.01 … 0.99.

    A range of N output buckets has N − 1 boundaries, so the 0..99 range
    yields the boundaries for percentiles 1 through 99.
    """
    n = len(percentile_range())
    return tuple(i / n for i in range(1, n))


# ── Quantiles ────────────────────────────────────────────────────────────

def _interior_quantiles(sample: Sequence[float]) -> np.ndarray:
    arr = np.asarray(sample, dtype=float)
    q = np.quantile(arr, quantile_probabilities(), method="linear")
    # Guard against 1-ulp dips from the lerp formula
    return np.maximum.accumulate(q)


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def _numeric_percentiles(values: Sequence) -> list:
    lo = min(values)
    hi = max(values)
    # float64 can round past exact ints or Decimals at the ends
    interior = [min(max(float(v), lo), hi) for v in _interior_quantiles(values)]
    return [lo] + interior + [hi]


def _temporal_percentiles(values: Sequence) -> list:
    stamps = [_as_datetime(v) for v in values]
    lo = min(stamps)
    hi = max(stamps)
    offsets = [(s - lo).total_seconds() for s in stamps]
    interior = [
        lo + timedelta(seconds=float(sec))
        for sec in _interior_quantiles(offsets)
    ]
    return [lo] + interior + [hi]


def compute_percentiles(values: Sequence, kind: str = KIND_NUMERIC) -> Tuple[PercentilePoint, ...]:
    """Compute the 101 percentile points of a validated sample.

    Parameters
    ----------
    values : sequence
        Non-empty sample that passed ``validator.sample_kind``.
    kind : str
        ``"numeric"`` or ``"temporal"``.

    Returns
    -------
    tuple of PercentilePoint
        Percentiles 0..100 in ascending order; values non-decreasing.
    """
    if kind == KIND_TEMPORAL:
        percentiles = _temporal_percentiles(values)
    else:
        percentiles = _numeric_percentiles(values)

    assert len(percentiles) == PERCENTILE_COUNT, (
        f"expected {PERCENTILE_COUNT} percentiles (0-100), "
        f"got {len(percentiles)}"
    )

    return tuple(
        PercentilePoint(percentile=i, value=v)
        for i, v in enumerate(percentiles)
    )


# ── Axis domain strategies ───────────────────────────────────────────────

def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def numeric_domain(lower, upper) -> AxisDomain:
    """Round ``[lower, upper]`` outward to multiples of 10.

    The epsilon keeps exact multiples in place: 20 stays 20, 13 goes
    to 10 and 77 goes to 80.
    """
    step = DOMAIN_ROUNDING_STEP
    lo = _round_half_up(float(lower) / step - DOMAIN_ROUNDING_EPSILON) * step
    hi = _round_half_up(float(upper) / step + DOMAIN_ROUNDING_EPSILON) * step
    if lo == hi:
        lo -= DEFAULT_NUMERIC_PADDING
        hi += DEFAULT_NUMERIC_PADDING
    return AxisDomain(lower=lo, upper=hi, kind=KIND_NUMERIC)


def temporal_domain(lower, upper) -> AxisDomain:
    """Unrounded time-scale domain, padded when the sample has no spread."""
    lo = _as_datetime(lower)
    hi = _as_datetime(upper)
    if lo == hi:
        lo -= DEFAULT_TEMPORAL_PADDING
        hi += DEFAULT_TEMPORAL_PADDING
    return AxisDomain(lower=lo, upper=hi, kind=KIND_TEMPORAL)


DOMAIN_STRATEGIES = {
    KIND_NUMERIC: numeric_domain,
    KIND_TEMPORAL: temporal_domain,
}


def axis_domain(kind: str, lower, upper) -> AxisDomain:
    """Pick the domain strategy for *kind* and apply it."""
    try:
        strategy = DOMAIN_STRATEGIES[kind]
    except KeyError:
        raise ValueError(f"unknown value kind: {kind!r}") from None
    return strategy(lower, upper)


def domain_for_points(points: Sequence[PercentilePoint], kind: str) -> AxisDomain:
    """x-axis domain spanning percentile 0 to percentile 100."""
    return axis_domain(kind, points[0].value, points[-1].value)
