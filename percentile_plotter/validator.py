"""
Input validation for the Percentile Chart Plotter.

A sample is usable only when it is non-empty and every element is of
one comparable kind: all finite numbers (any ``numbers.Real`` or
``Decimal`` that fits a float), or all datetimes/dates with the same
timezone awareness.  A single bad element invalidates the whole
sample; nothing is dropped silently.
"""

import math
import numbers
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from .constants import KIND_NUMERIC, KIND_TEMPORAL


def _element_kind(value) -> Optional[str]:
    # bool is an Integral but never a sample value
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        finite = value.is_finite() and math.isfinite(float(value))
        return KIND_NUMERIC if finite else None
    if isinstance(value, numbers.Real):
        try:
            finite = math.isfinite(value)
        except OverflowError:
            # int beyond float range
            return None
        return KIND_NUMERIC if finite else None
    if isinstance(value, (datetime, date)):
        return KIND_TEMPORAL
    return None


def _awareness(value) -> Optional[bool]:
    """``True``/``False`` for aware/naive datetimes, ``None`` for dates."""
    if isinstance(value, datetime):
        return value.utcoffset() is not None
    return None


def sample_kind(values: Optional[Sequence]) -> Optional[str]:
    """Classify a raw sample.

    Returns
    -------
    str or None
        ``"numeric"`` or ``"temporal"`` for a usable sample, ``None``
        when the sample is absent, empty, mixed, or contains a
        non-numeric / non-finite element.
    """
    if values is None or len(values) == 0:
        return None

    kind = _element_kind(values[0])
    if kind is None:
        return None

    if kind == KIND_NUMERIC:
        for v in values:
            if _element_kind(v) != KIND_NUMERIC:
                return None
        return kind

    # Temporal: dates and datetimes only compare within one awareness
    aware = None
    for v in values:
        if _element_kind(v) != KIND_TEMPORAL:
            return None
        v_aware = _awareness(v)
        if v_aware is None:
            continue
        if aware is None:
            aware = v_aware
        elif aware != v_aware:
            return None
    if aware is True and any(not isinstance(v, datetime) for v in values):
        return None
    return kind


def is_valid_sample(values: Optional[Sequence]) -> bool:
    """Return ``True`` when *values* can be turned into percentiles."""
    return sample_kind(values) is not None
