"""Pytest fixtures shared across the plotter tests."""

from __future__ import annotations

import matplotlib

# Headless backend; no Qt needed for the core and renderer tests
matplotlib.use("Agg")

import pytest
from matplotlib.figure import Figure

from percentile_plotter.data_model import ColumnData, ColumnMetadata, SampleDataset


def make_dataset(
    values,
    *,
    name: str | None = "Value",
    format_string: str | None = None,
) -> SampleDataset:
    """Single-column dataset (category column drives the axis)."""

    return SampleDataset(
        category=ColumnData(
            metadata=ColumnMetadata(display_name=name, format_string=format_string),
            values=tuple(values),
        ),
    )


def make_two_column_dataset(
    categories,
    values,
    *,
    category_name: str | None = "Store",
    value_name: str | None = "Sales",
    value_format: str | None = None,
) -> SampleDataset:
    """Category + values dataset (values column drives the axis)."""

    return SampleDataset(
        category=ColumnData(
            metadata=ColumnMetadata(display_name=category_name),
            values=tuple(categories),
        ),
        values=ColumnData(
            metadata=ColumnMetadata(display_name=value_name, format_string=value_format),
            values=tuple(values),
        ),
    )


@pytest.fixture
def fig() -> Figure:
    """A fresh matplotlib figure sized like the default viewport."""

    return Figure(figsize=(6.4, 4.0), dpi=100)


@pytest.fixture
def uniform_dataset() -> SampleDataset:
    """The values 1..100, named "Score"."""

    return make_dataset(range(1, 101), name="Score")


@pytest.fixture
def sample():
    """Factory for single-column datasets."""

    return make_dataset


@pytest.fixture
def two_column_sample():
    """Factory for category + values datasets."""

    return make_two_column_dataset
