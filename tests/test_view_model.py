"""View-model assembly: degradation, settings, titles and formats."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from percentile_plotter.capabilities import UserSettings
from percentile_plotter.data_model import ColumnData, ColumnMetadata, SampleDataset
from percentile_plotter.view_model import (
    build_view_model,
    resolve_format_string,
    resolve_precision,
    select_sample,
)


def test_full_model_for_numeric_sample(uniform_dataset) -> None:
    """101 points, defaults applied, two legends and a rounded domain."""

    model = build_view_model(uniform_dataset)
    assert not model.is_degraded
    assert len(model.points) == 101
    assert model.settings.fill_color == "teal"
    assert model.settings.precision == 2
    assert model.y_domain == (0, 100)
    assert (model.x_domain.lower, model.x_domain.upper) == (0, 100)
    assert [(legend.axis, legend.text) for legend in model.legends] == [
        ("x", "Score"), ("y", "Percentile"),
    ]
    assert model.diagnostic is None


def test_domain_rounds_outward(sample) -> None:
    """A 13..77 sample gets a 10..80 axis."""

    model = build_view_model(sample([13, 40, 77]))
    assert (model.x_domain.lower, model.x_domain.upper) == (10, 80)


@pytest.mark.parametrize(
    ("values", "message"),
    [
        (["a", "b"], "Invalid data: use numeric values"),
        ([1, float("nan")], "Invalid data: use numeric values"),
        ([], "No data to display"),
    ],
)
def test_bad_input_degrades_instead_of_raising(sample, values, message) -> None:
    """Invalid or empty samples yield a model with only a diagnostic."""

    model = build_view_model(sample(values))
    assert model.is_degraded
    assert model.points is None
    assert model.formatter is None
    assert model.x_domain is None
    assert model.diagnostic == message
    assert len(model.legends) == 1


def test_missing_dataset_degrades() -> None:
    """No dataset at all, or no category column, is "no data"."""

    assert build_view_model(None).diagnostic == "No data to display"
    assert build_view_model(SampleDataset(category=None)).is_degraded


@pytest.mark.parametrize(
    ("precision", "expected"),
    [(None, 2), (-3, 0), (0, 0), (4, 4), (2.9, 2)],
)
def test_precision_resolution(precision, expected) -> None:
    """Absent means 2; negatives clamp to 0; fractions truncate."""

    user = UserSettings(label_precision=precision)
    assert resolve_precision(user) == expected
    assert resolve_precision(None) == 2


def test_user_settings_reach_the_model(uniform_dataset) -> None:
    """Fill and precision overrides flow into settings and formatter."""

    user = UserSettings(fill_color="#123456", label_precision=0)
    model = build_view_model(uniform_dataset, user)
    assert model.settings.fill_color == "#123456"
    assert model.formatter.format(12.7) == "13"


def test_values_column_wins_over_category(two_column_sample) -> None:
    """When both columns are bound the values column is sampled."""

    dataset = two_column_sample(["n", "s", "e"], [1000, 2000, 3000])
    values, used_values = select_sample(dataset)
    assert used_values is True
    assert values == (1000, 2000, 3000)

    model = build_view_model(dataset)
    assert model.points[0].value == 1000
    assert model.legends[0].text == "Sales per Store"


def test_empty_values_column_falls_back_to_category(two_column_sample) -> None:
    """An empty values column leaves the category column in charge."""

    dataset = two_column_sample([5, 6, 7], [])
    model = build_view_model(dataset)
    assert model.points[-1].value == 7
    assert model.legends[0].text == "Store"


def test_axis_title_is_empty_when_a_name_is_missing(two_column_sample, sample) -> None:
    """Both names are needed for "X per Y"; an unnamed column gives ""."""

    dataset = two_column_sample(["a", "b"], [1, 2], value_name=None)
    assert build_view_model(dataset).legends[0].text == ""

    assert build_view_model(sample([1, 2], name=None)).legends[0].text == ""


def test_format_string_resolution(two_column_sample) -> None:
    """User override first, then the sampled column, then the category."""

    dataset = SampleDataset(
        category=ColumnData(ColumnMetadata("Store", "0.0"), ("a", "b")),
        values=ColumnData(ColumnMetadata("Sales", "$#,0"), (1, 2)),
    )
    assert resolve_format_string(dataset, None, used_values=True) == "$#,0"
    assert resolve_format_string(
        dataset, UserSettings(format_string="0%"), used_values=True,
    ) == "0%"

    unformatted = two_column_sample(["a"], [1])
    assert resolve_format_string(unformatted, None, used_values=True) is None


def test_column_format_drives_labels(two_column_sample) -> None:
    """The values column's pattern is used for tick and tooltip text."""

    dataset = two_column_sample(["a", "b"], [1500, 2500000], value_format="$#,0")
    model = build_view_model(dataset)
    assert model.formatter.format(2500000) == "$2,500,000.00"


def test_temporal_sample(sample) -> None:
    """Datetime samples produce a temporal domain and datetime points."""

    start = datetime(2026, 1, 1)
    values = [start + timedelta(hours=6 * i) for i in range(40)]
    model = build_view_model(sample(values, name="Order date"))
    assert model.x_domain.kind == "temporal"
    assert model.x_domain.lower == start
    assert model.points[-1].value == values[-1]
    assert model.formatter.format(start) == "2026-01-01"


def test_assembly_is_idempotent(uniform_dataset) -> None:
    """Same input, same model: structural equality holds."""

    user = UserSettings(fill_color="red", label_precision=1)
    assert build_view_model(uniform_dataset, user) == build_view_model(uniform_dataset, user)
    assert build_view_model(None) == build_view_model(None)


def test_oversized_integer_degrades_instead_of_raising(sample) -> None:
    """An int beyond float range is invalid input, not a crash."""

    model = build_view_model(sample([1, 10**400]))
    assert model.diagnostic == "Invalid data: use numeric values"


def test_huge_repeated_integer_gives_flat_curve(sample) -> None:
    """All 101 points equal the repeated value, exactly."""

    v = 2**53 + 1
    model = build_view_model(sample([v] * 4))
    assert {p.value for p in model.points} == {v}


def test_decimal_sample_builds_a_full_model(sample) -> None:
    """Decimal columns are numeric samples."""

    model = build_view_model(sample([Decimal("13"), Decimal("40.5"), Decimal("77")]))
    assert not model.is_degraded
    assert (model.x_domain.lower, model.x_domain.upper) == (10, 80)


def test_unusable_fill_colour_falls_back_to_default(uniform_dataset) -> None:
    """A colour matplotlib cannot parse resolves to the default fill."""

    model = build_view_model(uniform_dataset, UserSettings(fill_color="#12"))
    assert model.settings.fill_color == "teal"
