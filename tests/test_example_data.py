"""Example CSV generation."""

from __future__ import annotations

import warnings

from percentile_plotter.csv_parser import load_sample_csv
from percentile_plotter.example_data import generate_example_csvs
from percentile_plotter.view_model import build_view_model


def test_examples_load_into_valid_charts(tmp_path) -> None:
    """Both example files parse cleanly and give full view-models."""

    paths = generate_example_csvs(str(tmp_path), n_rows=200)
    assert set(paths) == {"response_times", "order_dates"}

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        times = load_sample_csv(paths["response_times"])
        orders = load_sample_csv(paths["order_dates"])

    model = build_view_model(times)
    assert not model.is_degraded
    assert model.legends[0].text == "Response time per Request"
    assert model.formatter.suffix == " ms"
    assert len(times.values.values) == 200

    temporal = build_view_model(orders)
    assert temporal.x_domain.kind == "temporal"
    assert temporal.legends[0].text == "Order date"


def test_examples_are_reproducible(tmp_path) -> None:
    """The generator is seeded, so reruns write identical files."""

    first = generate_example_csvs(str(tmp_path / "a"), n_rows=50)
    second = generate_example_csvs(str(tmp_path / "b"), n_rows=50)
    for key in first:
        with open(first[key], encoding="utf-8") as fa, open(second[key], encoding="utf-8") as fb:
            assert fa.read() == fb.read()
