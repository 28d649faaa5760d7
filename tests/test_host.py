"""Host lifecycle of the chart visual."""

from __future__ import annotations

import pytest

from percentile_plotter.capabilities import UserSettings
from percentile_plotter.data_model import Viewport
from percentile_plotter.host import PercentileChartVisual


def test_update_before_init_raises(uniform_dataset) -> None:
    """A visual needs a figure before it can draw."""

    visual = PercentileChartVisual()
    with pytest.raises(RuntimeError):
        visual.update(uniform_dataset, Viewport(640, 400))


def test_lifecycle(fig, uniform_dataset) -> None:
    """init binds, update rebuilds and draws, destroy releases."""

    visual = PercentileChartVisual()
    visual.init(fig)
    assert visual.figure is fig
    assert visual.model is None

    model = visual.update(uniform_dataset, Viewport(800, 500), UserSettings(label_precision=0))
    assert model is visual.model
    assert model.settings.precision == 0
    assert len(fig.axes) == 1
    assert tuple(fig.get_size_inches()) == pytest.approx((8.0, 5.0))

    visual.destroy()
    assert visual.figure is None
    assert visual.model is None


def test_update_without_data_keeps_previous_state(fig, uniform_dataset) -> None:
    """A None dataset is ignored rather than clearing the chart."""

    visual = PercentileChartVisual()
    visual.init(fig)
    first = visual.update(uniform_dataset, Viewport(640, 400))
    assert visual.update(None, Viewport(640, 400)) is None
    assert visual.model is first
    assert len(fig.axes) == 1


def test_each_update_rebuilds_the_model(fig, uniform_dataset, sample) -> None:
    """Bad data after good data switches to the diagnostic view."""

    visual = PercentileChartVisual()
    visual.init(fig)
    visual.update(uniform_dataset, Viewport(640, 400))
    model = visual.update(sample(["oops"]), Viewport(640, 400))
    assert model.is_degraded
    assert fig.axes == []
    assert visual.enumerate_object_instances("dataPoint") == []


def test_figure_size_left_alone_on_request(fig, uniform_dataset) -> None:
    """Canvas-managed figures are not resized by the visual."""

    visual = PercentileChartVisual()
    visual.init(fig)
    visual.update(uniform_dataset, Viewport(1200, 900), resize_figure=False)
    assert tuple(fig.get_size_inches()) == pytest.approx((6.4, 4.0))


def test_enumerate_object_instances(fig, uniform_dataset) -> None:
    """The property pane sees the resolved fill colour."""

    visual = PercentileChartVisual()
    visual.init(fig)
    visual.update(uniform_dataset, Viewport(640, 400), UserSettings(fill_color="orange"))
    (instance,) = visual.enumerate_object_instances("dataPoint")
    assert instance["properties"] == {"fill": "orange"}


def test_bad_fill_colour_from_property_bag_still_draws(fig, sample) -> None:
    """An unparseable host colour is ignored and the default line is drawn."""

    visual = PercentileChartVisual()
    visual.init(fig)
    user = UserSettings.from_objects({"dataPoint": {"fill": {"solid": {"color": "#12"}}}})
    model = visual.update(sample([1, 2, 3]), Viewport(640, 400), user)

    assert model.settings.fill_color == "teal"
    assert fig.axes[0].get_lines()[0].get_color() == "teal"
