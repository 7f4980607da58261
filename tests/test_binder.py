import pytest

from charting.binder import bar_rect, bind_bars, bind_labels, x_shift
from charting.config import ChartConfig
from charting.entities import InternalRecord, SeriesKey
from charting.metrics import Colors, derive_bars
from charting.scales import BandScale, compute_scales


@pytest.fixture
def open_scales():
    return compute_scales([InternalRecord("Open", 100, 150)], ChartConfig())


def test_x_shift_fixed_convention():
    band1 = BandScale(list(SeriesKey), (0, 540), padding_inner=0.05, padding_outer=0.05)
    assert band1.bandwidth == 250
    assert x_shift(SeriesKey.CURRENT, band1) == 125
    assert x_shift(SeriesKey.PREVIOUS, band1) == -62.5


def test_bar_geometry(open_scales):
    s = open_scales
    prev, cur = derive_bars(InternalRecord("Open", 100, 150))

    cur_rect = bar_rect(cur, s.band0, s.band1, s.value)
    assert cur_rect.x == 120 + 277 - 125
    assert cur_rect.width == 250
    assert cur_rect.y == 58
    assert cur_rect.height == 480 - 58
    assert cur_rect.fill == Colors.GREEN.value

    prev_rect = bar_rect(prev, s.band0, s.band1, s.value)
    assert prev_rect.x == 120 + 14 + 62.5
    assert prev_rect.width == 62.5
    assert prev_rect.y == 199
    assert prev_rect.height == 480 - 199
    assert prev_rect.fill == Colors.GREY.value


def test_bind_bars_keys_by_category_and_series(scene, open_scales):
    s = open_scales
    bars = list(derive_bars(InternalRecord("Open", 100, 150)))
    result = bind_bars(scene, bars, s.band0, s.band1, s.value)
    assert result.entered == [("bar", "Open", SeriesKey.PREVIOUS), ("bar", "Open", SeriesKey.CURRENT)]


def test_bind_labels_only_for_current(scene, open_scales):
    s = open_scales
    bars = list(derive_bars(InternalRecord("Open", 100, 150)))
    values, deltas = bind_labels(scene, bars, s.band0, s.band1, s.value)

    assert values.entered == [("value-label", "Open")]
    assert deltas.entered == [("delta-label", "Open")]

    value = scene.get(("value-label", "Open"))
    assert (value.x, value.y, value.text, value.fill) == (397, 58 + 15, "0K", "white")
    assert value.font_weight == "normal"

    delta = scene.get(("delta-label", "Open"))
    assert (delta.x, delta.y) == (397, 58 - 5)
    assert delta.text == "+50%\U0001F815"
    assert delta.fill == Colors.GREEN.value
    assert delta.font_weight == "bold"
    assert delta.anchor == "middle"


def test_rebinding_updates_in_place(scene, open_scales):
    s = open_scales
    bind_bars(scene, derive_bars(InternalRecord("Open", 100, 150)), s.band0, s.band1, s.value)
    result = bind_bars(scene, derive_bars(InternalRecord("Open", 100, 90)), s.band0, s.band1, s.value)
    assert result.entered == [] and result.exited == []
    assert result.updated == [("bar", "Open", SeriesKey.CURRENT)]
    assert scene.get(("bar", "Open", SeriesKey.CURRENT)).fill == Colors.RED.value
