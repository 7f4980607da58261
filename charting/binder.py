from typing import Iterable, Tuple

from .entities import DerivedBar, SeriesKey
from .metrics import bar_color, delta_color, delta_label, value_label
from .scales import BandScale, ValueScale
from .surface import DrawingSurface, JoinResult, Rect, Text, join

LABEL_FONT = '"Arial", sans-serif'
LABEL_FONT_SIZE = 13
VALUE_LABEL_COLOR = "white"
VALUE_LABEL_DROP = 15   # below the bar top, inside the bar
DELTA_LABEL_LIFT = 5    # above the bar top


def x_shift(key: SeriesKey, band1: BandScale) -> float:
    """Horizontal correction applied to a bar's slot start.

    The current bar is pulled left by half a slot so it is centred on its
    slot start; the previous bar is a quarter-slot wide and pushed right
    by its own width.
    """
    shift = 0.0
    if key is SeriesKey.CURRENT:
        shift = band1.bandwidth / 2
    elif key is SeriesKey.PREVIOUS:
        shift = band1.bandwidth / 4
        shift -= shift * 2
    return shift


def bar_rect(bar: DerivedBar, band0: BandScale, band1: BandScale, value: ValueScale) -> Rect:
    width = band1.bandwidth / (4 if bar.key is SeriesKey.PREVIOUS else 1)
    return Rect(
        x=band0(bar.title) + band1(bar.key) - x_shift(bar.key, band1),
        y=value(bar.value),
        width=width,
        height=value(0) - value(bar.value),
        fill=bar_color(bar).value,
    )


def bind_bars(surface: DrawingSurface, bars: Iterable[DerivedBar],
              band0: BandScale, band1: BandScale, value: ValueScale) -> JoinResult:
    return join(surface, "bar", (
        ((bar.title, bar.key), bar_rect(bar, band0, band1, value))
        for bar in bars
    ))


def _label(x, y, text, fill, weight="normal") -> Text:
    return Text(
        x, y, text,
        fill=fill,
        font_size=LABEL_FONT_SIZE,
        font_weight=weight,
        font_family=LABEL_FONT,
        anchor="middle",
    )


def bind_labels(surface: DrawingSurface, bars: Iterable[DerivedBar],
                band0: BandScale, band1: BandScale, value: ValueScale) -> Tuple[JoinResult, JoinResult]:
    """Value and delta labels; only the current series is labelled."""
    current = [bar for bar in bars if bar.key is SeriesKey.CURRENT]

    values = join(surface, "value-label", (
        ((bar.title,), _label(band0(bar.title) + band1(bar.key), value(bar.value) + VALUE_LABEL_DROP,
                              value_label(bar.value), VALUE_LABEL_COLOR))
        for bar in current
    ))
    deltas = join(surface, "delta-label", (
        ((bar.title,), _label(band0(bar.title) + band1(bar.key), value(bar.value) - DELTA_LABEL_LIFT,
                              delta_label(bar.percent_delta), delta_color(bar.percent_delta).value, "bold"))
        for bar in current
    ))
    return values, deltas
