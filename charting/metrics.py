import logging
from enum import Enum
from typing import Tuple

from .entities import DerivedBar, InternalRecord, SeriesKey
from .errors import DegenerateDeltaError
from .utils import round_half_up

logger = logging.getLogger(__name__)


class Colors(str, Enum):
    GREY = "#ccd3d5"
    RED = "#fe2844"
    GREEN = "#32d574"


class Arrows(str, Enum):
    UP = "\U0001F815"
    DOWN = "\U0001F817"


# Geometric-shape stand-ins for fonts that lack the supplemental arrows
PLAIN_ARROWS = {Arrows.UP.value: "\u25b2", Arrows.DOWN.value: "\u25bc"}


def plain_glyphs(text: str) -> str:
    return "".join(PLAIN_ARROWS.get(ch, ch) for ch in text)


# Percent shown when the previous value is zero and the current one is not
ZERO_BASE_DELTA: int = 100


def percent_delta(current: float, previous: float) -> int:
    if previous == 0:
        raise DegenerateDeltaError(previous, current)
    if current > previous:
        return round_half_up((current - previous) / previous * 100)
    return -round_half_up(100 - (current / previous * 100))


def resolve_delta(current: float, previous: float) -> int:
    """Percent delta with the zero-previous case pinned to a finite sentinel."""
    try:
        return percent_delta(current, previous)
    except DegenerateDeltaError as e:
        if current > 0:
            delta = ZERO_BASE_DELTA
        elif current < 0:
            delta = -ZERO_BASE_DELTA
        else:
            delta = 0
        logger.debug("%s; using %+d%%", e, delta)
        return delta


def delta_color(delta: int) -> Colors:
    return Colors.GREEN if delta > 0 else Colors.RED


def delta_arrow(delta: int) -> Arrows:
    return Arrows.UP if delta > 0 else Arrows.DOWN


def bar_color(bar: DerivedBar) -> Colors:
    if bar.key is SeriesKey.PREVIOUS:
        return Colors.GREY
    return delta_color(bar.percent_delta)


def delta_label(delta: int) -> str:
    sign = "+" if delta > 0 else ""
    return f"{sign}{delta}%{delta_arrow(delta).value}"


def value_label(value: float) -> str:
    """Value in thousands, e.g. 150 -> '0K', 500 -> '1K', 123456 -> '123K'."""
    return f"{round_half_up(value / 1000)}K"


def derive_bars(record: InternalRecord) -> Tuple[DerivedBar, DerivedBar]:
    delta = resolve_delta(record.current_value, record.prev_value)
    return (
        DerivedBar(record.title, SeriesKey.PREVIOUS, record.prev_value, delta),
        DerivedBar(record.title, SeriesKey.CURRENT, record.current_value, delta),
    )
