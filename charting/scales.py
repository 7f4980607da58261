"""
Coordinate scales for the grouped bar chart.

Three scales are rebuilt on every render:

    band0   category title -> x start of the category slot
    band1   series key     -> x offset inside a category slot
    value   value          -> y pixel (0 at the bottom, linear or symlog)

Tick and "nice" arithmetic follow the usual 1/2/5 x 10^n stepping so the
value axis always ends on a round number.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .config import AXIS_LABEL_INSET, ChartConfig, Mode
from .entities import SERIES, InternalRecord
from .errors import EmptyDatasetError
from .utils import round_half_up

logger = logging.getLogger(__name__)

E10 = math.sqrt(50)
E5 = math.sqrt(10)
E2 = math.sqrt(2)


# ---------- Tick arithmetic ----------

def tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    """Return (i1, i2, inc) so that ticks are i*inc (inc > 0) or i/-inc (inc < 0)."""
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= E10 else 5 if error >= E5 else 2 if error >= E2 else 1
    if power < 0:
        inc = 10 ** -power / factor
        i1 = round_half_up(start * inc)
        i2 = round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10 ** power * factor
        i1 = round_half_up(start / inc)
        i2 = round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    return tick_spec(start, stop, count)[2]


def ticks(start: float, stop: float, count: int = 10) -> List[float]:
    if count <= 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    i1, i2, inc = tick_spec(start, stop, count)
    if not i2 >= i1:
        return []
    idx = np.arange(i1, i2 + 1)
    values = idx / -inc if inc < 0 else idx * inc
    if reverse:
        values = values[::-1]
    return [float(v) for v in values]


def nice_domain(start: float, stop: float, count: int = 10) -> Tuple[float, float]:
    """Widen [start, stop] outward until both ends sit on a tick step."""
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    lo, hi = start, stop
    if start == stop or count <= 0:
        return (float(hi), float(lo)) if reverse else (float(lo), float(hi))
    prestep = None
    for _ in range(10):
        step = tick_increment(start, stop, count)
        if step == prestep:
            lo, hi = start, stop
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        elif step < 0:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        else:
            break
        prestep = step
    return (float(hi), float(lo)) if reverse else (float(lo), float(hi))


# ---------- Scales ----------

class BandScale:
    """Equal-width slots for a discrete domain, laid out across a pixel extent."""

    def __init__(self, domain: Iterable, extent: Sequence[float],
                 padding_inner: float = 0.0, padding_outer: float = 0.0,
                 align: float = 0.5, round: bool = True):
        # duplicates collapse onto their first slot
        self.domain = list(dict.fromkeys(domain))
        self.extent = (float(extent[0]), float(extent[1]))
        self.padding_inner = min(1.0, padding_inner)
        self.padding_outer = padding_outer
        self.align = align
        self.round = round
        self._rescale()

    def _rescale(self):
        n = len(self.domain)
        r0, r1 = self.extent
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        step = (stop - start) / max(1, n - self.padding_inner + self.padding_outer * 2)
        if self.round:
            step = math.floor(step)
        start += (stop - start - step * (n - self.padding_inner)) * self.align
        bandwidth = step * (1 - self.padding_inner)
        if self.round:
            start = round_half_up(start)
            bandwidth = round_half_up(bandwidth)
        positions = [start + step * i for i in range(n)]
        if reverse:
            positions.reverse()
        self.step = step
        self.bandwidth = bandwidth
        self._positions = dict(zip(self.domain, positions))

    def __call__(self, key) -> float:
        return self._positions[key]

    def __contains__(self, key) -> bool:
        return key in self._positions


def _identity(x: float) -> float:
    return float(x)


def _symlog(x: float) -> float:
    return float(np.sign(x) * np.log1p(np.abs(x)))


class ValueScale:
    """Continuous value -> pixel map; `mode` only swaps the transform."""

    def __init__(self, domain: Sequence[float], extent: Sequence[float],
                 mode: Mode = Mode.LINEAR, round: bool = True):
        self.domain = (float(domain[0]), float(domain[1]))
        self.extent = (float(extent[0]), float(extent[1]))
        self.mode = Mode(mode)
        self.round = round
        self._transform = _symlog if self.mode is Mode.LOG else _identity

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.extent
        t0, t1 = self._transform(d0), self._transform(d1)
        if t1 == t0:
            out = r0 + (r1 - r0) / 2
        else:
            out = r0 + (self._transform(value) - t0) / (t1 - t0) * (r1 - r0)
        return round_half_up(out) if self.round else out

    def nice(self, count: int = 10) -> "ValueScale":
        return ValueScale(nice_domain(*self.domain, count), self.extent, self.mode, self.round)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class Scales:
    band0: BandScale
    band1: BandScale
    value: ValueScale


def value_max(records: Sequence[InternalRecord]) -> float:
    return max(max(r.prev_value, r.current_value) for r in records)


def compute_scales(records: Sequence[InternalRecord], config: ChartConfig) -> Scales:
    if not records:
        raise EmptyDatasetError("no records to scale")
    m = config.margin

    band0 = BandScale(
        [r.title for r in records],
        (m.left + AXIS_LABEL_INSET, config.width - m.right),
        padding_inner=0.1,
    )
    band1 = BandScale(
        SERIES,
        (0, band0.bandwidth),
        padding_inner=0.05,
        padding_outer=0.05,
    )

    top = value_max(records)
    if top <= 0:
        logger.debug("value maximum %s is not positive, using [0, 1]", top)
        top = 1
    value = ValueScale(
        (0, top),
        (config.height - m.bottom, m.top),
        mode=config.mode,
    ).nice()

    return Scales(band0, band1, value)
