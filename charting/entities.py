from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class ChartRecord:
    """One category as delivered by a data source: title and (previous, current)."""
    title: str
    data: Tuple[float, float]


@dataclass(frozen=True)
class InternalRecord:
    title: str
    prev_value: float
    current_value: float


class SeriesKey(str, Enum):
    PREVIOUS = "prevValue"
    CURRENT = "currentValue"


SERIES: Tuple[SeriesKey, SeriesKey] = (SeriesKey.PREVIOUS, SeriesKey.CURRENT)


@dataclass(frozen=True)
class DerivedBar:
    title: str
    key: SeriesKey
    value: float
    percent_delta: int  # only displayed for the current series
