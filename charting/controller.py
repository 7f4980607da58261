import logging
import math
import numbers
from typing import Any, Iterable, List, Mapping, Optional

from .axes import render_category_axis, render_value_axis
from .binder import bind_bars, bind_labels
from .config import ChartConfig, Mode
from .entities import ChartRecord, InternalRecord
from .errors import ChartError, EmptyDatasetError, InvalidDimensionError, InvalidRecordError
from .metrics import derive_bars
from .scales import Scales, compute_scales
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


def _finite(v) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v)


def to_internal(record: Any) -> InternalRecord:
    """Project a ChartRecord (or a {'title', 'data'} mapping) onto the render row."""
    if isinstance(record, Mapping):
        title, data = record.get("title"), record.get("data")
    else:
        title, data = getattr(record, "title", None), getattr(record, "data", None)
    try:
        prev_value, current_value = data
    except (TypeError, ValueError):
        raise InvalidRecordError(f"record {title!r}: data must be a (previous, current) pair, got {data!r}")
    if not (_finite(prev_value) and _finite(current_value)):
        raise InvalidRecordError(f"record {title!r}: values must be finite numbers, got {data!r}")
    if prev_value < 0 or current_value < 0:
        raise InvalidRecordError(f"record {title!r}: values must not be negative, got {data!r}")
    return InternalRecord(str(title), float(prev_value), float(current_value))


class ChartController:
    """Entry point of the chart: validates, clears and redraws on every call.

    Errors never leave `render`; a rejected call returns False, sets
    `last_error` and leaves the surface as the last good render drew it.
    """

    def __init__(self, surface: DrawingSurface, config: Optional[ChartConfig] = None,
                 full_redraw: bool = True):
        self.surface = surface
        self.config = config or ChartConfig()
        self.full_redraw = full_redraw

        self.records: List[InternalRecord] = []
        self.scales: Optional[Scales] = None
        self.last_error: Optional[ChartError] = None

    # ---------- Public API ----------

    def render(self, data: Optional[Iterable[ChartRecord]], config: Optional[ChartConfig] = None) -> bool:
        config = config or self.config
        try:
            records = self._prepare(data, config)
        except EmptyDatasetError:
            logger.debug("empty dataset, keeping last render")
            return False
        except ChartError as e:
            logger.warning("render rejected: %s", e)
            self.last_error = e
            return False

        self._draw(records, config)
        return True

    def set_mode(self, mode) -> bool:
        """Switch linear/log and redraw what is on screen."""
        self.config = self.config.with_mode(mode)
        if not self.records:
            return False
        self._draw(self.records, self.config)
        return True

    def toggle_mode(self) -> Mode:
        self.set_mode(Mode.LINEAR if self.config.mode is Mode.LOG else Mode.LOG)
        return self.config.mode

    # ---------- Pipeline ----------

    def _prepare(self, data, config: ChartConfig) -> List[InternalRecord]:
        data = list(data) if data is not None else []
        if not data:
            raise EmptyDatasetError("no data")
        if not config.has_valid_size:
            raise InvalidDimensionError(f"width and height must be positive, got {config.width}x{config.height}")
        return [to_internal(r) for r in data]

    def _draw(self, records: List[InternalRecord], config: ChartConfig):
        if self.full_redraw:
            self.surface.clear()

        scales = compute_scales(records, config)

        render_category_axis(self.surface, scales.band0, config)
        render_value_axis(self.surface, scales.value, config)

        bars = [bar for record in records for bar in derive_bars(record)]
        bind_bars(self.surface, bars, scales.band0, scales.band1, scales.value)
        bind_labels(self.surface, bars, scales.band0, scales.band1, scales.value)

        self.records = records
        self.config = config
        self.scales = scales
        self.last_error = None
        logger.debug("rendered %d records (%s, %sx%s)", len(records), config.mode.value, config.width, config.height)
