"""
Grouped previous/current bar chart with percent-change annotations.

Provides:
    - ChartController (render entry point)
    - ChartConfig, Mode, CFG (configuration)
    - ChartRecord (input unit)
    - Scene (in-memory drawing surface)
    - ActionsDataSource, Debounced (mock data streams)
"""

from .config import CFG, ChartConfig, Margin, Mode
from .controller import ChartController
from .datasource import ActionsDataSource, Debounced
from .entities import ChartRecord
from .errors import (
    ChartError,
    DegenerateDeltaError,
    EmptyDatasetError,
    InvalidDimensionError,
    InvalidRecordError,
)
from .surface import Scene

__all__ = [
    "CFG", "ChartConfig", "Margin", "Mode",
    "ChartController", "ChartRecord", "Scene",
    "ActionsDataSource", "Debounced",
    "ChartError", "DegenerateDeltaError", "EmptyDatasetError",
    "InvalidDimensionError", "InvalidRecordError",
]
