import math
import numbers
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple


class Mode(str, Enum):
    LINEAR = "linear"
    LOG = "log"


@dataclass(frozen=True)
class Margin:
    top: int = 30
    right: int = 10
    bottom: int = 20
    left: int = 40


@dataclass(frozen=True)
class ChartConfig:
    width: float = 700
    height: float = 500
    mode: Mode = Mode.LINEAR
    margin: Margin = field(default_factory=Margin)

    def __post_init__(self):
        # accepts "log" / "linear" as plain strings, raises ValueError otherwise
        object.__setattr__(self, "mode", Mode(self.mode))

    def with_mode(self, mode) -> "ChartConfig":
        return replace(self, mode=Mode(mode))

    @property
    def has_valid_size(self) -> bool:
        return all(
            isinstance(v, numbers.Real) and math.isfinite(v) and v > 0
            for v in (self.width, self.height)
        )


# Space reserved left of the first category band for the value-axis labels
AXIS_LABEL_INSET: int = 50


@dataclass
class CFG:
    # Window
    WINDOW_W: int = 1540
    WINDOW_H: int = 680
    FPS: int = 60
    CAPTION: str = "Actions - previous vs current"

    # Charts (each panel gets its own ChartConfig)
    CHART_W: int = 700
    CHART_H: int = 500
    CHART_MODE: Mode = Mode.LINEAR

    # Data streams
    SEED: int = 7
    ACTIONS: Tuple[str, ...] = ("Open", "Close", "Delete", "Create", "Update", "View", "Click")
    MAX_RECORDS: int = 5
    VALUE_CEIL: int = 1_000_000      # values drawn from [0, VALUE_CEIL)
    USER_PERIOD: float = 0.3         # seconds between user-action emissions
    ADMIN_PERIOD: float = 0.1        # seconds between admin-action emissions
    ADMIN_DEBOUNCE: float = 0.5      # admin chart only redraws after this quiet time

    # End-of-run snapshots
    OUTPUT_DIR: str = "chart_results"
    SNAPSHOT_DPI: int = 100

    def chart_config(self) -> ChartConfig:
        return ChartConfig(self.CHART_W, self.CHART_H, self.CHART_MODE)
