from .config import ChartConfig
from .scales import BandScale, ValueScale
from .surface import DrawingSurface, JoinResult, Line, Text, join
from .utils import format_number

AXIS_COLOR = "grey"
AXIS_FONT_SIZE = 14
AXIS_FONT_WEIGHT = "bold"
TICK_PADDING = 3
GRID_OPACITY = 0.1
UNIT_LABEL = "(K)"


def _axis_text(x, y, text, anchor, baseline) -> Text:
    return Text(
        x, y, text,
        fill=AXIS_COLOR,
        font_size=AXIS_FONT_SIZE,
        font_weight=AXIS_FONT_WEIGHT,
        anchor=anchor,
        baseline=baseline,
    )


def render_category_axis(surface: DrawingSurface, band0: BandScale, config: ChartConfig) -> JoinResult:
    """Category titles under each slot; no domain line, no tick marks."""
    axis_y = config.height - config.margin.bottom + 5
    offset = band0.bandwidth / 2
    return join(surface, "x-axis", (
        ((title,), _axis_text(band0(title) + offset, axis_y + TICK_PADDING, str(title), "middle", "top"))
        for title in band0.domain
    ))


def render_value_axis(surface: DrawingSurface, value: ValueScale, config: ChartConfig) -> JoinResult:
    """Tick labels in thousands with a faint gridline per tick, plus the unit label."""
    axis_x = config.margin.left
    tick_values = value.ticks()

    labels = join(surface, "y-axis", (
        ((t,), _axis_text(axis_x - TICK_PADDING, value(t), format_number(t / 1000), "end", "middle"))
        for t in tick_values
    ))
    grid = join(surface, "y-grid", (
        ((t,), Line(axis_x, value(t), axis_x + config.width, value(t), stroke=AXIS_COLOR, opacity=GRID_OPACITY))
        for t in tick_values
    ))
    unit = join(surface, "y-unit", [((), _axis_text(15, 10, UNIT_LABEL, "start", "alphabetic"))])

    return JoinResult(
        labels.entered + grid.entered + unit.entered,
        labels.updated + grid.updated + unit.updated,
        labels.exited + grid.exited + unit.exited,
    )
