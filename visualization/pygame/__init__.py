"""
Pygame front end for the delta bar charts.

Provides:
    - COLORS (shared color palette)
    - ChartPanel (one chart on screen)
    - PygameMonitor (window, controls and frame loop)
    - draw_scene (paints a chart scene onto any pygame surface)
"""

from .colors import COLORS
from .chart_data import ChartPanel
from .chart_renderer import draw_scene
from .monitor import PygameMonitor

__all__ = ["COLORS", "ChartPanel", "PygameMonitor", "draw_scene"]
