"""
Matplotlib back end: paints chart scenes onto figures and saves snapshots.
"""

from .figure_renderer import draw_scene, final_charts, render_figure

__all__ = ["draw_scene", "final_charts", "render_figure"]
