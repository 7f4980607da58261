import os
import re

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from charting.config import ChartConfig
from charting.metrics import plain_glyphs
from charting.surface import Line, Rect, Scene, Text

# scene sizes are in pixels, matplotlib fonts in points
PX_TO_PT = 0.75

_HALIGN = {"start": "left", "middle": "center", "end": "right"}
_VALIGN = {"top": "top", "middle": "center", "alphabetic": "baseline"}


def draw_scene(ax, scene: Scene, config: ChartConfig):
    """Paint a scene on an axes whose data units are scene pixels (y down)."""
    ax.set_xlim(0, config.width)
    ax.set_ylim(config.height, 0)
    ax.set_axis_off()

    for z, (_, shape) in enumerate(scene.items()):
        if isinstance(shape, Rect):
            ax.add_patch(Rectangle((shape.x, shape.y), shape.width, shape.height,
                                   facecolor=shape.fill, edgecolor="none", zorder=z))
        elif isinstance(shape, Line):
            ax.plot([shape.x1, shape.x2], [shape.y1, shape.y2], color=shape.stroke,
                    alpha=shape.opacity, linewidth=shape.width * PX_TO_PT, zorder=z)
        elif isinstance(shape, Text):
            ax.text(shape.x, shape.y, plain_glyphs(shape.text), color=shape.fill,
                    fontsize=shape.font_size * PX_TO_PT, fontweight=shape.font_weight,
                    family="sans-serif", ha=_HALIGN[shape.anchor], va=_VALIGN[shape.baseline],
                    zorder=len(scene) + z)


def render_figure(scene: Scene, config: ChartConfig, title=None, dpi=100):
    fig = plt.figure(figsize=(config.width / dpi, config.height / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    draw_scene(ax, scene, config)
    if title:
        ax.text(config.width - config.margin.right, config.margin.top / 2, title,
                ha="right", va="center", fontsize=14, fontweight="bold", color="#323232")
    return fig


def _slug(title: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", title.lower()).strip("_") or "chart"


def final_charts(panels, cfg):
    """Save a PNG of every chart that has something drawn. Returns the paths."""
    drawn = [p for p in panels if len(p.scene)]
    if not drawn:
        print("No chart data to save")
        return []

    os.makedirs(cfg.OUTPUT_DIR, exist_ok=True)
    paths = []
    for panel in drawn:
        config = panel.controller.config
        fig = render_figure(panel.scene, config, panel.title, dpi=cfg.SNAPSHOT_DPI)
        path = os.path.join(cfg.OUTPUT_DIR, f"{_slug(panel.title)}.png")
        fig.savefig(path, dpi=cfg.SNAPSHOT_DPI)
        plt.close(fig)
        paths.append(path)
        print(f"Saved {panel.title} -> {path}")
    return paths
