import os
import warnings

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from charting.config import CFG
from charting.controller import ChartController
from charting.entities import ChartRecord
from charting.surface import Rect, Scene, Text
from visualization.matplotlib import final_charts, render_figure
from visualization.pygame.chart_data import ChartPanel


def test_render_figure_draws_every_shape(controller, scene, records):
    controller.render(records)
    fig = render_figure(scene, controller.config)
    ax = fig.axes[0]
    try:
        rects = [p for p in ax.patches if isinstance(p, Rectangle)]
        assert len(rects) == len(scene.shapes(Rect))
        assert len(ax.texts) == len(scene.shapes(Text))
        assert ax.get_ylim() == (500, 0)
        assert tuple(fig.get_size_inches() * fig.dpi) == (700, 500)
    finally:
        plt.close(fig)


def test_final_charts_saves_drawn_panels(tmp_path, records):
    cfg = CFG(OUTPUT_DIR=str(tmp_path / "out"))
    drawn = ChartPanel("User actions", ChartController(Scene()), 0, 0)
    drawn.on_data(records)
    empty = ChartPanel("Admin actions", ChartController(Scene()), 0, 0)

    paths = final_charts([drawn, empty], cfg)
    assert paths == [os.path.join(cfg.OUTPUT_DIR, "user_actions.png")]
    assert os.path.getsize(paths[0]) > 0


def test_final_charts_without_data(tmp_path, capsys):
    cfg = CFG(OUTPUT_DIR=str(tmp_path / "out"))
    assert final_charts([], cfg) == []
    assert not os.path.exists(cfg.OUTPUT_DIR)
    assert "No chart data" in capsys.readouterr().out


def test_render_figure_has_glyphs_for_arrow_labels(controller, scene):
    controller.render([ChartRecord("Open", (100, 150)), ChartRecord("Close", (1000, 500))])
    fig = render_figure(scene, controller.config)
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            fig.canvas.draw()
        missing = [str(w.message) for w in caught if "missing from font" in str(w.message)]
        assert missing == []
        labels = [t.get_text() for t in fig.axes[0].texts]
        assert "+50%▲" in labels and "-50%▼" in labels
    finally:
        plt.close(fig)
