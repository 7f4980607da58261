import logging

import pygame

from charting.config import CFG, Mode
from charting.controller import ChartController
from charting.surface import Scene
from .colors import COLORS
from .chart_data import ChartPanel
from .chart_renderer import clear_caches, draw_charts
from .ui_renderer import draw_legend, draw_buttons, draw_status
from .event_handler import handle_events

logger = logging.getLogger(__name__)


class PygameMonitor:
    def __init__(self, cfg: CFG):
        self.cfg = cfg

        # --- Initialize pygame ---
        pygame.init()
        self.width, self.height = cfg.WINDOW_W, cfg.WINDOW_H
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(cfg.CAPTION)

        # Fonts
        self.fonts = {
            "small": pygame.font.Font(None, 18),
            "medium": pygame.font.Font(None, 22),
            "large": pygame.font.Font(None, 28),
        }

        # Layout
        self.chart_x, self.chart_y, self.chart_gap = 40, 70, 40

        # UI state
        self.is_paused = False
        self.should_stop = False
        self.mouse_pos = (0, 0)
        self.mode = Mode(cfg.CHART_MODE)

        self.panels = []
        self.buttons = self._init_buttons()
        self.legend = {"x": self.chart_x, "y": 12}

        # FPS control
        self.fps_clock = pygame.time.Clock()
        self.fps = cfg.FPS

    # ---------- Initialization helpers ----------

    def _init_buttons(self):
        button_width, button_height = 120, 36
        x = self.width - 3 * (button_width + 15) - self.chart_x
        y = 8
        buttons = {}
        for i, (name, text, color, hover, action) in enumerate([
            ("mode", "Log" if self.mode is Mode.LINEAR else "Linear",
             COLORS["UI_BUTTON"], COLORS["UI_BUTTON_HOVER"], "toggle_mode"),
            ("pause_play", "⏸ Pause", COLORS["UI_BUTTON"], COLORS["UI_BUTTON_HOVER"], "toggle_pause"),
            ("stop", "⏹ Stop", COLORS["UI_STOP"], (255, 150, 150), "stop"),
        ]):
            buttons[name] = {
                "rect": pygame.Rect(x + i * (button_width + 15), y, button_width, button_height),
                "text": text,
                "color": color,
                "hover_color": hover,
                "action": action,
            }
        return buttons

    def add_panel(self, title, source=None) -> ChartPanel:
        """Place a new chart right of the existing ones and feed it from source"""
        config = self.cfg.chart_config().with_mode(self.mode)
        x = self.chart_x + len(self.panels) * (config.width + self.chart_gap)
        panel = ChartPanel(title, ChartController(Scene(), config), x, self.chart_y)
        self.panels.append(panel)
        if source is not None:
            panel.bind(source)
        return panel

    def set_mode(self, mode):
        self.mode = Mode(mode)
        for panel in self.panels:
            panel.controller.set_mode(self.mode)
        logger.info("value scale: %s", self.mode.value)

    # ---------- Main loop ----------

    def render(self):
        """Draw one frame; False once the window asks to close"""
        if not handle_events(self):
            return False

        self.screen.fill(COLORS["UI_BACKGROUND"])
        draw_legend(self)
        draw_charts(self)
        draw_buttons(self)
        draw_status(self)

        pygame.display.flip()
        self.fps_clock.tick(self.fps)
        return True

    # ---------- Utility ----------

    def cleanup(self):
        for panel in self.panels:
            panel.unbind()
        clear_caches()
        pygame.quit()
