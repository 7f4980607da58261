import pygame

from charting.metrics import Colors


COLORS = {
    # Bars
    'BAR_PREVIOUS': Colors.GREY.value,
    'BAR_UP': Colors.GREEN.value,
    'BAR_DOWN': Colors.RED.value,

    # UI elements
    'UI_BACKGROUND': (245, 245, 245), # Light gray
    'UI_BORDER': (200, 200, 200),     # Medium gray
    'UI_TEXT': (50, 50, 50),          # Dark gray
    'UI_BUTTON': (100, 149, 237),     # Cornflower blue
    'UI_BUTTON_HOVER': (70, 130, 180), # Steel blue
    'UI_BUTTON_ACTIVE': (65, 105, 225), # Royal blue
    'UI_PAUSE': (144, 238, 144),       # Light green
    'UI_STOP': (255, 182, 193),        # Light pink
    'UI_CHART_BG': (255, 255, 255),    # White
}


def rgba(color, opacity=1.0):
    """pygame colour from a name, '#rrggbb' or RGB tuple, with alpha from opacity."""
    c = pygame.Color(color)
    c.a = max(0, min(255, int(round(opacity * 255))))
    return c
