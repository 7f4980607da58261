import pygame

from charting.metrics import plain_glyphs
from charting.surface import Line, Rect, Scene, Text
from .colors import COLORS, rgba

_font_cache = {}
_overlay_cache = {}


def clear_caches():
    """Drop cached fonts and overlays; they die with pygame.quit()"""
    _font_cache.clear()
    _overlay_cache.clear()


def get_font(size, bold=False):
    if not pygame.font.get_init():
        pygame.font.init()
    key = (size, bold)
    if key not in _font_cache:
        font = pygame.font.Font(None, size)
        font.set_bold(bold)
        _font_cache[key] = font
    return _font_cache[key]


def get_overlay(size):
    """Cleared per-size alpha surface for translucent shapes"""
    size = (int(size[0]), int(size[1]))
    if size not in _overlay_cache:
        _overlay_cache[size] = pygame.Surface(size, pygame.SRCALPHA)
    overlay = _overlay_cache[size]
    overlay.fill((0, 0, 0, 0))
    return overlay


# ========== Shape painters ==========

def _draw_rect(target, shape: Rect, ox, oy):
    if shape.width <= 0 or shape.height <= 0:
        return
    rect = pygame.Rect(round(ox + shape.x), round(oy + shape.y), round(shape.width), round(shape.height))
    pygame.draw.rect(target, rgba(shape.fill), rect)


def _draw_line(target, overlay, shape: Line, ox, oy):
    if shape.opacity >= 1:
        start = (ox + shape.x1, oy + shape.y1)
        end = (ox + shape.x2, oy + shape.y2)
        pygame.draw.line(target, rgba(shape.stroke), start, end, shape.width)
    else:
        # translucent lines go on the scene-sized overlay, in scene coordinates
        pygame.draw.line(overlay, rgba(shape.stroke, shape.opacity),
                         (shape.x1, shape.y1), (shape.x2, shape.y2), shape.width)


def _draw_text(target, shape: Text, ox, oy):
    font = get_font(shape.font_size, shape.font_weight == "bold")
    surf = font.render(plain_glyphs(shape.text), True, rgba(shape.fill))
    rect = surf.get_rect()

    x, y = ox + shape.x, oy + shape.y
    if shape.anchor == "start":
        rect.left = round(x)
    elif shape.anchor == "end":
        rect.right = round(x)
    else:
        rect.centerx = round(x)

    if shape.baseline == "top":
        rect.top = round(y)
    elif shape.baseline == "middle":
        rect.centery = round(y)
    else:
        rect.top = round(y - font.get_ascent())
    target.blit(surf, rect)


def draw_scene(target, scene: Scene, origin=(0, 0), size=None):
    """Paint every shape of a scene, in creation order, offset by origin.

    `size` bounds the scene (defaults to the rest of the target right of and
    below the origin).
    """
    ox, oy = origin
    if size is None:
        tw, th = target.get_size()
        size = (max(1, tw - ox), max(1, th - oy))
    overlay = get_overlay(size)
    texts = []
    for _, shape in scene.items():
        if isinstance(shape, Rect):
            _draw_rect(target, shape, ox, oy)
        elif isinstance(shape, Line):
            _draw_line(target, overlay, shape, ox, oy)
        elif isinstance(shape, Text):
            texts.append(shape)
    target.blit(overlay, (ox, oy))
    # labels last so gridlines never cross them
    for shape in texts:
        _draw_text(target, shape, ox, oy)


# ========== Panels ==========

def _draw_panel(monitor, panel):
    cfg = panel.controller.config
    rect = pygame.Rect(panel.x, panel.y, cfg.width, cfg.height)
    pygame.draw.rect(monitor.screen, COLORS['UI_CHART_BG'], rect)
    pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], rect, 2)

    title_surface = monitor.fonts['large'].render(panel.title, True, COLORS['UI_TEXT'])
    monitor.screen.blit(title_surface, (panel.x + 5, panel.y - 28))

    if not len(panel.scene):
        waiting = monitor.fonts['small'].render("Waiting for data...", True, COLORS['UI_TEXT'])
        monitor.screen.blit(waiting, waiting.get_rect(center=rect.center))
        return

    previous_clip = monitor.screen.get_clip()
    monitor.screen.set_clip(rect)
    draw_scene(monitor.screen, panel.scene, (panel.x, panel.y), rect.size)
    monitor.screen.set_clip(previous_clip)


def draw_charts(monitor):
    for panel in monitor.panels:
        _draw_panel(monitor, panel)
