import pygame
from .colors import COLORS

LEGEND_ITEMS = [
    ('BAR_PREVIOUS', "Previous"),
    ('BAR_UP', "Current (up)"),
    ('BAR_DOWN', "Current (down)"),
]


def draw_legend(monitor):
    x, y = monitor.legend['x'], monitor.legend['y']
    for key, label in LEGEND_ITEMS:
        patch = pygame.Rect(x, y, 16, 16)
        pygame.draw.rect(monitor.screen, COLORS[key], patch)
        surf = monitor.fonts['small'].render(label, True, COLORS['UI_TEXT'])
        monitor.screen.blit(surf, (x + 22, y + 2))
        x += 30 + surf.get_width() + 20


def draw_buttons(monitor):
    for button in monitor.buttons.values():
        color = button['hover_color'] if button['rect'].collidepoint(monitor.mouse_pos) else button['color']
        pygame.draw.rect(monitor.screen, color, button['rect'])
        pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], button['rect'], 2)
        text_surface = monitor.fonts['medium'].render(button['text'], True, COLORS['UI_TEXT'])
        text_rect = text_surface.get_rect(center=button['rect'].center)
        monitor.screen.blit(text_surface, text_rect)


def draw_status(monitor):
    if monitor.should_stop:
        status_text, status_color = "Stopped", COLORS['UI_STOP']
    elif monitor.is_paused:
        status_text, status_color = "Paused", COLORS['UI_PAUSE']
    else:
        status_text, status_color = "Live", COLORS['UI_BUTTON']

    parts = [f"Scale: {monitor.mode.value}"]
    for panel in monitor.panels:
        parts.append(f"{panel.title}: {len(panel.controller.records)} records / {panel.renders} renders")

    x, y = monitor.legend['x'], monitor.height - 50
    status_surface = monitor.fonts['medium'].render(status_text, True, status_color)
    monitor.screen.blit(status_surface, (x, y))
    info = monitor.fonts['small'].render(" | ".join(parts), True, COLORS['UI_TEXT'])
    monitor.screen.blit(info, (x + status_surface.get_width() + 15, y + 3))
