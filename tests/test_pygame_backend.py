import pygame
import pytest

from charting.config import CFG, Mode
from charting.datasource import ActionsDataSource
from charting.entities import ChartRecord
from charting.metrics import Colors
from charting.surface import Line, Scene
from visualization.pygame.chart_renderer import clear_caches, draw_scene, get_font, get_overlay
from visualization.pygame.colors import rgba
from visualization.pygame.monitor import PygameMonitor


@pytest.fixture
def pygame_ready():
    pygame.init()
    yield
    clear_caches()
    pygame.quit()


def _rgb(color):
    c = pygame.Color(color)
    return (c.r, c.g, c.b)


def test_rgba_accepts_names_hex_and_tuples():
    assert tuple(rgba("#32d574")) == (0x32, 0xd5, 0x74, 255)
    assert rgba("grey", 0.1).a == 26
    assert tuple(rgba((1, 2, 3))) == (1, 2, 3, 255)


def test_draw_scene_paints_bars(pygame_ready, controller, scene):
    controller.render([ChartRecord("Open", (100, 150))])
    target = pygame.Surface((700, 500))
    target.fill((255, 255, 255))
    draw_scene(target, scene)

    # current bar spans x 272..522, y 58..480; previous bar x 196..258, y 199..480
    assert tuple(target.get_at((400, 300)))[:3] == _rgb(Colors.GREEN.value)
    assert tuple(target.get_at((227, 400)))[:3] == _rgb(Colors.GREY.value)
    assert tuple(target.get_at((650, 150)))[:3] != _rgb(Colors.GREEN.value)


def test_draw_scene_honours_origin(pygame_ready, controller, scene):
    controller.render([ChartRecord("Close", (1000, 500))])
    target = pygame.Surface((900, 700))
    target.fill((255, 255, 255))
    draw_scene(target, scene, (100, 100))
    assert tuple(target.get_at((500, 520)))[:3] == _rgb(Colors.RED.value)


@pytest.fixture
def monitor():
    m = PygameMonitor(CFG(CHART_W=300, CHART_H=200, WINDOW_W=800, WINDOW_H=400))
    yield m
    m.cleanup()


def test_monitor_panels_follow_source(monitor):
    source = ActionsDataSource(0.1, rng=None)
    panel = monitor.add_panel("User actions", source)
    assert panel.renders == 0

    source.start(0.0)
    source.poll(0.0)
    assert panel.renders == 1
    assert len(panel.controller.records) == 1
    assert monitor.render()


def test_monitor_side_by_side_layout(monitor):
    first = monitor.add_panel("A")
    second = monitor.add_panel("B")
    assert second.x == first.x + 300 + monitor.chart_gap
    assert first.y == second.y


def test_mode_key_toggles_every_chart(monitor):
    panels = [monitor.add_panel("A"), monitor.add_panel("B")]
    for panel in panels:
        panel.on_data([ChartRecord("Open", (100, 150))])

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_l))
    assert monitor.render()
    assert monitor.mode is Mode.LOG
    assert all(p.controller.config.mode is Mode.LOG for p in panels)
    assert monitor.buttons['mode']['text'] == 'Linear'


def test_pause_and_escape_keys(monitor):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert monitor.render()
    assert monitor.is_paused

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert monitor.render() is False
    assert monitor.should_stop


def test_fonts_are_cached_until_cleared(pygame_ready):
    font = get_font(13, True)
    assert get_font(13, True) is font
    assert get_font(13) is not font
    clear_caches()
    assert get_font(13, True) is not font



def test_overlay_is_sized_per_scene_and_reused(pygame_ready):
    overlay = get_overlay((300, 200))
    assert overlay.get_size() == (300, 200)
    overlay.fill((255, 0, 0, 255))
    again = get_overlay((300, 200))
    assert again is overlay
    assert tuple(again.get_at((10, 10))) == (0, 0, 0, 0)
    assert get_overlay((700, 500)) is not overlay
    clear_caches()
    assert get_overlay((300, 200)) is not overlay


def test_translucent_lines_follow_origin(pygame_ready):
    scene = Scene()
    scene.create(("y-grid", 0), Line(0, 10, 50, 10, "#000000", opacity=0.5))
    target = pygame.Surface((400, 300))
    target.fill((255, 255, 255))
    draw_scene(target, scene, (100, 50), (60, 20))

    shaded = tuple(target.get_at((120, 60)))[:3]
    assert all(100 <= c <= 160 for c in shaded)
    assert tuple(target.get_at((20, 10)))[:3] == (255, 255, 255)
    assert tuple(target.get_at((200, 60)))[:3] == (255, 255, 255)
