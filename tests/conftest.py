import os

# headless pygame and matplotlib for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import matplotlib

matplotlib.use("Agg")

import pytest

from charting.config import ChartConfig
from charting.controller import ChartController
from charting.entities import ChartRecord
from charting.surface import Scene


@pytest.fixture
def scene():
    return Scene()


@pytest.fixture
def controller(scene):
    return ChartController(scene, ChartConfig())


@pytest.fixture
def records():
    return [
        ChartRecord("Open", (100_000, 150_000)),
        ChartRecord("Close", (400_000, 200_000)),
        ChartRecord("View", (999_999, 999_999)),
    ]
