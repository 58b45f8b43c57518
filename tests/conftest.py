import asyncio

import pytest

from ghost_canvas.models import Tool
from ghost_canvas.publisher import CanvasPublisher
from ghost_canvas.surface import RasterSurface

WHITE = (255, 255, 255, 255)


class RecordingSleep:
    """실제로 기다리지 않고 요청된 대기 시간을 기록하는 sleep."""

    def __init__(self):
        self.delays: list[float] = []
        self.now = 0.0

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        self.now += delay
        await asyncio.sleep(0)


class RecordingSurface:
    """stroke_segment 호출만 기록하는 가짜 캔버스."""

    def __init__(self, clock=None):
        self.generation = 1
        self.calls: list[tuple] = []
        self.clock = clock

    def stroke_segment(self, start, end, color, generation=None):
        at = self.clock() if self.clock is not None else None
        self.calls.append((start, end, color, generation, at))
        return True


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def red_tool() -> Tool:
    return Tool(name="red", color=(255, 0, 0, 255), initial_delay=1.0)


@pytest.fixture
def publisher() -> CanvasPublisher:
    return CanvasPublisher()


@pytest.fixture
def surface(publisher) -> RasterSurface:
    surface = RasterSurface(publisher)
    surface.initialize(100, 100, background_color=WHITE, line_width=4)
    return surface
