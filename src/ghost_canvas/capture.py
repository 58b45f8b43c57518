import asyncio
import logging
import time
from typing import Callable

from ghost_canvas.models import Point, Stroke, TimedPoint, Tool
from ghost_canvas.scheduler import ReplayScheduler

logger = logging.getLogger(__name__)


class GestureCapture:
    """진행 중인 제스처 하나의 (포인트, 시각) 목록을 모은다."""

    def __init__(
        self,
        scheduler: ReplayScheduler,
        tool_provider: Callable[[], Tool],
        clock: Callable[[], float] = time.monotonic,
    ):
        self.scheduler = scheduler
        self._tool_provider = tool_provider
        self._clock = clock
        self._points: list[TimedPoint] = []
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def point_count(self) -> int:
        return len(self._points)

    def on_point_received(self, point: Point, timestamp: float | None = None) -> None:
        """포인트 추가. 진행 중인 제스처가 없으면 새로 시작한다."""
        if not self._active:
            self._active = True
            self._points = []

        if timestamp is None:
            timestamp = self._clock()
        self._points.append(TimedPoint(point=point, timestamp=timestamp))

    def on_gesture_ended(self) -> asyncio.Task | None:
        """스트로크를 확정하고 현재 도구로 재생을 예약.

        Returns:
            재생 태스크. 그릴 것이 없으면 None.
        """
        stroke = Stroke(points=tuple(self._points))
        self._reset()

        tool = self._tool_provider()
        logger.debug(
            "Gesture ended with %d point(s) over %.3fs, tool=%s",
            len(stroke), stroke.duration, tool.name,
        )
        return self.scheduler.replay(stroke, tool)

    def on_gesture_cancelled(self) -> None:
        """모은 포인트를 버린다. 재생은 예약하지 않는다."""
        logger.debug("Gesture cancelled, discarding %d point(s)", len(self._points))
        self._reset()

    def _reset(self) -> None:
        self._points = []
        self._active = False
