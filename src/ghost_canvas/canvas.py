import asyncio
import logging
import time
from typing import Callable

from ghost_canvas.capture import GestureCapture
from ghost_canvas.config import CanvasConfig
from ghost_canvas.models import CanvasSnapshot, Point, Tool
from ghost_canvas.publisher import CanvasPublisher, Observer
from ghost_canvas.scheduler import ReplayScheduler, SleepFunc
from ghost_canvas.surface import RasterSurface

logger = logging.getLogger(__name__)


class GhostCanvas:
    """호스트 UI가 호출하는 진입점.

    레이아웃 변경, 도구 선택, 드래그 이벤트, 지우기 동작을
    캔버스 구성 요소들에 연결한다.
    """

    def __init__(
        self,
        config: CanvasConfig | None = None,
        *,
        sleep: SleepFunc = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or CanvasConfig()
        self.publisher = CanvasPublisher()
        self.surface = RasterSurface(self.publisher)
        self.scheduler = ReplayScheduler(self.surface, sleep=sleep)
        self.capture = GestureCapture(
            self.scheduler, tool_provider=lambda: self.selected_tool, clock=clock
        )
        self._selected_tool = self.config.tools[0]
        self._layout: tuple[float, float] | None = None

    @property
    def tools(self) -> tuple[Tool, ...]:
        return self.config.tools

    @property
    def selected_tool(self) -> Tool:
        return self._selected_tool

    def select_tool(self, name: str) -> Tool:
        """도구 선택. 이미 예약된 재생에는 영향을 주지 않는다.

        Raises:
            UnknownToolError: 설정에 없는 도구 이름인 경우
        """
        self._selected_tool = self.config.get_tool(name)
        return self._selected_tool

    def layout(
        self, container_width: float, container_height: float, display_scale: float
    ) -> bool:
        """컨테이너 크기나 배율이 바뀌면 캔버스를 새로 만듦.

        캔버스는 컨테이너 너비를 한 변으로 하는 정사각형이다.

        Returns:
            캔버스를 새로 만들었으면 True
        """
        if container_width <= 0 or container_height <= 0 or display_scale <= 0:
            logger.debug(
                "Ignoring empty layout %sx%s @%s",
                container_width, container_height, display_scale,
            )
            return False

        key = (float(container_width), float(display_scale))
        if key == self._layout:
            return False

        side = int(container_width * display_scale)
        if side <= 0:
            logger.debug("Ignoring layout smaller than one pixel: %s", key)
            return False

        self.surface.initialize(
            side,
            side,
            background_color=self.config.background_color,
            line_width=self.config.line_width,
            display_scale=display_scale,
        )
        self._layout = key
        return True

    def drag_changed(self, x: float, y: float, timestamp: float | None = None) -> None:
        self.capture.on_point_received(Point(x=x, y=y), timestamp)

    def drag_ended(self) -> asyncio.Task | None:
        return self.capture.on_gesture_ended()

    def drag_cancelled(self) -> None:
        self.capture.on_gesture_cancelled()

    def clear(self) -> None:
        self.surface.clear()

    def snapshot(self) -> CanvasSnapshot | None:
        return self.surface.snapshot()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return self.publisher.subscribe(observer)

    async def wait_idle(self) -> None:
        await self.scheduler.wait_idle()
