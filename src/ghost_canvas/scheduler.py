import asyncio
import logging
from typing import Awaitable, Callable

from ghost_canvas.models import Segment, Stroke, Tool
from ghost_canvas.surface import RasterSurface

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


def compute_delays(stroke: Stroke, tool: Tool) -> list[float]:
    """선분별 대기 시간 계산.

    첫 선분은 도구의 initial_delay, 이후 선분은 원래 제스처에서
    두 포인트 사이에 흐른 시간. 음수는 0으로 보정한다.

    Returns:
        길이 len(stroke) - 1 의 대기 시간 목록 (초). 포인트가 2개 미만이면 빈 목록.
    """
    delays = []
    for index, (prev, curr) in enumerate(stroke.pairs()):
        if index == 0:
            delay = tool.initial_delay
        else:
            delay = curr.timestamp - prev.timestamp

        if delay < 0:
            logger.warning(
                "Negative delay %.3fs at segment %d clamped to zero", delay, index
            )
            delay = 0.0

        delays.append(delay)

    return delays


def build_segments(stroke: Stroke, tool: Tool) -> list[Segment]:
    """스트로크를 그리기 순서대로 Segment 목록으로 변환."""
    delays = compute_delays(stroke, tool)
    return [
        Segment(start=prev.point, end=curr.point, delay=delay, color=tool.color)
        for (prev, curr), delay in zip(stroke.pairs(), delays)
    ]


class ReplayScheduler:
    """완성된 스트로크를 원래 속도로 캔버스에 다시 그린다.

    스트로크마다 하나의 asyncio 태스크가 선분을 순서대로 기다렸다 그린다.
    여러 스트로크의 태스크는 같은 이벤트 루프에서 동시에 진행되므로
    선분이 서로 섞여서 그려진다.
    """

    def __init__(self, surface: RasterSurface, sleep: SleepFunc = asyncio.sleep):
        self.surface = surface
        self._sleep = sleep
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """진행 중인 재생 수."""
        return len(self._tasks)

    def replay(self, stroke: Stroke, tool: Tool) -> asyncio.Task | None:
        """스트로크 재생 예약.

        실행 중인 이벤트 루프 안에서 호출해야 한다.

        Args:
            stroke: 완성된 스트로크
            tool: 제스처가 끝난 시점에 선택된 도구

        Returns:
            재생 태스크. 포인트가 2개 미만이면 None.
        """
        if not stroke.is_drawable:
            logger.debug("Ignoring stroke with %d point(s)", len(stroke))
            return None

        segments = build_segments(stroke, tool)
        generation = self.surface.generation

        logger.debug(
            "Scheduling %d segment(s) with %s (total %.3fs)",
            len(segments), tool.name, sum(s.delay for s in segments),
        )

        task = asyncio.get_running_loop().create_task(
            self._run(segments, generation), name=f"ghost-replay-{tool.name}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """진행 중인 모든 재생이 끝날 때까지 대기."""
        while self._tasks:
            await asyncio.gather(*self._tasks)

    def cancel_all(self) -> None:
        """종료 시 남은 재생 태스크를 모두 취소."""
        for task in list(self._tasks):
            task.cancel()

    async def _run(self, segments: list[Segment], generation: int) -> None:
        for segment in segments:
            await self._sleep(segment.delay)
            self.surface.stroke_segment(
                segment.start, segment.end, segment.color, generation=generation
            )
