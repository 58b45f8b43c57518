import asyncio
import logging

from ghost_canvas.capture import GestureCapture
from ghost_canvas.models import DEFAULT_TOOLS, Point
from ghost_canvas.scheduler import ReplayScheduler

RED, BLUE, GREEN, ERASER = DEFAULT_TOOLS


class FakeScheduler:
    def __init__(self):
        self.calls = []

    def replay(self, stroke, tool):
        self.calls.append((stroke, tool))
        return None


def test_points_accumulate():
    capture = GestureCapture(FakeScheduler(), tool_provider=lambda: RED)

    capture.on_point_received(Point(0, 0), 0.0)
    capture.on_point_received(Point(1, 1), 0.1)

    assert capture.is_active
    assert capture.point_count == 2


def test_gesture_ended_hands_stroke_to_scheduler():
    scheduler = FakeScheduler()
    capture = GestureCapture(scheduler, tool_provider=lambda: BLUE)
    capture.on_point_received(Point(0, 0), 0.0)
    capture.on_point_received(Point(5, 5), 0.2)
    capture.on_point_received(Point(9, 9), 0.5)

    capture.on_gesture_ended()

    assert len(scheduler.calls) == 1
    stroke, tool = scheduler.calls[0]
    assert [p.point for p in stroke.points] == [Point(0, 0), Point(5, 5), Point(9, 9)]
    assert [p.timestamp for p in stroke.points] == [0.0, 0.2, 0.5]
    assert tool is BLUE
    assert not capture.is_active
    assert capture.point_count == 0


def test_tool_is_read_when_gesture_ends():
    """제스처 중간에 도구를 바꾸면 끝난 시점의 도구로 재생."""
    scheduler = FakeScheduler()
    selected = [RED]
    capture = GestureCapture(scheduler, tool_provider=lambda: selected[0])

    capture.on_point_received(Point(0, 0), 0.0)
    selected[0] = GREEN
    capture.on_point_received(Point(1, 1), 0.1)
    capture.on_gesture_ended()

    assert scheduler.calls[0][1] is GREEN


def test_gesture_cancelled_discards_points():
    scheduler = FakeScheduler()
    capture = GestureCapture(scheduler, tool_provider=lambda: RED)
    for i in range(5):
        capture.on_point_received(Point(i, i), i * 0.1)

    capture.on_gesture_cancelled()

    assert scheduler.calls == []
    assert not capture.is_active
    assert capture.point_count == 0


def test_new_gesture_after_cancel_starts_empty():
    scheduler = FakeScheduler()
    capture = GestureCapture(scheduler, tool_provider=lambda: RED)
    capture.on_point_received(Point(0, 0), 0.0)
    capture.on_gesture_cancelled()

    capture.on_point_received(Point(7, 7), 1.0)
    capture.on_point_received(Point(8, 8), 1.1)
    capture.on_gesture_ended()

    stroke, _ = scheduler.calls[0]
    assert len(stroke) == 2
    assert stroke.points[0].point == Point(7, 7)


def test_default_timestamp_uses_clock():
    ticks = iter([10.0, 10.25])
    scheduler = FakeScheduler()
    capture = GestureCapture(scheduler, tool_provider=lambda: RED, clock=lambda: next(ticks))

    capture.on_point_received(Point(0, 0))
    capture.on_point_received(Point(1, 1))
    capture.on_gesture_ended()

    stroke, _ = scheduler.calls[0]
    assert [p.timestamp for p in stroke.points] == [10.0, 10.25]


def test_cancel_with_real_scheduler_draws_nothing(recording_surface, recording_sleep):
    async def run():
        scheduler = ReplayScheduler(recording_surface, sleep=recording_sleep)
        capture = GestureCapture(scheduler, tool_provider=lambda: RED)
        for i in range(5):
            capture.on_point_received(Point(i, i), i * 0.1)
        capture.on_gesture_cancelled()
        assert scheduler.pending == 0
        await scheduler.wait_idle()

    asyncio.run(run())

    assert recording_surface.calls == []
    assert recording_sleep.delays == []


def test_gesture_ended_logs_duration(caplog):
    capture = GestureCapture(FakeScheduler(), tool_provider=lambda: RED)
    capture.on_point_received(Point(0, 0), 2.0)
    capture.on_point_received(Point(1, 1), 2.5)

    with caplog.at_level(logging.DEBUG, logger="ghost_canvas.capture"):
        capture.on_gesture_ended()

    assert "2 point(s) over 0.500s" in caplog.text
