import logging
from typing import Callable

from ghost_canvas.models import CanvasSnapshot

logger = logging.getLogger(__name__)

Observer = Callable[[CanvasSnapshot], None]


class CanvasPublisher:
    """최신 스냅샷 하나만 보관하고 구독자에게 알리는 채널."""

    def __init__(self):
        self._latest: CanvasSnapshot | None = None
        self._observers: list[Observer] = []

    @property
    def latest(self) -> CanvasSnapshot | None:
        return self._latest

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """구독자 등록.

        현재 최신 값이 있으면 즉시 한 번 전달한다.

        Returns:
            구독 해제 함수
        """
        self._observers.append(observer)
        if self._latest is not None:
            self._notify(observer, self._latest)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def publish(self, snapshot: CanvasSnapshot) -> None:
        """최신 값을 교체하고 모든 구독자에게 알림."""
        self._latest = snapshot
        # 알림 중 구독 해제가 일어나도 순회가 깨지지 않도록 복사
        for observer in list(self._observers):
            self._notify(observer, snapshot)

    def _notify(self, observer: Observer, snapshot: CanvasSnapshot) -> None:
        try:
            observer(snapshot)
        except Exception:
            logger.exception("Canvas observer %r failed", observer)
