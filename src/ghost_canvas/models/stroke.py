from dataclasses import dataclass

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class TimedPoint:
    point: Point
    timestamp: float

    @classmethod
    def from_list(cls, data: list) -> "TimedPoint":
        return cls(
            point=Point(x=float(data[0]), y=float(data[1])),
            timestamp=float(data[2]),
        )


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    delay: float
    color: Color


@dataclass(frozen=True)
class Stroke:
    points: tuple[TimedPoint, ...]

    def __post_init__(self):
        # list로 넘겨도 완성된 스트로크는 변경 불가
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_drawable(self) -> bool:
        """선분을 하나 이상 만들 수 있는지 여부 (포인트 2개 이상)."""
        return len(self.points) >= 2

    @property
    def duration(self) -> float:
        """첫 포인트부터 마지막 포인트까지 걸린 시간 (초)."""
        if not self.points:
            return 0.0
        return self.points[-1].timestamp - self.points[0].timestamp

    def pairs(self) -> list[tuple[TimedPoint, TimedPoint]]:
        """연속한 두 포인트 쌍 목록.

        Returns:
            [(points[0], points[1]), (points[1], points[2]), ...]
        """
        return list(zip(self.points, self.points[1:]))

    @classmethod
    def from_path_data(cls, data: list[list]) -> "Stroke":
        """[[x, y, timestamp], ...] 형식의 데이터로 스트로크 생성."""
        return cls(points=tuple(TimedPoint.from_list(p) for p in data))
