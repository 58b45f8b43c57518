from ghost_canvas.models import Point


class GeometryTransform:
    """입력 좌표계 <-> 래스터 좌표계 변환.

    입력 좌표는 UI 논리 단위이며 원점이 왼쪽 아래, y축이 위쪽이다.
    래스터 좌표는 픽셀 단위이며 원점이 왼쪽 위, y축이 아래쪽이다.
    """

    def __init__(self, display_scale: float, raster_height: float):
        if display_scale <= 0:
            raise ValueError(f"display_scale must be positive: {display_scale}")

        self.display_scale = float(display_scale)
        self.raster_height = float(raster_height)

    def to_raster_space(self, point: Point) -> Point:
        """입력 좌표를 스케일한 뒤 y축을 뒤집어 래스터 좌표로 변환."""
        return Point(
            x=point.x * self.display_scale,
            y=self.raster_height - point.y * self.display_scale,
        )

    def to_input_space(self, point: Point) -> Point:
        """to_raster_space의 역변환."""
        return Point(
            x=point.x / self.display_scale,
            y=(self.raster_height - point.y) / self.display_scale,
        )

    def __repr__(self) -> str:
        return (
            f"GeometryTransform(display_scale={self.display_scale}, "
            f"raster_height={self.raster_height})"
        )
