import logging

from PIL import Image, ImageDraw

from ghost_canvas.exceptions import InvalidSurfaceSizeError
from ghost_canvas.geometry import GeometryTransform
from ghost_canvas.models import CanvasSnapshot, Color, Point
from ghost_canvas.publisher import CanvasPublisher

logger = logging.getLogger(__name__)


class RasterSurface:
    """고정 해상도 RGBA 캔버스.

    모든 변경 (initialize, clear, stroke_segment) 후 새 스냅샷을
    CanvasPublisher로 발행한다. 하나의 이벤트 루프에서만 호출해야 한다.
    """

    def __init__(self, publisher: CanvasPublisher | None = None):
        self.publisher = publisher or CanvasPublisher()
        self._image: Image.Image | None = None
        self._draw: ImageDraw.ImageDraw | None = None
        self._transform: GeometryTransform | None = None
        self._background_color: Color = (255, 255, 255, 255)
        self._line_width = 1
        self._generation = 0

    @property
    def is_initialized(self) -> bool:
        return self._image is not None

    @property
    def width(self) -> int:
        return self._image.width if self._image is not None else 0

    @property
    def height(self) -> int:
        return self._image.height if self._image is not None else 0

    @property
    def generation(self) -> int:
        """initialize 호출 횟수. 이전 세대를 대상으로 예약된 선분은 버려진다."""
        return self._generation

    @property
    def background_color(self) -> Color:
        return self._background_color

    @property
    def line_width(self) -> int:
        return self._line_width

    @property
    def transform(self) -> GeometryTransform | None:
        return self._transform

    def initialize(
        self,
        pixel_width: int,
        pixel_height: int,
        background_color: Color,
        line_width: float,
        display_scale: float = 1.0,
    ) -> None:
        """새 픽셀 버퍼를 만들고 배경색으로 채움.

        기존 버퍼의 내용은 모두 버려진다.

        Args:
            pixel_width: 버퍼 너비 (px)
            pixel_height: 버퍼 높이 (px)
            background_color: 배경 RGBA
            line_width: 모든 선분에 쓰일 굵기 (px)
            display_scale: 입력 좌표 -> 픽셀 배율

        Raises:
            InvalidSurfaceSizeError: 너비, 높이 또는 배율이 0 이하인 경우
        """
        pixel_width = int(pixel_width)
        pixel_height = int(pixel_height)
        if pixel_width <= 0 or pixel_height <= 0:
            raise InvalidSurfaceSizeError(
                f"Surface size must be positive: {pixel_width}x{pixel_height}"
            )
        if display_scale <= 0:
            raise InvalidSurfaceSizeError(f"Display scale must be positive: {display_scale}")

        # 새 버퍼와 변환을 먼저 만든 뒤 한 번에 교체
        transform = GeometryTransform(display_scale, pixel_height)
        background_color = tuple(background_color)
        image = Image.new("RGBA", (pixel_width, pixel_height), background_color)

        logger.info(
            "Creating canvas %dx%d (scale=%s, line_width=%s)",
            pixel_width, pixel_height, display_scale, line_width,
        )

        self._background_color = background_color
        self._line_width = max(1, int(round(line_width)))
        self._image = image
        self._draw = ImageDraw.Draw(image)
        self._transform = transform
        self._generation += 1

        self._publish()

    def clear(self) -> None:
        """버퍼 전체를 배경색으로 다시 채움. 초기화 전이면 무시."""
        if self._image is None:
            return

        self._image.paste(self._background_color, (0, 0, self._image.width, self._image.height))
        self._publish()

    def stroke_segment(
        self,
        start: Point,
        end: Point,
        color: Color,
        generation: int | None = None,
    ) -> bool:
        """입력 좌표의 두 점을 잇는 직선을 그림.

        Args:
            start: 시작점 (입력 좌표)
            end: 끝점 (입력 좌표)
            color: 선 RGBA
            generation: 예약 시점의 세대. 현재 세대와 다르면 그리지 않는다.

        Returns:
            실제로 그렸으면 True
        """
        if self._image is None or self._draw is None or self._transform is None:
            logger.debug("Dropping segment: surface not initialized")
            return False

        if generation is not None and generation != self._generation:
            logger.debug(
                "Dropping stale segment from generation %d (current %d)",
                generation, self._generation,
            )
            return False

        p0 = self._transform.to_raster_space(start)
        p1 = self._transform.to_raster_space(end)
        self._draw.line(
            [(p0.x, p0.y), (p1.x, p1.y)],
            fill=tuple(color),
            width=self._line_width,
        )
        self._publish()
        return True

    def snapshot(self) -> CanvasSnapshot | None:
        """현재 픽셀의 독립 복사본. 초기화 전이면 None."""
        if self._image is None:
            return None
        return CanvasSnapshot.from_image(self._image)

    def _publish(self) -> None:
        self.publisher.publish(self.snapshot())
