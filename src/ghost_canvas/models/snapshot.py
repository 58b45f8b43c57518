from dataclasses import dataclass

from PIL import Image

from ghost_canvas.models.stroke import Color


@dataclass(frozen=True)
class CanvasSnapshot:
    """캔버스 픽셀의 불변 복사본 (RGBA, 행 우선)."""

    width: int
    height: int
    pixels: bytes

    @classmethod
    def from_image(cls, image: Image.Image) -> "CanvasSnapshot":
        # tobytes()는 항상 새 버퍼를 만든다
        return cls(width=image.width, height=image.height, pixels=image.tobytes())

    def get_pixel(self, x: int, y: int) -> Color:
        """좌표의 RGBA 값.

        Raises:
            IndexError: 좌표가 범위를 벗어난 경우
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel out of range: ({x}, {y})")

        offset = (y * self.width + x) * 4
        r, g, b, a = self.pixels[offset:offset + 4]
        return r, g, b, a

    def to_image(self) -> Image.Image:
        """표시용 PIL 이미지로 변환."""
        return Image.frombytes("RGBA", (self.width, self.height), self.pixels)
