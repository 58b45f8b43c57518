from dataclasses import dataclass

from PIL import ImageColor

from ghost_canvas.models.stroke import Color


@dataclass(frozen=True)
class Tool:
    name: str
    color: Color
    initial_delay: float

    @classmethod
    def from_spec(cls, name: str, color: str, initial_delay: float) -> "Tool":
        """CSS 색상 문자열로 도구 생성.

        Args:
            name: 도구 이름
            color: "#ff0000", "red" 등 PIL이 해석할 수 있는 색상
            initial_delay: 첫 선분을 그리기 전 대기 시간 (초)
        """
        r, g, b = ImageColor.getrgb(color)[:3]
        return cls(name=name, color=(r, g, b, 255), initial_delay=float(initial_delay))


RED = Tool(name="red", color=(255, 0, 0, 255), initial_delay=1.0)
BLUE = Tool(name="blue", color=(0, 0, 255, 255), initial_delay=3.0)
GREEN = Tool(name="green", color=(0, 255, 0, 255), initial_delay=5.0)
ERASER = Tool(name="eraser", color=(170, 170, 170, 255), initial_delay=2.0)

DEFAULT_TOOLS: tuple[Tool, ...] = (RED, BLUE, GREEN, ERASER)
