import json
from dataclasses import dataclass, field
from pathlib import Path

from ghost_canvas.exceptions import ConfigError, UnknownToolError
from ghost_canvas.models import DEFAULT_TOOLS, Tool


@dataclass
class CanvasConfig:
    line_width: float = 12.0
    background_tool: str = "eraser"
    tools: tuple[Tool, ...] = field(default_factory=lambda: DEFAULT_TOOLS)

    def get_tool(self, name: str) -> Tool:
        """이름으로 도구 조회.

        Raises:
            UnknownToolError: 설정에 없는 도구 이름인 경우
        """
        for tool in self.tools:
            if tool.name == name:
                return tool
        raise UnknownToolError(f"Unknown tool: {name}")

    @property
    def background_color(self):
        return self.get_tool(self.background_tool).color


ALLOWED_KEYS = {"line_width", "background_tool", "tools"}


def load_config(path: Path | str | None = None) -> CanvasConfig:
    """JSON 설정 파일 로드. 없는 키는 기본값 사용.

    형식::

        {
            "line_width": 12,
            "background_tool": "eraser",
            "tools": [{"name": "red", "color": "#ff0000", "delay": 1}, ...]
        }

    Args:
        path: 설정 파일 경로. None이면 기본 설정 반환.

    Raises:
        ConfigError: 파일을 읽을 수 없거나 값이 잘못된 경우
    """
    if path is None:
        return CanvasConfig()

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be an object: {path}")

    unknown = set(data) - ALLOWED_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    config = CanvasConfig()

    if "line_width" in data:
        line_width = data["line_width"]
        if not isinstance(line_width, (int, float)) or line_width <= 0:
            raise ConfigError(f"line_width must be a positive number: {line_width!r}")
        config.line_width = float(line_width)

    if "tools" in data:
        config.tools = _parse_tools(data["tools"])

    if "background_tool" in data:
        config.background_tool = data["background_tool"]

    try:
        config.get_tool(config.background_tool)
    except UnknownToolError:
        raise ConfigError(f"background_tool is not a configured tool: {config.background_tool}")

    return config


def _parse_tools(items) -> tuple[Tool, ...]:
    """tools 항목을 Tool 목록으로 변환."""
    if not isinstance(items, list) or not items:
        raise ConfigError("tools must be a non-empty list")

    tools = []
    names = set()
    for item in items:
        try:
            name = item["name"]
            color = item["color"]
            delay = float(item["delay"])
        except (KeyError, TypeError, ValueError):
            raise ConfigError(f"Tool entry needs name, color and delay: {item!r}")

        if delay < 0:
            raise ConfigError(f"Tool delay must not be negative: {name}")
        if name in names:
            raise ConfigError(f"Duplicate tool name: {name}")

        try:
            tools.append(Tool.from_spec(name, color, delay))
        except (ValueError, TypeError):
            raise ConfigError(f"Invalid color for tool {name}: {color!r}")
        names.add(name)

    return tuple(tools)
