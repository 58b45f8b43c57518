import pytest

from ghost_canvas.models import DEFAULT_TOOLS, Tool


def test_default_tools():
    """기본 도구: red 1초, blue 3초, green 5초, eraser 2초."""
    delays = {tool.name: tool.initial_delay for tool in DEFAULT_TOOLS}

    assert delays == {"red": 1.0, "blue": 3.0, "green": 5.0, "eraser": 2.0}


def test_default_tool_colors_are_opaque():
    for tool in DEFAULT_TOOLS:
        assert len(tool.color) == 4
        assert tool.color[3] == 255


def test_tool_from_hex_color():
    tool = Tool.from_spec("pink", "#ff00bc", 0.5)

    assert tool.color == (255, 0, 188, 255)
    assert tool.initial_delay == 0.5


def test_tool_from_named_color():
    tool = Tool.from_spec("blue", "blue", 3)

    assert tool.color == (0, 0, 255, 255)
    assert isinstance(tool.initial_delay, float)


def test_tool_from_invalid_color():
    with pytest.raises(ValueError):
        Tool.from_spec("bad", "not-a-color", 1)
