import pytest

from ghost_canvas.exceptions import (
    ConfigError,
    GhostCanvasError,
    InvalidSurfaceSizeError,
    UnknownToolError,
)


def test_invalid_surface_size_error():
    with pytest.raises(InvalidSurfaceSizeError) as exc_info:
        raise InvalidSurfaceSizeError("0x0")

    assert "0x0" in str(exc_info.value)


def test_config_error():
    with pytest.raises(ConfigError) as exc_info:
        raise ConfigError("invalid JSON")

    assert "invalid JSON" in str(exc_info.value)


def test_exceptions_inherit_from_base():
    assert issubclass(InvalidSurfaceSizeError, GhostCanvasError)
    assert issubclass(ConfigError, GhostCanvasError)
    assert issubclass(UnknownToolError, GhostCanvasError)
    assert issubclass(GhostCanvasError, Exception)
