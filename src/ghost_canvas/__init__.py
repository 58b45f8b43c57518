"""Ghost Canvas - replays freehand strokes onto a raster canvas with delays."""

from ghost_canvas.canvas import GhostCanvas
from ghost_canvas.config import CanvasConfig, load_config
from ghost_canvas.exceptions import (
    ConfigError,
    GhostCanvasError,
    InvalidSurfaceSizeError,
    UnknownToolError,
)

__version__ = "0.1.0"
__all__ = [
    "GhostCanvas",
    "CanvasConfig",
    "load_config",
    "ConfigError",
    "GhostCanvasError",
    "InvalidSurfaceSizeError",
    "UnknownToolError",
]
