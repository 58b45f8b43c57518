from ghost_canvas.models.snapshot import CanvasSnapshot
from ghost_canvas.models.stroke import Color, Point, Segment, Stroke, TimedPoint
from ghost_canvas.models.tool import DEFAULT_TOOLS, Tool

__all__ = [
    "CanvasSnapshot",
    "Color",
    "DEFAULT_TOOLS",
    "Point",
    "Segment",
    "Stroke",
    "TimedPoint",
    "Tool",
]
