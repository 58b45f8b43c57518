class GhostCanvasError(Exception):
    """Base exception for ghost-canvas."""

    pass


class InvalidSurfaceSizeError(GhostCanvasError):
    """Raised when a raster surface is created with a non-positive size."""

    pass


class ConfigError(GhostCanvasError):
    """Raised when the canvas configuration is invalid."""

    pass


class UnknownToolError(GhostCanvasError):
    """Raised when a tool name is not part of the configured tool set."""

    pass
