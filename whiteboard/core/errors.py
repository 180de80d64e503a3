class WhiteboardError(Exception):
    """Base class for all errors raised by the whiteboard core."""

    pass


class UnsupportedShapeTypeError(WhiteboardError, ValueError):
    """Raised when a shape is requested for a type the factory can't build."""

    pass


class ShapeDispatchError(WhiteboardError, TypeError):
    """
    Raised when an object that is not one of the known shape records
    reaches a per-type algorithm (hit testing, rendering, normalizing).
    This is a data-model violation, not a miss.
    """

    pass


class StyleError(WhiteboardError, ValueError):
    """Raised for style overrides naming a property that doesn't exist."""

    pass


class ConfigError(WhiteboardError):
    """Raised when a configuration file can't be interpreted."""

    pass
