"""Error kinds raised while configuring or building gradients."""


class GradientError(ValueError):
    """Base class for every error raised by chromagrad."""


class EmptyStopsError(GradientError):
    """Raised when a gradient is built from an empty stop list."""

    def __init__(self, message: str = "at least one color stop is required"):
        super().__init__(message)


class InvalidDomainError(GradientError):
    """Raised for a malformed domain (``min >= max``) or unusable positions."""


class InvalidColorError(GradientError):
    """Raised by the color-string parsers for input they cannot read."""


class UnsupportedModeError(GradientError):
    """Raised for an unrecognized blend, interpolation or format keyword."""


class UnknownPresetError(GradientError):
    """Raised when a preset gradient name is not in the registry."""


class InvalidSvgError(GradientError):
    """Raised for unreadable SVG markup or an SVG gradient with malformed stops."""


class InvalidGgrError(GradientError):
    """Raised for a GIMP gradient file that cannot be read."""
