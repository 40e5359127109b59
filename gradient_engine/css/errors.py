"""
Exceptions raised while parsing CSS gradients.
"""


class GradientError(ValueError):
    """Base class for all gradient parsing errors."""


class GradientSyntaxError(GradientError):
    """The text is not a well-formed ``name(arguments)`` function call."""


class UnsupportedGradientError(GradientError):
    """The gradient function is radial or not a known gradient type."""


class ColorStopError(GradientError):
    """A color stop has a position that cannot be normalized."""

    def __init__(self, message: str, color: str = None, index: int = None):
        super().__init__(message)
        self.color = color
        self.index = index
