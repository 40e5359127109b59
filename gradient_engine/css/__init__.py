"""
CSS gradient parsing.
This package turns CSS linear gradient functions into gradient line geometry
and normalized color stops.
"""

from .angle import parse_angle
from .direction import (Bounds, Direction, DirectionTerm, DirectionType, UNIT_BOUNDS,
                        calculate_gradient_direction, classify_direction, resolve_direction)
from .errors import ColorStopError, GradientError, GradientSyntaxError, UnsupportedGradientError
from .gradient import GradientDescriptor, GradientParser, parse_gradient_css
from .stylesheet import ExtractedGradient, GradientExtractor

__all__ = [
    'parse_gradient_css', 'GradientParser', 'GradientDescriptor',
    'GradientExtractor', 'ExtractedGradient',
    'Bounds', 'UNIT_BOUNDS', 'Direction', 'DirectionTerm', 'DirectionType',
    'calculate_gradient_direction', 'classify_direction', 'resolve_direction', 'parse_angle',
    'GradientError', 'GradientSyntaxError', 'UnsupportedGradientError', 'ColorStopError'
]
