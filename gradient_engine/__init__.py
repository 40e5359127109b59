"""
Gradient Engine - CSS linear gradient parsing for renderers.
"""

from gradient_engine.css import (Bounds, ColorStopError, GradientDescriptor, GradientError,
                                 GradientExtractor, GradientParser, GradientSyntaxError,
                                 UnsupportedGradientError, parse_gradient_css)

# Package information
__version__ = "1.0.0"
__author__ = "Gradient Engine Team"
__description__ = "Parses CSS linear gradients into gradient line geometry and color stops"

__all__ = [
    'parse_gradient_css', 'GradientParser', 'GradientDescriptor', 'GradientExtractor',
    'Bounds', 'GradientError', 'GradientSyntaxError', 'UnsupportedGradientError',
    'ColorStopError'
]
