"""
CSS Gradient parsing.
This module turns a CSS linear gradient function into the start point, end
point, colors and normalized stop locations needed to draw it.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .color_stops import parse_color_stops
from .direction import UNIT_BOUNDS, Bounds, classify_direction, resolve_direction
from .errors import GradientSyntaxError, UnsupportedGradientError
from .grammar import FunctionCall, parse_function_call
from .legacy import transform_obsolete_color_stops

logger = logging.getLogger(__name__)


class GradientDescriptor:
    """
    Geometry and color stops of a linear gradient.
    """
    def __init__(self, colors: List[str], locations: List[float],
                 start: Dict[str, float], end: Dict[str, float]):
        """
        Initialize a gradient descriptor.

        Args:
            colors: Colors in stop order
            locations: Normalized stop positions, index-aligned with colors
            start: Start point of the gradient line as ``{'x', 'y'}``
            end: End point of the gradient line as ``{'x', 'y'}``
        """
        if len(colors) != len(locations):
            raise ValueError("colors and locations must have the same length")
        self.colors = colors
        self.locations = locations
        self.start = start
        self.end = end

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the descriptor to plain data.

        Returns:
            Dictionary with ``colors``, ``locations``, ``start`` and ``end``
        """
        return {
            'colors': list(self.colors),
            'locations': list(self.locations),
            'start': dict(self.start),
            'end': dict(self.end),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, GradientDescriptor):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"GradientDescriptor(colors={self.colors!r}, locations={self.locations!r}, "
                f"start={self.start!r}, end={self.end!r})")


class GradientParser:
    """
    Parser for CSS linear gradients.
    """
    def __init__(self, bounds: Optional[Bounds] = None):
        """
        Initialize the gradient parser.

        Args:
            bounds: Box the gradient line is computed for (unit square by default)
        """
        self.bounds = bounds or UNIT_BOUNDS

    def parse(self, gradient_str: str) -> GradientDescriptor:
        """
        Parse a CSS gradient string.

        Args:
            gradient_str: The gradient function, e.g. ``linear-gradient(red, blue)``

        Returns:
            Parsed GradientDescriptor

        Raises:
            GradientSyntaxError: If the text is not a function call
            UnsupportedGradientError: For radial or unknown gradient functions
            ColorStopError: If a color stop position cannot be normalized
        """
        call = parse_function_call(gradient_str)
        return self.parse_call(call)

    def parse_call(self, call: FunctionCall) -> GradientDescriptor:
        """
        Route a parsed function call to the matching gradient parser.

        Args:
            call: Parsed gradient function

        Returns:
            Parsed GradientDescriptor
        """
        method = call.name
        args = call.args
        kind = args[0].lower() if args else None
        logger.debug(f"Parsing {call.prefix}{method} with {len(args)} arguments")

        if method == 'linear-gradient':
            return self.parse_linear_gradient(args, bool(call.prefix))

        if method == 'gradient' and kind == 'linear':
            # Only vertical legacy gradients are handled; the start and end
            # points in args[1] and args[2] are ignored.
            return self.parse_linear_gradient(
                ['to bottom'] + transform_obsolete_color_stops(args[3:]),
                bool(call.prefix))

        if method == 'radial-gradient' or (method == 'gradient' and kind == 'radial'):
            raise UnsupportedGradientError("radial gradients are not supported")

        raise UnsupportedGradientError(f"unknown gradient type: {call.prefix}{method}")

    def parse_linear_gradient(self, args: Sequence[str], has_prefix: bool = False) -> GradientDescriptor:
        """
        Parse the arguments of a linear gradient.

        Args:
            args: Direction (optional) followed by color stops
            has_prefix: Whether the function carried a vendor prefix

        Returns:
            Parsed GradientDescriptor
        """
        term = classify_direction(args[0] if args else None)
        direction = resolve_direction(term, self.bounds, has_prefix)
        first_color_stop_index = 1 if term.consumes_argument else 0
        logger.debug(f"Direction {term!r} resolved to {direction!r}")

        if first_color_stop_index >= len(args):
            raise GradientSyntaxError(f"Gradient has no color stops: {', '.join(args)}")

        colors, locations = parse_color_stops(args, first_color_stop_index)

        return GradientDescriptor(colors, locations, direction.start, direction.end)


def parse_gradient_css(text: str) -> GradientDescriptor:
    """
    Parse a CSS linear gradient for the unit square.

    >>> parse_gradient_css('linear-gradient(to right, #fff 0%, #000 100%)').colors
    ['#fff', '#000']

    Args:
        text: CSS gradient function string

    Returns:
        GradientDescriptor with points relative to a 1x1 box
    """
    return GradientParser(UNIT_BOUNDS).parse(text)
