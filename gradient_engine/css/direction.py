"""
Gradient line resolution.
This module turns the first argument of a linear gradient into the start and
end points of the gradient line through a bounding box.
"""

import logging
import math
from enum import Enum
from typing import Dict, Optional, Tuple

from .angle import parse_angle
from .grammar import PERCENTAGE_ANGLES, SIDE_OR_CORNER

logger = logging.getLogger(__name__)


class Bounds:
    """
    Size of the box a gradient is drawn into.
    """
    def __init__(self, width: float, height: float):
        """
        Initialize bounds.

        Args:
            width: Box width, must be positive
            height: Box height, must be positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Bounds must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __repr__(self) -> str:
        return f"Bounds(width={self.width}, height={self.height})"


UNIT_BOUNDS = Bounds(1, 1)


class Direction:
    """
    Endpoints of a gradient line.
    """
    def __init__(self, x0: float, y0: float, x1: float, y1: float):
        self.x0 = x0
        self.y0 = y0
        self.x1 = x1
        self.y1 = y1

    @property
    def start(self) -> Dict[str, float]:
        return {'x': self.x0, 'y': self.y0}

    @property
    def end(self) -> Dict[str, float]:
        return {'x': self.x1, 'y': self.y1}

    def __repr__(self) -> str:
        return f"Direction(({self.x0}, {self.y0}) -> ({self.x1}, {self.y1}))"


class DirectionType(Enum):
    """Shapes the direction argument of a linear gradient can take."""
    SIDE_OR_CORNER = "side-or-corner"
    ANGLE = "angle"
    PERCENTAGE = "percentage"
    NONE = "none"


class DirectionTerm:
    """
    A classified direction argument.
    """
    def __init__(self, type: DirectionType, text: Optional[str] = None,
                 angle: Optional[float] = None):
        """
        Initialize a direction term.

        Args:
            type: Which kind of direction the argument is
            text: The argument text (None when there is no direction)
            angle: Angle in radians for ANGLE terms
        """
        self.type = type
        self.text = text
        self.angle = angle

    @property
    def consumes_argument(self) -> bool:
        """Whether the argument is a direction rather than the first color stop."""
        return self.type is not DirectionType.NONE

    def __repr__(self) -> str:
        return f"DirectionTerm({self.type.name}, {self.text!r})"


def classify_direction(arg: Optional[str]) -> DirectionTerm:
    """
    Classify the first argument of a linear gradient.

    Side or corner keywords are tested first, then angles, then percentage
    points. Anything else is a color stop and yields a NONE term.

    Args:
        arg: The first gradient argument, or None if there are no arguments

    Returns:
        DirectionTerm describing the argument
    """
    if arg is None:
        return DirectionTerm(DirectionType.NONE)

    if SIDE_OR_CORNER.fullmatch(arg):
        return DirectionTerm(DirectionType.SIDE_OR_CORNER, arg)

    angle = parse_angle(arg)
    if angle is not None:
        return DirectionTerm(DirectionType.ANGLE, arg, angle)

    if PERCENTAGE_ANGLES.fullmatch(arg):
        return DirectionTerm(DirectionType.PERCENTAGE, arg)

    return DirectionTerm(DirectionType.NONE)


def calculate_gradient_direction(radian: float, bounds: Bounds) -> Direction:
    """
    Compute the gradient line for an angle.

    The line passes through the center of the box. An angle of 0 points up
    and angles grow clockwise. The line is long enough that the lines
    perpendicular to it through its endpoints touch the box corners.

    Args:
        radian: Gradient angle in radians
        bounds: Box the gradient is drawn into

    Returns:
        Direction with the line endpoints
    """
    width = bounds.width
    height = bounds.height
    half_width = width * 0.5
    half_height = height * 0.5
    line_length = abs(width * math.sin(radian)) + abs(height * math.cos(radian))
    half_line_length = line_length / 2

    x0 = half_width + math.sin(radian) * half_line_length
    y0 = half_height - math.cos(radian) * half_line_length
    x1 = width - x0
    y1 = height - y0

    return Direction(x0, y0, x1, y1)


def corner_angle(bounds: Bounds) -> float:
    """Angle between the vertical axis and the box center to top-right corner."""
    return math.acos(bounds.width / 2 / (math.hypot(bounds.width, bounds.height) / 2))


# Keyword -> (base angle, sign applied to the corner angle)
SIDE_OR_CORNER_ANGLES: Dict[str, Tuple[float, int]] = {
    'bottom': (0.0, 0),
    'to top': (0.0, 0),
    'left': (math.pi / 2, 0),
    'to right': (math.pi / 2, 0),
    'right': (3 * math.pi / 2, 0),
    'to left': (3 * math.pi / 2, 0),
    'top right': (math.pi, 1),
    'right top': (math.pi, 1),
    'to bottom left': (math.pi, 1),
    'to left bottom': (math.pi, 1),
    'top left': (math.pi, -1),
    'left top': (math.pi, -1),
    'to bottom right': (math.pi, -1),
    'to right bottom': (math.pi, -1),
    'bottom left': (0.0, 1),
    'left bottom': (0.0, 1),
    'to top right': (0.0, 1),
    'to right top': (0.0, 1),
    'bottom right': (2 * math.pi, -1),
    'right bottom': (2 * math.pi, -1),
    'to top left': (2 * math.pi, -1),
    'to left top': (2 * math.pi, -1),
    'top': (math.pi, 0),
    'to bottom': (math.pi, 0),
}


def side_or_corner_angle(side: str, bounds: Bounds) -> float:
    """
    Angle in radians for a side or corner keyword.

    Unrecognized keywords point to the bottom.
    """
    base, corner_sign = SIDE_OR_CORNER_ANGLES.get(side.lower(), (math.pi, 0))
    if corner_sign:
        return base + corner_sign * corner_angle(bounds)
    return base


def parse_side_or_corner(side: str, bounds: Bounds) -> Direction:
    return calculate_gradient_direction(side_or_corner_angle(side, bounds), bounds)


def _divide(numerator: float, denominator: float) -> float:
    # Division by zero follows IEEE 754: x/0 is signed infinity, 0/0 is NaN
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def parse_percentage_angle(angle: str, bounds: Bounds) -> Direction:
    """
    Compute the gradient line for a ``<left>% <top>%`` point.

    Args:
        angle: Percentage point text, e.g. ``25% 75%``
        bounds: Box the gradient is drawn into

    Returns:
        Direction with the line endpoints
    """
    match = PERCENTAGE_ANGLES.fullmatch(angle.strip())
    if not match:
        raise ValueError(f"Not a percentage point: {angle}")

    left, top = float(match.group(1)), float(match.group(2))
    ratio = _divide(left / 100 * bounds.width, top / 100 * bounds.height)
    if math.isnan(ratio):
        ratio = 1

    return calculate_gradient_direction(math.atan(ratio) + math.pi / 2, bounds)


def resolve_direction(term: DirectionTerm, bounds: Bounds, has_prefix: bool = False) -> Direction:
    """
    Compute the gradient line for a classified direction argument.

    Args:
        term: Result of classify_direction
        bounds: Box the gradient is drawn into
        has_prefix: Whether the gradient function carried a vendor prefix.
            Prefixed gradients measure angles from East instead of North.

    Returns:
        Direction with the line endpoints
    """
    if term.type is DirectionType.ANGLE:
        radian = term.angle - math.pi * 0.5 if has_prefix else term.angle
        return calculate_gradient_direction(radian, bounds)

    if term.type is DirectionType.SIDE_OR_CORNER:
        return parse_side_or_corner(term.text, bounds)

    if term.type is DirectionType.PERCENTAGE:
        return parse_percentage_angle(term.text, bounds)

    # No direction given: top to bottom
    return calculate_gradient_direction(math.pi, bounds)
