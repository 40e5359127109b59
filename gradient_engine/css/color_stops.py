"""
Color stop parsing and position normalization.
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .errors import ColorStopError
from .grammar import ENDS_WITH_LENGTH

logger = logging.getLogger(__name__)

LEADING_INTEGER = re.compile(r'\s*([+-]?\d+)')


class ColorStop:
    """
    Represents a color stop in a gradient.
    """
    def __init__(self, color: str, stop: Optional[str] = None):
        """
        Initialize a color stop.

        Args:
            color: The color value, passed through untouched
            stop: The position token (``"25%"``, ``"10px"``) or None when
                the source gives no position
        """
        self.color = color
        self.stop = stop

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorStop):
            return NotImplemented
        return self.color == other.color and self.stop == other.stop

    def __repr__(self) -> str:
        return f"ColorStop({self.color!r}, {self.stop!r})"


def split_color_stops(args: Sequence[str], first_index: int) -> List[ColorStop]:
    """
    Split gradient arguments into colors and position tokens.

    An argument ending in ``px``, ``%`` or `` 0`` is split at its last space.
    Otherwise the first stop defaults to ``0%``, the last stop to ``100%``
    and interior stops keep no position.

    Args:
        args: All gradient arguments
        first_index: Index of the first color stop argument

    Returns:
        List of ColorStop in argument order
    """
    color_stops = []
    last_index = len(args) - 1

    for i in range(first_index, len(args)):
        value = args[i]
        if ENDS_WITH_LENGTH.search(value):
            color, _, stop = value.rpartition(' ')
        elif i == first_index:
            color, stop = value, '0%'
        elif i == last_index:
            color, stop = value, '100%'
        else:
            color, stop = value, None
        color_stops.append(ColorStop(color, stop))

    return color_stops


def parse_position(stop: str) -> float:
    """
    Normalize a position token to a fraction of the gradient line.

    A trailing ``%`` is dropped and the leading integer of the rest is
    divided by 100, so ``"25%"`` is 0.25 and ``"12.5%"`` is 0.12.

    Args:
        stop: Position token

    Returns:
        Normalized position

    Raises:
        ColorStopError: If the token has no leading integer
    """
    match = LEADING_INTEGER.match(re.sub(r'%$', '', stop))
    if not match:
        raise ColorStopError(f"Invalid color stop position: {stop!r}")
    return int(match.group(1)) / 100


def parse_color_stops(args: Sequence[str], first_index: int) -> Tuple[List[str], List[float]]:
    """
    Build index-aligned color and location lists.

    Args:
        args: All gradient arguments
        first_index: Index of the first color stop argument

    Returns:
        Tuple of (colors, locations)

    Raises:
        ColorStopError: If an interior color stop has no explicit position
    """
    colors = []
    locations = []

    for index, color_stop in enumerate(split_color_stops(args, first_index)):
        if color_stop.stop is None:
            raise ColorStopError(
                f"Color stop {color_stop.color!r} at index {index} has no position; "
                f"interior color stops must give an explicit position",
                color=color_stop.color, index=index)
        colors.append(color_stop.color)
        locations.append(parse_position(color_stop.stop))

    logger.debug(f"Parsed {len(colors)} color stops")
    return colors, locations
