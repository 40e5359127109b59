"""
CSS <angle> parsing.
"""

import math
from typing import Optional

from .grammar import ANGLE

# Radians per unit, keyed by lowercase unit name
ANGLE_UNITS = {
    'deg': math.pi / 180,
    'grad': math.pi / 200,
    'rad': 1.0,
    'turn': math.pi * 2,
}


def parse_angle(angle: str) -> Optional[float]:
    """
    Convert a CSS angle token to radians.
    
    Args:
        angle: Token such as ``45deg``, ``100grad``, ``1.5rad`` or ``0.25turn``
        
    Returns:
        The angle in radians, or None if the token is not an angle
    """
    match = ANGLE.fullmatch(angle.strip())
    if not match:
        return None
    
    value = float(match.group(1))
    return value * ANGLE_UNITS[match.group(2).lower()]
