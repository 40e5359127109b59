"""
Rewriting of the obsolete ``-webkit-gradient(linear, ...)`` color stops.

``from(red)``, ``to(blue)`` and ``color-stop(0.5, green)`` become the modern
``"<color> <percent>%"`` form understood by the color stop parser.
"""

import re
from typing import List, Sequence

from .grammar import FROM_TO_COLORSTOP

NUMBER = re.compile(r'\d*\.?\d+')


def _format_percentage(value: float) -> str:
    text = f"{round(value, 6):f}".rstrip('0').rstrip('.')
    return f"{text}%"


def transform_obsolete_color_stop(arg: str) -> str:
    """
    Rewrite a single legacy color stop.

    Arguments that are not ``from()``, ``to()`` or ``color-stop()`` calls
    are returned unchanged.
    """
    match = FROM_TO_COLORSTOP.fullmatch(arg)
    if not match:
        return arg

    kind, amount, percent, color = match.groups()
    kind = kind.lower()

    if kind == 'from':
        return f"{color} 0%"
    if kind == 'to':
        return f"{color} 100%"

    if amount is None or not NUMBER.fullmatch(amount):
        # color-stop() without a usable position
        return arg
    if percent:
        return f"{color} {amount}%"
    return f"{color} {_format_percentage(float(amount) * 100)}"


def transform_obsolete_color_stops(args: Sequence[str]) -> List[str]:
    """
    Rewrite legacy color stops into ``"<color> <percent>%"`` arguments.

    Args:
        args: Color stop arguments of a ``gradient(linear, ...)`` call

    Returns:
        The rewritten arguments in the same order
    """
    return [transform_obsolete_color_stop(arg) for arg in args]
