"""
Grammar tables and the function-call parser for CSS gradient values.

The patterns below are compiled once and never mutated. The outer
``name(arguments)`` call is read by a small recursive-descent parser so that
commas nested inside ``rgba(...)`` or ``color-stop(...)`` never split an
argument.
"""

import logging
import re
from typing import List, NoReturn, Tuple

from .errors import GradientSyntaxError

logger = logging.getLogger(__name__)

# <number><unit>
ANGLE = re.compile(r'([+-]?\d*\.?\d+)(deg|grad|rad|turn)', re.IGNORECASE)

# [to] <side> [<side>]
SIDE_OR_CORNER = re.compile(
    r'(to )?(left|top|right|bottom)( (left|top|right|bottom))?', re.IGNORECASE)

# <num>% <num>%
PERCENTAGE_ANGLES = re.compile(r'([+-]?\d*\.?\d+)% ([+-]?\d*\.?\d+)%', re.IGNORECASE)

# A color stop with an explicit position
ENDS_WITH_LENGTH = re.compile(r'(px|%| 0)$', re.IGNORECASE)

# from(<color>), to(<color>), color-stop(<amount>[%], <color>)
FROM_TO_COLORSTOP = re.compile(
    r'(from|to|color-stop)\((?:([\d.]+)(%)?,\s*)?(.+?)\)', re.IGNORECASE)

FUNCTION_NAME = re.compile(r'[a-zA-Z0-9_-]+')

VENDOR_PREFIX = re.compile(r'-(webkit|moz|o|ms)-', re.IGNORECASE)

# Gradient functions inside a property value such as ``background``
GRADIENT_FUNCTION = re.compile(
    r'(?<![\w-])((?:-(?:webkit|moz|o|ms)-)?'
    r'(?:repeating-)?(?:linear-gradient|radial-gradient|gradient))\(',
    re.IGNORECASE)


class FunctionCall:
    """
    A parsed ``[prefix]name(arg, arg, ...)`` call.
    """
    def __init__(self, name: str, args: List[str], prefix: str = '', source: str = ''):
        """
        Initialize a function call.

        Args:
            name: Lowercase function name without the vendor prefix
            args: Trimmed top-level arguments
            prefix: Vendor prefix such as ``-webkit-`` or an empty string
            source: The text the call was parsed from
        """
        self.name = name
        self.args = tuple(args)
        self.prefix = prefix
        self.source = source

    def __repr__(self) -> str:
        return f"FunctionCall({self.prefix}{self.name}, args={list(self.args)!r})"


def find_closing_paren(text: str, open_index: int) -> int:
    """
    Find the parenthesis that closes the one at ``open_index``.

    Args:
        text: Text to scan
        open_index: Index of an opening parenthesis

    Returns:
        Index of the matching closing parenthesis, or -1 if unbalanced
    """
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                return index
    return -1


def split_arguments(params_str: str) -> List[str]:
    """
    Split an argument string on top-level commas.

    Args:
        params_str: Text between the parentheses of a function call

    Returns:
        List of trimmed arguments (empty for a blank argument string)
    """
    if not params_str.strip():
        return []

    result = []
    current = ''
    paren_level = 0

    for char in params_str:
        if char == ',' and paren_level == 0:
            result.append(current.strip())
            current = ''
            continue

        if char == '(':
            paren_level += 1
        elif char == ')':
            paren_level -= 1
            if paren_level < 0:
                raise GradientSyntaxError(f"Unbalanced ')' in arguments: {params_str}")
        current += char

    if paren_level != 0:
        raise GradientSyntaxError(f"Unbalanced '(' in arguments: {params_str}")

    result.append(current.strip())

    if '' in result:
        raise GradientSyntaxError(f"Empty argument in: {params_str}")

    return result


def split_vendor_prefix(name: str) -> Tuple[str, str]:
    """
    Split a function name into ``(prefix, name)``.

    ``-webkit-linear-gradient`` becomes ``('-webkit-', 'linear-gradient')``.
    """
    match = VENDOR_PREFIX.match(name)
    if match:
        return match.group(0).lower(), name[match.end():].lower()
    return '', name.lower()


class _CallReader:
    """Recursive-descent reader for ``call := ident '(' arglist ')' trailing``."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def fail(self, reason: str) -> NoReturn:
        raise GradientSyntaxError(f"Invalid CSS Gradient function ({reason}): {self.text}")

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def read_identifier(self) -> str:
        match = FUNCTION_NAME.match(self.text, self.pos)
        if not match:
            self.fail("expected a function name")
        self.pos = match.end()
        return match.group(0)

    def read_argument_list(self) -> List[str]:
        if self.pos >= len(self.text) or self.text[self.pos] != '(':
            self.fail("expected '('")

        close = find_closing_paren(self.text, self.pos)
        if close < 0:
            self.fail("missing ')'")

        inner = self.text[self.pos + 1:close]
        self.pos = close + 1
        return split_arguments(inner)

    def read_call(self) -> FunctionCall:
        self.skip_whitespace()
        raw_name = self.read_identifier()
        args = self.read_argument_list()
        # Anything after the call (``;``, ``!important``) is ignored
        prefix, name = split_vendor_prefix(raw_name)
        return FunctionCall(name, args, prefix=prefix, source=self.text)


def parse_function_call(text: str) -> FunctionCall:
    """
    Parse the outer ``name(arguments)`` call of a gradient value.

    Args:
        text: CSS function text, e.g. ``linear-gradient(red, blue)``

    Returns:
        The parsed FunctionCall

    Raises:
        GradientSyntaxError: If the text is not a function call
    """
    if not isinstance(text, str):
        raise GradientSyntaxError(f"Invalid CSS Gradient function: {text!r}")

    call = _CallReader(text).read_call()
    logger.debug(f"Parsed {call!r}")
    return call
