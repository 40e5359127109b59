"""
Gradient extraction from stylesheets.
This module finds the gradients used by style rules and parses them.
"""

import logging
from typing import Any, Dict, List, Optional

import cssutils

from .direction import Bounds
from .errors import GradientError, UnsupportedGradientError
from .gradient import GradientDescriptor, GradientParser
from .grammar import GRADIENT_FUNCTION, find_closing_paren

# Silence cssutils' warnings about properties it does not know
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

# Properties whose values may hold gradient images
GRADIENT_PROPERTIES = {
    'background', 'background-image', 'border-image', 'border-image-source',
    'list-style-image', 'mask', 'mask-image', 'content',
}


class ExtractedGradient:
    """
    A gradient found in a stylesheet.
    """
    def __init__(self, selector: str, property_name: str, text: str,
                 gradient: GradientDescriptor):
        """
        Initialize an extracted gradient.

        Args:
            selector: Selector of the rule declaring the gradient
            property_name: Property the gradient is used in
            text: The gradient function text
            gradient: The parsed gradient
        """
        self.selector = selector
        self.property_name = property_name
        self.text = text
        self.gradient = gradient

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the extracted gradient to plain data.

        Returns:
            Dictionary with ``selector``, ``property``, ``text`` and ``gradient``
        """
        return {
            'selector': self.selector,
            'property': self.property_name,
            'text': self.text,
            'gradient': self.gradient.to_dict(),
        }

    def __repr__(self) -> str:
        return f"ExtractedGradient({self.selector!r}, {self.property_name!r}, {self.text!r})"


def find_gradient_functions(value: str) -> List[str]:
    """
    Find every gradient function call in a property value.

    Args:
        value: CSS property value, e.g. ``url(a.png), linear-gradient(red, blue)``

    Returns:
        The gradient calls in order of appearance
    """
    functions = []
    pos = 0

    while True:
        match = GRADIENT_FUNCTION.search(value, pos)
        if not match:
            break

        close = find_closing_paren(value, match.end() - 1)
        if close < 0:
            logger.warning(f"Unterminated gradient in value: {value}")
            break

        functions.append(value[match.start():close + 1])
        pos = close + 1

    return functions


class GradientExtractor:
    """Extracts linear gradients from CSS using cssutils."""

    def __init__(self, bounds: Optional[Bounds] = None):
        """
        Initialize the extractor.

        Args:
            bounds: Box the gradient lines are computed for
        """
        self.parser = GradientParser(bounds)

        # Don't validate property names or values
        cssutils.ser.prefs.validOnly = False
        cssutils.ser.prefs.keepAllProperties = True
        # Report colors as written, not shortened to #rgb
        cssutils.ser.prefs.minimizeColorHash = False

        logger.debug("Gradient extractor initialized")

    def parse(self, css_content: str) -> cssutils.css.CSSStyleSheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse

        Returns:
            cssutils.css.CSSStyleSheet: Parsed stylesheet
        """
        return cssutils.parseString(css_content, validate=False)

    def extract(self, css_content: str) -> List[ExtractedGradient]:
        """
        Extract the linear gradients declared in CSS content.

        Radial gradients and malformed gradients are logged and skipped.

        Args:
            css_content: CSS content to parse

        Returns:
            List of ExtractedGradient in document order
        """
        stylesheet = self.parse(css_content)
        return self.extract_from_stylesheet(stylesheet)

    def extract_from_stylesheet(self, stylesheet: cssutils.css.CSSStyleSheet) -> List[ExtractedGradient]:
        """
        Extract the linear gradients of an already parsed stylesheet.

        Args:
            stylesheet: CSS stylesheet

        Returns:
            List of ExtractedGradient in document order
        """
        gradients = self._extract_from_rules(stylesheet.cssRules)
        logger.debug(f"Extracted {len(gradients)} gradients")
        return gradients

    def _extract_from_rules(self, rules) -> List[ExtractedGradient]:
        """Extract gradients from style rules, descending into @media blocks."""
        gradients = []

        for rule in rules:
            if rule.type == cssutils.css.CSSRule.MEDIA_RULE:
                gradients.extend(self._extract_from_rules(rule.cssRules))
                continue

            if rule.type != cssutils.css.CSSRule.STYLE_RULE:
                continue

            selector = rule.selectorText
            for prop in rule.style.getProperties(all=True):
                if prop.name.lower() not in GRADIENT_PROPERTIES:
                    continue
                gradients.extend(self.extract_from_value(selector, prop.name, prop.value))

        return gradients

    def extract_from_value(self, selector: str, property_name: str, value: str) -> List[ExtractedGradient]:
        """
        Parse the gradients in a single property value.

        Args:
            selector: Selector of the rule
            property_name: Property name
            value: Property value

        Returns:
            List of ExtractedGradient
        """
        gradients = []

        for text in find_gradient_functions(value):
            try:
                gradient = self.parser.parse(text)
            except UnsupportedGradientError as e:
                logger.warning(f"Skipping {selector} {{{property_name}}}: {e}")
                continue
            except GradientError as e:
                logger.warning(f"Skipping invalid gradient in {selector} {{{property_name}}}: {e}")
                continue

            gradients.append(ExtractedGradient(selector, property_name, text, gradient))

        return gradients
