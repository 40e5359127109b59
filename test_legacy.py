"""
Tests for the legacy -webkit-gradient color stop rewriting.
"""

import pytest

from gradient_engine.css.legacy import transform_obsolete_color_stop, transform_obsolete_color_stops


@pytest.mark.parametrize("arg, expected", [
    ("from(red)", "red 0%"),
    ("FROM(red)", "red 0%"),
    ("to(#fff)", "#fff 100%"),
    ("color-stop(50%, green)", "green 50%"),
    ("color-stop(0.25, green)", "green 25%"),
    ("color-stop(0.125,green)", "green 12.5%"),
    ("color-stop(1, blue)", "blue 100%"),
    ("color-stop(.5, rgba(0, 0, 0, 0.5))", "rgba(0, 0, 0, 0.5) 50%"),
    ("from(rgba(0, 0, 0, 0.5))", "rgba(0, 0, 0, 0.5) 0%"),
])
def test_rewrites_legacy_stops(arg, expected):
    assert transform_obsolete_color_stop(arg) == expected


@pytest.mark.parametrize("arg", ["red 10%", "blue", "color-stop(green)", "rgba(0, 0, 0, 0.5)"])
def test_passes_through_other_arguments(arg):
    assert transform_obsolete_color_stop(arg) == arg


def test_rewrites_in_order():
    assert transform_obsolete_color_stops(["from(red)", "color-stop(0.5, green)", "to(blue)"]) == [
        "red 0%", "green 50%", "blue 100%"]
