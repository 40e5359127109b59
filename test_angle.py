"""
Tests for CSS angle parsing.
"""

import math

import pytest

from gradient_engine.css.angle import parse_angle


@pytest.mark.parametrize("token, expected", [
    ("30deg", math.pi / 6),
    ("200grad", math.pi),
    ("0.5turn", math.pi),
    (".5turn", math.pi),
    ("1rad", 1.0),
    ("-90deg", -math.pi / 2),
    ("+180deg", math.pi),
    ("45DEG", math.pi / 4),
])
def test_angle_units(token, expected):
    assert parse_angle(token) == pytest.approx(expected)


@pytest.mark.parametrize("token", ["to right", "red", "45", "deg", "50% 50%", "45degrees"])
def test_non_angles(token):
    assert parse_angle(token) is None
