"""
Tests for extracting gradients from stylesheets.
"""

import logging

import pytest

from gradient_engine.css.direction import Bounds
from gradient_engine.css.stylesheet import GradientExtractor, find_gradient_functions

CSS = """
.hero {
    background: #fff;
    background: linear-gradient(180deg, red 10%, blue 90%);
}
.badge { background-image: linear-gradient(to right, red, blue); }
.ring { background-image: radial-gradient(circle, red, blue); }
.text { color: red; }
"""


def test_find_gradient_functions():
    value = ("url(a.png), -webkit-linear-gradient(top, rgba(0, 0, 0, 0.5), red), "
             "linear-gradient(red, blue)")
    assert find_gradient_functions(value) == [
        "-webkit-linear-gradient(top, rgba(0, 0, 0, 0.5), red)",
        "linear-gradient(red, blue)",
    ]


def test_find_gradient_functions_includes_legacy_and_repeating():
    value = "-webkit-gradient(linear, left top, left bottom, from(red), to(blue)), repeating-linear-gradient(red, blue)"
    assert find_gradient_functions(value) == [
        "-webkit-gradient(linear, left top, left bottom, from(red), to(blue))",
        "repeating-linear-gradient(red, blue)",
    ]


def test_find_gradient_functions_without_gradients():
    assert find_gradient_functions("#fff url(a.png) no-repeat") == []
    assert find_gradient_functions("linear-gradient(red, blue") == []


def test_extract_from_stylesheet():
    gradients = GradientExtractor().extract(CSS)
    assert [(g.selector, g.property_name) for g in gradients] == [
        (".hero", "background"),
        (".badge", "background-image"),
    ]

    hero = gradients[0].gradient
    assert hero.colors == ["red", "blue"]
    assert hero.locations == pytest.approx([0.1, 0.9])
    assert hero.start == pytest.approx({'x': 0.5, 'y': 1})

    badge = gradients[1].gradient
    assert badge.locations == pytest.approx([0, 1])
    assert badge.start == pytest.approx({'x': 1, 'y': 0.5})


def test_extract_uses_bounds():
    gradients = GradientExtractor(Bounds(200, 100)).extract(
        ".a { background-image: linear-gradient(to right, red, blue); }")
    assert gradients[0].gradient.start == pytest.approx({'x': 200, 'y': 50})


def test_unsupported_and_invalid_gradients_are_skipped(caplog):
    extractor = GradientExtractor()
    value = ("radial-gradient(red, blue), linear-gradient(red 0%, green, blue 100%), "
             "linear-gradient(to left, red, blue)")

    with caplog.at_level(logging.WARNING, logger="gradient_engine"):
        gradients = extractor.extract_from_value(".a", "background", value)

    assert [g.text for g in gradients] == ["linear-gradient(to left, red, blue)"]
    assert "radial gradients are not supported" in caplog.text
    assert "green" in caplog.text


def test_extracted_gradient_to_dict():
    gradient = GradientExtractor().extract_from_value(".a", "background", "linear-gradient(red, blue)")[0]
    data = gradient.to_dict()
    assert data['selector'] == ".a"
    assert data['property'] == "background"
    assert data['text'] == "linear-gradient(red, blue)"
    assert data['gradient']['colors'] == ["red", "blue"]


def test_extract_from_media_rules():
    css = """
    @media (min-width: 600px) {
        .hero { background: linear-gradient(red, blue); }
    }
    .after { background-image: linear-gradient(to right, red, blue); }
    """
    gradients = GradientExtractor().extract(css)
    assert [g.selector for g in gradients] == [".hero", ".after"]
    assert gradients[0].gradient.colors == ["red", "blue"]


def test_extract_keeps_colors_as_written():
    gradients = GradientExtractor().extract(
        ".a { background: linear-gradient(to right, #ffffff 0%, #000000 100%); }")
    assert gradients[0].gradient.colors == ["#ffffff", "#000000"]
