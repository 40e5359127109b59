"""
Tests for the gradient function-call parser.
"""

import pytest

from gradient_engine.css.errors import GradientSyntaxError
from gradient_engine.css.grammar import (find_closing_paren, parse_function_call,
                                         split_arguments, split_vendor_prefix)


def test_split_arguments_ignores_nested_commas():
    assert split_arguments("45deg, rgba(0, 0, 0, 0.5) 10%, blue") == [
        "45deg", "rgba(0, 0, 0, 0.5) 10%", "blue"]


def test_split_arguments_trims_each_argument():
    assert split_arguments("  red ,blue  ") == ["red", "blue"]


def test_split_arguments_blank():
    assert split_arguments("") == []
    assert split_arguments("   ") == []


def test_split_arguments_rejects_unbalanced_parens():
    with pytest.raises(GradientSyntaxError):
        split_arguments("rgb(0, 0, 0")
    with pytest.raises(GradientSyntaxError):
        split_arguments("red), blue")


def test_split_arguments_rejects_empty_argument():
    with pytest.raises(GradientSyntaxError, match="Empty argument"):
        split_arguments("red,, blue")


def test_find_closing_paren():
    text = "a(b(c), d) e"
    assert find_closing_paren(text, 1) == 9
    assert find_closing_paren(text, 3) == 5
    assert find_closing_paren("a(b", 1) == -1


def test_split_vendor_prefix():
    assert split_vendor_prefix("-webkit-linear-gradient") == ("-webkit-", "linear-gradient")
    assert split_vendor_prefix("-MOZ-Linear-Gradient") == ("-moz-", "linear-gradient")
    assert split_vendor_prefix("linear-gradient") == ("", "linear-gradient")


def test_parse_function_call():
    call = parse_function_call("linear-gradient(to right, red, blue)")
    assert call.name == "linear-gradient"
    assert call.prefix == ""
    assert call.args == ("to right", "red", "blue")


def test_parse_function_call_with_prefix():
    call = parse_function_call("-webkit-gradient(linear, left top, left bottom, from(red), to(blue))")
    assert call.prefix == "-webkit-"
    assert call.name == "gradient"
    assert call.args == ("linear", "left top", "left bottom", "from(red)", "to(blue)")


def test_parse_function_call_ignores_trailing_text():
    call = parse_function_call("  linear-gradient(red, blue);")
    assert call.args == ("red", "blue")


@pytest.mark.parametrize("text", [
    "not-a-function",
    "linear-gradient (red, blue)",
    "linear-gradient(red, blue",
    "(red, blue)",
    "",
])
def test_parse_function_call_rejects_malformed_input(text):
    with pytest.raises(GradientSyntaxError):
        parse_function_call(text)


def test_parse_function_call_error_quotes_input():
    with pytest.raises(GradientSyntaxError, match="not-a-function"):
        parse_function_call("not-a-function")


def test_parse_function_call_rejects_non_string():
    with pytest.raises(GradientSyntaxError):
        parse_function_call(None)


@pytest.mark.parametrize("text, reason", [
    ("(red, blue)", "expected a function name"),
    ("linear-gradient", "expected '\\('"),
    ("linear-gradient(red, blue", "missing '\\)'"),
])
def test_parse_function_call_reports_reason(text, reason):
    with pytest.raises(GradientSyntaxError, match=reason):
        parse_function_call(text)
