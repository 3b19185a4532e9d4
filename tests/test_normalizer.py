"""Tests for parenthesis balancing before evaluation."""

import pytest

from omnicalc.normalizer import normalize


@pytest.mark.parametrize("text, expected", [
    ("(1+2", "(1+2)"),
    ("((1+2)", "((1+2))"),
    ("sin(cos(0", "sin(cos(0))"),
    ("1+2", "1+2"),
    ("(1+2)", "(1+2)"),
])
def test_normalize(text, expected):
    assert normalize(text) == expected


def test_idempotent():
    once = normalize("((2*(3")
    assert normalize(once) == once


def test_surplus_close_paren_left_alone():
    assert normalize("1+2)") == "1+2)"
