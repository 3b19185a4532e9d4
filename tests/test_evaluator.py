"""Tests for the SymPy expression engine: evaluate, format_result, simplify."""

import pytest

from omnicalc.errors import EvaluationError
from omnicalc.evaluator import evaluate, format_result, simplify


def calc(expr, precision=10):
    return format_result(evaluate(expr), precision)


# --- Arithmetic and notation ---

@pytest.mark.parametrize("expr, expected", [
    ("2+3*4", "14"),
    ("(2+3)*4", "20"),
    ("2^10", "1024"),
    ("10%3", "1"),
    ("5!", "120"),
    ("1/3", "0.3333333333"),
    ("0.1+0.2", "0.3"),
    ("-5+3", "-2"),
    ("007+1", "8"),
])
def test_arithmetic(expr, expected):
    assert calc(expr) == expected


@pytest.mark.parametrize("expr, expected", [
    ("sqrt(16)", "4"),
    ("log10(1000)", "3"),
    ("log(e)", "1"),
    ("sin(pi/2)", "1"),
    ("cos(pi)", "-1"),
    ("2pi", "6.283185307"),
    ("3(1+1)", "6"),
])
def test_scientific_functions(expr, expected):
    assert calc(expr) == expected


def test_complex_results_are_re_evaluable():
    assert calc("sqrt(-4)") == "2*i"
    assert calc("1+sqrt(-1)") == "1 + 1*i"
    assert calc("1-sqrt(-1)") == "1 - 1*i"
    assert calc("2*i") == "2*i"


def test_precision():
    assert calc("1/3", precision=4) == "0.3333"
    assert calc("2/3", precision=3) == "0.667"


def test_large_values_use_exponent():
    assert calc("10^21") == "1e+21"


# --- Failures ---

@pytest.mark.parametrize("expr", [
    "1/0",
    "0/0",
    "log(0)",
    "2+*",
    "2+",
    "",
    ")(",
    "(1,2)",
    "foo(2)",
    "x+1",
    "sin",
    "2.real",
    "__import__('os')",
    "1;2",
    "1.2.3",
    "1..2",
    "2e5",
])
def test_invalid_expressions_raise(expr):
    with pytest.raises(EvaluationError):
        evaluate(expr)


# --- Simplify ---

@pytest.mark.parametrize("expr, expected", [
    ("2x + 3x + 5", "5*x + 5"),
    ("x^2*x", "x^3"),
    ("(x+1)^2 - x^2 - 2x", "1"),
    ("y + 0", "y"),
])
def test_simplify(expr, expected):
    assert simplify(expr) == expected


@pytest.mark.parametrize("expr", ["2x +", "x.__class__", "(", "a;b"])
def test_simplify_invalid(expr):
    with pytest.raises(EvaluationError):
        simplify(expr)


def test_signed_exponent_is_a_number():
    assert calc("2e+5") == "200000"
    assert calc("3e-2") == "0.03"


# --- Size limits ---

@pytest.mark.parametrize("expr", ["9^9^9", "9999999!", "2^(10^6)", "(10^5)!"])
def test_oversized_operands_raise(expr):
    with pytest.raises(EvaluationError, match="too large"):
        evaluate(expr)


@pytest.mark.parametrize("expr, expected", [
    ("2^100", "1.2676506e+30"),
    ("20!", "2.432902008e+18"),
    ("(-2)^3", "-8"),
])
def test_sizeable_operands_still_evaluate(expr, expected):
    assert calc(expr) == expected


def test_simplify_rejects_double_decimal():
    with pytest.raises(EvaluationError):
        simplify("1.2.3x")
