"""Tests for the algebra helper: simplifier, quadratic and linear solvers."""

import pytest

from omnicalc.algebra import simplify_expression, solve_linear, solve_quadratic
from omnicalc.errors import AlgebraError


# --- Simplify ---

def test_simplify():
    assert simplify_expression("2x + 3x + 5") == "5*x + 5"


def test_simplify_blank_is_empty():
    assert simplify_expression("   ") == ""


def test_simplify_invalid():
    with pytest.raises(AlgebraError, match="Invalid expression. Check syntax."):
        simplify_expression("2x +* 3")


# --- Quadratic ---

def test_two_real_roots():
    s = solve_quadratic(1, -3, 2)
    assert (s.x1, s.x2) == ("2.0000", "1.0000")
    assert s.kind == "two real roots"


def test_repeated_root():
    s = solve_quadratic("1", "2", "1")
    assert s.x1 == s.x2 == "-1.0000"
    assert s.kind == "one repeated root"


def test_complex_roots():
    s = solve_quadratic(1, 0, 1)
    assert s.x1 == "0.0000 + 1.0000i"
    assert s.x2 == "0.0000 - 1.0000i"
    assert s.kind == "complex conjugate roots"


def test_complex_roots_with_negative_a():
    s = solve_quadratic(-1, 0, -4)
    assert s.x1 == "0.0000 + 2.0000i"
    assert s.x2 == "0.0000 - 2.0000i"


def test_negative_zero_not_shown():
    s = solve_quadratic(2, 0, 0)
    assert s.x1 == "0.0000"


def test_zero_a_rejected():
    with pytest.raises(AlgebraError, match="'a' cannot be zero"):
        solve_quadratic(0, 2, 1)


@pytest.mark.parametrize("bad", ["", "abc", "nan", "inf"])
def test_invalid_numbers(bad):
    with pytest.raises(AlgebraError, match="Please enter valid numbers"):
        solve_quadratic(bad, 1, 1)


def test_near_zero_discriminant_uses_exact_comparison():
    # (x + 0.1)^2: 0.2 * 0.2 rounds up, so b^2 - 4ac is a tiny positive float
    s = solve_quadratic(1, 0.2, 0.01)
    assert s.discriminant > 0
    assert s.kind == "two real roots"
    assert s.x1 == s.x2 == "-0.1000"


# --- Linear ---

def test_linear():
    assert solve_linear(2, -4).x == "2.0000"
    assert solve_linear("4", "1").x == "-0.2500"


def test_linear_zero_a():
    with pytest.raises(AlgebraError):
        solve_linear(0, 3)
