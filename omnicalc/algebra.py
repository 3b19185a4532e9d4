"""Algebra helper — expression simplifier and closed-form equation solvers.

Solvers take raw user text for their coefficients so the "valid numbers"
check lives here, next to the arithmetic, rather than in every front end.
"""

from __future__ import annotations

import logging
import math
from typing import Union

from omnicalc import evaluator as engine
from omnicalc.errors import AlgebraError, EvaluationError
from omnicalc.models import LinearSolution, QuadraticSolution

logger = logging.getLogger(__name__)

Coefficient = Union[str, int, float]

INVALID_NUMBERS = "Please enter valid numbers"
INVALID_EXPRESSION = "Invalid expression. Check syntax."
ZERO_LEADING_COEFFICIENT = "'a' cannot be zero for a quadratic equation"
ZERO_LINEAR_COEFFICIENT = "'a' cannot be zero for a linear equation"


def _to_float(value: Coefficient) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError) as e:
        raise AlgebraError(INVALID_NUMBERS) from e
    if math.isnan(x) or math.isinf(x):
        raise AlgebraError(INVALID_NUMBERS)
    return x


def _fixed(x: float) -> str:
    """Four decimals, with negative zero shown as 0.0000."""
    return f"{x + 0.0:.4f}"


def simplify_expression(expression: str) -> str:
    """Simplify an algebraic expression such as "2x + 3x + 5".

    Blank input returns an empty string.
    """
    if not expression.strip():
        return ""
    try:
        return engine.simplify(expression)
    except EvaluationError as e:
        logger.debug("simplify failed: %s", e)
        raise AlgebraError(INVALID_EXPRESSION) from e


def solve_quadratic(a: Coefficient, b: Coefficient, c: Coefficient) -> QuadraticSolution:
    """Roots of ax² + bx + c = 0.

    A zero discriminant is detected with exact float equality, so inputs
    whose discriminant only rounds to zero report two (very close) real
    roots. Complex roots are returned as conjugates "re + imi" / "re - imi".
    """
    a, b, c = _to_float(a), _to_float(b), _to_float(c)
    if a == 0:
        raise AlgebraError(ZERO_LEADING_COEFFICIENT)

    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        x1 = (-b + root) / (2 * a)
        x2 = (-b - root) / (2 * a)
        return QuadraticSolution(_fixed(x1), _fixed(x2), discriminant)
    if discriminant == 0:
        x = -b / (2 * a)
        return QuadraticSolution(_fixed(x), _fixed(x), discriminant)

    real = _fixed(-b / (2 * a))
    imag = _fixed(abs(math.sqrt(-discriminant) / (2 * a)))
    return QuadraticSolution(f"{real} + {imag}i", f"{real} - {imag}i", discriminant)


def solve_linear(a: Coefficient, b: Coefficient) -> LinearSolution:
    """Root of ax + b = 0."""
    a, b = _to_float(a), _to_float(b)
    if a == 0:
        raise AlgebraError(ZERO_LINEAR_COEFFICIENT)
    return LinearSolution(_fixed(-b / a))
