"""SymPy-backed expression engine.

This is the boundary the calculator core treats as opaque:

    evaluate(expr)            -> SymPy number, or raises EvaluationError
    format_result(value, p)   -> display string with p significant digits
    simplify(expr)            -> simplified expression string

Input notation follows the calculator keypad: '^' is power, '!' is
factorial, '%' is modulo, 'log' is the natural log and 'log10' the common
log. Implicit multiplication is accepted ("2pi", "3(1+1)").
"""

from __future__ import annotations

import logging
import math
import re
from tokenize import TokenError

import sympy as sp
from sympy.core.sympify import SympifyError
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from omnicalc.errors import EvaluationError

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 10

# Extra digits carried through evalf before rounding for display
_GUARD_DIGITS = 5


def _log10(x):
    return sp.log(x, 10)


# The only names the scientific calculator understands.
CALCULATOR_NAMES: dict[str, object] = {
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "log": sp.log,
    "log10": _log10,
    "sqrt": sp.sqrt,
    "pi": sp.pi,
    "e": sp.E,
    "i": sp.I,
}

_CALC_TRANSFORMS = standard_transformations + (implicit_multiplication, convert_xor)
_ALGEBRA_TRANSFORMS = standard_transformations + (implicit_multiplication_application, convert_xor)

_ALLOWED_CHARS_RE = re.compile(r"^[0-9A-Za-z_+\-*/^%().!,\s]*$")
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z_0-9]*")
# No attribute access ("2.real", "x.__class__"); parse_expr evaluates Python
_ATTRIBUTE_RE = re.compile(r"[\w)]\s*\.\s*[A-Za-z_]")
# "007" is not a Python int literal; read it as 7
_LEADING_ZEROS_RE = re.compile(r"(?<![\w.])0+(?=\d)")
# "1.2.3" and "1..2" would tokenize as two adjacent numbers and be multiplied
_DOUBLE_DECIMAL_RE = re.compile(r"\d*\.\d*\.")

# Exact powers/factorials beyond these are never finite as a float result,
# and computing them exactly can take minutes.
_MAX_POWER_DIGITS = 10000
_MAX_FACTORIAL_ARG = 10000

_PARSE_ERRORS = (SympifyError, SyntaxError, TokenError, TypeError, ValueError, ArithmeticError)


def _factorial(n):
    # Left unevaluated so _check_size sees it before anything is computed
    return sp.factorial(n, evaluate=False)


def _screen(expr: str) -> str:
    """Reject text that is not plain math notation before it reaches parse_expr."""
    if not expr.strip():
        raise EvaluationError("empty expression")
    if not _ALLOWED_CHARS_RE.match(expr):
        raise EvaluationError(f"unexpected character in {expr!r}")
    if "__" in expr or _ATTRIBUTE_RE.search(expr):
        raise EvaluationError(f"unsupported syntax in {expr!r}")
    if _DOUBLE_DECIMAL_RE.search(expr):
        raise EvaluationError(f"malformed number in {expr!r}")
    return _LEADING_ZEROS_RE.sub("", expr)


def _magnitude(node: sp.Expr) -> float:
    """Rough absolute value of an unevaluated subtree; 0 if it has none."""
    try:
        return abs(complex(node.evalf(15)))
    except OverflowError:
        return math.inf
    except (TypeError, ValueError):
        return 0.0


def _check_size(parsed: sp.Expr) -> None:
    """Refuse powers and factorials too large to compute exactly.

    Children are visited before parents, so every subtree whose magnitude
    is estimated has already passed the check.
    """
    for node in sp.postorder_traversal(parsed):
        if isinstance(node, sp.Pow):
            base = _magnitude(node.base)
            if base > 0:
                digits = _magnitude(node.exp) * abs(math.log10(base))
                if digits > _MAX_POWER_DIGITS:
                    raise EvaluationError(f"power too large: {node.base}^{node.exp}")
        elif isinstance(node, sp.factorial):
            if _magnitude(node.args[0]) > _MAX_FACTORIAL_ARG:
                raise EvaluationError(f"factorial too large: {node.args[0]}!")


def _parse(expr: str, transformations, local_dict: dict) -> sp.Expr:
    """Parse without evaluating, check operand sizes, then evaluate."""
    names = dict(local_dict)
    names["factorial"] = _factorial
    try:
        parsed = parse_expr(expr, local_dict=names, transformations=transformations, evaluate=False)
    except _PARSE_ERRORS as e:
        raise EvaluationError(f"cannot parse {expr!r}: {e}") from e
    if not isinstance(parsed, sp.Expr):
        # Tuples ("1,2"), booleans, bare functions ("sin")
        raise EvaluationError(f"not an expression: {expr!r}")

    _check_size(parsed)
    try:
        return parsed.doit()
    except _PARSE_ERRORS as e:
        raise EvaluationError(f"cannot evaluate {expr!r}: {e}") from e


def evaluate(expr: str, precision: int = DEFAULT_PRECISION) -> sp.Expr:
    """Evaluate a calculator expression to a finite SymPy number.

    Raises EvaluationError on syntax errors, unknown identifiers and
    non-finite results (division by zero, log(0), overflow).
    """
    text = _screen(expr)
    for name in _IDENTIFIER_RE.findall(text):
        if name not in CALCULATOR_NAMES:
            raise EvaluationError(f"unknown identifier: {name}")

    parsed = _parse(text, _CALC_TRANSFORMS, CALCULATOR_NAMES)
    try:
        value = parsed.evalf(precision + _GUARD_DIGITS)
    except _PARSE_ERRORS as e:
        raise EvaluationError(f"cannot evaluate {expr!r}: {e}") from e

    if value.free_symbols or not value.is_number:
        raise EvaluationError(f"not a number: {value}")
    if value.has(sp.zoo, sp.oo, -sp.oo, sp.nan):
        raise EvaluationError(f"non-finite result for {expr!r}")

    re_part, im_part = value.as_real_imag()
    if not (math.isfinite(float(re_part)) and math.isfinite(float(im_part))):
        raise EvaluationError(f"result out of range for {expr!r}")

    logger.debug("evaluate %r -> %s", expr, value)
    return value


def _format_real(x: float, precision: int) -> str:
    text = format(x, f".{precision}g")
    if text == "-0":
        return "0"
    return text


def format_result(value: sp.Expr, precision: int = DEFAULT_PRECISION) -> str:
    """Format a finite number to ``precision`` significant digits.

    Complex values come out as "a + b*i" / "b*i" so the text can be
    evaluated again after a replay.
    """
    re_part, im_part = (float(p) for p in value.as_real_imag())
    real = _format_real(re_part, precision)
    imag = _format_real(abs(im_part), precision)

    if imag == "0":
        return real
    if real == "0":
        sign = "-" if im_part < 0 else ""
        return f"{sign}{imag}*i"
    sign = "-" if im_part < 0 else "+"
    return f"{real} {sign} {imag}*i"


def simplify(expr: str) -> str:
    """Algebraically simplify ``expr``; free variables are allowed.

    Output uses '^' for powers to match the input notation.
    """
    text = _screen(expr)
    parsed = _parse(text, _ALGEBRA_TRANSFORMS, {"e": sp.E, "pi": sp.pi, "log10": _log10})
    try:
        result = sp.simplify(parsed)
    except _PARSE_ERRORS as e:
        raise EvaluationError(f"cannot simplify {expr!r}: {e}") from e

    logger.debug("simplify %r -> %s", expr, result)
    return str(result).replace("**", "^")
