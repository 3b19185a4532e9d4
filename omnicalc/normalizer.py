"""Pre-evaluation normalization of the expression buffer."""

from __future__ import annotations


def normalize(text: str) -> str:
    """Close any parentheses left open.

    Only a deficit of ')' is repaired; surplus ')' is left for the evaluator
    to reject. Balanced input comes back unchanged.
    """
    missing = text.count("(") - text.count(")")
    if missing > 0:
        return text + ")" * missing
    return text
