"""Exception hierarchy for omnicalc.

The scientific core never raises these to its callers: evaluation failures
are absorbed by the pipeline and shown as "Error". The age and algebra tools
raise them for the CLI to report.
"""

from __future__ import annotations


class OmnicalcError(Exception):
    """Base class for all omnicalc errors."""


class EvaluationError(OmnicalcError):
    """The expression engine could not produce a finite result."""


class AlgebraError(OmnicalcError):
    """Invalid input to the algebra helper. Message is user-facing."""


class AgeError(OmnicalcError):
    """A date could not be parsed."""
