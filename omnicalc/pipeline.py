"""Evaluation pipeline — normalize → evaluate → format → commit.

Data flow per evaluation:
1. Skip if the buffer already shows "Error"
2. Close unmatched parentheses
3. Hand the normalized text to the evaluator
4. Format the number to the display precision
5. Prepend {expression, result} to the history log
6. Commit the formatted result to the buffer

Any evaluator failure replaces steps 4-6 with buffer.set_errored(); the
history log is only touched on success.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Optional

from omnicalc import evaluator as engine
from omnicalc.buffer import ExpressionBuffer
from omnicalc.errors import EvaluationError
from omnicalc.history import HistoryLog
from omnicalc.models import EvaluationErrorKind, EvaluationOutcome, HistoryEntry
from omnicalc.normalizer import normalize

logger = logging.getLogger(__name__)

Evaluator = Callable[[str], Any]
Formatter = Callable[[Any, int], str]


class EvaluationPipeline:
    """Runs one evaluation against a buffer and a history log.

    The evaluator and formatter are injectable; they default to the SymPy
    engine in ``omnicalc.evaluator``.
    """

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        formatter: Optional[Formatter] = None,
        precision: int = engine.DEFAULT_PRECISION,
    ) -> None:
        self.evaluator = evaluator or partial(engine.evaluate, precision=precision)
        self.formatter = formatter or engine.format_result
        self.precision = precision

    def evaluate(self, buffer: ExpressionBuffer, history: HistoryLog) -> EvaluationOutcome:
        if buffer.errored:
            return EvaluationOutcome.failure(detail="buffer is in error state")

        expression = normalize(buffer.text)
        try:
            value = self.evaluator(expression)
            formatted = self.formatter(value, self.precision)
        except EvaluationError as e:
            logger.debug("evaluation failed for %r: %s", expression, e)
            buffer.set_errored()
            return EvaluationOutcome.failure(EvaluationErrorKind.INVALID_EXPRESSION, str(e))

        history.prepend(HistoryEntry(expression=expression, result=formatted))
        buffer.commit_result(formatted)
        logger.debug("evaluated %r = %s", expression, formatted)
        return EvaluationOutcome.success(formatted)
