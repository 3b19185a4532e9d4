"""Calculator session: the one object that owns a tool's mutable state.

A session bundles the buffer, the history log and the pipeline that ties
them together. The router and the display both receive it explicitly.
"""

from __future__ import annotations

from typing import Optional

from omnicalc.buffer import ExpressionBuffer
from omnicalc.config import Settings
from omnicalc.history import HistoryLog
from omnicalc.models import EvaluationOutcome
from omnicalc.pipeline import EvaluationPipeline


class CalculatorSession:
    """State for one scientific calculator instance."""

    def __init__(
        self,
        pipeline: Optional[EvaluationPipeline] = None,
        history_size: int = 10,
    ) -> None:
        self.buffer = ExpressionBuffer()
        self.history = HistoryLog(capacity=history_size)
        self.pipeline = pipeline or EvaluationPipeline()

    @classmethod
    def from_settings(cls, settings: Settings) -> CalculatorSession:
        return cls(
            pipeline=EvaluationPipeline(precision=settings.precision),
            history_size=settings.history_size,
        )

    @property
    def text(self) -> str:
        return self.buffer.text

    def evaluate(self) -> EvaluationOutcome:
        return self.pipeline.evaluate(self.buffer, self.history)

    def replay(self, index: int) -> bool:
        """Load history entry ``index`` (0 = newest) into the buffer.

        Returns False when there is no such entry.
        """
        if not 0 <= index < len(self.history):
            return False
        self.buffer.commit_result(HistoryLog.replay(self.history[index]))
        return True

    @property
    def ans_preview(self) -> Optional[str]:
        """Most recent result, shown while a new expression is being typed."""
        latest = self.history.latest
        if latest is None or self.buffer.fresh_start:
            return None
        return latest.result
