"""Data models for the omnicalc calculator suite.

BufferMode, HistoryEntry, EvaluationOutcome, InputEvent, Action and the
age/algebra result records: the typed structures that flow through
router → buffer → pipeline → display.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class BufferMode(str, Enum):
    """Input state of the scientific calculator buffer."""

    EDITING = "editing"
    JUST_EVALUATED = "just-evaluated"
    ERRORED = "errored"


class EvaluationErrorKind(str, Enum):
    """Why an evaluation failed."""

    INVALID_EXPRESSION = "invalid-expression"


class InputSource(str, Enum):
    """Where an input event came from."""

    BUTTON = "button"
    KEYBOARD = "keyboard"


class Action(str, Enum):
    """What the router decided to do with one input event."""

    DIGIT = "digit"
    OPERATOR = "operator"
    FUNCTION_TOKEN = "function-token"
    EVALUATE = "evaluate"
    BACKSPACE = "backspace"
    CLEAR = "clear"
    CLEAR_HISTORY = "clear-history"
    REPLAY = "replay"


@dataclass(frozen=True)
class HistoryEntry:
    """One successful calculation. Immutable once created."""

    expression: str
    result: str

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"


@dataclass(frozen=True)
class EvaluationOutcome:
    """Tagged result of one evaluation attempt.

    Exactly one of ``formatted_result`` / ``reason`` is set. Use the
    ``success`` and ``failure`` constructors rather than building it directly.
    """

    formatted_result: Optional[str] = None
    reason: Optional[EvaluationErrorKind] = None
    detail: str = ""

    @classmethod
    def success(cls, formatted_result: str) -> EvaluationOutcome:
        return cls(formatted_result=formatted_result)

    @classmethod
    def failure(
        cls,
        reason: EvaluationErrorKind = EvaluationErrorKind.INVALID_EXPRESSION,
        detail: str = "",
    ) -> EvaluationOutcome:
        return cls(reason=reason, detail=detail)

    @property
    def ok(self) -> bool:
        return self.reason is None


@dataclass(frozen=True)
class InputEvent:
    """A raw input event from a button or a physical key.

    ``value`` is the token string for buttons ("sin(", "7", "AC") and the key
    identifier for keyboard events ("7", "Enter", "Backspace").
    ``focused_button`` mirrors whether a button control had focus when a key
    was pressed; only meaningful for keyboard events.
    """

    source: InputSource
    value: str
    focused_button: bool = False
    history_index: Optional[int] = None

    @classmethod
    def button(cls, value: str) -> InputEvent:
        return cls(source=InputSource.BUTTON, value=value)

    @classmethod
    def key(cls, value: str, focused_button: bool = False) -> InputEvent:
        return cls(source=InputSource.KEYBOARD, value=value, focused_button=focused_button)

    @classmethod
    def replay(cls, index: int) -> InputEvent:
        """Activation of the history item at ``index`` (0 = newest)."""
        return cls(source=InputSource.BUTTON, value="REPLAY", history_index=index)


@dataclass
class RoutedEvent:
    """Classification of one InputEvent: the action plus keyboard handling."""

    action: Action
    token: str
    prevent_default: bool = False


# ---------------------------------------------------------------------------
# Age calculator
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NextBirthday:
    """Upcoming birthday relative to the target date."""

    on: date
    days_until: int

    @property
    def weekday(self) -> str:
        return self.on.strftime("%A")


@dataclass(frozen=True)
class AgeReport:
    """Exact age between two dates plus the derived totals."""

    birth: date
    target: date
    years: int
    months: int
    days: int
    total_days: int
    next_birthday: NextBirthday

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    @property
    def total_weeks(self) -> int:
        return self.total_days // 7

    @property
    def total_hours(self) -> int:
        """Approximate: whole days times 24."""
        return self.total_days * 24


# ---------------------------------------------------------------------------
# Algebra helper
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class QuadraticSolution:
    """Roots of ax² + bx + c = 0, already formatted to 4 decimals."""

    x1: str
    x2: str
    discriminant: float

    @property
    def kind(self) -> str:
        if self.discriminant > 0:
            return "two real roots"
        if self.discriminant == 0:
            return "one repeated root"
        return "complex conjugate roots"


@dataclass(frozen=True)
class LinearSolution:
    """Root of ax + b = 0, formatted to 4 decimals."""

    x: str
