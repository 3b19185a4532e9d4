"""Expression buffer for the scientific calculator.

Owns the text being typed and the input mode. Every edit is total: invalid
combinations are repaired in place (doubled operators replaced, errored
text discarded) instead of raising.

Mode transitions:

    EDITING         --commit_result--> JUST_EVALUATED
    EDITING         --set_errored-->   ERRORED
    JUST_EVALUATED  --digit/token/op-> EDITING (digit/token replace text)
    ERRORED         --digit/token-->   EDITING (text replaced)
    any             --clear-->         JUST_EVALUATED, text "0"
"""

from __future__ import annotations

from omnicalc.models import BufferMode

ERROR_TEXT = "Error"

# Trailing characters that a new operator overwrites rather than follows
OPERATOR_CHARS = ("+", "-", "*", "/", "^", "%", ".")


class ExpressionBuffer:
    """Mutable text buffer plus mode. Never empty; minimum text is "0"."""

    def __init__(self) -> None:
        self.text = "0"
        self.mode = BufferMode.JUST_EVALUATED

    def __repr__(self) -> str:
        return f"ExpressionBuffer(text={self.text!r}, mode={self.mode.value})"

    @property
    def fresh_start(self) -> bool:
        """True when the next digit or function token replaces the text."""
        return self.mode is not BufferMode.EDITING

    @property
    def errored(self) -> bool:
        return self.mode is BufferMode.ERRORED

    # -- edits --------------------------------------------------------------

    def append_digit_or_decimal(self, ch: str) -> None:
        if self.mode is not BufferMode.EDITING or self.text == "0":
            self.text = ch
        else:
            self.text += ch
        self.mode = BufferMode.EDITING

    def append_operator(self, op: str) -> None:
        if self.errored:
            return
        self.mode = BufferMode.EDITING
        if self.text[-1] in OPERATOR_CHARS:
            self.text = self.text[:-1] + op
        else:
            self.text += op

    def append_function_token(self, tok: str) -> None:
        """Append a scientific token such as "sin(", "pi", "(" or "!".

        Unlike digits, a token after a committed result extends it ("5" then
        "!" gives "5!"); only "0" and "Error" are replaced.
        """
        if self.errored or (self.text == "0" and tok != "."):
            self.text = tok
        else:
            self.text += tok
        self.mode = BufferMode.EDITING

    def backspace(self) -> None:
        if self.errored:
            self.clear()
        elif len(self.text) == 1:
            self.text = "0"
            self.mode = BufferMode.JUST_EVALUATED
        else:
            self.text = self.text[:-1]

    def clear(self) -> None:
        self.text = "0"
        self.mode = BufferMode.JUST_EVALUATED

    # -- pipeline transitions ----------------------------------------------

    def set_errored(self) -> None:
        self.text = ERROR_TEXT
        self.mode = BufferMode.ERRORED

    def commit_result(self, formatted: str) -> None:
        self.text = formatted
        self.mode = BufferMode.JUST_EVALUATED
