"""Input routing — one raw event in, at most one buffer/pipeline action out.

Buttons and physical keys share a single classification table so that the
same key sequence always leaves the buffer in the same state, whichever
surface it came from. Differences between the two sources are limited to:

- named scientific tokens ("sin(", "pi", ...) exist only as buttons
- history controls (replay, clear history) exist only as buttons
- keyboard Enter is dropped while a button has focus, so activating a
  focused history item does not also submit the expression
"""

from __future__ import annotations

import logging
from typing import Optional

from omnicalc.models import Action, InputEvent, InputSource, RoutedEvent
from omnicalc.session import CalculatorSession

logger = logging.getLogger(__name__)

DIGIT_KEYS = frozenset("0123456789.")
OPERATOR_KEYS = frozenset("+-*/%^")
PAREN_KEYS = frozenset("()")
EVALUATE_KEYS = frozenset({"Enter", "="})

# Button-only tokens, in keypad order
SCIENTIFIC_TOKENS = ("sin(", "cos(", "tan(", "log10(", "log(", "sqrt(", "pi", "e", "!")

# Keys/controls that map straight to a single action
_CONTROL_ACTIONS: dict[str, Action] = {
    "Backspace": Action.BACKSPACE,
    "Escape": Action.CLEAR,
}
_BUTTON_CONTROL_ACTIONS: dict[str, Action] = {
    "AC": Action.CLEAR,
    "DEL": Action.BACKSPACE,
    "CLEAR_HISTORY": Action.CLEAR_HISTORY,
    "REPLAY": Action.REPLAY,
}


def classify(event: InputEvent) -> Optional[RoutedEvent]:
    """Map an input event to its action, or None if it should be ignored."""
    value = event.value
    from_button = event.source is InputSource.BUTTON

    if not from_button and event.focused_button and value == "Enter":
        return None

    if value in DIGIT_KEYS:
        return RoutedEvent(Action.DIGIT, value)
    if value in OPERATOR_KEYS:
        return RoutedEvent(Action.OPERATOR, value, prevent_default=True)
    if value in EVALUATE_KEYS:
        return RoutedEvent(Action.EVALUATE, value, prevent_default=True)
    if value in _CONTROL_ACTIONS:
        return RoutedEvent(_CONTROL_ACTIONS[value], value)
    if value in PAREN_KEYS:
        return RoutedEvent(Action.FUNCTION_TOKEN, value)

    if from_button:
        if value in SCIENTIFIC_TOKENS:
            return RoutedEvent(Action.FUNCTION_TOKEN, value)
        if value in _BUTTON_CONTROL_ACTIONS:
            return RoutedEvent(_BUTTON_CONTROL_ACTIONS[value], value)
    return None


def dispatch(event: InputEvent, session: CalculatorSession) -> Optional[RoutedEvent]:
    """Classify ``event`` and apply it to ``session``.

    Returns the routing decision (None when the event was ignored) so the
    caller can honour ``prevent_default``.
    """
    routed = classify(event)
    if routed is None:
        logger.debug("ignored %s event %r", event.source.value, event.value)
        return None

    buffer = session.buffer
    action = routed.action
    if action is Action.DIGIT:
        buffer.append_digit_or_decimal(routed.token)
    elif action is Action.OPERATOR:
        buffer.append_operator(routed.token)
    elif action is Action.FUNCTION_TOKEN:
        buffer.append_function_token(routed.token)
    elif action is Action.EVALUATE:
        session.evaluate()
    elif action is Action.BACKSPACE:
        buffer.backspace()
    elif action is Action.CLEAR:
        buffer.clear()
    elif action is Action.CLEAR_HISTORY:
        session.history.clear()
    elif action is Action.REPLAY:
        if event.history_index is None or not session.replay(event.history_index):
            logger.debug("no history entry at %r", event.history_index)
            return None
    return routed


def feed(events, session: CalculatorSession) -> None:
    """Dispatch events to ``session`` in order."""
    for event in events:
        dispatch(event, session)


# Longest first so "log10(" wins over "log("
_TOKENS_BY_LENGTH = sorted(SCIENTIFIC_TOKENS, key=len, reverse=True)
_NAMED_KEYS = frozenset(_CONTROL_ACTIONS) | frozenset({"Enter"})
_NAMED_BUTTONS = frozenset({"AC", "DEL"})


def events_from_text(text: str) -> list[InputEvent]:
    """Turn typed text into the events a user would have produced.

    Whitespace-separated key names ("Enter", "Backspace", "Escape") and
    button labels ("AC", "DEL") are single events. Everything else is
    scanned left to right: scientific tokens become button presses, any
    other character a key press. Unknown characters are kept; the router
    ignores them.
    """
    events: list[InputEvent] = []
    for word in text.split():
        if word in _NAMED_KEYS:
            events.append(InputEvent.key(word))
            continue
        if word in _NAMED_BUTTONS:
            events.append(InputEvent.button(word))
            continue
        i = 0
        while i < len(word):
            for tok in _TOKENS_BY_LENGTH:
                if word.startswith(tok, i):
                    events.append(InputEvent.button(tok))
                    i += len(tok)
                    break
            else:
                events.append(InputEvent.key(word[i]))
                i += 1
    return events
