"""Tests for the bounded, newest-first history log."""

import pytest

from omnicalc.history import HistoryLog
from omnicalc.models import HistoryEntry


def entry(n):
    return HistoryEntry(expression=f"{n}+0", result=str(n))


def test_prepend_puts_newest_first():
    log = HistoryLog()
    log.prepend(entry(1))
    log.prepend(entry(2))
    assert [e.result for e in log] == ["2", "1"]
    assert log.latest == entry(2)


def test_eleven_prepends_keep_ten_and_evict_oldest():
    log = HistoryLog()
    for n in range(11):
        log.prepend(entry(n))
    assert len(log) == 10
    results = [e.result for e in log]
    assert results[0] == "10"
    assert "0" not in results
    assert results[-1] == "1"


def test_custom_capacity():
    log = HistoryLog(capacity=3)
    for n in range(5):
        log.prepend(entry(n))
    assert [e.result for e in log] == ["4", "3", "2"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        HistoryLog(capacity=0)


def test_clear():
    log = HistoryLog()
    log.prepend(entry(1))
    log.clear()
    assert len(log) == 0
    assert log.latest is None


def test_replay_returns_result():
    assert HistoryLog.replay(HistoryEntry("2+3*4", "14")) == "14"


def test_entries_are_immutable():
    e = entry(1)
    with pytest.raises(AttributeError):
        e.result = "2"
