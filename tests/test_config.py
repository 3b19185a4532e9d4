"""Tests for environment-driven settings."""

from omnicalc.config import DEFAULT_HISTORY_SIZE, DEFAULT_PRECISION, Settings, load_settings


def test_defaults():
    s = load_settings({})
    assert s == Settings(precision=DEFAULT_PRECISION, history_size=DEFAULT_HISTORY_SIZE, log_level="WARNING")


def test_reads_env():
    s = load_settings({
        "OMNICALC_PRECISION": "6",
        "OMNICALC_HISTORY_SIZE": "25",
        "OMNICALC_LOG_LEVEL": "debug",
    })
    assert s.precision == 6
    assert s.history_size == 25
    assert s.log_level == "DEBUG"


def test_invalid_values_fall_back():
    s = load_settings({
        "OMNICALC_PRECISION": "many",
        "OMNICALC_HISTORY_SIZE": "-3",
        "OMNICALC_LOG_LEVEL": "LOUD",
    })
    assert s == load_settings({})


def test_overrides_skip_none():
    s = Settings().with_overrides(precision=4, history_size=None)
    assert s.precision == 4
    assert s.history_size == DEFAULT_HISTORY_SIZE
