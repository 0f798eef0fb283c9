"""Tests for output formatters."""

from datetime import timedelta

import pytest

from pomodorable.utils.ui.formatters import (
    _flatten,
    format_countdown,
    format_dict_table,
    format_error,
    format_success,
    get_progress_bar,
)


class TestFormatCountdown:
    @pytest.mark.parametrize(
        ("remaining", "expected"),
        [
            (timedelta(minutes=25), "25:00"),
            (timedelta(minutes=4, seconds=59.9), "04:59"),
            (timedelta(seconds=0.4), "00:00"),
            (timedelta(0), "00:00"),
            (timedelta(minutes=90), "90:00"),
        ],
    )
    def test_values(self, remaining, expected):
        assert format_countdown(remaining) == expected

    def test_negative_clamped(self):
        assert format_countdown(timedelta(seconds=-5)) == "00:00"


class TestProgressBar:
    def test_empty(self):
        assert get_progress_bar(0.0, width=10) == "░" * 10

    def test_full(self):
        assert get_progress_bar(1.0, width=10) == "▓" * 10

    def test_partial(self):
        assert get_progress_bar(0.25, width=8) == "▓▓" + "░" * 6

    def test_out_of_range_clamped(self):
        assert get_progress_bar(1.7, width=4) == "▓▓▓▓"
        assert get_progress_bar(-0.2, width=4) == "░░░░"


class TestMessages:
    @pytest.mark.parametrize(
        ("func", "prefix"),
        [
            (format_error, "Error:"),
            (format_success, "Success:"),
        ],
    )
    def test_prefix(self, capsys, func, prefix):
        func("hello")
        out = capsys.readouterr().out
        assert prefix in out
        assert "hello" in out


class TestDictTable:
    def test_flatten_nested(self):
        rows = _flatten({"timer": {"focus_length": 25}, "quotes": None})
        assert rows == [("timer.focus_length", 25), ("quotes", None)]

    def test_table_shows_keys(self, capsys):
        format_dict_table({"ui": {"show_quotes": True}}, title="Config")
        out = capsys.readouterr().out
        assert "ui.show_quotes" in out
        assert "True" in out
