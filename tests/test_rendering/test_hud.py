"""Tests for HUD text formatting."""

from riverwood.rendering.hud import format_counter, format_elapsed


class TestCounter:
    def test_zero_padded(self):
        assert format_counter(0) == "000"
        assert format_counter(7) == "007"
        assert format_counter(42) == "042"
        assert format_counter(255) == "255"


class TestElapsed:
    def test_start(self):
        assert format_elapsed(0) == "00:00"

    def test_partial_second_rounds_down(self):
        assert format_elapsed(59) == "00:00"
        assert format_elapsed(60) == "00:01"

    def test_minutes(self):
        assert format_elapsed(60 * 60) == "01:00"
        assert format_elapsed(60 * 125) == "02:05"

    def test_past_an_hour(self):
        assert format_elapsed(60 * 60 * 100) == "100:00"

    def test_custom_rate(self):
        assert format_elapsed(30, tick_rate=30) == "00:01"
