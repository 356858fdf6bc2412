"""Tests for date formatting."""

from __future__ import annotations

import logging

import pytest

from date_utils import format_date


class TestFormatDate:
    """Tests for format_date()."""

    def test_valid_timestamp(self) -> None:
        result = format_date("2024-01-01T00:00:00Z", "N/A")

        assert result
        assert result != "N/A"

    def test_valid_timestamp_with_offset(self) -> None:
        assert format_date("2024-06-15T12:30:00.123+02:00", "N/A") != "N/A"

    @pytest.mark.parametrize("raw", ["not-a-date", "", "2024-13-45T99:00:00Z", None])
    def test_invalid_returns_fallback(self, raw) -> None:
        assert format_date(raw, "N/A") == "N/A"

    def test_invalid_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="date_utils"):
            format_date("garbage", "N/A", "Component: DNS")

        assert "Component: DNS" in caplog.text
        assert "garbage" in caplog.text

    @pytest.mark.parametrize(
        "raw",
        [
            "2024-01-01T00:00:00.1Z",
            "2024-01-01T00:00:00.12345Z",
            "2024-01-01T00:00:00.123456789+00:00",
        ],
    )
    def test_any_fraction_width(self, raw: str) -> None:
        """Fractional seconds of any width parse like the whole-second form."""
        assert format_date(raw, "N/A") == format_date("2024-01-01T00:00:00Z", "N/A")
