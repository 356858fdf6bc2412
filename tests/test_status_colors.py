"""Tests for status classification."""

from __future__ import annotations

import pytest

from models import StatusInfo
from status_colors import classify, classify_overall


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("operational", StatusInfo("green", "Operational")),
            ("partial_outage", StatusInfo("yellow", "Re-routed")),
            ("major_outage", StatusInfo("red", "Major Outage")),
            ("under_maintenance", StatusInfo("blue", "Partially Re-routed")),
            ("degraded_performance", StatusInfo("yellow", "Degraded Performance")),
        ],
    )
    def test_known_statuses(self, status: str, expected: StatusInfo) -> None:
        assert classify(status) == expected

    @pytest.mark.parametrize("status", ["", "exploded", "OPERATIONAL"])
    def test_unknown_status_falls_back(self, status: str) -> None:
        assert classify(status) == StatusInfo("gray", "Unknown Status")


class TestClassifyOverall:
    """Tests for classify_overall()."""

    def test_critical_is_red(self) -> None:
        assert classify_overall("critical").color == "red"

    def test_none_is_green(self) -> None:
        assert classify_overall("none") == StatusInfo("green", "All Systems Operational")

    def test_unknown_indicator(self) -> None:
        assert classify_overall("meltdown").color == "gray"

