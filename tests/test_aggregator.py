"""Tests for header status aggregation."""

from __future__ import annotations

from typing import Callable

from aggregator import aggregate
from models import Incident


class TestAggregate:
    """Tests for aggregate()."""

    def test_no_incidents(self) -> None:
        result = aggregate([])

        assert (result.indicator, result.description) == ("none", "All Systems Operational")

    def test_minor_only(self, make_incident: Callable[..., Incident]) -> None:
        result = aggregate([make_incident("minor")])

        assert (result.indicator, result.description) == ("minor", "Minor Service Issues")

    def test_critical_wins_regardless_of_order(
        self,
        make_incident: Callable[..., Incident],
    ) -> None:
        forward = aggregate([make_incident("minor"), make_incident("critical")])
        backward = aggregate([make_incident("critical"), make_incident("minor")])

        assert forward == backward
        assert forward.indicator == "critical"
        assert forward.description == "Critical Service Outage"

    def test_major_over_minor(self, make_incident: Callable[..., Incident]) -> None:
        result = aggregate([make_incident("minor"), make_incident("major")])

        assert result.indicator == "major"
        assert result.description == "Major Service Outage"

    def test_none_impact_counts_as_minor_issue(
        self,
        make_incident: Callable[..., Incident],
    ) -> None:
        """Any unresolved incident at all lifts the banner off operational."""
        result = aggregate([make_incident("none")])

        assert result.indicator == "minor"
