"""Shared fixtures for dashboard tests."""

from __future__ import annotations

from typing import Callable, Optional

import pytest

from models import Component, Incident, PageStatus, Snapshot


def _build_component(
    id: str,
    name: str = "",
    status: str = "operational",
    is_group: bool = False,
    group_id: Optional[str] = None,
    position: Optional[int] = None,
) -> Component:
    return Component(
        id=id,
        name=name,
        status=status,
        updated_at="2024-01-01T00:00:00Z",
        is_group=is_group,
        group_id=group_id,
        position=position,
    )


def _build_incident(impact: str, id: str = "inc") -> Incident:
    return Incident(
        id=id,
        name=f"{impact} incident",
        status="investigating",
        impact=impact,
        updates=[],
    )


@pytest.fixture
def make_component() -> Callable[..., Component]:
    """Factory for components with sensible defaults."""
    return _build_component


@pytest.fixture
def make_incident() -> Callable[..., Incident]:
    """Factory for unresolved incidents of a given impact."""
    return _build_incident


@pytest.fixture
def components(make_component: Callable[..., Component]) -> list[Component]:
    """A small mixed component list: two groups, members, PoPs and strays."""
    return [
        make_component("g2", "Europe", is_group=True, position=2),
        make_component("g1", "North America", is_group=True, position=1),
        make_component("c1", "Los Angeles API", group_id="g1", position=3),
        make_component("c2", "Denver CDN", status="major_outage", group_id="g1", position=1),
        make_component("c3", "London DNS", status="degraded_performance", group_id="g2"),
        make_component("p1", "Los Angeles, CA, United States - (LAX)"),
        make_component("p2", "London, United Kingdom - (LHR)", status="partial_outage"),
        make_component("x1", "Unclassified Service"),
        make_component("orphan", "Orphan (ORD)", group_id="missing"),
    ]


@pytest.fixture
def snapshot(components: list[Component]) -> Snapshot:
    return Snapshot(
        status=PageStatus(
            name="Cloudflare",
            updated_at="2024-01-01T00:00:00Z",
            indicator="none",
            description="All Systems Operational",
        ),
        components=components,
        incidents=[],
        active_maintenance=[],
        upcoming_maintenance=[],
    )
