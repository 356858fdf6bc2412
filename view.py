"""Pure composition of organizer, filters and aggregator into a renderable view"""

from dataclasses import dataclass, field
from typing import Dict, List

from aggregator import aggregate
from filters import filter_components, filter_groups, filter_maintenances
from models import (
    Component,
    ComponentGroup,
    FilterState,
    HeaderStatus,
    Incident,
    Maintenance,
    Snapshot,
)
from organizer import organize

ACTIVE_MAINTENANCE = "maintenance:active"
UPCOMING_MAINTENANCE = "maintenance:upcoming"


def group_section(group_id: str) -> str:
    return f"group:{group_id}"


@dataclass(frozen=True)
class DashboardView:
    header: HeaderStatus
    incidents: List[Incident] = field(default_factory=list)
    active_maintenance: List[Maintenance] = field(default_factory=list)
    upcoming_maintenance: List[Maintenance] = field(default_factory=list)
    points_of_presence: List[Component] = field(default_factory=list)
    parent_groups: List[ComponentGroup] = field(default_factory=list)

    @property
    def has_components(self) -> bool:
        return bool(self.points_of_presence or self.parent_groups)

    def section_counts(self) -> Dict[str, int]:
        """Number of visible entries in each collapsible section"""
        counts = {
            ACTIVE_MAINTENANCE: len(self.active_maintenance),
            UPCOMING_MAINTENANCE: len(self.upcoming_maintenance),
        }
        for group in self.parent_groups:
            counts[group_section(group.parent.id)] = len(group.children)
        return counts


def build_view(snapshot: Snapshot, filters: FilterState) -> DashboardView:
    organized = organize(snapshot.components)
    return DashboardView(
        header=aggregate(snapshot.incidents),
        incidents=list(snapshot.incidents),
        active_maintenance=filter_maintenances(
            snapshot.active_maintenance, filters.search_term
        ),
        upcoming_maintenance=filter_maintenances(
            snapshot.upcoming_maintenance, filters.search_term
        ),
        points_of_presence=filter_components(organized.points_of_presence, filters),
        parent_groups=filter_groups(organized.parent_groups, filters),
    )
