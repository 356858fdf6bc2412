from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Component:
    id: str
    name: str
    status: str
    updated_at: str
    is_group: bool = False
    group_id: Optional[str] = None
    position: Optional[int] = None
    description: Optional[str] = None
    page_id: Optional[str] = None


@dataclass(frozen=True)
class ComponentGroup:
    parent: Component
    children: List[Component] = field(default_factory=list)


@dataclass(frozen=True)
class OrganizedComponents:
    points_of_presence: List[Component] = field(default_factory=list)
    parent_groups: List[ComponentGroup] = field(default_factory=list)


@dataclass(frozen=True)
class IncidentUpdate:
    id: str
    body: str
    status: str
    created_at: str
    updated_at: str
    display_at: str


@dataclass(frozen=True)
class Incident:
    id: str
    name: str
    status: str
    impact: str
    updates: List[IncidentUpdate]
    shortlink: str = ""
    created_at: str = ""
    updated_at: str = ""
    monitoring_at: Optional[str] = None
    resolved_at: Optional[str] = None


@dataclass(frozen=True)
class Maintenance:
    id: str
    name: str
    status: str
    impact: str
    scheduled_for: str
    scheduled_until: str
    shortlink: str = ""
    components: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PageStatus:
    name: str
    updated_at: str
    indicator: str
    description: str


@dataclass(frozen=True)
class Snapshot:
    """One full refresh cycle's worth of status page data"""

    status: PageStatus
    components: List[Component]
    incidents: List[Incident]
    active_maintenance: List[Maintenance]
    upcoming_maintenance: List[Maintenance]


@dataclass(frozen=True)
class StatusInfo:
    color: str
    label: str


@dataclass(frozen=True)
class HeaderStatus:
    indicator: str
    description: str


@dataclass(frozen=True)
class FilterState:
    search_term: str = ""
    only_issues: bool = False
