import re
from typing import Dict, List, Sequence

from models import Component, ComponentGroup, OrganizedComponents

# Points of Presence carry an airport code suffix, e.g. "Los Angeles, CA, United States - (LAX)"
AIRPORT_CODE_PATTERN = re.compile(r"\([A-Z]{3}\)")


def _position(component: Component) -> int:
    return component.position or 0


def is_point_of_presence(component: Component) -> bool:
    if component.group_id:
        return False
    return bool(component.name) and bool(AIRPORT_CODE_PATTERN.search(component.name))


def organize(components: Sequence[Component]) -> OrganizedComponents:
    """Split components into Points of Presence and parent groups with children.

    Ungrouped components without an airport code, and members of unknown
    groups, are left out of both collections.
    """
    parent_groups: Dict[str, List[Component]] = {}
    parents: Dict[str, Component] = {}

    for component in components:
        if component.is_group and not component.group_id:
            parents[component.id] = component
            parent_groups[component.id] = []

    points_of_presence: List[Component] = []
    for component in components:
        if component.group_id and component.group_id in parent_groups:
            parent_groups[component.group_id].append(component)
        elif is_point_of_presence(component):
            points_of_presence.append(component)

    groups = [
        ComponentGroup(
            parent=parents[group_id],
            children=sorted(children, key=_position),
        )
        for group_id, children in parent_groups.items()
    ]
    groups.sort(key=lambda group: _position(group.parent))

    return OrganizedComponents(
        points_of_presence=points_of_presence, parent_groups=groups
    )
