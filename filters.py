from typing import List, Optional, Sequence

from models import Component, ComponentGroup, FilterState, Maintenance


def matches_search(name: Optional[str], search_term: str) -> bool:
    if not search_term:
        return True
    if not name:
        return False
    return search_term.lower() in name.lower()


def matches_status_filter(component: Component, only_issues: bool) -> bool:
    if not only_issues:
        return True
    return component.status != "operational"


def matches_filters(component: Component, filters: FilterState) -> bool:
    return matches_search(component.name, filters.search_term) and (
        matches_status_filter(component, filters.only_issues)
    )


def filter_components(
    components: Sequence[Component], filters: FilterState
) -> List[Component]:
    return [c for c in components if matches_filters(c, filters)]


def filter_groups(
    groups: Sequence[ComponentGroup], filters: FilterState
) -> List[ComponentGroup]:
    """Filter each group's children, dropping groups left with none.

    The parent row is never matched itself; a group is visible only
    through its surviving children.
    """
    visible = []
    for group in groups:
        children = filter_components(group.children, filters)
        if children:
            visible.append(ComponentGroup(parent=group.parent, children=children))
    return visible


def filter_maintenances(
    maintenances: Sequence[Maintenance], search_term: str
) -> List[Maintenance]:
    return [m for m in maintenances if matches_search(m.name, search_term)]


def expand_on_match(expanded: bool, search_term: str, match_count: int) -> bool:
    """Open a collapsible section once a search finds something in it.

    Never collapses: clearing the term or losing the matches leaves the
    section as it was.
    """
    if search_term and match_count > 0:
        return True
    return expanded
