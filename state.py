"""Immutable dashboard state and the transitions between states.

Every transition takes the previous state and returns a new one; nothing
here mutates in place, so a render always sees one consistent snapshot.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Optional

from filters import expand_on_match
from models import FilterState, Snapshot
from view import build_view


@dataclass(frozen=True)
class DashboardState:
    snapshot: Optional[Snapshot] = None
    loading: bool = False
    error: Optional[str] = None
    initial_load: bool = True
    filters: FilterState = field(default_factory=FilterState)
    expanded: FrozenSet[str] = frozenset()


def _section_counts(state: DashboardState) -> Dict[str, int]:
    if state.snapshot is None:
        return {}
    return build_view(state.snapshot, state.filters).section_counts()


def _expand_matching(
    state: DashboardState, previous: Optional[Dict[str, int]] = None
) -> DashboardState:
    """Open sections the current search has matches in.

    With ``previous`` counts, only sections whose matches went from none
    to some are opened, so a section collapsed mid-search stays closed
    across refreshes.
    """
    expanded = set(state.expanded)
    for section, count in _section_counts(state).items():
        if previous is not None and previous.get(section, 0) > 0:
            continue
        if expand_on_match(section in expanded, state.filters.search_term, count):
            expanded.add(section)
    return replace(state, expanded=frozenset(expanded))


def begin_refresh(state: DashboardState) -> DashboardState:
    # Only the very first load blocks the view
    return replace(state, loading=state.initial_load, error=None)


def apply_snapshot(state: DashboardState, snapshot: Snapshot) -> DashboardState:
    previous = _section_counts(state)
    new_state = replace(
        state, snapshot=snapshot, loading=False, error=None, initial_load=False
    )
    return _expand_matching(new_state, previous)


def apply_failure(state: DashboardState, message: str) -> DashboardState:
    """Record a failed refresh, keeping whatever snapshot was already shown"""
    return replace(state, loading=False, error=message)


def apply_filters(state: DashboardState, filters: FilterState) -> DashboardState:
    return _expand_matching(replace(state, filters=filters))


def toggle_section(state: DashboardState, section: str) -> DashboardState:
    return replace(state, expanded=state.expanded ^ {section})


def expand_all_sections(state: DashboardState) -> DashboardState:
    """Open every section visible under the current filters"""
    for section in _section_counts(state):
        if section not in state.expanded:
            state = toggle_section(state, section)
    return state
