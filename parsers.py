import logging
from typing import Any, List, Optional

from models import (
    Component,
    Incident,
    IncidentUpdate,
    Maintenance,
    PageStatus,
)

logger = logging.getLogger(__name__)


class StatusPayloadError(ValueError):
    """Raised when a payload does not have the expected top-level shape"""


def _require_dict(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise StatusPayloadError(f"Expected an object for {what}, got {type(data).__name__}")
    return data


def _require_list(data: dict, key: str) -> List[Any]:
    items = data.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise StatusPayloadError(f"Expected a list for '{key}', got {type(items).__name__}")
    return items


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _as_position(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _records(items: List[Any], what: str) -> List[dict]:
    records = []
    for item in items:
        if isinstance(item, dict):
            records.append(item)
        else:
            logger.warning(f"Skipping malformed {what} entry: {item!r}")
    return records


def parse_page_status(data: Any) -> PageStatus:
    data = _require_dict(data, "status")
    page = data.get("page")
    page = page if isinstance(page, dict) else {}
    status = data.get("status")
    status = status if isinstance(status, dict) else {}
    return PageStatus(
        name=_as_str(page.get("name")),
        updated_at=_as_str(page.get("updated_at")),
        indicator=_as_str(status.get("indicator")),
        description=_as_str(status.get("description")),
    )


def parse_components(data: Any) -> List[Component]:
    data = _require_dict(data, "components")
    components = []
    for comp_data in _records(_require_list(data, "components"), "component"):
        components.append(
            Component(
                id=_as_str(comp_data.get("id")),
                name=_as_str(comp_data.get("name")),
                status=_as_str(comp_data.get("status")),
                updated_at=_as_str(comp_data.get("updated_at")),
                is_group=comp_data.get("group") is True,
                group_id=_as_optional_str(comp_data.get("group_id")),
                position=_as_position(comp_data.get("position")),
                description=_as_optional_str(comp_data.get("description")),
                page_id=_as_optional_str(comp_data.get("page_id")),
            )
        )
    return components


def parse_incidents(data: Any) -> List[Incident]:
    data = _require_dict(data, "incidents")
    incidents = []
    for inc_data in _records(_require_list(data, "incidents"), "incident"):
        updates = []
        for update_data in _records(
            _require_list(inc_data, "incident_updates"), "incident update"
        ):
            updates.append(
                IncidentUpdate(
                    id=_as_str(update_data.get("id")),
                    body=_as_str(update_data.get("body")),
                    status=_as_str(update_data.get("status")),
                    created_at=_as_str(update_data.get("created_at")),
                    updated_at=_as_str(update_data.get("updated_at")),
                    display_at=_as_str(update_data.get("display_at")),
                )
            )

        incidents.append(
            Incident(
                id=_as_str(inc_data.get("id")),
                name=_as_str(inc_data.get("name")),
                status=_as_str(inc_data.get("status")),
                impact=_as_str(inc_data.get("impact")) or "none",
                updates=updates,
                shortlink=_as_str(inc_data.get("shortlink")),
                created_at=_as_str(inc_data.get("created_at")),
                updated_at=_as_str(inc_data.get("updated_at")),
                monitoring_at=_as_optional_str(inc_data.get("monitoring_at")),
                resolved_at=_as_optional_str(inc_data.get("resolved_at")),
            )
        )
    return incidents


def parse_maintenances(data: Any) -> List[Maintenance]:
    data = _require_dict(data, "scheduled maintenances")
    maintenances = []
    for maint_data in _records(
        _require_list(data, "scheduled_maintenances"), "maintenance"
    ):
        # The API returns affected components either as ids or as full objects
        affected = []
        for comp in _require_list(maint_data, "components"):
            if isinstance(comp, dict):
                comp = comp.get("id")
            if isinstance(comp, str) and comp:
                affected.append(comp)

        maintenances.append(
            Maintenance(
                id=_as_str(maint_data.get("id")),
                name=_as_str(maint_data.get("name")),
                status=_as_str(maint_data.get("status")),
                impact=_as_str(maint_data.get("impact")),
                scheduled_for=_as_str(maint_data.get("scheduled_for")),
                scheduled_until=_as_str(maint_data.get("scheduled_until")),
                shortlink=_as_str(maint_data.get("shortlink")),
                components=tuple(affected),
            )
        )
    return maintenances
