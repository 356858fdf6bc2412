import asyncio
import json
import logging
from typing import Dict, List, Optional

import aiohttp

from date_utils import format_date
from models import Component, FilterState, Incident, Maintenance, Snapshot
from parsers import (
    StatusPayloadError,
    parse_components,
    parse_incidents,
    parse_maintenances,
    parse_page_status,
)
from state import (
    DashboardState,
    apply_failure,
    apply_filters,
    apply_snapshot,
    begin_refresh,
    expand_all_sections,
)
from status_colors import classify, classify_overall
from view import (
    ACTIVE_MAINTENANCE,
    UPCOMING_MAINTENANCE,
    DashboardView,
    build_view,
    group_section,
)

COLOR_EMOJIS = {
    "green": "🟢",
    "yellow": "🟡",
    "red": "🔴",
    "blue": "🔵",
    "gray": "⚪",
}


class StatusFetchError(Exception):
    """Raised when an endpoint answers with something other than 200 or 304"""


class StatusDashboard:
    BASE_URL = "https://www.cloudflarestatus.com"
    STATUS_ENDPOINT = "/api/v2/status.json"
    COMPONENTS_ENDPOINT = "/api/v2/components.json"
    UPCOMING_MAINTENANCE_ENDPOINT = "/api/v2/scheduled-maintenances/upcoming.json"
    ACTIVE_MAINTENANCE_ENDPOINT = "/api/v2/scheduled-maintenances/active.json"
    INCIDENTS_ENDPOINT = "/api/v2/incidents/unresolved.json"
    REQUEST_TIMEOUT = 15

    def __init__(
        self,
        poll_interval: int = 60,
        base_url: Optional[str] = None,
        filters: Optional[FilterState] = None,
        expand_all: bool = False,
    ):
        self.poll_interval = poll_interval
        self.expand_all = expand_all
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.session: Optional[aiohttp.ClientSession] = None
        self.etags: Dict[str, str] = {}
        self.payloads: Dict[str, dict] = {}
        self.state = apply_filters(DashboardState(), filters or FilterState())

        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.logger = logging.getLogger(__name__)

    async def __aenter__(self):
        timeout = aiohttp.ClientTimeout(total=self.REQUEST_TIMEOUT)
        self.session = aiohttp.ClientSession(timeout=timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()

    async def _fetch_with_etag(self, endpoint: str) -> dict:
        """Fetch an endpoint, reusing the last payload when the server answers 304"""
        url = self.base_url + endpoint
        headers = {}

        if endpoint in self.etags and endpoint in self.payloads:
            headers["If-None-Match"] = self.etags[endpoint]

        async with self.session.get(url, headers=headers) as response:
            if response.status == 304:
                return self.payloads[endpoint]

            if response.status != 200:
                raise StatusFetchError(f"HTTP {response.status} for {endpoint}")

            payload = await response.json(content_type=None)
            etag = response.headers.get("ETag")
            if etag:
                self.etags[endpoint] = etag
            self.payloads[endpoint] = payload
            return payload

    async def fetch_snapshot(self) -> Snapshot:
        status_data = await self._fetch_with_etag(self.STATUS_ENDPOINT)
        components_data = await self._fetch_with_etag(self.COMPONENTS_ENDPOINT)
        upcoming_data = await self._fetch_with_etag(self.UPCOMING_MAINTENANCE_ENDPOINT)
        active_data = await self._fetch_with_etag(self.ACTIVE_MAINTENANCE_ENDPOINT)
        incidents_data = await self._fetch_with_etag(self.INCIDENTS_ENDPOINT)

        return Snapshot(
            status=parse_page_status(status_data),
            components=parse_components(components_data),
            incidents=parse_incidents(incidents_data),
            active_maintenance=parse_maintenances(active_data),
            upcoming_maintenance=parse_maintenances(upcoming_data),
        )

    async def refresh(self) -> DashboardState:
        """Run one fetch cycle and swap in the new snapshot.

        A failed cycle keeps the previous snapshot and records the error.
        """
        self.state = begin_refresh(self.state)
        try:
            snapshot = await self.fetch_snapshot()
        except StatusFetchError as e:
            self.logger.error(f"Error fetching status data: {e}")
            self.state = apply_failure(self.state, str(e))
        except aiohttp.ClientError as e:
            self.logger.error(f"Network error fetching status data: {e}")
            self.state = apply_failure(self.state, f"Network error: {e}")
        except asyncio.TimeoutError:
            self.logger.error("Timed out fetching status data")
            self.state = apply_failure(self.state, "Timed out fetching status data")
        except (json.JSONDecodeError, StatusPayloadError) as e:
            self.logger.error(f"Malformed status data: {e}")
            self.state = apply_failure(self.state, f"Malformed status data: {e}")
        else:
            self.state = apply_snapshot(self.state, snapshot)
            if self.expand_all:
                self.state = expand_all_sections(self.state)
            self.logger.info(
                f"Loaded {len(snapshot.components)} components, "
                f"{len(snapshot.incidents)} unresolved incidents"
            )
        return self.state

    def set_filters(self, filters: FilterState) -> None:
        self.state = apply_filters(self.state, filters)
        if self.expand_all:
            self.state = expand_all_sections(self.state)

    def render(self) -> None:
        print("\n".join(render_lines(self.state)))

    async def start_monitoring(self) -> None:
        self.logger.info(
            f"Starting status dashboard for {self.base_url} "
            f"(refreshing every {self.poll_interval}s)"
        )

        try:
            while True:
                await self.refresh()
                self.render()
                await asyncio.sleep(self.poll_interval)
        except asyncio.CancelledError:
            self.logger.info("Monitoring stopped")
            raise


def _component_line(component: Component, indent: str = "  ") -> str:
    info = classify(component.status)
    updated = format_date(
        component.updated_at, "N/A", f"Component: {component.name}"
    )
    return (
        f"{indent}{COLOR_EMOJIS[info.color]} {component.name} - {info.label} "
        f"(last updated: {updated})"
    )


def _incident_lines(incident: Incident) -> List[str]:
    lines = [
        f"  {incident.name}",
        f"    {incident.impact.replace('_', ' ').upper()} IMPACT | Status: {incident.status}",
    ]
    if incident.updates:
        latest = incident.updates[0]
        lines.append(f"    Latest Update: {latest.body}")
        lines.append(
            f"    Updated: {format_date(latest.updated_at, 'N/A', 'Incident')}"
        )
    if incident.shortlink:
        lines.append(f"    Details: {incident.shortlink}")
    return lines


def _maintenance_lines(maintenance: Maintenance) -> List[str]:
    lines = [
        f"    {maintenance.name} [{maintenance.status.replace('_', ' ')}]",
        f"      Impact: {maintenance.impact}",
        f"      Scheduled: {format_date(maintenance.scheduled_for, 'N/A', 'Maintenance')}",
        f"      Until: {format_date(maintenance.scheduled_until, 'N/A', 'Maintenance')}",
    ]
    if maintenance.shortlink:
        lines.append(f"      Details: {maintenance.shortlink}")
    return lines


def _section_header(title: str, expanded: bool) -> str:
    return f"  {'▼' if expanded else '▶'} {title}"


def render_lines(state: DashboardState) -> List[str]:
    """Lay the current state out as console lines"""
    if state.loading:
        return ["Loading...", "Fetching status data..."]

    lines: List[str] = []
    if state.error:
        lines.append(f"Error: {state.error}")
        lines.append("Showing last known data; will retry on the next refresh.")

    if state.snapshot is None:
        return lines

    snapshot = state.snapshot
    view: DashboardView = build_view(snapshot, state.filters)
    header_info = classify_overall(view.header.indicator)
    page_name = snapshot.status.name or "Status"
    last_updated = format_date(snapshot.status.updated_at, "Loading...", "Status Header")

    lines.append(f"{page_name} {COLOR_EMOJIS[header_info.color]} {view.header.description}")
    lines.append(f"Last updated: {last_updated}")
    lines.append("=" * 50)

    lines.append("Current Status")
    if not view.incidents:
        lines.append("  All Systems Operational - no unresolved incidents detected.")
    for incident in view.incidents:
        lines.extend(_incident_lines(incident))

    for section, title, maintenances in (
        (ACTIVE_MAINTENANCE, "Active Maintenance", view.active_maintenance),
        (UPCOMING_MAINTENANCE, "Upcoming Maintenance", view.upcoming_maintenance),
    ):
        if not maintenances:
            continue
        expanded = section in state.expanded
        lines.append(_section_header(f"{title} ({len(maintenances)})", expanded))
        if expanded:
            for maintenance in maintenances:
                lines.extend(_maintenance_lines(maintenance))

    if view.points_of_presence:
        lines.append(f"Points of Presence ({len(view.points_of_presence)})")
        lines.extend(_component_line(c) for c in view.points_of_presence)

    if view.parent_groups:
        lines.append("Services by Region")
        for group in view.parent_groups:
            expanded = group_section(group.parent.id) in state.expanded
            lines.append(
                _section_header(f"{group.parent.name} ({len(group.children)})", expanded)
            )
            if expanded:
                lines.extend(_component_line(c, indent="    ") for c in group.children)

    if not view.has_components:
        lines.append("No components match your search criteria.")
        if state.filters.only_issues:
            lines.append('Try disabling "only issues" to see all components.')

    return lines
