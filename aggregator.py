from typing import Sequence

from models import HeaderStatus, Incident

ALL_OPERATIONAL = HeaderStatus("none", "All Systems Operational")
CRITICAL_OUTAGE = HeaderStatus("critical", "Critical Service Outage")
MAJOR_OUTAGE = HeaderStatus("major", "Major Service Outage")
MINOR_ISSUES = HeaderStatus("minor", "Minor Service Issues")


def aggregate(incidents: Sequence[Incident]) -> HeaderStatus:
    """Derive the header status from unresolved incidents only.

    Component and maintenance status never feed into this; the banner
    reflects incidents alone.
    """
    if not incidents:
        return ALL_OPERATIONAL

    impacts = {incident.impact for incident in incidents}
    if "critical" in impacts:
        return CRITICAL_OUTAGE
    if "major" in impacts:
        return MAJOR_OUTAGE
    return MINOR_ISSUES
