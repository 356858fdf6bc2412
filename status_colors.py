from typing import Dict

from models import StatusInfo

STATUS_COLORS: Dict[str, StatusInfo] = {
    "operational": StatusInfo("green", "Operational"),
    "partial_outage": StatusInfo("yellow", "Re-routed"),
    "major_outage": StatusInfo("red", "Major Outage"),
    "under_maintenance": StatusInfo("blue", "Partially Re-routed"),
    "degraded_performance": StatusInfo("yellow", "Degraded Performance"),
}

OVERALL_STATUS_COLORS: Dict[str, StatusInfo] = {
    "none": StatusInfo("green", "All Systems Operational"),
    "minor": StatusInfo("yellow", "Minor Service Outage"),
    "major": StatusInfo("red", "Major Service Outage"),
    "critical": StatusInfo("red", "Critical Service Outage"),
}

UNKNOWN_STATUS = StatusInfo("gray", "Unknown Status")


def classify(status: str) -> StatusInfo:
    """Get display color and label for a component status"""
    return STATUS_COLORS.get(status, UNKNOWN_STATUS)


def classify_overall(indicator: str) -> StatusInfo:
    """Get display color and label for an overall status indicator"""
    return OVERALL_STATUS_COLORS.get(indicator, UNKNOWN_STATUS)
