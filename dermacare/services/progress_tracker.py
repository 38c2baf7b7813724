import logging
from typing import Dict, List
from dermacare.models import HistoryEntry, ProgressPoint, ProgressReport
from dermacare.config import PROGRESS_MONTHS

logger = logging.getLogger(__name__)


def build_progress_report(history: List[HistoryEntry], months: int = PROGRESS_MONTHS) -> ProgressReport:
    """
    Monthly healthy-vs-issue breakdown of the scan history.

    A scan with severity "low" counts as healthy, anything else as an issue.
    Months are ordered chronologically and only the most recent `months` are kept.
    """
    monthly: Dict[str, Dict[str, int]] = {}
    for entry in history:
        month_key = entry.timestamp.strftime("%Y-%m")
        bucket = monthly.setdefault(month_key, {"healthy": 0, "issues": 0})
        if entry.result.severity == "low":
            bucket["healthy"] += 1
        else:
            bucket["issues"] += 1

    points = []
    for month_key in sorted(monthly)[-months:]:
        data = monthly[month_key]
        total = data["healthy"] + data["issues"]
        points.append(ProgressPoint(
            month=month_key,
            healthy=data["healthy"],
            issues=data["issues"],
            total=total,
            healthy_percentage=data["healthy"] / total * 100,
        ))

    latest = points[-1].healthy_percentage if points else 0.0
    trend = latest - points[-2].healthy_percentage if len(points) > 1 else 0.0

    return ProgressReport(months=points, latest_healthy_percentage=latest, trend=trend)
