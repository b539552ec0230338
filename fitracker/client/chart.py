"""
Views derived from the full record list.

Both functions are pure: they take the list the view model holds and never
reorder it.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from fitracker.client.formatting import format_date_label

CHART_WINDOW = 14


@dataclass
class ChartPoint:
    """Food/exercise log counts for one date."""
    date: str
    day: str
    foodLogs: int = 0
    exerciseLogs: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def filter_day(entries: List[Dict[str, Any]], selected_date: str) -> List[Dict[str, Any]]:
    """Entries logged on ``selected_date``, in list order."""
    return [entry for entry in entries if entry.get("date") == selected_date]


def build_chart_series(
    entries: List[Dict[str, Any]],
    window: int = CHART_WINDOW,
) -> List[ChartPoint]:
    """
    Group entries by date and count non-blank food and exercise logs.

    Groups keep the order in which their date was first seen while scanning
    ``entries``, and only the last ``window`` groups are returned. Since the
    server lists entries newest first, those are the groups at the end of
    the scan, which is not necessarily the most recent dates.

    Args:
        entries: Records as held by the view model
        window: Number of points to keep

    Returns:
        At most ``window`` chart points
    """
    grouped: Dict[str, ChartPoint] = {}

    for entry in entries:
        date = entry.get("date")
        point = grouped.get(date)
        if point is None:
            point = ChartPoint(date=date, day=format_date_label(date))
            grouped[date] = point

        if (entry.get("food") or "").strip():
            point.foodLogs += 1
        if (entry.get("exercise") or "").strip():
            point.exerciseLogs += 1

    points = list(grouped.values())
    return points[-window:] if window > 0 else []
