"""Date helpers shared by the calendar view, chart labels, and PDF export."""

from datetime import date


def format_date_label(value: str) -> str:
    """Render a YYYY-MM-DD string as M/D/YYYY, e.g. "2024-01-05" -> "1/5/2024"."""
    try:
        day = date.fromisoformat(value)
    except (TypeError, ValueError):
        return "Invalid Date"
    return f"{day.month}/{day.day}/{day.year}"


def to_date_input(value: date) -> str:
    return value.isoformat()[:10]


def format_grams(value) -> str:
    """Render a quantity without a trailing .0 for whole numbers."""
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
