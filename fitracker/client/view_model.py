"""
Progress view model.

Holds the client-side state of the progress hub: the full record list, the
draft form, the selected calendar day, the image preview, and a status line.
Derived views (day log, chart series) are recomputed from that state on
access; nothing is cached beyond the record list itself.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from fitracker.client.api_client import ProgressAPIClient, ProgressAPIError
from fitracker.client.chart import ChartPoint, build_chart_series, filter_day
from fitracker.client.formatting import format_date_label, format_grams, to_date_input
from fitracker.client.images import read_data_url
from fitracker.client.pdf_export import ExportDocument, export_progress

logger = logging.getLogger(__name__)

STATUS_LOADING = "Loading your logs..."
STATUS_READY = "Ready"
STATUS_EMPTY = "No entries yet. Add your first day."
STATUS_UNREACHABLE = "Could not reach backend. Check MongoDB settings."
STATUS_SAVE_FAILED = "Failed to save progress."
STATUS_NOTHING_TO_EXPORT = "Nothing to export yet."
NO_LOGS_FOR_DAY = "No logs for this day yet."

DateValue = Union[date, str, None]


def blank_form(day: str) -> Dict[str, Any]:
    """A fresh draft for ``day`` with empty text and zero grams."""
    return {
        "date": day,
        "food": "",
        "exercise": "",
        "wheyGrams": 0,
        "creatineGrams": 0,
    }


def _as_date_string(value: DateValue) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, date):
        return to_date_input(value)
    return str(value)[:10]


class ProgressViewModel:
    """State holder behind the calendar, chart, form, and export views."""

    def __init__(self, api: ProgressAPIClient, today: Optional[date] = None):
        """
        Initialize ProgressViewModel.

        Args:
            api: Client for the progress endpoint
            today: Date used for the initial draft and selection
        """
        self._api = api
        today_str = to_date_input(today or date.today())

        self.entries: List[Dict[str, Any]] = []
        self.form: Dict[str, Any] = blank_form(today_str)
        self.selected_date: str = today_str
        self.image_preview: Optional[str] = None
        self.status: str = STATUS_LOADING

    # ─────────────────────────────────────────────────────────────
    # Loading
    # ─────────────────────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch every record once; no retry on failure."""
        try:
            records = await self._api.fetch_progress()
        except ProgressAPIError as e:
            logger.warning(f"Could not load progress records: {e}")
            self.status = STATUS_UNREACHABLE
            return

        self.entries = records
        self.status = STATUS_READY if records else STATUS_EMPTY

    # ─────────────────────────────────────────────────────────────
    # Derived views
    # ─────────────────────────────────────────────────────────────

    @property
    def selected_day_entries(self) -> List[Dict[str, Any]]:
        return filter_day(self.entries, self.selected_date)

    @property
    def chart_data(self) -> List[ChartPoint]:
        return build_chart_series(self.entries)

    def render_day_log(self) -> str:
        """Text card for the selected day: a heading and one block per entry."""
        lines = [format_date_label(self.selected_date)]
        entries = self.selected_day_entries

        if not entries:
            lines.append(NO_LOGS_FOR_DAY)
            return "\n".join(lines)

        for entry in entries:
            lines.append(f"Food: {entry.get('food', '')}")
            lines.append(f"Exercise: {entry.get('exercise', '')}")
            lines.append(
                f"Whey: {format_grams(entry.get('wheyGrams'))}g | "
                f"Creatine: {format_grams(entry.get('creatineGrams'))}g"
            )
            if entry.get("imageData"):
                lines.append(f"Image: {entry.get('imageName') or 'Progress'}")
        return "\n".join(lines)

    # ─────────────────────────────────────────────────────────────
    # Form and calendar
    # ─────────────────────────────────────────────────────────────

    def select_date(self, value: Union[DateValue, Sequence[DateValue]]) -> None:
        """
        Change the calendar selection.

        Accepts a date, a YYYY-MM-DD string, or a (start, end) range whose
        first element is used. An empty selection leaves it unchanged.
        """
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None

        selected = _as_date_string(value)
        if selected:
            self.selected_date = selected

    def update_form(self, **changes: Any) -> None:
        self.form = {**self.form, **changes}

    def set_form_datetime(self, value: str) -> None:
        """Take the date part of a datetime-local value (YYYY-MM-DDTHH:MM)."""
        self.update_form(date=value[:10])

    async def attach_image(self, path) -> None:
        """Embed a local image file into the draft as a data URL."""
        data_url, name = await read_data_url(path)
        self.image_preview = data_url
        self.update_form(imageData=data_url, imageName=name)

    # ─────────────────────────────────────────────────────────────
    # Commands
    # ─────────────────────────────────────────────────────────────

    async def submit(self) -> Optional[Dict[str, Any]]:
        """
        Save the draft.

        On success the stored record is prepended to ``entries`` and the draft
        is reset, keeping its date. On failure the draft is left as is.

        Returns:
            The stored record, or None if saving failed
        """
        draft = dict(self.form)
        try:
            saved = await self._api.create_progress(draft)
        except ProgressAPIError as e:
            logger.warning(f"Could not save progress record: {e}")
            self.status = STATUS_SAVE_FAILED
            return None

        self.entries = [saved, *self.entries]
        self.status = f"Saved progress for {format_date_label(saved.get('date'))}."
        self.form = blank_form(draft["date"])
        self.image_preview = None
        self.selected_date = saved.get("date")
        return saved

    def export_pdf(self) -> Optional[ExportDocument]:
        """Render all entries to PDF, or set a status if there are none."""
        if not self.entries:
            self.status = STATUS_NOTHING_TO_EXPORT
            return None
        return export_progress(self.entries)
