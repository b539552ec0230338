"""
PDF export of every progress record.

Layout is computed first as plain data (pages of positioned lines) so the
pagination rule can be checked without reading PDF bytes back; the pages are
then drawn with ReportLab.

Coordinates are millimetres on A4, with the cursor measured from the top of
the page.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from fitracker.client.formatting import format_date_label, format_grams

logger = logging.getLogger(__name__)

TOP_MARGIN = 20
PAGE_BREAK_AT = 250
LEFT_MARGIN = 12
FONT_NAME = "Helvetica"
FONT_SIZE = 12

# (cursor, text) of one drawn line
Line = Tuple[float, str]
Page = List[Line]


@dataclass
class ExportDocument:
    """A rendered export ready to be offered for download."""
    filename: str
    content: bytes
    page_count: int

    def save(self, directory: Union[str, Path] = ".") -> Path:
        path = Path(directory) / self.filename
        path.write_bytes(self.content)
        logger.info(f"Saved export to {path}")
        return path


def sort_for_export(entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Copy of ``entries`` ordered by date ascending (stable within a date)."""
    return sorted(entries, key=lambda entry: entry.get("date") or "")


def _entry_lines(entry: Dict[str, Any], index: int) -> List[Tuple[str, float]]:
    return [
        (f"DATE: {format_date_label(entry.get('date'))}", 8),
        (f"DAY {index + 1}", 8),
        (f"FOOD: {entry.get('food') or '-'}", 8),
        (f"EXERCISE: {entry.get('exercise') or '-'}", 8),
        (f"WHEY GRAMS: {format_grams(entry.get('wheyGrams'))}", 8),
        (f"CREATINE GRAMS: {format_grams(entry.get('creatineGrams'))}", 12),
        ("---", 10),
    ]


def layout_pages(sorted_entries: List[Dict[str, Any]]) -> List[Page]:
    """
    Place every entry's lines on pages.

    A new page starts before an entry whenever the cursor has moved past
    PAGE_BREAK_AT. Entries are never split across pages.

    Args:
        sorted_entries: Entries already in export order

    Returns:
        Pages, each a list of (cursor, text) pairs
    """
    pages: List[Page] = [[]]
    y = TOP_MARGIN

    for index, entry in enumerate(sorted_entries):
        if y > PAGE_BREAK_AT:
            pages.append([])
            y = TOP_MARGIN

        for text, advance in _entry_lines(entry, index):
            pages[-1].append((y, text))
            y += advance

    return pages


def render_pdf(pages: List[Page]) -> bytes:
    """Draw laid-out pages into a PDF document."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    _, page_height = A4

    for number, page in enumerate(pages):
        if number:
            pdf.showPage()
        pdf.setFont(FONT_NAME, FONT_SIZE)
        for y, text in page:
            pdf.drawString(LEFT_MARGIN * mm, page_height - y * mm, text)

    pdf.save()
    return buffer.getvalue()


def export_progress(entries: List[Dict[str, Any]]) -> Optional[ExportDocument]:
    """
    Build the progress PDF.

    Args:
        entries: All records held by the view model

    Returns:
        ExportDocument, or None when there is nothing to export
    """
    if not entries:
        return None

    ordered = sort_for_export(entries)
    pages = layout_pages(ordered)
    content = render_pdf(pages)

    filename = f"fitracker-progress-{ordered[-1].get('date')}.pdf"
    logger.info(f"Exported {len(ordered)} records on {len(pages)} pages")
    return ExportDocument(filename=filename, content=content, page_count=len(pages))
