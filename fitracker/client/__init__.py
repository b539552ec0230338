"""
Client side of the progress hub.

Usage:
    from fitracker.client import ProgressAPIClient, ProgressViewModel

    view_model = ProgressViewModel(ProgressAPIClient("http://localhost:8000"))
    await view_model.load()
    points = view_model.chart_data
"""

from fitracker.client.api_client import ProgressAPIClient, ProgressAPIError
from fitracker.client.chart import ChartPoint, build_chart_series, filter_day
from fitracker.client.pdf_export import ExportDocument, export_progress
from fitracker.client.view_model import ProgressViewModel

__all__ = [
    "ProgressAPIClient",
    "ProgressAPIError",
    "ChartPoint",
    "build_chart_series",
    "filter_day",
    "ExportDocument",
    "export_progress",
    "ProgressViewModel",
]
