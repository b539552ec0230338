"""Progress services."""

from fitracker.services.progress.progress_service import ProgressService

__all__ = [
    "ProgressService",
]
