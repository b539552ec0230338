"""
FastAPI dependencies for Fitracker.

Provides dependency injection for services.
"""

from typing import Optional

from common.database import MongoDB
from fitracker.services.progress.progress_service import ProgressService


# ─────────────────────────────────────────────────────────────────
# Service instances
# ─────────────────────────────────────────────────────────────────

_progress_service: Optional[ProgressService] = None


def init_progress_services(mongo: MongoDB, collection_name: str = "progress") -> None:
    """
    Initialize progress services with the shared database handle.

    Called once at application startup. The handle connects lazily, so no
    database round trip happens here.

    Args:
        mongo: Process-wide MongoDB handle
        collection_name: Name of the progress collection
    """
    global _progress_service
    _progress_service = ProgressService(mongo=mongo, collection_name=collection_name)


def get_progress_service() -> ProgressService:
    """Get progress service instance."""
    if _progress_service is None:
        raise RuntimeError("Progress services not initialized.")
    return _progress_service
