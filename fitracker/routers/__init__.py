"""
Fitracker API Routers.

All routers are imported here for easy access.
"""

from fitracker.routers.progress import router as progress_router

__all__ = [
    "progress_router",
]
