#!/usr/bin/env python3
"""
Export every progress record to a PDF file.

This script:
1. Loads all records from a running Fitracker API
2. Renders them oldest first, one block per record
3. Writes fitracker-progress-<latest date>.pdf to the output directory

Usage:
    python scripts/export_progress.py [output_dir]

Environment variables:
    FITRACKER_API_URL - API root (default: http://localhost:8000)
"""

import asyncio
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fitracker.client import ProgressAPIClient, ProgressViewModel
from fitracker.client.view_model import STATUS_READY
from fitracker.config import settings


async def export(output_dir: str) -> int:
    """Load records and write the PDF; returns a process exit code."""
    api = ProgressAPIClient(settings.FITRACKER_API_URL, timeout=settings.FITRACKER_API_TIMEOUT)
    view_model = ProgressViewModel(api)

    print(f"Loading records from: {settings.FITRACKER_API_URL}")
    await view_model.load()
    print(view_model.status)
    if view_model.status != STATUS_READY:
        return 1

    document = view_model.export_pdf()
    if document is None:
        print(view_model.status)
        return 1

    path = document.save(output_dir)
    print(f"Wrote {document.page_count} page(s) to {path}")
    return 0


if __name__ == "__main__":
    print("Fitracker Progress Export")
    print("-" * 40)
    sys.exit(asyncio.run(export(sys.argv[1] if len(sys.argv) > 1 else ".")))
