"""Timestamp formatting utilities."""

from datetime import datetime


def today() -> str:
    """
    Current local date in ISO format.

    Used for default export filenames (e.g., "cv-data-2025-11-13.json").
    """
    return datetime.now().date().isoformat()
