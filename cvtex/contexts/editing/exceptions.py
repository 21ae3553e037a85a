"""Custom exceptions for the editing context."""

from pathlib import Path
from typing import Optional


class ResumeStorageError(Exception):
    """
    Exception raised when a stored or imported résumé cannot be read.

    Attributes:
        message: Error description
        path: File that failed to load
        original_error: The underlying JSON, shape or OS error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]
        if path:
            parts.append(f"File: {path}")
        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))


class EntryNotFoundError(KeyError):
    """Exception raised when an entry id is not present in a résumé collection."""

    def __init__(self, collection: str, entry_id: str):
        self.collection = collection
        self.entry_id = entry_id
        super().__init__(f"No {collection} entry with id '{entry_id}'")
