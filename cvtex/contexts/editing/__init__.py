"""
Editing Context

Responsibilities:
- Holds the current résumé and applies whole-record and partial updates
- Notifies subscribers after every commit (auto-persistence hooks in here)
- Persists the record as JSON under a fixed storage key
- Imports and exports single records as JSON files

Owns: Record store, persistence, import/export
Never: Renders documents (depends on templating, never the reverse)
"""

from cvtex.contexts.editing.exceptions import EntryNotFoundError, ResumeStorageError
from cvtex.contexts.editing.resume_store import ResumeStore, new_entry_id, parse_skills
from cvtex.contexts.editing.storage import (
    STORAGE_KEY,
    JSONResumeStorage,
    export_resume,
    import_resume,
)

__all__ = [
    "ResumeStore",
    "JSONResumeStorage",
    "STORAGE_KEY",
    "export_resume",
    "import_resume",
    "new_entry_id",
    "parse_skills",
    "EntryNotFoundError",
    "ResumeStorageError",
]
