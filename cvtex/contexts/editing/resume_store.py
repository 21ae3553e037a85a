"""
Résumé Record Store

Owns the current résumé and applies every edit as a whole-record replacement.
After each commit, subscribers are called with the new record; this is how
auto-persistence is wired (a JSONResumeStorage is just a subscriber).

The store depends on the templating context's data model, never the reverse.
Renderers only ever see the committed, immutable Resume value.
"""

import uuid
from dataclasses import fields, replace
from typing import Any, Callable, Iterable, List, Optional, Tuple

from cvtex.contexts.editing.exceptions import EntryNotFoundError
from cvtex.contexts.editing.logger import _log_debug, _log_error, _log_info
from cvtex.contexts.editing.storage import JSONResumeStorage
from cvtex.contexts.templating.defaults import (
    INITIAL_RESUME_DATA,
    NEW_EDUCATION_DEFAULTS,
    NEW_EXPERIENCE_DEFAULTS,
    NEW_PROJECT_DEFAULTS,
)
from cvtex.contexts.templating.exceptions import InvalidResumeStructureError
from cvtex.contexts.templating.resume_data_structure import (
    Education,
    Experience,
    Project,
    Resume,
)

Subscriber = Callable[[Resume], None]


def new_entry_id() -> str:
    """Generate a unique id for a new experience, education or project entry."""
    return str(uuid.uuid4())


def parse_skills(raw: str) -> Tuple[str, ...]:
    """
    Parse a comma-separated skills field.

    Example:
        >>> parse_skills("Angular, TypeScript,, RxJS ")
        ('Angular', 'TypeScript', 'RxJS')
    """
    return tuple(skill.strip() for skill in (raw or "").split(",") if skill.strip())


def merge_fields(record: Any, changes: dict) -> Any:
    """
    Merge field changes into a flat record and re-validate it.

    Args:
        record: Profile, Experience, Education or Project
        changes: Field names (snake_case) mapped to new values

    Returns:
        New record of the same type; the original is untouched

    Raises:
        InvalidResumeStructureError: If a field name is unknown or a value has the wrong type
    """
    valid = {f.name for f in fields(record)}
    unknown = sorted(set(changes) - valid)
    if unknown:
        raise InvalidResumeStructureError(
            f"Unknown {type(record).__name__} fields: {unknown}. Valid fields: {sorted(valid)}"
        )

    merged = replace(record, **changes)
    # Round-trip through the JSON shape to type-check and normalize newlines
    return type(merged).from_dict(merged.to_dict())


class ResumeStore:
    """
    Mutable holder of the current immutable Resume.

    Attributes:
        resume: Current committed record
    """

    def __init__(
        self,
        initial: Optional[Resume] = None,
        storage: Optional[JSONResumeStorage] = None,
    ):
        """
        Initialize the store.

        Args:
            initial: Starting record. Defaults to storage.load() when a storage is
                     given, otherwise to the sample record
            storage: Persistence subscriber (e.g., JSONResumeStorage), called on every commit
        """
        if initial is None:
            if storage is not None:
                initial = storage.load()
            else:
                initial = Resume.from_dict(INITIAL_RESUME_DATA)

        self._resume = initial
        self._subscribers: List[Subscriber] = []

        if storage is not None:
            self.subscribe(storage)

    @property
    def resume(self) -> Resume:
        return self._resume

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with the new record after every commit.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _commit(self, resume: Resume, action: str) -> Resume:
        """
        Replace the current record and notify subscribers.

        Every subscriber runs even if an earlier one fails; the first failure is
        re-raised afterwards.
        """
        self._resume = resume
        _log_debug(f"Committed: {action}")

        first_error = None
        for callback in list(self._subscribers):
            try:
                callback(resume)
            except Exception as e:
                _log_error(f"Subscriber {callback!r} failed after '{action}': {e}")
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error
        return resume

    # Whole-record operations

    def load_state(self, resume: Resume) -> Resume:
        """Replace the entire record (e.g., after importing a file)."""
        _log_info(f"Loading state for {resume.name}")
        return self._commit(resume, "load_state")

    def reset(self) -> Resume:
        """Restore the sample record."""
        return self._commit(Resume.from_dict(INITIAL_RESUME_DATA), "reset")

    # Profile and skills

    def update_profile(self, **changes) -> Resume:
        """Merge partial profile changes (e.g., full_name="Ana", email="ana@x.com")."""
        profile = merge_fields(self._resume.profile, changes)
        return self._commit(replace(self._resume, profile=profile), "update_profile")

    def update_skills(self, skills: Iterable[str]) -> Resume:
        """Replace the entire list of skills."""
        skills = tuple(skills)
        for skill in skills:
            if not isinstance(skill, str):
                raise InvalidResumeStructureError(
                    f"skills must be strings, got {type(skill).__name__}"
                )
        return self._commit(replace(self._resume, skills=skills), "update_skills")

    # Collection helpers shared by experience, education and projects

    def _add(self, collection: str, entry: Any) -> Resume:
        entries = getattr(self._resume, collection)
        if any(existing.id == entry.id for existing in entries):
            raise InvalidResumeStructureError(
                f"Duplicate {collection} id '{entry.id}'"
            )
        return self._commit(
            replace(self._resume, **{collection: entries + (entry,)}), f"add {collection}"
        )

    def _update(self, collection: str, entry_id: str, changes: dict) -> Resume:
        entries = getattr(self._resume, collection)
        if not any(entry.id == entry_id for entry in entries):
            raise EntryNotFoundError(collection, entry_id)

        updated = tuple(
            merge_fields(entry, changes) if entry.id == entry_id else entry for entry in entries
        )
        return self._commit(
            replace(self._resume, **{collection: updated}), f"update {collection} {entry_id}"
        )

    def _remove(self, collection: str, entry_id: str) -> Resume:
        entries = getattr(self._resume, collection)
        remaining = tuple(entry for entry in entries if entry.id != entry_id)
        if len(remaining) == len(entries):
            raise EntryNotFoundError(collection, entry_id)
        return self._commit(
            replace(self._resume, **{collection: remaining}), f"remove {collection} {entry_id}"
        )

    # Experience

    def add_experience(self, entry: Optional[Experience] = None) -> Experience:
        """
        Append an experience entry.

        Args:
            entry: Entry to add. Defaults to a placeholder entry with a fresh id

        Returns:
            The added entry
        """
        if entry is None:
            entry = Experience.from_dict({"id": new_entry_id(), **NEW_EXPERIENCE_DEFAULTS})
        self._add("experience", entry)
        return entry

    def update_experience(self, entry_id: str, **changes) -> Resume:
        return self._update("experience", entry_id, changes)

    def remove_experience(self, entry_id: str) -> Resume:
        return self._remove("experience", entry_id)

    # Education

    def add_education(self, entry: Optional[Education] = None) -> Education:
        """Append an education entry (placeholder entry with a fresh id by default)."""
        if entry is None:
            entry = Education.from_dict({"id": new_entry_id(), **NEW_EDUCATION_DEFAULTS})
        self._add("education", entry)
        return entry

    def update_education(self, entry_id: str, **changes) -> Resume:
        return self._update("education", entry_id, changes)

    def remove_education(self, entry_id: str) -> Resume:
        return self._remove("education", entry_id)

    # Projects

    def add_project(self, entry: Optional[Project] = None) -> Project:
        """Append a project (placeholder project with a fresh id by default)."""
        if entry is None:
            entry = Project.from_dict({"id": new_entry_id(), **NEW_PROJECT_DEFAULTS})
        self._add("projects", entry)
        return entry

    def update_project(self, entry_id: str, **changes) -> Resume:
        return self._update("projects", entry_id, changes)

    def remove_project(self, entry_id: str) -> Resume:
        return self._remove("projects", entry_id)
