"""
Résumé Data Structure

Defines the immutable résumé record consumed by both renderers and owned by the
editing context's store.

Records mirror the persisted JSON shape (camelCase keys) field for field. Each
dataclass field carries its JSON key in metadata so conversion in both directions
stays in one place.

Newline handling:
    The in-memory record always uses real newline characters. Multi-line fields
    (summary, duties, description) are normalized on load, so records stored with
    the literal two-character backslash-n sequence render the same as records with
    real line breaks.
"""

import json
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Tuple, Type, TypeVar

from cvtex.contexts.templating.exceptions import InvalidResumeStructureError
from cvtex.utils.text_processing import normalize_newlines

R = TypeVar("R")


def _key(json_key: str, multiline: bool = False):
    """Declare a text field backed by a JSON key."""
    return field(default="", metadata={"key": json_key, "multiline": multiline})


def _record_from_dict(cls: Type[R], data: Any, where: str) -> R:
    """
    Build a flat record (Profile, Experience, ...) from its JSON mapping.

    Every declared key must be present. Text fields must be strings and boolean
    fields must be booleans; anything else is a shape error.

    Raises:
        InvalidResumeStructureError: If data is not a mapping or a key is missing/mistyped
    """
    if not isinstance(data, Mapping):
        raise InvalidResumeStructureError(
            f"{where} must be an object, got {type(data).__name__}"
        )

    values = {}
    for f in fields(cls):
        json_key = f.metadata["key"]
        if json_key not in data:
            raise InvalidResumeStructureError(f"{where} is missing required field '{json_key}'")

        value = data[json_key]
        expected = bool if f.type is bool else str
        if not isinstance(value, expected):
            raise InvalidResumeStructureError(
                f"{where}.{json_key} must be {expected.__name__}, got {type(value).__name__}"
            )

        if f.metadata.get("multiline"):
            value = normalize_newlines(value)
        values[f.name] = value

    return cls(**values)


def _record_to_dict(record: Any) -> Dict[str, Any]:
    """Convert a flat record back to its JSON mapping."""
    return {f.metadata["key"]: getattr(record, f.name) for f in fields(record)}


def _list_field(data: Mapping, key: str) -> list:
    """Fetch an optional list field, treating an absent key as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidResumeStructureError(
            f"resume.{key} must be a list, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Profile:
    """
    Personal contact information and professional summary.

    Attributes:
        summary: Flowing text; newlines are soft line breaks
    """

    full_name: str = _key("fullName")
    email: str = _key("email")
    phone: str = _key("phone")
    location: str = _key("location")
    linkedin: str = _key("linkedin")
    github: str = _key("github")
    summary: str = _key("summary", multiline=True)

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        return _record_from_dict(cls, data, "profile")

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


@dataclass(frozen=True)
class Experience:
    """
    Professional work experience entry.

    Attributes:
        id: Caller-assigned identifier, used only for editor-side addressing
        current: When True the date range ends in "Presente" instead of end_date
        duties: Bullet text; each non-blank line is one list item
    """

    id: str = _key("id")
    role: str = _key("role")
    company: str = _key("company")
    location: str = _key("location")
    start_date: str = _key("startDate")
    end_date: str = _key("endDate")
    current: bool = field(default=False, metadata={"key": "current"})
    duties: str = _key("duties", multiline=True)

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> "Experience":
        return _record_from_dict(cls, data, f"experience[{index}]")

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


@dataclass(frozen=True)
class Education:
    """Academic education entry."""

    id: str = _key("id")
    degree: str = _key("degree")
    institution: str = _key("institution")
    location: str = _key("location")
    graduation_date: str = _key("graduationDate")

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> "Education":
        return _record_from_dict(cls, data, f"education[{index}]")

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


@dataclass(frozen=True)
class Project:
    """
    Noteworthy personal or professional project.

    Attributes:
        description: Flowing text; newlines are soft line breaks
        keywords: Free text shown as a labeled inline list when present
        link: URL, possibly without scheme (e.g., "github.com/x")
    """

    id: str = _key("id")
    name: str = _key("name")
    role: str = _key("role")
    stack: str = _key("stack")
    description: str = _key("description", multiline=True)
    keywords: str = _key("keywords")
    link: str = _key("link")

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> "Project":
        return _record_from_dict(cls, data, f"projects[{index}]")

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


@dataclass(frozen=True)
class Resume:
    """
    Complete résumé record.

    Immutable value: the editing context replaces it wholesale on every change and
    renderers only read it. Entry order is insertion order and is preserved by
    both renderers.

    Multiline fields written on a single line treat a literal backslash-n as a line
    break (older saves stored breaks that way), so such text cannot contain a
    literal backslash-n. Once a field holds a real newline it is kept as written.
    """

    profile: Profile
    experience: Tuple[Experience, ...] = ()
    education: Tuple[Education, ...] = ()
    projects: Tuple[Project, ...] = ()
    skills: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Display name used in log messages and export filenames."""
        return self.profile.full_name or "resume"

    @classmethod
    def from_dict(cls, data: Any) -> "Resume":
        """
        Build a Resume from its persisted JSON shape.

        Args:
            data: Mapping with 'profile' and optional 'experience', 'education',
                  'projects', 'skills' lists

        Returns:
            Resume instance with newlines normalized

        Raises:
            InvalidResumeStructureError: If 'profile' is missing or any part is mistyped
        """
        if not isinstance(data, Mapping):
            raise InvalidResumeStructureError(
                f"resume must be an object, got {type(data).__name__}"
            )
        if "profile" not in data:
            raise InvalidResumeStructureError("resume is missing required field 'profile'")

        skills = _list_field(data, "skills")
        for i, skill in enumerate(skills):
            if not isinstance(skill, str):
                raise InvalidResumeStructureError(
                    f"skills[{i}] must be str, got {type(skill).__name__}"
                )

        return cls(
            profile=Profile.from_dict(data["profile"]),
            experience=tuple(
                Experience.from_dict(entry, i)
                for i, entry in enumerate(_list_field(data, "experience"))
            ),
            education=tuple(
                Education.from_dict(entry, i)
                for i, entry in enumerate(_list_field(data, "education"))
            ),
            projects=tuple(
                Project.from_dict(entry, i)
                for i, entry in enumerate(_list_field(data, "projects"))
            ),
            skills=tuple(skills),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted JSON shape (lists, camelCase keys)."""
        return {
            "profile": self.profile.to_dict(),
            "experience": [entry.to_dict() for entry in self.experience],
            "education": [entry.to_dict() for entry in self.education],
            "projects": [entry.to_dict() for entry in self.projects],
            "skills": list(self.skills),
        }

    @classmethod
    def from_json(cls, text: str) -> "Resume":
        """
        Parse a Resume from JSON text.

        Raises:
            json.JSONDecodeError: If text is not valid JSON
            InvalidResumeStructureError: If the decoded value has the wrong shape
        """
        return cls.from_dict(json.loads(text))

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def as_resume(value: Any) -> Resume:
    """Accept either a Resume or its JSON-shaped mapping."""
    if isinstance(value, Resume):
        return value
    return Resume.from_dict(value)
