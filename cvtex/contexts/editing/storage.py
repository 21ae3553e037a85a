"""
Résumé Persistence

JSON file storage for the current record, plus single-record import/export.

Store file layout:
    A JSON object. The résumé lives under one fixed key (STORAGE_KEY); other keys
    in the file are preserved on save.

        {
          "ats_resume_data": {"profile": {...}, "experience": [...], ...}
        }

Exported/imported files contain a bare record (the value under STORAGE_KEY).
"""

import json
import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from cvtex.contexts.editing.exceptions import ResumeStorageError
from cvtex.contexts.editing.logger import _log_debug, _log_error, _log_info, _log_success
from cvtex.contexts.templating.defaults import INITIAL_RESUME_DATA
from cvtex.contexts.templating.exceptions import InvalidResumeStructureError
from cvtex.contexts.templating.resume_data_structure import Resume
from cvtex.utils.timestamp import today

load_dotenv()
STORE_PATH = Path(os.getenv("CVTEX_STORE_PATH", "data/resume_store.json"))
STORAGE_KEY = "ats_resume_data"


def _read_json(path: Path) -> Any:
    """Read and decode a JSON file, wrapping failures in ResumeStorageError."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ResumeStorageError("Could not read JSON file", path=path, original_error=e) from e


def _parse_resume(data: Any, path: Path) -> Resume:
    try:
        return Resume.from_dict(data)
    except InvalidResumeStructureError as e:
        raise ResumeStorageError("Invalid résumé structure", path=path, original_error=e) from e


class JSONResumeStorage:
    """
    Persists the current résumé in a JSON file under a fixed key.

    Instances are callable so they can be registered directly as ResumeStore
    subscribers (auto-save on every commit).
    """

    def __init__(self, path: Path = STORE_PATH, key: str = STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def __repr__(self) -> str:
        return f"JSONResumeStorage(path={str(self.path)!r}, key={self.key!r})"

    def _read_store(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        store = _read_json(self.path)
        if not isinstance(store, dict):
            raise ResumeStorageError(
                f"Store file must contain a JSON object, got {type(store).__name__}",
                path=self.path,
            )
        return store

    def load(self) -> Resume:
        """
        Load the stored résumé.

        Returns:
            Stored record, or the sample record when nothing is stored yet

        Raises:
            ResumeStorageError: If the file is unreadable or the record is malformed
        """
        store = self._read_store()
        if self.key not in store:
            _log_info(f"No stored résumé at {self.path}, using sample record")
            return Resume.from_dict(INITIAL_RESUME_DATA)

        resume = _parse_resume(store[self.key], self.path)
        _log_debug(f"Loaded {resume.name} from {self.path}")
        return resume

    def save(self, resume: Resume, replace_unreadable: bool = False) -> Path:
        """
        Write the résumé under the storage key, keeping other keys in the file.

        Args:
            resume: Record to store
            replace_unreadable: Overwrite a store file that cannot be read instead
                                of raising (used by reset)

        Returns:
            Path to the store file

        Raises:
            ResumeStorageError: If the existing file is unreadable and
                                replace_unreadable is False
        """
        try:
            store = self._read_store()
        except ResumeStorageError as e:
            if not replace_unreadable:
                raise
            _log_error(f"Replacing unreadable store {self.path}: {e.original_error or e.message}")
            store = {}
        store[self.key] = resume.to_dict()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(store, indent=2, ensure_ascii=False), encoding="utf-8")
        _log_debug(f"Saved {resume.name} to {self.path}")
        return self.path

    def clear(self) -> None:
        """Remove the stored résumé (other keys are kept)."""
        store = self._read_store()
        if store.pop(self.key, None) is not None:
            self.path.write_text(json.dumps(store, indent=2, ensure_ascii=False), encoding="utf-8")
            _log_info(f"Cleared stored résumé in {self.path}")

    def __call__(self, resume: Resume) -> None:
        self.save(resume)


def default_export_name() -> str:
    """Export filename for today, e.g. cv-data-2025-11-13.json."""
    return f"cv-data-{today()}.json"


def export_resume(resume: Resume, output_path: Path = None) -> Path:
    """
    Export a résumé as a pretty-printed JSON file.

    Args:
        resume: Record to export
        output_path: Destination file, or a directory to place the default-named
                     file in. A path without a file suffix is treated as a directory
                     and created if needed. Defaults to the working directory

    Returns:
        Path to the written file
    """
    if output_path is None:
        output_path = Path.cwd() / default_export_name()
    elif output_path.is_dir() or not output_path.suffix:
        output_path = output_path / default_export_name()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(resume.to_json(), encoding="utf-8")
    _log_success(f"Exported {resume.name} to {output_path}")
    return output_path


def import_resume(input_path: Path) -> Resume:
    """
    Import a résumé from a JSON file containing a single record.

    Raises:
        ResumeStorageError: If the file is unreadable, not JSON, or malformed
    """
    resume = _parse_resume(_read_json(input_path), input_path)
    _log_success(f"Imported {resume.name} from {input_path}")
    return resume
