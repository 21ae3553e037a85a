"""Shared fixtures for cvtex tests."""

import copy
from pathlib import Path

import pytest

from cvtex.contexts.templating.defaults import INITIAL_RESUME_DATA
from cvtex.contexts.templating.resume_data_structure import Resume

FIXTURES_PATH = Path(__file__).parent / "fixtures"

# Every LaTeX special character, wrapped in markers so it can be located in output
HOSTILE_TEXT = "«\\{}$&#^_~%»"
HOSTILE_ESCAPED = (
    r"«\textbackslash{}\{\}\$\&\#\textasciicircum{}\_\textasciitilde{}\%»"
)


@pytest.fixture
def sample_data():
    """Deep copy of the sample résumé mapping, safe to modify."""
    return copy.deepcopy(INITIAL_RESUME_DATA)


@pytest.fixture
def sample_resume(sample_data):
    return Resume.from_dict(sample_data)


@pytest.fixture
def hostile_data():
    """Résumé mapping where every text field carries every LaTeX special character."""
    return {
        "profile": {
            "fullName": HOSTILE_TEXT,
            "email": HOSTILE_TEXT,
            "phone": HOSTILE_TEXT,
            "location": HOSTILE_TEXT,
            "linkedin": HOSTILE_TEXT,
            "github": HOSTILE_TEXT,
            "summary": HOSTILE_TEXT,
        },
        "experience": [
            {
                "id": "1",
                "role": HOSTILE_TEXT,
                "company": HOSTILE_TEXT,
                "location": HOSTILE_TEXT,
                "startDate": HOSTILE_TEXT,
                "endDate": HOSTILE_TEXT,
                "current": False,
                "duties": f"{HOSTILE_TEXT}\n{HOSTILE_TEXT}",
            }
        ],
        "education": [
            {
                "id": "1",
                "degree": HOSTILE_TEXT,
                "institution": HOSTILE_TEXT,
                "location": HOSTILE_TEXT,
                "graduationDate": HOSTILE_TEXT,
            }
        ],
        "projects": [
            {
                "id": "1",
                "name": HOSTILE_TEXT,
                "role": HOSTILE_TEXT,
                "stack": HOSTILE_TEXT,
                "description": f"{HOSTILE_TEXT}\n{HOSTILE_TEXT}",
                "keywords": HOSTILE_TEXT,
                "link": HOSTILE_TEXT,
            }
        ],
        "skills": [HOSTILE_TEXT, HOSTILE_TEXT],
    }


@pytest.fixture
def hostile_text():
    return HOSTILE_TEXT


@pytest.fixture
def hostile_escaped():
    return HOSTILE_ESCAPED
