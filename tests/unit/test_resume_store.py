"""Unit tests for the résumé record store."""

import pytest

from cvtex.contexts.editing.exceptions import EntryNotFoundError
from cvtex.contexts.editing.resume_store import (
    ResumeStore,
    merge_fields,
    new_entry_id,
    parse_skills,
)
from cvtex.contexts.templating.exceptions import InvalidResumeStructureError
from cvtex.contexts.templating.resume_data_structure import Experience, Profile, Project, Resume


@pytest.fixture
def store(sample_resume):
    return ResumeStore(initial=sample_resume)


@pytest.mark.unit
def test_default_store_uses_sample_record():
    assert ResumeStore().resume.profile.full_name == "Juan J. Desarrollador"


@pytest.mark.unit
def test_subscribers_receive_new_value(store):
    received = []
    store.subscribe(received.append)

    new = store.update_profile(full_name="Ana García")

    assert received == [new]
    assert store.resume is new
    assert new.profile.full_name == "Ana García"


@pytest.mark.unit
def test_update_does_not_mutate_previous_value(store):
    before = store.resume
    store.update_profile(email="ana@ejemplo.com")

    assert before.profile.email == "hola@ejemplo.com"
    assert store.resume.profile.email == "ana@ejemplo.com"


@pytest.mark.unit
def test_unsubscribe(store):
    received = []
    unsubscribe = store.subscribe(received.append)
    unsubscribe()

    store.update_skills(["Python"])
    assert received == []
    # Safe to call twice
    unsubscribe()


@pytest.mark.unit
def test_failing_subscriber_does_not_block_others(store):
    received = []

    def broken(resume):
        raise RuntimeError("disk full")

    store.subscribe(broken)
    store.subscribe(received.append)

    with pytest.raises(RuntimeError, match="disk full"):
        store.update_skills(["Python"])

    assert len(received) == 1
    assert store.resume.skills == ("Python",)


@pytest.mark.unit
def test_update_profile_rejects_unknown_field(store):
    with pytest.raises(InvalidResumeStructureError, match="nickname"):
        store.update_profile(nickname="JJ")


@pytest.mark.unit
def test_update_profile_rejects_wrong_type(store):
    with pytest.raises(InvalidResumeStructureError):
        store.update_profile(email=None)


@pytest.mark.unit
def test_add_experience_placeholder(store):
    entry = store.add_experience()

    assert entry.role == "Nuevo Rol"
    assert entry.company == "Empresa"
    assert entry.current is False
    assert store.resume.experience[-1] == entry
    assert len(store.resume.experience) == 2


@pytest.mark.unit
def test_add_explicit_experience_keeps_insertion_order(store):
    entry = Experience(id="x", role="Becario", company="ACME")
    store.add_experience(entry)
    assert [e.id for e in store.resume.experience] == ["1", "x"]


@pytest.mark.unit
def test_add_duplicate_id_rejected(store):
    with pytest.raises(InvalidResumeStructureError, match="Duplicate"):
        store.add_experience(Experience(id="1"))


@pytest.mark.unit
def test_update_experience_by_id(store):
    store.update_experience("1", current=False, end_date="2024-05", duties="Uno\\nDos")
    entry = store.resume.experience[0]

    assert entry.current is False
    assert entry.end_date == "2024-05"
    # Newlines normalized through the same path as loading
    assert entry.duties == "Uno\nDos"
    # Untouched fields kept
    assert entry.company == "Tech Solutions Inc."


@pytest.mark.unit
def test_update_unknown_id(store):
    with pytest.raises(EntryNotFoundError):
        store.update_experience("missing", role="X")


@pytest.mark.unit
def test_remove_experience(store):
    store.remove_experience("1")
    assert store.resume.experience == ()


@pytest.mark.unit
def test_remove_unknown_id(store):
    with pytest.raises(EntryNotFoundError):
        store.remove_education("missing")


@pytest.mark.unit
def test_education_crud(store):
    entry = store.add_education()
    assert entry.degree == "Título"

    store.update_education(entry.id, degree="Máster en IA")
    assert store.resume.education[-1].degree == "Máster en IA"

    store.remove_education(entry.id)
    assert [e.id for e in store.resume.education] == ["1"]


@pytest.mark.unit
def test_project_crud(store):
    entry = store.add_project(Project(id="p3", name="CLI"))
    assert store.resume.projects[-1] is entry

    store.update_project("p3", link="github.com/x/cli")
    assert store.resume.projects[-1].link == "github.com/x/cli"

    store.remove_project("p3")
    assert len(store.resume.projects) == 2


@pytest.mark.unit
def test_add_project_to_record_without_projects(sample_data):
    del sample_data["projects"]
    store = ResumeStore(initial=Resume.from_dict(sample_data))

    store.add_project()
    assert len(store.resume.projects) == 1


@pytest.mark.unit
def test_load_state_and_reset(store):
    received = []
    store.subscribe(received.append)

    store.load_state(Resume(profile=Profile(full_name="Vacío")))
    assert store.resume.experience == ()

    store.reset()
    assert store.resume.profile.full_name == "Juan J. Desarrollador"
    assert len(received) == 2


@pytest.mark.unit
def test_update_skills_rejects_non_strings(store):
    with pytest.raises(InvalidResumeStructureError):
        store.update_skills(["Python", 3])


@pytest.mark.unit
def test_parse_skills():
    assert parse_skills("Angular, TypeScript,, RxJS ") == ("Angular", "TypeScript", "RxJS")
    assert parse_skills("") == ()
    assert parse_skills(None) == ()


@pytest.mark.unit
def test_new_entry_id_unique():
    assert new_entry_id() != new_entry_id()


@pytest.mark.unit
def test_merge_fields_returns_new_record():
    profile = Profile(full_name="A")
    merged = merge_fields(profile, {"full_name": "B"})
    assert merged.full_name == "B"
    assert profile.full_name == "A"
