import pytest

from nextstep import editor
from nextstep.models import Profile


def test_add_skill_trims_and_dedupes():
    profile = editor.add_skill(Profile(), "  Python ")
    profile = editor.add_skill(profile, "Python")
    profile = editor.add_skill(profile, "   ")
    assert profile.skills == ("Python",)


def test_remove_skill():
    profile = Profile(skills=("Python", "SQL"))
    assert editor.remove_skill(profile, "Python").skills == ("SQL",)


def test_edits_return_new_profile():
    profile = Profile()
    updated = editor.set_field(profile, "full_name", "Ada")
    assert profile.full_name == ""
    assert updated.full_name == "Ada"


def test_set_unknown_field():
    with pytest.raises(KeyError):
        editor.set_field(Profile(), "skills", "x")


def test_new_entry_id_bumps_on_collision():
    profile = editor.add_experience(Profile(), entry_id="1000")
    assert editor.new_entry_id(profile, "experience", now=1000) == "1001"
    assert editor.new_entry_id(profile, "education", now=1000) == "1000"


def test_add_entries():
    profile = editor.add_project(editor.add_education(editor.add_experience(Profile())))
    assert len(profile.experience) == len(profile.education) == len(profile.projects) == 1
    assert profile.experience[0].id


def test_duplicate_entry_id():
    profile = editor.add_experience(Profile(), entry_id="x")
    with pytest.raises(editor.DuplicateEntryError):
        editor.add_experience(profile, entry_id="x")


def test_update_entry_with_stored_and_attr_names():
    profile = editor.add_experience(Profile(), entry_id="x")
    profile = editor.update_entry(profile, "experience", "x", "startDate", "2020-01")
    profile = editor.update_entry(profile, "experience", "x", "company", "Acme")
    assert profile.experience[0].start_date == "2020-01"
    assert profile.experience[0].company == "Acme"


def test_marking_current_keeps_end_date():
    profile = editor.add_experience(Profile(), entry_id="x")
    profile = editor.update_entry(profile, "experience", "x", "endDate", "2023-06")
    profile = editor.update_entry(profile, "experience", "x", "current", 1)
    assert profile.experience[0].current is True
    assert profile.experience[0].end_date == "2023-06"


def test_update_unknown_field():
    profile = editor.add_project(Profile(), entry_id="p")
    with pytest.raises(KeyError):
        editor.update_entry(profile, "projects", "p", "startDate", "2020")


def test_remove_entry():
    profile = editor.add_education(editor.add_education(Profile(), entry_id="a"), entry_id="b")
    assert [e.id for e in editor.remove_entry(profile, "education", "a").education] == ["b"]
