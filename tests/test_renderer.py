import pytest

from nextstep.cleaner import normalize_profile
from nextstep.renderer import render_document, render_portfolio, render_resume
from nextstep.themes import THEMES


def _make_record(**overrides):
    record = {
        "full_name": "Ada Lovelace",
        "headline": "Analyst",
        "about": "Notes on engines.",
        "email": "ada@example.com",
        "phone": "+44 1",
        "location": "London",
        "website": "https://ada.dev",
        "linkedin": "https://linkedin.com/in/ada",
        "github": "https://github.com/ada",
        "skills": ["Python", "SQL", "Math", "Logic", "Writing", "Looms", "Cards"],
        "experience": [
            {"id": "1", "position": "Engineer", "company": "Acme", "startDate": "2020-01",
             "endDate": "2023-06", "current": True, "description": "Built engines."},
            {"id": "2", "position": "Intern", "company": "Babbage", "startDate": "2018-05",
             "endDate": "2019-09", "description": "Tables."},
            {"id": "3", "position": "Tutor", "company": "Self", "startDate": "2016"},
        ],
        "education": [{"id": "1", "degree": "BSc", "institution": "UCL", "field": "Maths",
                       "startDate": "2014-09", "endDate": "2017-06", "description": "First class."}],
        "projects": [{"id": "1", "name": "Engine", "url": "https://engine.dev",
                      "technologies": "Brass", "description": "Difference engine."}],
    }
    record.update(overrides)
    return record


def test_skills_only_minimal_portfolio():
    doc = render_portfolio({"skills": ["Python", "SQL"]})
    assert doc.section_keys == ["header", "skills"]
    header = doc.section("header")
    assert header.title == "Your Name"
    assert header.subtitle == "Your Headline"
    assert doc.section("skills").tags == ("Python", "SQL")


@pytest.mark.parametrize("theme", list(THEMES))
def test_empty_sections_omitted(theme):
    doc = render_portfolio(_make_record(about="", experience=[], projects=None), theme)
    assert "about" not in doc.section_keys
    assert "experience" not in doc.section_keys
    assert "projects" not in doc.section_keys
    assert "skills" in doc.section_keys


def test_minimal_full_order():
    doc = render_portfolio(_make_record(), "minimal")
    assert doc.section_keys == ["header", "about", "contact", "skills", "experience",
                                "education", "projects", "social"]
    social = doc.section("social")
    assert [link.label for link in social.links] == ["LinkedIn", "GitHub", "Website"]


def test_modern_and_professional_order():
    modern = render_portfolio(_make_record(), "modern")
    assert modern.section_keys == ["header", "about", "skills", "experience", "projects",
                                   "education", "contact"]
    pro = render_portfolio(_make_record(), "professional", year=2025)
    assert pro.section_keys == ["header", "about", "skills", "experience", "education",
                                "projects", "footer"]
    assert pro.section("footer").text == "© 2025 Ada Lovelace. All rights reserved."


def test_social_subset_only():
    doc = render_portfolio(_make_record(linkedin="", website=""), "minimal")
    assert [link.kind for link in doc.section("social").links] == ["github"]


def test_contact_links():
    doc = render_portfolio(_make_record(phone=""), "minimal")
    links = doc.section("contact").links
    assert [link.kind for link in links] == ["email", "location"]
    assert links[0].href == "mailto:ada@example.com"
    assert links[1].href == ""


def test_current_renders_present():
    doc = render_portfolio(_make_record(), "minimal")
    first = doc.section("experience").entries[0]
    assert first.dates == "Jan 2020 — Present"
    assert "Jun 2023" not in first.dates


def test_card_limits():
    doc = render_portfolio(_make_record(), "minimal", "card")
    assert len(doc.section("skills").tags) == 6
    entries = doc.section("experience").entries
    assert len(entries) == 2
    assert entries[0].dates == "Jan 2020"
    assert entries[0].description == ""


def test_modern_card_has_avatar_glyph():
    doc = render_portfolio(_make_record(avatar_url=""), "modern", "card")
    assert doc.section("header").avatar.initial == "A"
    doc = render_portfolio(_make_record(full_name="", avatar_url=""), "modern", "card")
    assert doc.section("header").avatar.initial == "?"


def test_project_link_and_technologies():
    (entry,) = render_portfolio(_make_record(), "modern").section("projects").entries
    assert entry.link.href == "https://engine.dev"
    assert entry.detail == "Brass"
    (entry,) = render_portfolio(_make_record(projects=[{"id": "1", "name": "Loom"}])).section("projects").entries
    assert entry.link is None


def test_absent_profile_is_empty_state():
    doc = render_portfolio(None, "professional")
    assert doc.is_empty_state
    assert doc.message == "Complete your profile to see the full preview"
    assert render_portfolio(None, variant="card").message == "Complete your profile to see the preview"
    assert render_resume(None).message == "Complete your profile to generate a resume"


def test_unknown_theme_and_variant():
    with pytest.raises(ValueError):
        render_portfolio({}, "retro")
    with pytest.raises(ValueError):
        render_portfolio({}, "minimal", "poster")
    with pytest.raises(ValueError):
        render_document("letter", {})


def test_resume_order_and_header():
    doc = render_resume(_make_record())
    assert doc.section_keys == ["header", "summary", "skills", "experience", "projects", "education"]
    assert doc.title == "Ada Lovelace - Resume"
    header = doc.section("header")
    assert header.text == "ada@example.com | +44 1 | London | LinkedIn | GitHub | Portfolio"


def test_resume_keeps_stored_order():
    entries = render_resume(_make_record()).section("experience").entries
    assert [e.title for e in entries] == ["Engineer", "Intern", "Tutor"]
    assert entries[1].dates == "May 2018 — Sep 2019"
    assert entries[2].dates == "2016"


def test_resume_education_details():
    (edu,) = render_resume(_make_record()).section("education").entries
    assert edu.title == "BSc"
    assert edu.subtitle == "UCL"
    assert edu.detail == "Maths"
    assert edu.dates == "Sep 2014 — Jun 2017"
    assert edu.description == "First class."


def test_render_is_idempotent():
    record = _make_record()
    assert render_portfolio(record, "professional", year=2024) == render_portfolio(record, "professional", year=2024)
    assert render_resume(record) == render_resume(normalize_profile(record))


def test_render_does_not_mutate_input():
    record = _make_record()
    snapshot = repr(record)
    render_portfolio(record, "modern")
    render_resume(record)
    assert repr(record) == snapshot


def test_malformed_values_do_not_raise():
    doc = render_resume({"full_name": None, "experience": [{"startDate": 2020, "current": "yes"}]})
    (entry,) = doc.section("experience").entries
    assert entry.dates == "Present"
    assert doc.section("header").title == "Your Name"


@pytest.mark.parametrize("theme", list(THEMES))
def test_empty_education_omitted(theme):
    assert "education" not in render_portfolio(_make_record(education=[]), theme).section_keys
    assert "education" in render_portfolio(_make_record(), theme).section_keys


@pytest.mark.parametrize("theme", list(THEMES))
def test_empty_contact_fields_omitted(theme):
    doc = render_portfolio(_make_record(email="", phone="", location=""), theme)
    assert "contact" not in doc.section_keys
    kinds = {link.kind for link in doc.section("header").links}
    assert not kinds & {"email", "phone", "location"}


@pytest.mark.parametrize("theme", list(THEMES))
def test_empty_social_links_omitted(theme):
    doc = render_portfolio(_make_record(linkedin="", github="", website=""), theme)
    assert "social" not in doc.section_keys
    header = doc.section("header")
    assert header.extra_links == ()
    assert not {link.kind for link in header.links} & {"linkedin", "github", "website"}


def test_professional_header_links_follow_profile():
    header = render_portfolio(_make_record(email="", phone="", location=""), "professional").section("header")
    assert header.links == ()
    assert [link.kind for link in header.extra_links] == ["linkedin", "github", "website"]


def test_document_style_is_read_only():
    doc = render_portfolio({"skills": ["x"]}, "modern")
    with pytest.raises(TypeError):
        doc.style["accent"] = "red"
    with pytest.raises(TypeError):
        render_resume({"skills": ["x"]}).style["text"] = "red"
    assert THEMES["modern"].style["accent"] == "#d946ef"
    assert render_portfolio({"skills": ["x"]}, "modern") == doc


def test_unsafe_link_schemes_dropped():
    doc = render_portfolio(_make_record(linkedin="javascript:alert(1)", github="github.com/ada",
                                        website="data:text/html,hi"), "minimal")
    links = {link.kind: link for link in doc.section("social").links}
    assert links["linkedin"].href == ""
    assert links["linkedin"].label == "LinkedIn"
    assert links["github"].href == "https://github.com/ada"
    assert links["website"].href == ""


def test_unsafe_project_url_has_no_link():
    record = _make_record(projects=[{"id": "1", "name": "Loom", "url": "javascript:void(0)"}])
    (entry,) = render_portfolio(record, "modern").section("projects").entries
    assert entry.link is None
