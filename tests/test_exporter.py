from bs4 import BeautifulSoup

from nextstep.exporter import document_to_html, print_job
from nextstep.renderer import render_portfolio, render_resume


def _make_record(**overrides):
    record = {
        "full_name": "Grace Hopper",
        "headline": "Rear Admiral",
        "email": "grace@example.com",
        "github": "https://github.com/grace",
        "skills": ["COBOL", "Compilers"],
        "experience": [{"id": "1", "position": "Programmer", "company": "Harvard",
                        "startDate": "1944-07", "current": True}],
        "projects": [{"id": "1", "name": "A-0", "technologies": "UNIVAC"}],
    }
    record.update(overrides)
    return record


def test_portfolio_html_structure():
    html = document_to_html(render_portfolio(_make_record(), "professional", year=2024))
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.string == "Grace Hopper"
    assert soup.select_one("h1.hero-name").get_text() == "Grace Hopper"
    assert [t.get_text() for t in soup.select(".tag")] == ["COBOL", "Compilers"]
    assert "Harvard" in soup.select_one("section.experience").get_text()
    assert soup.select_one("a.link-email")["href"] == "mailto:grace@example.com"
    assert soup.select_one("footer.copyright") is not None
    assert "professional" in soup.body["class"]


def test_theme_tokens_become_css_variables():
    html = document_to_html(render_portfolio(_make_record(), "modern"))
    assert "--accent: #d946ef;" in html
    assert "--accent-gradient:" in html


def test_user_text_is_escaped():
    html = document_to_html(render_portfolio(_make_record(full_name="<script>x</script>")))
    assert "<script>x</script>" not in html
    assert "&lt;script&gt;" in html


def test_external_stylesheet_when_not_inline():
    html = document_to_html(render_resume(_make_record()), inline=False)
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one('link[rel="stylesheet"]')["href"] == "resume.css"


def test_resume_html_sections():
    soup = BeautifulSoup(document_to_html(render_resume(_make_record())), "html.parser")
    titles = [h.get_text() for h in soup.select("h2.section-title")]
    assert titles == ["Technical Skills", "Professional Experience", "Projects"]
    assert soup.select_one(".project-tech").get_text() == "(UNIVAC)"
    assert "Jul 1944 — Present" in soup.select_one(".section-experience").get_text()


def test_empty_state_html():
    soup = BeautifulSoup(document_to_html(render_portfolio(None)), "html.parser")
    assert soup.select_one(".empty-state").get_text(strip=True) == \
        "Complete your profile to see the full preview"


def test_print_job():
    job = print_job(render_resume(_make_record()))
    assert job.title == "Grace Hopper - Resume"
    assert job.instruction == "print"
    assert "window.print()" in job.html


def test_preview_has_no_print_script():
    assert "window.print" not in document_to_html(render_resume(_make_record()))


def test_javascript_urls_never_reach_href():
    record = _make_record(linkedin="javascript:alert(1)",
                          projects=[{"id": "1", "name": "A-0", "url": "JavaScript:alert(2)"}])
    soup = BeautifulSoup(document_to_html(render_portfolio(record, "modern")), "html.parser")
    assert all(not a["href"].lower().startswith("javascript:") for a in soup.select("a[href]"))
    assert soup.select_one("span.link-linkedin").get_text() == "LinkedIn"
