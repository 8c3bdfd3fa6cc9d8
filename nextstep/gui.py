import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="NextStep")

import atexit
import logging
from datetime import date
from urllib.parse import unquote, urlparse

import streamlit.components.v1 as components

from nextstep import config, editor
from nextstep.actions import export_resume, generate_portfolio
from nextstep.career_chat import SUGGESTED_PROMPTS, ChatSession
from nextstep.completion import (
    DASHBOARD_CRITERIA,
    PORTFOLIO_CRITERIA,
    CompletionReport,
    IncompleteProfileError,
    evaluate_completion,
)
from nextstep.exporter import document_to_html
from nextstep.llm_client import ChatError
from nextstep.models import Profile
from nextstep.renderer import render_portfolio, render_resume
from nextstep.skill_hub import SKILL_CATEGORIES, analyze_skill, fetch_trending_skills
from nextstep.store import AvatarRejected, LocalProfileStore, load_profile
from nextstep.temp_server import cleanup_preview_server, publish_portfolio
from nextstep.themes import THEMES
from nextstep.utils import now_ms, portfolio_slug

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# Register cleanup function to run when Streamlit exits
atexit.register(cleanup_preview_server)

USER_ID = config.LOCAL_USER_ID


@st.cache_resource
def get_store() -> LocalProfileStore:
    return LocalProfileStore()


# Initialize session state variables
if "profile" not in st.session_state:
    st.session_state.profile = load_profile(get_store(), USER_ID)
if "chat" not in st.session_state:
    st.session_state.chat = ChatSession()
if "selected_theme" not in st.session_state:
    st.session_state.selected_theme = "minimal"
if "portfolio_preview" not in st.session_state:
    st.session_state.portfolio_preview = False
if "resume_preview" not in st.session_state:
    st.session_state.resume_preview = False
if "portfolio_url" not in st.session_state:
    st.session_state.portfolio_url = None
if "skill_analysis" not in st.session_state:
    st.session_state.skill_analysis = None


def current_profile() -> Profile | None:
    return st.session_state.profile


def show_html(html: str, height: int = 700) -> None:
    components.html(html, height=height, scrolling=True)


def avatar_source(url: str) -> str:
    """st.image takes local paths, not file:// URIs."""
    parsed = urlparse(url)
    return unquote(parsed.path) if parsed.scheme == "file" else url


@st.cache_data(ttl=3600, show_spinner=False)
def trending_skills(year: int):
    return fetch_trending_skills(year)


def completion_panel(report: CompletionReport) -> None:
    st.markdown("##### PROFILE COMPLETION")
    st.metric("Complete", f"{report.percent}%")
    st.progress(report.percent)
    if not report.meets():
        st.warning(f"Min {config.COMPLETION_THRESHOLD}% required")
    for criterion, done in report.checklist:
        st.markdown(f"{'✅' if done else '⬜'} {criterion.label}")


# ───────────────────────────────────────── sections ──
def overview_page() -> None:
    st.title("Welcome to NextStep")
    profile = current_profile()
    report = evaluate_completion(profile, DASHBOARD_CRITERIA)
    col1, col2, col3 = st.columns(3)
    col1.metric("Conversations", len(st.session_state.chat.messages) // 2)
    col2.metric("Skills", len(profile.skills) if profile else 0)
    col3.metric("Profile complete", f"{report.percent}%")
    if report.missing:
        st.info("To finish your profile add: " + ", ".join(report.missing))


def career_chat_page() -> None:
    st.title("💬 AI Career Chatbot")
    session: ChatSession = st.session_state.chat

    if not session.messages:
        st.markdown("Try one of these:")
        for i, prompt in enumerate(SUGGESTED_PROMPTS):
            if st.button(prompt, key=f"suggest-{i}"):
                session.ask(prompt)
                st.rerun()

    for msg in session.messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])
    if session.error:
        st.error(session.error)

    if text := st.chat_input("Ask about careers, skills, interviews..."):
        with st.spinner("Thinking..."):
            session.ask(text)
        st.rerun()
    if session.messages and st.button("🗑️ Clear chat"):
        session.clear()
        st.rerun()


def skill_hub_page() -> None:
    st.title("📈 Skill Intelligence")
    year = date.today().year
    with st.spinner("Loading trending skills..."):
        result = trending_skills(year)
    if result.used_fallback:
        st.caption("Live trends unavailable, showing a recent snapshot.")

    cols = st.columns(2)
    for i, skill in enumerate(result.skills):
        with cols[i % 2]:
            st.markdown(f"**{skill.name}** · {SKILL_CATEGORIES[skill.category]} · {skill.growth}")
            st.progress(skill.demand)
            if st.button("Analyze", key=f"analyze-{i}"):
                st.session_state.skill_analysis = (skill.name, None)

    query = st.text_input("Search any skill")
    if st.button("Analyze skill") and query.strip():
        st.session_state.skill_analysis = (query.strip(), None)

    if st.session_state.skill_analysis:
        name, text = st.session_state.skill_analysis
        if text is None:
            with st.spinner(f"Analyzing {name}..."):
                try:
                    text = analyze_skill(name)
                except ChatError:
                    text = "Unable to analyze skill. Please try again."
            st.session_state.skill_analysis = (name, text)
        st.subheader(name)
        st.markdown(text)


def portfolio_page() -> None:
    st.title("🗂️ Portfolio Generator")
    profile = current_profile()
    theme = st.session_state.selected_theme
    report = evaluate_completion(profile, PORTFOLIO_CRITERIA)

    label = "Edit Mode" if st.session_state.portfolio_preview else "Preview"
    if st.button(f"👁️ {label}", key="portfolio-toggle"):
        st.session_state.portfolio_preview = not st.session_state.portfolio_preview
        st.rerun()

    if st.session_state.portfolio_preview:
        show_html(document_to_html(render_portfolio(profile, theme, "full", date.today().year)), 900)
        return

    left, right = st.columns([1, 2])
    with left:
        completion_panel(report)
        st.markdown("##### PORTFOLIO THEME")
        names = list(THEMES)
        st.session_state.selected_theme = st.radio(
            "Theme",
            names,
            index=names.index(theme),
            format_func=lambda n: f"{THEMES[n].label}: {THEMES[n].description}",
            label_visibility="collapsed",
        )
        if st.button("✨ Generate Portfolio", disabled=not report.meets(), use_container_width=True):
            try:
                generated = generate_portfolio(profile, st.session_state.selected_theme, date.today().year)
            except IncompleteProfileError as exc:
                st.error(str(exc))
            else:
                slug = portfolio_slug(USER_ID, now_ms())
                st.session_state.portfolio_url = publish_portfolio(generated.html, slug)
                st.success("Portfolio generated successfully!")
        if st.session_state.portfolio_url:
            st.text_input("Portfolio Ready!", st.session_state.portfolio_url, disabled=True)
    with right:
        st.caption(f"Portfolio Preview — {THEMES[st.session_state.selected_theme].label}")
        show_html(document_to_html(render_portfolio(profile, st.session_state.selected_theme, "card")), 500)


def resume_page() -> None:
    st.title("📄 Resume Builder")
    profile = current_profile()
    report = evaluate_completion(profile, PORTFOLIO_CRITERIA)

    col_toggle, col_download = st.columns(2)
    with col_toggle:
        label = "Edit Mode" if st.session_state.resume_preview else "Preview"
        if st.button(f"👁️ {label}", key="resume-toggle"):
            st.session_state.resume_preview = not st.session_state.resume_preview
            st.rerun()
    with col_download:
        if report.meets():
            try:
                job = export_resume(profile)
            except IncompleteProfileError as exc:
                st.error(str(exc))
            else:
                st.download_button("⬇️ Download PDF", job.html, file_name=f"{job.title}.html",
                                   mime="text/html",
                                   help="Opens your browser's print dialog; choose 'Save as PDF'.")
        else:
            st.button("⬇️ Download PDF", disabled=True)

    preview = document_to_html(render_resume(profile))
    if st.session_state.resume_preview:
        show_html(preview, 1000)
        return
    left, right = st.columns([1, 2])
    with left:
        completion_panel(report)
        st.markdown("##### ATS TIPS")
        st.markdown(
            "- Use standard section headings (Experience, Education, Skills)\n"
            "- Include keywords from the job description in your skills\n"
            "- Use simple formatting, ATS can't parse complex layouts\n"
            "- Quantify achievements with numbers when possible"
        )
    with right:
        show_html(preview, 800)


# ───────────────────────────────────────── profile editor ──
_PERSONAL = [
    ("full_name", "Full name"), ("headline", "Headline"), ("email", "Email"),
    ("phone", "Phone"), ("location", "Location"), ("website", "Website"),
    ("linkedin", "LinkedIn"), ("github", "GitHub"),
]

_ENTRY_FORMS = {
    "experience": [("position", "Position"), ("company", "Company"),
                   ("startDate", "Start (YYYY-MM)"), ("endDate", "End (YYYY-MM)"),
                   ("current", "I currently work here"), ("description", "Description")],
    "education": [("degree", "Degree"), ("institution", "Institution"), ("field", "Field of study"),
                  ("startDate", "Start (YYYY-MM)"), ("endDate", "End (YYYY-MM)"),
                  ("description", "Description")],
    "projects": [("name", "Name"), ("url", "URL"), ("technologies", "Technologies"),
                 ("description", "Description")],
}


def _bound(widget, label: str, key: str, current, **kwargs):
    """Widget whose state is seeded once from the profile and then owned by Streamlit."""
    if key not in st.session_state:
        st.session_state[key] = current
    return widget(label, key=key, **kwargs)


def _commit(profile: Profile) -> None:
    st.session_state.profile = profile
    st.rerun()


def _entry_form(profile: Profile, kind: str) -> Profile:
    for entry in profile.entries(kind):
        title = getattr(entry, "position", None) or getattr(entry, "degree", None) or getattr(entry, "name", None)
        with st.expander(title or "New entry", expanded=True):
            for key, label in _ENTRY_FORMS[kind]:
                attr = {"startDate": "start_date", "endDate": "end_date"}.get(key, key)
                current = getattr(entry, attr)
                widget_key = f"{kind}-{entry.id}-{key}"
                if key == "current":
                    value = _bound(st.checkbox, label, widget_key, current)
                elif key == "description":
                    value = _bound(st.text_area, label, widget_key, current)
                else:
                    value = _bound(st.text_input, label, widget_key, current,
                                   disabled=(key == "endDate" and getattr(entry, "current", False)))
                if value != current:
                    profile = editor.update_entry(profile, kind, entry.id, key, value)
            if st.button("🗑️ Remove", key=f"{kind}-{entry.id}-remove"):
                _commit(editor.remove_entry(profile, kind, entry.id))
    if st.button(f"➕ Add {kind.rstrip('s')}", key=f"add-{kind}"):
        _commit(editor.add_entry(profile, kind))
    return profile


def profile_page() -> None:
    st.title("👤 Profile")
    store = get_store()
    profile = current_profile() or Profile(user_id=USER_ID)

    tabs = st.tabs(["Personal", "Experience", "Education", "Skills", "Projects"])
    with tabs[0]:
        if profile.avatar_url:
            st.image(avatar_source(profile.avatar_url), width=96)
        upload = st.file_uploader("Profile photo", type=["png", "jpg", "jpeg", "gif", "webp"])
        if upload is not None and st.button("Upload photo"):
            try:
                url = store.save_avatar(USER_ID, upload.name, upload.getvalue(), upload.type)
            except AvatarRejected as exc:
                st.error(str(exc))
            else:
                st.toast("Photo uploaded successfully!")
                _commit(editor.set_field(profile, "avatar_url", url))
        for name, label in _PERSONAL:
            value = _bound(st.text_input, label, f"personal-{name}", getattr(profile, name))
            if value != getattr(profile, name):
                profile = editor.set_field(profile, name, value)
        about = _bound(st.text_area, "About", "personal-about", profile.about)
        if about != profile.about:
            profile = editor.set_field(profile, "about", about)
    with tabs[1]:
        profile = _entry_form(profile, "experience")
    with tabs[2]:
        profile = _entry_form(profile, "education")
    with tabs[3]:
        new_skill = st.text_input("Add a skill", key="new-skill")
        if st.button("Add skill"):
            _commit(editor.add_skill(profile, new_skill))
        for i, skill in enumerate(profile.skills):
            if st.button(f"✕ {skill}", key=f"skill-{i}"):
                _commit(editor.remove_skill(profile, skill))
    with tabs[4]:
        profile = _entry_form(profile, "projects")

    # a never-saved profile stays None until the user types something
    if current_profile() is not None or not profile.is_empty:
        st.session_state.profile = profile
    if st.button("💾 Save", type="primary"):
        store.upsert(USER_ID, profile)
        st.session_state.profile = profile
        st.success("Profile saved successfully!")


PAGES = {
    "Overview": overview_page,
    "AI Career Chatbot": career_chat_page,
    "Skill Intelligence": skill_hub_page,
    "Portfolio Generator": portfolio_page,
    "Resume Builder": resume_page,
    "Profile": profile_page,
}

st.sidebar.title("NextStep")
page = st.sidebar.radio("Navigate", list(PAGES), label_visibility="collapsed")
PAGES[page]()
