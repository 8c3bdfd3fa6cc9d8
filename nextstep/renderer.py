"""
Profile → document tree.

• One engine walks a layout (tuple of SectionSpec) and asks a builder for each
  section; a builder returns None when the backing data is empty, so empty
  sections are dropped instead of rendered as placeholders.
• Pure: no I/O, no clock, no random ids; the copyright year is passed in.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional
from urllib.parse import urlparse

from nextstep.cleaner import normalize_profile
from nextstep.document import Avatar, Document, Entry, Link, Section
from nextstep.formatting import (
    avatar_initial,
    date_range,
    display_headline,
    display_name,
    format_date,
)
from nextstep.models import Profile
from nextstep.themes import RESUME_LAYOUT, RESUME_STYLE, SectionSpec, get_theme

EMPTY_PREVIEW = "Complete your profile to see the preview"
EMPTY_FULL_PREVIEW = "Complete your profile to see the full preview"
EMPTY_RESUME = "Complete your profile to generate a resume"

_LINK_LABELS = {"linkedin": "LinkedIn", "github": "GitHub", "website": "Website"}
_RESUME_LABELS = {"linkedin": "LinkedIn", "github": "GitHub", "website": "Portfolio"}

Builder = Callable[[Profile, SectionSpec, Optional[int]], Optional[Section]]


# ───────────────────────────────────────── links ──
_SAFE_SCHEMES = ("http", "https", "mailto")


def safe_href(url: str) -> str:
    """``url`` when it is an http(s)/mailto link, ``https://`` + a bare host, else ``""``."""
    url = url.strip()
    scheme = urlparse(url).scheme.lower()
    if scheme in _SAFE_SCHEMES:
        return url
    if not scheme and url and not url.startswith(("/", "\\")):
        return f"https://{url}"
    return ""


def contact_link(profile: Profile, kind: str, labels: Dict[str, str] = _LINK_LABELS) -> Link | None:
    value = getattr(profile, kind).strip()
    if not value:
        return None
    if kind == "email":
        return Link("email", value, f"mailto:{value}")
    if kind in ("phone", "location"):
        return Link(kind, value)
    return Link(kind, labels[kind], safe_href(value))


def _links(profile: Profile, kinds, labels: Dict[str, str] = _LINK_LABELS) -> tuple[Link, ...]:
    found = (contact_link(profile, kind, labels) for kind in kinds)
    return tuple(link for link in found if link is not None)


# ───────────────────────────────────────── builders ──
def _header(profile: Profile, spec: SectionSpec, year=None) -> Section:
    avatar = None
    if spec.avatar:
        avatar = Avatar(
            url=profile.avatar_url.strip(),
            initial=avatar_initial(profile.full_name),
            shape=spec.avatar,
        )
    return Section(
        key=spec.key,
        title=display_name(profile.full_name),
        subtitle=display_headline(profile.headline),
        avatar=avatar,
        links=_links(profile, spec.link_kinds),
        extra_links=_links(profile, spec.extra_link_kinds),
    )


def _resume_header(profile: Profile, spec: SectionSpec, year=None) -> Section:
    links = _links(profile, spec.link_kinds, _RESUME_LABELS)
    return Section(
        key=spec.key,
        title=display_name(profile.full_name),
        subtitle=display_headline(profile.headline),
        text=" | ".join(link.label for link in links),
        links=links,
    )


def _about(profile: Profile, spec: SectionSpec, year=None) -> Section | None:
    if not profile.about.strip():
        return None
    return Section(key=spec.key, title=spec.title, text=profile.about)


def _link_list(profile: Profile, spec: SectionSpec, year=None) -> Section | None:
    links = _links(profile, spec.link_kinds)
    if not links:
        return None
    return Section(key=spec.key, title=spec.title, links=links)


def _skills(profile: Profile, spec: SectionSpec, year=None) -> Section | None:
    if not profile.skills:
        return None
    return Section(key=spec.key, title=spec.title, tags=profile.skills[:spec.limit])


def _dates(spec: SectionSpec, start: str, end: str, current: bool = False) -> str:
    if spec.dates == "start":
        return format_date(start)
    if spec.dates == "none":
        return ""
    return date_range(start, end, current)


def _experience(profile: Profile, spec: SectionSpec, year=None) -> Section | None:
    if not profile.experience:
        return None
    entries = tuple(
        Entry(
            title=exp.position,
            subtitle=exp.company,
            dates=_dates(spec, exp.start_date, exp.end_date, exp.current),
            description=exp.description if spec.descriptions else "",
        )
        for exp in profile.experience[:spec.limit]
    )
    return Section(key=spec.key, title=spec.title, entries=entries)


def _education(profile: Profile, spec: SectionSpec, year=None) -> Section | None:
    if not profile.education:
        return None
    entries = tuple(
        Entry(
            title=edu.degree,
            subtitle=edu.institution,
            dates=_dates(spec, edu.start_date, edu.end_date),
            detail=edu.field,
            description=edu.description if spec.descriptions else "",
        )
        for edu in profile.education[:spec.limit]
    )
    return Section(key=spec.key, title=spec.title, entries=entries)


def _project_link(project) -> Link | None:
    href = safe_href(project.url)
    return Link("project", project.name or project.url, href) if href else None


def _projects(profile: Profile, spec: SectionSpec, year=None) -> Section | None:
    if not profile.projects:
        return None
    entries = tuple(
        Entry(
            title=project.name,
            detail=project.technologies,
            description=project.description if spec.descriptions else "",
            link=_project_link(project),
        )
        for project in profile.projects[:spec.limit]
    )
    return Section(key=spec.key, title=spec.title, entries=entries)


def _copyright(profile: Profile, spec: SectionSpec, year=None) -> Section:
    owner = profile.full_name.strip() or "Portfolio"
    stamp = f"© {year} {owner}" if year else f"© {owner}"
    return Section(key=spec.key, text=f"{stamp}. All rights reserved.")


BUILDERS: Dict[str, Builder] = {
    "header": _header,
    "resume_header": _resume_header,
    "about": _about,
    "links": _link_list,
    "skills": _skills,
    "experience": _experience,
    "education": _education,
    "projects": _projects,
    "copyright": _copyright,
}


def _build(profile: Profile, layout, year: int | None) -> tuple[Section, ...]:
    sections = (BUILDERS[spec.builder](profile, spec, year) for spec in layout)
    return tuple(s for s in sections if s is not None)


def _coerce(profile: Any) -> Profile | None:
    return normalize_profile(profile)


# ───────────────────────────────────────── public ──
def render_portfolio(profile, theme: str = "minimal", variant: str = "full",
                     year: int | None = None) -> Document:
    """Render a portfolio page (``full``) or its condensed preview (``card``)."""
    spec = get_theme(theme)
    layout = spec.layout(variant)
    profile = _coerce(profile)
    if profile is None:
        return Document(
            kind="empty",
            title="Portfolio",
            theme=spec.name,
            variant=variant,
            style=spec.style,
            message=EMPTY_FULL_PREVIEW if variant == "full" else EMPTY_PREVIEW,
        )
    return Document(
        kind="portfolio",
        title=profile.full_name.strip() or "Portfolio",
        theme=spec.name,
        variant=variant,
        sections=_build(profile, layout, year),
        style=spec.style,
    )


def render_resume(profile) -> Document:
    """Render the single print-oriented resume layout."""
    profile = _coerce(profile)
    if profile is None:
        return Document(kind="empty", title="Resume", variant="print",
                        style=RESUME_STYLE, message=EMPTY_RESUME)
    return Document(
        kind="resume",
        title=f"{profile.full_name.strip() or 'Resume'} - Resume",
        variant="print",
        sections=_build(profile, RESUME_LAYOUT, None),
        style=RESUME_STYLE,
    )


def render_document(kind: str, profile, theme: str = "minimal",
                    variant: str = "full", year: int | None = None) -> Document:
    if kind == "portfolio":
        return render_portfolio(profile, theme, variant, year)
    if kind == "resume":
        return render_resume(profile)
    raise ValueError(f"Unknown document kind: {kind!r}")
