"""
Template descriptions for the portfolio themes and the resume layout.

A layout is an ordered tuple of SectionSpec; the renderer walks it and asks
the matching builder for each section. Themes differ only in their specs and
their style tokens, never in the presence rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

PREVIEW_SKILLS = 6
PREVIEW_ENTRIES = 2

SOCIAL = ("linkedin", "github", "website")


@dataclass(frozen=True)
class SectionSpec:
    key: str
    builder: str
    title: str = ""
    limit: int | None = None
    link_kinds: tuple[str, ...] = ()
    extra_link_kinds: tuple[str, ...] = ()
    avatar: str | None = None        # avatar shape, header only
    dates: str = "range"             # "range", "start" or "none"
    descriptions: bool = True


@dataclass(frozen=True)
class ThemeSpec:
    name: str
    label: str
    description: str
    full: tuple[SectionSpec, ...]
    card: tuple[SectionSpec, ...]
    style: Mapping[str, str] = field(default_factory=dict, hash=False)

    def layout(self, variant: str) -> tuple[SectionSpec, ...]:
        if variant == "full":
            return self.full
        if variant == "card":
            return self.card
        raise ValueError(f"Unknown variant: {variant!r} (expected 'full' or 'card')")


MINIMAL = ThemeSpec(
    name="minimal",
    label="Minimal",
    description="Clean typography, no photo, elegant whitespace",
    full=(
        SectionSpec("header", "header"),
        SectionSpec("about", "about"),
        SectionSpec("contact", "links", link_kinds=("email", "location", "phone")),
        SectionSpec("skills", "skills", "Skills"),
        SectionSpec("experience", "experience", "Experience"),
        SectionSpec("education", "education", "Education", descriptions=False),
        SectionSpec("projects", "projects", "Projects"),
        SectionSpec("social", "links", link_kinds=SOCIAL),
    ),
    card=(
        SectionSpec("header", "header"),
        SectionSpec("about", "about"),
        SectionSpec("skills", "skills", limit=PREVIEW_SKILLS),
        SectionSpec("experience", "experience", limit=PREVIEW_ENTRIES,
                    dates="start", descriptions=False),
    ),
    style=MappingProxyType({
        "background": "#020617",
        "surface": "transparent",
        "text": "#e2e8f0",
        "muted": "#64748b",
        "accent": "#ffffff",
        "font": "'Inter', -apple-system, sans-serif",
        "heading_weight": "200",
        "radius": "2px",
        "tag_border": "#1e293b",
    }),
)

MODERN = ThemeSpec(
    name="modern",
    label="Modern",
    description="Bold gradients, vibrant colors, creative layout",
    full=(
        SectionSpec("header", "header", avatar="rounded",
                    link_kinds=SOCIAL + ("email",)),
        SectionSpec("about", "about"),
        SectionSpec("skills", "skills", "Tech Stack"),
        SectionSpec("experience", "experience", "Experience"),
        SectionSpec("projects", "projects", "Projects"),
        SectionSpec("education", "education", "Education", descriptions=False),
        SectionSpec("contact", "links", "Let's connect",
                    link_kinds=("email", "phone", "location")),
    ),
    card=(
        SectionSpec("header", "header", avatar="rounded"),
        SectionSpec("skills", "skills", limit=PREVIEW_SKILLS),
        SectionSpec("experience", "experience", limit=PREVIEW_ENTRIES,
                    dates="none", descriptions=False),
    ),
    style=MappingProxyType({
        "background": "#0a0a14",
        "surface": "rgba(255, 255, 255, 0.03)",
        "text": "#f8fafc",
        "muted": "#94a3b8",
        "accent": "#d946ef",
        "accent_gradient": "linear-gradient(90deg, #a78bfa, #e879f9, #f472b6)",
        "font": "'Inter', -apple-system, sans-serif",
        "heading_weight": "700",
        "radius": "16px",
        "tag_border": "rgba(139, 92, 246, 0.2)",
    }),
)

PROFESSIONAL = ThemeSpec(
    name="professional",
    label="Professional",
    description="Classic structure, polished and corporate",
    full=(
        SectionSpec("header", "header", avatar="circle",
                    link_kinds=("email", "phone", "location"),
                    extra_link_kinds=SOCIAL),
        SectionSpec("about", "about", "About"),
        SectionSpec("skills", "skills", "Core Competencies"),
        SectionSpec("experience", "experience", "Professional Experience"),
        SectionSpec("education", "education", "Education"),
        SectionSpec("projects", "projects", "Key Projects"),
        SectionSpec("footer", "copyright"),
    ),
    card=(
        SectionSpec("header", "header", avatar="circle"),
        SectionSpec("skills", "skills", limit=PREVIEW_SKILLS),
        SectionSpec("experience", "experience", limit=PREVIEW_ENTRIES,
                    dates="none", descriptions=False),
    ),
    style=MappingProxyType({
        "background": "#0f172a",
        "surface": "#1e293b",
        "text": "#f1f5f9",
        "muted": "#64748b",
        "accent": "#fbbf24",
        "font": "Georgia, 'Times New Roman', serif",
        "heading_weight": "700",
        "radius": "8px",
        "tag_border": "rgba(245, 158, 11, 0.2)",
    }),
)

THEMES: dict[str, ThemeSpec] = {t.name: t for t in (MINIMAL, MODERN, PROFESSIONAL)}

RESUME_LAYOUT: tuple[SectionSpec, ...] = (
    SectionSpec("header", "resume_header",
                link_kinds=("email", "phone", "location") + SOCIAL),
    SectionSpec("summary", "about", "Professional Summary"),
    SectionSpec("skills", "skills", "Technical Skills"),
    SectionSpec("experience", "experience", "Professional Experience"),
    SectionSpec("projects", "projects", "Projects"),
    SectionSpec("education", "education", "Education"),
)

RESUME_STYLE = MappingProxyType({
    "text": "#1a1a2e",
    "heading": "#0f172a",
    "muted": "#64748b",
    "rule": "#cbd5e1",
    "font": "'Inter', -apple-system, BlinkMacSystemFont, sans-serif",
})


def get_theme(name: str) -> ThemeSpec:
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(
            f"Unknown theme: {name!r} (expected one of {', '.join(THEMES)})"
        ) from None
