"""
Document tree produced by the renderers.

Everything is a frozen dataclass over tuples, so two renders of the same
profile compare equal and a tree can be handed to several consumers at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class Link:
    kind: str          # email, phone, location, linkedin, github, website, project
    label: str
    href: str = ""     # empty for plain text items (phone, location)


@dataclass(frozen=True)
class Avatar:
    url: str = ""
    initial: str = "?"
    shape: str = "rounded"


@dataclass(frozen=True)
class Entry:
    title: str
    subtitle: str = ""
    dates: str = ""
    detail: str = ""
    description: str = ""
    link: Link | None = None


@dataclass(frozen=True)
class Section:
    key: str
    title: str = ""
    text: str = ""
    subtitle: str = ""
    avatar: Avatar | None = None
    tags: tuple[str, ...] = ()
    entries: tuple[Entry, ...] = ()
    links: tuple[Link, ...] = ()
    extra_links: tuple[Link, ...] = ()


@dataclass(frozen=True)
class Document:
    kind: str                      # "portfolio", "resume" or "empty"
    title: str
    theme: str = ""
    variant: str = "full"
    sections: tuple[Section, ...] = ()
    style: Mapping[str, str] = field(default_factory=dict, hash=False)
    message: str = ""

    @property
    def section_keys(self) -> list[str]:
        return [s.key for s in self.sections]

    def section(self, key: str) -> Section | None:
        return next((s for s in self.sections if s.key == key), None)

    @property
    def is_empty_state(self) -> bool:
        return self.kind == "empty"
