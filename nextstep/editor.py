"""
Edits a user makes on the profile page, one field or entry at a time.

Every function returns a new Profile and leaves its argument untouched.
"""

from __future__ import annotations

from dataclasses import replace

from nextstep.models import ENTRY_FIELD_NAMES, ENTRY_TYPES, Profile
from nextstep.schema_profile import SCALAR_FIELDS
from nextstep.utils import now_ms


class DuplicateEntryError(ValueError):
    pass


def set_field(profile: Profile, name: str, value: str) -> Profile:
    if name not in SCALAR_FIELDS:
        raise KeyError(f"Unknown profile field: {name}")
    return replace(profile, **{name: value})


def add_skill(profile: Profile, skill: str) -> Profile:
    """Append a trimmed skill; blanks and exact duplicates are ignored."""
    skill = (skill or "").strip()
    if not skill or skill in profile.skills:
        return profile
    return replace(profile, skills=profile.skills + (skill,))


def remove_skill(profile: Profile, skill: str) -> Profile:
    return replace(profile, skills=tuple(s for s in profile.skills if s != skill))


def new_entry_id(profile: Profile, kind: str, now: int | None = None) -> str:
    """Creation-timestamp id, bumped until it is unused in ``kind``."""
    taken = {e.id for e in profile.entries(kind)}
    stamp = now if now is not None else now_ms()
    while str(stamp) in taken:
        stamp += 1
    return str(stamp)


def add_entry(profile: Profile, kind: str, entry_id: str | None = None) -> Profile:
    entries = profile.entries(kind)
    entry_id = entry_id or new_entry_id(profile, kind)
    if any(e.id == entry_id for e in entries):
        raise DuplicateEntryError(f"{kind} already has an entry with id {entry_id!r}")
    return replace(profile, **{kind: entries + (ENTRY_TYPES[kind](id=entry_id),)})


def add_experience(profile: Profile, entry_id: str | None = None) -> Profile:
    return add_entry(profile, "experience", entry_id)


def add_education(profile: Profile, entry_id: str | None = None) -> Profile:
    return add_entry(profile, "education", entry_id)


def add_project(profile: Profile, entry_id: str | None = None) -> Profile:
    return add_entry(profile, "projects", entry_id)


def update_entry(profile: Profile, kind: str, entry_id: str, field: str, value) -> Profile:
    """Set one field on the entry with ``entry_id``; ``field`` uses stored names.

    Marking an entry ``current`` keeps its stored end date; renderers ignore it.
    """
    names = ENTRY_FIELD_NAMES.get(kind, {})
    attr = names.get(field) or (field if field in names.values() else None)
    if attr is None:
        raise KeyError(f"Unknown {kind} field: {field}")
    value = bool(value) if attr == "current" else ("" if value is None else str(value))
    updated = tuple(
        replace(e, **{attr: value}) if e.id == entry_id else e
        for e in profile.entries(kind)
    )
    return replace(profile, **{kind: updated})


def remove_entry(profile: Profile, kind: str, entry_id: str) -> Profile:
    return replace(profile, **{kind: tuple(e for e in profile.entries(kind) if e.id != entry_id)})
