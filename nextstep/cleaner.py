"""
Input-boundary normalisation for profile records.

Records come back from the profile store with fields missing, lists set to
null and the odd non-string value. Everything is coerced here, once, so the
completion evaluator and the renderers can rely on a fully populated Profile.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable

from nextstep.models import (
    ENTRY_FIELD_NAMES,
    ENTRY_TYPES,
    Profile,
)
from nextstep.schema_profile import SCALAR_FIELDS

logger = logging.getLogger(__name__)

# older exports and hand-written JSON use these names
_ALIASES = {
    "experience": {"title": "position", "start": "startDate", "end": "endDate",
                   "start_date": "startDate", "end_date": "endDate"},
    "education": {"school": "institution", "fieldOfStudy": "field",
                  "start": "startDate", "end": "endDate",
                  "start_date": "startDate", "end_date": "endDate"},
    "projects": {"title": "name", "link": "url", "tech": "technologies"},
}


# ───────────────────────────────────────── helpers ──
def as_text(value: Any) -> str:
    """Strings pass through; anything else becomes an empty field."""
    return value if isinstance(value, str) else ""


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return value is True or value == 1


def _as_id(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float, str)):
        return str(value).strip()
    return ""


def clean_skills(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()
    # stored order is display order; duplicates are only blocked at insertion
    return tuple(s for s in (as_text(item) for item in raw) if s.strip())


def clean_entries(kind: str, raw: Any) -> tuple:
    """Coerce one entry list, repairing missing or clashing ids."""
    if not isinstance(raw, (list, tuple)):
        return ()
    cls = ENTRY_TYPES[kind]
    names = ENTRY_FIELD_NAMES[kind]
    aliases = _ALIASES[kind]

    entries = []
    seen: set[str] = set()
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            logger.debug("Dropping non-object %s entry at %d", kind, index)
            continue
        item = {aliases.get(k, k): v for k, v in item.items()}

        entry_id = _as_id(item.get("id"))
        if not entry_id or entry_id in seen:
            entry_id = _free_id(f"{kind}-{index}", seen)
            logger.warning("Re-keyed %s entry %d to %r", kind, index, entry_id)
        seen.add(entry_id)

        kwargs = {"id": entry_id}
        for key, attr in names.items():
            value = item.get(key)
            kwargs[attr] = _as_flag(value) if attr == "current" else as_text(value)
        entries.append(cls(**kwargs))
    return tuple(entries)


def _free_id(base: str, taken: Iterable[str]) -> str:
    taken = set(taken)
    candidate, n = base, 1
    while candidate in taken:
        candidate = f"{base}-{n}"
        n += 1
    return candidate


# ───────────────────────────────────────── cleaner ──
def normalize_profile(record: Dict[str, Any] | Profile | None, user_id: str = "") -> Profile | None:
    """Turn a stored record into a Profile; ``None`` stays ``None`` (not found)."""
    if record is None:
        return None
    if isinstance(record, Profile):
        return record
    if not isinstance(record, dict):
        logger.warning("Profile record of type %s treated as empty", type(record).__name__)
        record = {}

    scalars = {name: as_text(record.get(name)) for name in SCALAR_FIELDS}
    return Profile(
        **scalars,
        skills=clean_skills(record.get("skills")),
        experience=clean_entries("experience", record.get("experience")),
        education=clean_entries("education", record.get("education")),
        projects=clean_entries("projects", record.get("projects")),
        user_id=user_id or _as_id(record.get("id")),
    )
