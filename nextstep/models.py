from __future__ import annotations

from dataclasses import dataclass, field, fields

# Stored records use the camelCase keys of the hosted table; the dataclasses
# use Python names and translate at the dict boundary.
_DATE_KEYS = {"start_date": "startDate", "end_date": "endDate"}


def _to_key(name: str) -> str:
    return _DATE_KEYS.get(name, name)


@dataclass(frozen=True)
class ExperienceEntry:
    id: str
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""

    def to_dict(self) -> dict:
        return {_to_key(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class EducationEntry:
    id: str
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        return {_to_key(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ProjectEntry:
    id: str
    name: str = ""
    description: str = ""
    url: str = ""
    technologies: str = ""

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


ENTRY_TYPES = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "projects": ProjectEntry,
}

# stored key -> dataclass attribute, per entry kind
ENTRY_FIELD_NAMES = {
    kind: {_to_key(f.name): f.name for f in fields(cls) if f.name != "id"}
    for kind, cls in ENTRY_TYPES.items()
}


@dataclass(frozen=True)
class Profile:
    full_name: str = ""
    headline: str = ""
    about: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    avatar_url: str = ""
    skills: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()
    user_id: str = field(default="", compare=False)

    @property
    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self) if f.name != "user_id")

    def entries(self, kind: str) -> tuple:
        if kind not in ENTRY_TYPES:
            raise KeyError(f"Unknown entry kind: {kind}")
        return getattr(self, kind)

    def to_dict(self) -> dict:
        data = {}
        for f in fields(self):
            if f.name == "user_id":
                continue
            value = getattr(self, f.name)
            if f.name in ENTRY_TYPES:
                data[f.name] = [e.to_dict() for e in value]
            elif f.name == "skills":
                data[f.name] = list(value)
            else:
                data[f.name] = value
        return data
