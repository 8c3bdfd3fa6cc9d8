"""
Display helpers shared by every template: dates, defaults, avatar glyph.
"""
from __future__ import annotations
import re

from nextstep.cleaner import as_text

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

NAME_PLACEHOLDER = "Your Name"
HEADLINE_PLACEHOLDER = "Your Headline"
AVATAR_PLACEHOLDER = "?"
PRESENT = "Present"
RANGE_SEP = " — "

_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{1,2})(?:-\d{1,2})?$")
_YEAR = re.compile(r"^(\d{4})$")


def format_date(value) -> str:
    """``2024-03`` -> ``Mar 2024``, ``2024`` -> ``2024``, empty -> ``""``.

    Full dates (``2024-03-15``) keep their month; anything unparseable is
    shown as stored.
    """
    text = as_text(value).strip()
    if not text:
        return ""
    if m := _YEAR_MONTH.match(text):
        year, month = m.group(1), int(m.group(2))
        if 1 <= month <= 12:
            return f"{MONTHS[month - 1]} {year}"
        return year
    if _YEAR.match(text):
        return text
    return text


def date_range(start, end, current: bool = False) -> str:
    """Join the formatted ends; ``current`` wins over any stored end date."""
    first = format_date(start)
    last = PRESENT if current else format_date(end)
    return RANGE_SEP.join(part for part in (first, last) if part)


def display_name(full_name) -> str:
    return as_text(full_name).strip() or NAME_PLACEHOLDER


def display_headline(headline) -> str:
    return as_text(headline).strip() or HEADLINE_PLACEHOLDER


def avatar_initial(full_name) -> str:
    name = as_text(full_name).strip()
    return name[0] if name else AVATAR_PLACEHOLDER
