"""
Profile completion scoring.

A completion score is the share of criteria a profile satisfies, rounded to a
whole percent. Two criterion sets are in use and are kept apart on purpose:
the portfolio/resume gate counts the four collections, the dashboard stat
counts seven identity and collection fields.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Sequence

from nextstep import config
from nextstep.cleaner import normalize_profile
from nextstep.models import Profile

logger = logging.getLogger(__name__)

REFUSAL_MESSAGE = "Please complete at least {threshold}% of your profile first"


@dataclass(frozen=True)
class Criterion:
    key: str
    label: str
    check: Callable[[Profile], bool]

    def __call__(self, profile: Profile) -> bool:
        return bool(self.check(profile))


def _filled(attr: str) -> Callable[[Profile], bool]:
    return lambda p: bool(getattr(p, attr).strip())


def _non_empty(attr: str) -> Callable[[Profile], bool]:
    return lambda p: len(getattr(p, attr)) > 0


PORTFOLIO_CRITERIA: tuple[Criterion, ...] = (
    Criterion("experience", "Work experience", _non_empty("experience")),
    Criterion("education", "Education", _non_empty("education")),
    Criterion("skills", "At least one skill", _non_empty("skills")),
    Criterion("projects", "Projects", _non_empty("projects")),
)

DASHBOARD_CRITERIA: tuple[Criterion, ...] = (
    Criterion("full_name", "Full name", _filled("full_name")),
    Criterion("headline", "Headline", _filled("headline")),
    Criterion("about", "About", _filled("about")),
    Criterion("email", "Email", _filled("email")),
    Criterion("skills", "At least one skill", _non_empty("skills")),
    Criterion("experience", "Work experience", _non_empty("experience")),
    Criterion("education", "Education", _non_empty("education")),
)


@dataclass(frozen=True)
class CompletionReport:
    percent: int
    checklist: tuple[tuple[Criterion, bool], ...]

    @property
    def satisfied(self) -> int:
        return sum(1 for _, done in self.checklist if done)

    @property
    def missing(self) -> list[str]:
        return [c.label for c, done in self.checklist if not done]

    def meets(self, threshold: int = config.COMPLETION_THRESHOLD) -> bool:
        return self.percent >= threshold


class IncompleteProfileError(Exception):
    """Raised when a generation action is attempted below the threshold."""

    def __init__(self, report: CompletionReport, threshold: int = config.COMPLETION_THRESHOLD):
        super().__init__(REFUSAL_MESSAGE.format(threshold=threshold))
        self.report = report
        self.threshold = threshold


def evaluate_completion(
    profile: Profile | dict | None,
    criteria: Sequence[Criterion] = PORTFOLIO_CRITERIA,
) -> CompletionReport:
    if not criteria:
        raise ValueError("criteria must not be empty")
    profile = normalize_profile(profile)
    if profile is None:
        return CompletionReport(0, tuple((c, False) for c in criteria))

    checklist = tuple((c, c(profile)) for c in criteria)
    done = sum(1 for _, ok in checklist if ok)
    # halves round up, never to even
    percent = int(math.floor(100 * done / len(criteria) + 0.5))
    return CompletionReport(percent, checklist)


def require_completion(
    profile: Profile | dict | None,
    criteria: Sequence[Criterion] = PORTFOLIO_CRITERIA,
    threshold: int = config.COMPLETION_THRESHOLD,
) -> CompletionReport:
    """Return the report, or raise IncompleteProfileError below ``threshold``."""
    report = evaluate_completion(profile, criteria)
    if not report.meets(threshold):
        logger.info(
            "Generation refused: %d%% complete (needs %d%%), missing %s",
            report.percent, threshold, ", ".join(report.missing),
        )
        raise IncompleteProfileError(report, threshold)
    return report
