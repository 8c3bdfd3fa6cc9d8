"""
Generation actions gated on profile completion.

Both actions check the portfolio criterion set first and raise
IncompleteProfileError below the threshold, before anything is rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nextstep import config
from nextstep.cleaner import normalize_profile
from nextstep.completion import PORTFOLIO_CRITERIA, CompletionReport, require_completion
from nextstep.document import Document
from nextstep.exporter import PrintJob, document_to_html, print_job
from nextstep.renderer import render_portfolio, render_resume

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedPortfolio:
    document: Document
    html: str
    report: CompletionReport


def generate_portfolio(profile, theme: str = "minimal", year: int | None = None,
                       threshold: int = config.COMPLETION_THRESHOLD) -> GeneratedPortfolio:
    profile = normalize_profile(profile)
    report = require_completion(profile, PORTFOLIO_CRITERIA, threshold)
    doc = render_portfolio(profile, theme, "full", year)
    logger.info("Generated %s portfolio (%d%% complete)", theme, report.percent)
    return GeneratedPortfolio(document=doc, html=document_to_html(doc), report=report)


def export_resume(profile, threshold: int = config.COMPLETION_THRESHOLD) -> PrintJob:
    profile = normalize_profile(profile)
    require_completion(profile, PORTFOLIO_CRITERIA, threshold)
    return print_job(render_resume(profile))
