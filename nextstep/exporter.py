"""
Document tree → standalone HTML, and the print job handed to the browser.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from nextstep.document import Document

logger = logging.getLogger(__name__)

_STATIC = Path(__file__).parent / "static"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=select_autoescape(["html"]),
                  trim_blocks=True, lstrip_blocks=True)

_TEMPLATES = {"portfolio": "portfolio.html", "resume": "resume.html", "empty": "empty.html"}
_STYLESHEETS = {"portfolio": "portfolio.css", "resume": "resume.css", "empty": "portfolio.css"}


@dataclass(frozen=True)
class PrintJob:
    title: str
    html: str
    instruction: str = "print"


def document_to_html(doc: Document, inline: bool = True, auto_print: bool = False) -> str:
    """Render a document tree → HTML.  If inline=True, embed CSS in a <style> tag."""
    stylesheet = _STYLESHEETS[doc.kind]
    css_inline = (_STATIC / stylesheet).read_text(encoding="utf-8") if inline else ""
    return env.get_template(_TEMPLATES[doc.kind]).render(
        doc=doc,
        inline_css=css_inline,
        stylesheet=stylesheet,
        auto_print=auto_print,
    )


def print_job(doc: Document) -> PrintJob:
    """Flatten a document for PDF export; the page prints itself on load."""
    logger.info("Preparing print job for %r (%d sections)", doc.title, len(doc.sections))
    return PrintJob(title=doc.title, html=document_to_html(doc, inline=True, auto_print=True))
