"""
Parsers converting between note text and note dataclasses.

Modules:
    section_parser: One section's text -> Section
    document_parser: Full note file text <-> Document
"""

from .section_parser import parse_section, parse_section_contents
from .document_parser import parse_document, render_document, section_line_matcher

__all__ = [
    "parse_section",
    "parse_section_contents",
    "parse_document",
    "render_document",
    "section_line_matcher",
]
