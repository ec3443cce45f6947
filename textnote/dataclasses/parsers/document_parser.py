#!/usr/bin/env python3
"""
document_parser.py
-------------------
Parse a whole note file into a Document and render it back.

A note file is a preamble followed by sections:

    Monday, 15 Jan 2024     <- preamble, kept verbatim as Document.header

    ___TODO___              <- section name line
    buy milk
    ___DONE___              <- section name line
    [2024-01-14]
    filed taxes

Section name lines are found one of two ways:
- config.section_names given: a line must equal prefix + name + suffix for
  one of those names, so a stray delimited line never splits a section
- otherwise: any line shaped prefix...suffix that is not also shaped like
  an entry header

Each section's slice of the text goes through parse_section.

Programmatic API:
    from textnote.dataclasses.parsers import parse_document, render_document
    document = parse_document(text, config)
    text = render_document(document, config)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from typing import Callable, List

# --- Local imports ---
from textnote.core.config import ParserConfig
from textnote.core.exceptions import EmptyInputError, InvalidDelimiterPatternError
from textnote.dataclasses.document import Document
from textnote.dataclasses.parsers.section_parser import parse_section
from textnote.utils.txt import ensure_trailing_newline, is_delimited_line

logger = logging.getLogger(__name__)


def section_line_matcher(config: ParserConfig) -> Callable[[str], bool]:
    """
    Predicate telling whether a line opens a section.

    Raises:
        InvalidDelimiterPatternError: If section delimiters are both empty
            and no section names are configured
    """
    if config.section_names:
        name_lines = {config.format_section_name(name) for name in config.section_names}
        return name_lines.__contains__

    if not config.section_prefix and not config.section_suffix:
        raise InvalidDelimiterPatternError(
            f"invalid section prefix [{config.section_prefix}] or suffix "
            f"[{config.section_suffix}]: configure section names to parse documents"
        )

    def matches(line: str) -> bool:
        return is_delimited_line(
            line, config.section_prefix, config.section_suffix
        ) and not config.is_entry_header(line)

    return matches


def parse_document(text: str, config: ParserConfig) -> Document:
    """
    Build a Document from note file text.

    Args:
        text: Full note file contents
        config: Delimiter bundle

    Returns:
        Document with preamble and sections in file order

    Raises:
        EmptyInputError: If text is empty
        InvalidDelimiterPatternError: If section lines cannot be recognised
    """
    if len(text) == 0:
        raise EmptyInputError("cannot parse Document from empty input")

    is_section_line = section_line_matcher(config)
    lines = text.split("\n")
    starts = [idx for idx, line in enumerate(lines) if is_section_line(line)]

    if not starts:
        logger.warning("No section name lines found; keeping text as preamble only")
        return Document(header=text)

    header = "\n".join(lines[: starts[0]]) + "\n" if starts[0] > 0 else ""

    document = Document(header=header)
    bounds = starts + [len(lines)]
    for begin, end in zip(bounds, bounds[1:]):
        chunk = "\n".join(lines[begin:end])
        if end < len(lines):
            # The newline before the next name line ends this section
            chunk += "\n"
        document.add_section(parse_section(chunk, config))

    logger.debug(
        f"Parsed document with sections: {', '.join(document.section_names())}"
    )
    return document


def render_document(document: Document, config: ParserConfig) -> str:
    """
    Note file text for a Document.

    The preamble is written verbatim (newline-terminated), then every
    section's name line and contents.
    """
    parts: List[str] = []
    if document.header:
        parts.append(ensure_trailing_newline(document.header))
    for section in document.sections:
        parts.append(section.render(config.section_prefix, config.section_suffix))
    return "".join(parts)
