#!/usr/bin/env python3
"""
section_parser.py
-------------------
Parse the text of one note section into a Section.

Section text is its name line followed by body lines:

    ___TODO___              <- name line, delimiters stripped -> "TODO"
    buy milk                <- headerless entry
    [2024-01-14]            <- header line: starts a new entry
    call the bank
    [2024-01-15]            <- header line: starts a new entry
    walk dog

A header line is any line with the configured entry prefix and suffix;
what sits between them is not checked, so a body line that happens to
look like a header becomes an entry boundary.

Parsing is two-pass. All entries are built first; then, if every one of
them is empty, they are dropped and the section comes back with no
entries at all.

Programmatic API:
    from textnote.dataclasses.parsers import parse_section
    section = parse_section(text, config)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from typing import List

# --- Local imports ---
from textnote.core.config import ParserConfig
from textnote.core.exceptions import EmptyInputError
from textnote.dataclasses.content_entry import ContentEntry
from textnote.dataclasses.section import Section
from textnote.utils.txt import is_delimited_line, strip_prefix_suffix

logger = logging.getLogger(__name__)


def parse_section(text: str, config: ParserConfig) -> Section:
    """
    Build a Section from its note text.

    Args:
        text: Section text, name line first
        config: Delimiter bundle

    Returns:
        Section with every parsed entry, or with none if all are empty

    Raises:
        EmptyInputError: If text is empty
    """
    if len(text) == 0:
        raise EmptyInputError("cannot parse Section from empty input")

    lines = text.split("\n")
    name = strip_prefix_suffix(lines[0], config.section_prefix, config.section_suffix)
    contents = parse_section_contents(lines[1:], config.entry_prefix, config.entry_suffix)

    if any(not entry.is_empty() for entry in contents):
        logger.debug(f"Parsed section '{name}' with {len(contents)} entries")
        return Section.from_entries(name, *contents)

    # All entries empty: keep the section but none of its placeholders
    logger.debug(f"Parsed section '{name}' with no content")
    return Section.from_entries(name)


def parse_section_contents(lines: List[str], prefix: str, suffix: str) -> List[ContentEntry]:
    """
    Scan body lines into entries, splitting on header lines.

    Text flushed at a header keeps the newline that ended its last line,
    so the entries' rendered text covers the input exactly. Text flushed
    at end of input is the plain join; a final "" line (input ended with
    a newline) supplies its trailing newline.

    Args:
        lines: Section lines after the name line
        prefix: Entry header prefix
        suffix: Entry header suffix

    Returns:
        Entries in input order, empty ones included
    """
    contents: List[ContentEntry] = []
    if not lines:
        return contents

    header = ""
    body: List[str] = []
    if is_delimited_line(lines[0], prefix, suffix):
        header = lines[0]
    else:
        body.append(lines[0])

    for line in lines[1:]:
        if is_delimited_line(line, prefix, suffix):
            text = "\n".join(body) + "\n" if body else ""
            contents.append(ContentEntry(header=header, text=text))
            header = line
            body = []
            continue
        body.append(line)

    if body or header:
        contents.append(ContentEntry(header=header, text="\n".join(body)))
    return contents
