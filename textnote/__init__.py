"""
textnote
========

Plain-text daily notes organised into named sections of dated entries.

A note file is a preamble line (usually the day's title) followed by
sections. Each section starts with a delimited name line and holds
free-form text and dated entries:

    ___TODO___
    [2024-01-14]
    call the bank
    buy milk

This package parses that layout into Document -> Section -> ContentEntry
values, renders it back, and archives old daily notes into monthly files.

Main Components:
    - dataclasses: ContentEntry, Section and Document values
    - dataclasses.parsers: text <-> Document/Section conversion
    - core: configuration, paths, logging and exceptions
    - utils: delimiter helpers and note file I/O
    - pipeline: archiving and the command-line interface

Example Usage:
    >>> from textnote import ParserConfig, parse_section
    >>> config = ParserConfig(section_prefix="", section_suffix="")
    >>> section = parse_section("TODO\\nbuy milk\\n", config)
    >>> section.name
    'TODO'
"""

__version__ = "0.3.0"

from textnote.core.config import NoteConfig, ParserConfig, init_app, load_config
from textnote.dataclasses import ContentEntry, Document, Section
from textnote.dataclasses.parsers import parse_document, parse_section, render_document

__all__ = [
    "ContentEntry",
    "Document",
    "NoteConfig",
    "ParserConfig",
    "Section",
    "init_app",
    "load_config",
    "parse_document",
    "parse_section",
    "render_document",
]
