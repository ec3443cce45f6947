#!/usr/bin/env python3
"""
document.py
-------------------

Defines the Document dataclass representing one note file.

A Document is the file's preamble (typically the day's title line) and its
sections, in file order. Section order is never re-derived by sorting.

Document-level operations cover what a Section cannot do for itself:
lookup by name, adding/removing whole sections, and moving entries between
documents (copying a section from yesterday's note, merging archived
entries into a monthly archive).

Section names are expected to be unique. This is not enforced: lookups
return the first section with a given name.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, List, Optional

# ---- Local imports ----
from textnote.core.exceptions import SectionNotFoundError
from textnote.dataclasses.section import Section

if TYPE_CHECKING:
    from textnote.core.config import ParserConfig


# ----- Logging ----
logger = logging.getLogger(__name__)


@dataclass
class Document:
    """
    Parsed note file.

    Attributes:
        header (str): Verbatim text before the first section, "" if none.
        sections (List[Section]): Sections in file order.
    """

    header: str = ""
    sections: List[Section] = field(default_factory=list)

    # ---- Lookup ----
    def section_names(self) -> List[str]:
        return [section.name for section in self.sections]

    def has_section(self, name: str) -> bool:
        return self._find(name) is not None

    def get_section(self, name: str) -> Section:
        """
        First section called `name`.

        Raises:
            SectionNotFoundError: If there is none
        """
        section = self._find(name)
        if section is None:
            raise SectionNotFoundError(name)
        return section

    def _find(self, name: str) -> Optional[Section]:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    # ---- Whole-section operations ----
    def add_section(self, section: Section) -> None:
        self.sections.append(section)

    def remove_section(self, name: str) -> Section:
        """Remove and return the first section called `name`."""
        section = self.get_section(name)
        self.sections.remove(section)
        return section

    def clear_section(self, name: str) -> None:
        self.get_section(name).delete_contents()

    # ---- Moving entries between documents ----
    def copy_section_contents(self, source: Document, name: str) -> None:
        """
        Append copies of `source`'s entries for section `name` to ours.

        The section is created at the end of this document if missing.

        Raises:
            SectionNotFoundError: If `source` has no such section
        """
        entries = [replace(entry) for entry in source.get_section(name).contents]
        self._ensure_section(name).add_contents(*entries)
        logger.debug(f"Copied {len(entries)} entries into section '{name}'")

    def merge(self, other: Document) -> None:
        """
        Append every section of `other` onto the same-named section here.

        Sections missing here are added at the end, in `other`'s order.
        `other`'s header is ignored.
        """
        for section in other.sections:
            entries = [replace(entry) for entry in section.contents]
            self._ensure_section(section.name).add_contents(*entries)

    def _ensure_section(self, name: str) -> Section:
        section = self._find(name)
        if section is None:
            section = Section(name=name)
            self.sections.append(section)
        return section

    # ---- Bulk ----
    def sort_contents(self) -> None:
        for section in self.sections:
            section.sort_contents()

    def is_empty(self) -> bool:
        return all(section.is_empty() for section in self.sections)

    # ---- Rendering ----
    def render(self, config: ParserConfig) -> str:
        """Note text for this document; see parsers.render_document."""
        from textnote.dataclasses.parsers.document_parser import render_document

        return render_document(self, config)
