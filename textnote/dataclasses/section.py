#!/usr/bin/env python3
"""
section.py
-------------------

Defines the Section dataclass: a named, ordered list of ContentEntry values.

A section is rendered as a name line followed by its entries:

    ___DONE___          <- render_name("___", "___")
    [2024-01-14]        <- render_contents()
    filed taxes
    [2024-01-15]
    called the bank

The name is set once when the section is parsed and is never derived from
the contents. Sections are mutated in place (delete_contents,
sort_contents, add_contents) and are not safe to mutate from several
threads at once.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass, field
from operator import attrgetter
from typing import List

# ---- Local imports ----
from textnote.dataclasses.content_entry import ContentEntry
from textnote.utils.txt import ensure_trailing_newline


@dataclass
class Section:
    """
    Named section of a note Document.

    Attributes:
        name (str): Section name with delimiters stripped.
        contents (List[ContentEntry]): Entries in document order.
    """

    name: str
    contents: List[ContentEntry] = field(default_factory=list)

    # ---- Constructors ----
    @classmethod
    def from_entries(cls, name: str, *entries: ContentEntry) -> Section:
        """Section holding `entries` in the order given (possibly none)."""
        return cls(name=name, contents=list(entries))

    # ---- Mutation ----
    def delete_contents(self) -> None:
        self.contents = []

    def add_contents(self, *entries: ContentEntry) -> None:
        self.contents.extend(entries)

    def sort_contents(self) -> None:
        """
        Order entries by header.

        list.sort is stable, so entries sharing a header (in particular
        all the headerless ones) keep their relative order.
        """
        self.contents.sort(key=attrgetter("header"))

    # ---- Queries ----
    def is_empty(self) -> bool:
        """True if every entry is empty; a section with no entries is empty."""
        return all(entry.is_empty() for entry in self.contents)

    # ---- Rendering ----
    def render_name(self, prefix: str, suffix: str) -> str:
        return f"{prefix}{self.name}{suffix}\n"

    def render_contents(self) -> str:
        """Entries concatenated, each ending on a newline."""
        return "".join(ensure_trailing_newline(entry.render()) for entry in self.contents)

    def render(self, prefix: str, suffix: str) -> str:
        return self.render_name(prefix, suffix) + self.render_contents()
