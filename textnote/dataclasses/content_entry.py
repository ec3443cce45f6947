#!/usr/bin/env python3
"""
content_entry.py
-------------------

Defines the ContentEntry dataclass, the smallest unit of a note section.

An entry is either:
- a dated snippet: a header line such as "[2024-01-15]" and its body, or
- free-form text: no header, just body.

Entries are built by the section parser while scanning a section's lines
and rendered back by Section.render_contents().
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass


@dataclass
class ContentEntry:
    """
    Header line plus body text.

    Attributes:
        header (str): Header line without newline, "" for free-form text.
        text (str): Body text, may hold embedded newlines.
    """

    header: str = ""
    text: str = ""

    def render(self) -> str:
        """
        Entry as note text: header line then body, or body alone.

        The result is not guaranteed to end in a newline; Section adds
        one where needed.
        """
        if self.header:
            return f"{self.header}\n{self.text}"
        return self.text

    def is_empty(self) -> bool:
        """
        True if the body holds nothing but newlines.

        The header is not considered: a dated entry with a blank body
        counts as empty.
        """
        return len(self.text.replace("\n", "")) == 0
