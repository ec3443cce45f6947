"""
dataclasses package
-------------------
Dataclass definitions for parsed notes.

- ContentEntry: header line plus body text
- Section: named, ordered list of entries
- Document: preamble plus ordered sections of one note file
"""
from textnote.dataclasses.content_entry import ContentEntry
from textnote.dataclasses.section import Section
from textnote.dataclasses.document import Document

__all__ = ["ContentEntry", "Section", "Document"]
