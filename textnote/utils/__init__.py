"""
Utilities package for textnote.

- txt: Delimited-line helpers and word counts
- fs: Note and archive file naming and I/O

Import commonly-used utilities directly from this package:
    from textnote.utils import is_delimited_line, read_note
"""

# Text utilities
from .txt import (
    is_delimited_line,
    strip_prefix_suffix,
    ensure_trailing_newline,
    compute_word_count,
)

# Filesystem utilities
from .fs import (
    read_note,
    write_note,
    note_file_name,
    archive_file_name,
    parse_date_from_filename,
    find_note_files,
)

__all__ = [
    # Text
    "is_delimited_line",
    "strip_prefix_suffix",
    "ensure_trailing_newline",
    "compute_word_count",
    # Filesystem
    "read_note",
    "write_note",
    "note_file_name",
    "archive_file_name",
    "parse_date_from_filename",
    "find_note_files",
]
