#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for note and archive files.

Daily notes are named by date and monthly archives by month, both with
the configured extension:

    notes/
    ├── 2024-01-15.txt
    └── 2024-01-16.txt
    archive/
    └── archive-Jan2024.txt

Functions:
    read_note: Read a note file as text
    write_note: Atomically write note text, creating parent directories
    note_file_name: File name of a day's note
    archive_file_name: File name of a month's archive
    parse_date_from_filename: Date of a note file, or None
    find_note_files: Dated note files of a directory, oldest first

Usage:
    from textnote.utils.fs import find_note_files, read_note

    for day, path in find_note_files(notes_dir, config):
        text = read_note(path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Tuple

# --- Local imports ---
from textnote.core.exceptions import NoteFileError

if TYPE_CHECKING:
    from textnote.core.config import NoteConfig


# ----- Reading & writing -----
def read_note(path: Path) -> str:
    """
    Read a note file as UTF-8 text, newlines untranslated.

    Raises:
        NoteFileError: If the file cannot be read or decoded
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise NoteFileError(f"cannot read note file [{path}]: {e}") from e


def write_note(path: Path, text: str) -> None:
    """
    Write note text through a temporary file in the same directory.

    The target is replaced only once the new text is fully on disk.

    Raises:
        NoteFileError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise NoteFileError(f"cannot write note file [{path}]: {e}") from e


# ----- Naming -----
def note_file_name(day: date, config: NoteConfig) -> str:
    return f"{day.strftime(config.file_time_format)}.{config.file_ext}"


def archive_file_name(day: date, config: NoteConfig) -> str:
    """Archive file for the month containing `day`."""
    month = day.strftime(config.archive_month_format)
    return f"{config.archive_file_prefix}{month}.{config.file_ext}"


def parse_date_from_filename(path: Path, config: NoteConfig) -> Optional[date]:
    """
    Date encoded in a note file's name.

    Returns:
        The date, or None if the extension differs, the stem does not
        parse with config.file_time_format, or the name is not the one
        note_file_name gives for that date (e.g. "2024-1-5.txt")
    """
    if path.suffix != f".{config.file_ext}":
        return None
    try:
        day = datetime.strptime(path.stem, config.file_time_format).date()
    except ValueError:
        return None
    if note_file_name(day, config) != path.name:
        return None
    return day


def find_note_files(directory: Path, config: NoteConfig) -> List[Tuple[date, Path]]:
    """Dated note files directly inside `directory`, oldest first."""
    if not directory.is_dir():
        return []
    found: List[Tuple[date, Path]] = []
    for path in directory.iterdir():
        if not path.is_file():
            continue
        day = parse_date_from_filename(path, config)
        if day is not None:
            found.append((day, path))
    return sorted(found)
