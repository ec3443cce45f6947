#!/usr/bin/env python3
"""
archive.py
-------------------
Move old daily notes into monthly archive files.

Each non-empty section of a daily note becomes one dated entry in the
same-named section of the month's archive:

    notes/2024-01-15.txt            archive/archive-Jan2024.txt
    --------------------            ---------------------------
    Monday, 15 Jan 2024             ARCHIVE Jan2024
    ___TODO___                      ___TODO___
    buy milk               ──►      [2024-01-14]
    ___DONE___                      call the bank
    filed taxes                     [2024-01-15]
                                    buy milk
                                    ___DONE___
                                    [2024-01-15]
                                    filed taxes

Archive sections are re-sorted by entry header after every merge; the
sort is stable, so entries from the same day keep their order.

The run reads and parses every note due for archiving before writing
anything, so a malformed note aborts the run with no file changed.

Programmatic API:
    from textnote.pipeline.archive import archive_notes
    stats = archive_notes(notes_dir, archive_dir, date.today(), config, logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# --- Local imports ---
from textnote.core.cli import ArchiveStats
from textnote.core.config import NoteConfig
from textnote.core.exceptions import (
    ArchiveError,
    EmptyInputError,
    NoteFileError,
    NoteParseError,
    ConfigurationError,
)
from textnote.core.logging_manager import TextnoteLogger, safe_logger
from textnote.dataclasses import ContentEntry, Document, Section
from textnote.dataclasses.parsers import parse_document
from textnote.utils.fs import archive_file_name, find_note_files, read_note, write_note


# --- Building archive entries ---
def archive_header(day: date, config: NoteConfig) -> str:
    """Title line of the archive file for the month containing `day`."""
    return f"{config.archive_header_prefix}{day.strftime(config.archive_month_format)}"


def archive_entries(document: Document, day: date, config: NoteConfig) -> Document:
    """
    One dated entry per non-empty section of a daily note.

    Args:
        document: Parsed daily note
        day: Date of the note
        config: Application configuration

    Returns:
        Document holding only the sections with content, each with a
        single entry whose header is the note's date
    """
    header = config.parser.format_entry_header(day)
    archived = Document()
    for section in document.sections:
        if section.is_empty():
            continue
        entry = ContentEntry(header=header, text=section.render_contents())
        archived.add_section(Section.from_entries(section.name, entry))
    return archived


def merge_into_archive(archive: Document, incoming: Document) -> Document:
    """Append `incoming` to `archive` and re-sort each section by header."""
    archive.merge(incoming)
    archive.sort_contents()
    return archive


# --- File pipeline ---
def _load_document(path: Path, config: NoteConfig) -> Optional[Document]:
    """Parsed note file, or None when the file is empty."""
    try:
        return parse_document(read_note(path), config.parser)
    except EmptyInputError:
        return None
    except (NoteFileError, NoteParseError, ConfigurationError) as e:
        raise ArchiveError(f"cannot archive [{path}]: {e}") from e


def archive_notes(
    notes_dir: Path,
    archive_dir: Path,
    today: date,
    config: NoteConfig,
    keep: bool = False,
    dry_run: bool = False,
    logger: Optional[TextnoteLogger] = None,
) -> ArchiveStats:
    """
    Archive daily notes dated `archive_after_days` or more before `today`.

    Args:
        notes_dir: Directory of daily note files
        archive_dir: Directory of monthly archive files
        today: Reference date
        config: Application configuration
        keep: Leave archived daily notes in place
        dry_run: Parse and count only; write and delete nothing
        logger: Optional logger

    Returns:
        ArchiveStats for the run

    Raises:
        ArchiveError: If a note or archive cannot be read, parsed,
            written or deleted
    """
    log = safe_logger(logger)
    stats = ArchiveStats()
    cutoff = today - timedelta(days=config.archive_after_days)

    due = [(day, path) for day, path in find_note_files(notes_dir, config) if day <= cutoff]
    log.log_operation(
        "archive_start",
        {"notes_dir": notes_dir, "archive_dir": archive_dir, "cutoff": cutoff, "due": len(due)},
    )

    # Read phase: nothing is written until every due note and archive has parsed
    months: Dict[str, List[Tuple[date, Path, Document]]] = {}
    for day, path in due:
        document = _load_document(path, config)
        if document is None:
            log.log_warning(f"Empty note file: {path.name}")
            document = Document()
        stats.files_processed += 1
        incoming = archive_entries(document, day, config)
        months.setdefault(archive_file_name(day, config), []).append((day, path, incoming))

    archives: Dict[str, Document] = {}
    for file_name, items in months.items():
        archive_path = archive_dir / file_name
        archive: Optional[Document] = None
        if archive_path.exists():
            archive = _load_document(archive_path, config)
        if archive is None:
            archive = Document(header=archive_header(items[0][0], config))
        archives[file_name] = archive

    # Write phase
    for file_name, items in months.items():
        archive_path = archive_dir / file_name
        archive = archives[file_name]
        for _, path, incoming in items:
            merge_into_archive(archive, incoming)
            stats.notes_archived += 1
            stats.entries_archived += sum(len(s.contents) for s in incoming.sections)
            log.log_debug(f"Merged {path.name} into {file_name}")

        if dry_run:
            log.log_info(f"Dry run: would write {archive_path}")
            continue

        try:
            write_note(archive_path, archive.render(config.parser))
        except NoteFileError as e:
            raise ArchiveError(str(e)) from e
        stats.archives_written += 1

        if keep:
            continue
        for _, path, _ in items:
            try:
                path.unlink()
            except OSError as e:
                raise ArchiveError(f"cannot delete archived note [{path}]: {e}") from e
            stats.notes_deleted += 1

    log.log_operation("archive_complete", stats.to_dict())
    return stats
