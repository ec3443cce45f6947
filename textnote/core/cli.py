#!/usr/bin/env python3
"""
cli.py
------
Shared helpers for textnote commands.

Functions:
    setup_logger: Initialize a TextnoteLogger for a command

Classes:
    OperationStats: Files processed and elapsed time
    ArchiveStats: OperationStats plus archive-specific counters

Usage:
    from textnote.core.cli import setup_logger, ArchiveStats

    logger = setup_logger(log_dir, "archive")
    stats = ArchiveStats()
    stats.notes_archived += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from textnote.core.logging_manager import TextnoteLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> TextnoteLogger:
    """
    Logger for a command, writing under <log_dir>/operations.

    Args:
        log_dir: Base log directory (typically paths.get_log_dir())
        component_name: Component identifier, e.g. 'cli' or 'archive'
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return TextnoteLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Counters common to file-processing commands.

    Attributes:
        files_processed: Files read and handled
        start_time: When the operation started
    """
    files_processed: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(
                f"files_processed must be non-negative, got {self.files_processed}"
            )

    def duration(self) -> float:
        """Seconds since start_time, fixed at the first call."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return f"{self.files_processed} files processed, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "duration": self.duration(),
        }


@dataclass
class ArchiveStats(OperationStats):
    """
    Statistics for an archive run.

    Attributes:
        notes_archived: Daily notes merged into an archive
        entries_archived: Dated entries written into archives
        archives_written: Monthly archive files created or updated
        notes_deleted: Archived daily notes removed
    """
    notes_archived: int = 0
    entries_archived: int = 0
    archives_written: int = 0
    notes_deleted: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("notes_archived", "entries_archived", "archives_written", "notes_deleted"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def summary(self) -> str:
        return ", ".join(
            [
                f"{self.notes_archived} notes archived",
                f"{self.entries_archived} entries",
                f"{self.archives_written} archive files written",
                f"{self.notes_deleted} notes deleted",
                f"{self.duration():.2f}s",
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update(
            {
                "notes_archived": self.notes_archived,
                "entries_archived": self.entries_archived,
                "archives_written": self.archives_written,
                "notes_deleted": self.notes_deleted,
            }
        )
        return d
