"""
test_cli_stats.py
-----------------
Unit tests for textnote.core.cli: command logger setup and run statistics.
"""
from datetime import datetime, timedelta

import pytest

from textnote.core.cli import ArchiveStats, OperationStats, setup_logger


class TestSetupLogger:
    def test_logs_under_operations(self, tmp_dir):
        logger = setup_logger(tmp_dir, "archive")
        assert logger.log_dir == tmp_dir / "operations"
        assert logger.main_logger.name == "textnote.archive"


class TestOperationStats:
    """Test shared counters."""

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="files_processed"):
            OperationStats(files_processed=-1)

    def test_duration_fixed_after_first_call(self):
        stats = OperationStats(start_time=datetime.now() - timedelta(seconds=5))
        first = stats.duration()
        assert first >= 5
        assert stats.duration() == first

    def test_to_dict(self):
        stats = OperationStats(files_processed=2)
        data = stats.to_dict()
        assert data["files_processed"] == 2
        assert set(data) == {"files_processed", "duration"}


class TestArchiveStats:
    """Test archive counters and their summary."""

    def test_summary(self):
        stats = ArchiveStats(notes_archived=2, entries_archived=3, archives_written=1, notes_deleted=2)
        summary = stats.summary()
        assert summary.startswith(
            "2 notes archived, 3 entries, 1 archive files written, 2 notes deleted, "
        )
        assert summary.endswith("s")

    def test_to_dict_includes_base(self):
        data = ArchiveStats(files_processed=4, notes_archived=4).to_dict()
        assert data["files_processed"] == 4
        assert data["notes_archived"] == 4
        assert "errors" not in data

    @pytest.mark.parametrize(
        "field", ["notes_archived", "entries_archived", "archives_written", "notes_deleted"]
    )
    def test_negative_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            ArchiveStats(**{field: -1})
