#!/usr/bin/env python3
"""
Integration tests for the textnote CLI.

Each test runs against an isolated application directory (TEXTNOTE_DIR)
with logs written to a temporary directory.
"""
import pytest
from click.testing import CliRunner

from textnote.pipeline.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, app_dir, tmp_dir):
    """Invoke the CLI with logs under tmp_dir/logs."""
    def _invoke(*args):
        return runner.invoke(cli, ["--log-dir", str(tmp_dir / "logs"), *args], obj={})
    return _invoke


@pytest.fixture
def note_file(tmp_dir, daily_note_text):
    path = tmp_dir / "2024-01-15.txt"
    path.write_text(daily_note_text, encoding="utf-8")
    return path


@pytest.fixture
def archive_file(tmp_dir, archive_note_text):
    path = tmp_dir / "archive-Jan2024.txt"
    path.write_text(archive_note_text, encoding="utf-8")
    return path


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "plain-text daily notes" in result.output

    @pytest.mark.parametrize("command", ["show", "sort", "clear", "archive", "config"])
    def test_command_help(self, invoke, command):
        result = invoke(command, "--help")
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_writes_cli_log(self, invoke, note_file, tmp_dir):
        result = invoke("sort", str(note_file))
        assert result.exit_code == 0
        assert (tmp_dir / "logs" / "operations" / "cli.log").exists()


class TestShowCommand:
    """Test the show command."""

    def test_lists_sections(self, invoke, note_file):
        result = invoke("show", str(note_file))
        assert result.exit_code == 0
        assert "2024-01-15.txt: 3 sections" in result.output
        assert "TODO: 1 entries, 5 words" in result.output
        assert "DONE: 1 entries, 2 words" in result.output
        assert "NOTES: empty" in result.output

    def test_single_section(self, invoke, note_file):
        result = invoke("show", str(note_file), "-s", "TODO")
        assert result.exit_code == 0
        assert result.output == "___TODO___\nbuy milk\ncall the bank\n"

    def test_missing_section(self, invoke, note_file):
        result = invoke("show", str(note_file), "-s", "MISSING")
        assert result.exit_code == 1
        assert "SectionNotFoundError" in result.output
        assert "MISSING" in result.output

    def test_empty_file(self, invoke, tmp_dir):
        path = tmp_dir / "empty.txt"
        path.write_text("")
        result = invoke("show", str(path))
        assert result.exit_code == 1
        assert "EmptyInputError" in result.output

    def test_missing_file(self, invoke, tmp_dir):
        result = invoke("show", str(tmp_dir / "nope.txt"))
        assert result.exit_code == 2

    def test_uses_config_file(self, invoke, tmp_dir):
        config_path = tmp_dir / "hash.yml"
        config_path.write_text(
            "section:\n  prefix: '## '\n  suffix: ' ##'\n"
            "entry:\n  prefix: '### '\n  suffix: ' ###'\n"
        )
        note = tmp_dir / "note.txt"
        note.write_text("## TODO ##\n### 2023-01-01 ###\nmilk\n")

        result = invoke("-c", str(config_path), "show", str(note))
        assert result.exit_code == 0
        assert "TODO: 1 entries, 1 words" in result.output


class TestSortCommand:
    """Test the sort command."""

    def test_sorts_in_place(self, invoke, archive_file):
        result = invoke("sort", str(archive_file))
        assert result.exit_code == 0
        assert "Sorted 2 sections" in result.output
        assert archive_file.read_text(encoding="utf-8") == (
            "ARCHIVE Jan2024\n"
            "___TODO___\n"
            "[2024-01-01]\nrenew passport\n"
            "[2024-01-03]\nwater plants\n"
            "___DONE___\n"
            "[2024-01-02]\npaid rent\n"
        )

    def test_dry_run(self, invoke, archive_file, archive_note_text):
        result = invoke("sort", str(archive_file), "--dry-run")
        assert result.exit_code == 0
        assert result.output.startswith("ARCHIVE Jan2024\n___TODO___\n[2024-01-01]\n")
        assert archive_file.read_text(encoding="utf-8") == archive_note_text


class TestClearCommand:
    """Test the clear command."""

    def test_clears_section(self, invoke, note_file):
        result = invoke("clear", str(note_file), "-s", "TODO")
        assert result.exit_code == 0
        assert "Cleared section TODO" in result.output
        assert note_file.read_text(encoding="utf-8") == (
            "Monday, 15 Jan 2024\n\n___TODO___\n___DONE___\nfiled taxes\n___NOTES___\n"
        )

    def test_section_required(self, invoke, note_file):
        result = invoke("clear", str(note_file))
        assert result.exit_code == 2

    def test_unknown_section_leaves_file(self, invoke, note_file, daily_note_text):
        result = invoke("clear", str(note_file), "-s", "IDEAS")
        assert result.exit_code == 1
        assert note_file.read_text(encoding="utf-8") == daily_note_text


class TestArchiveCommand:
    """Test the archive command."""

    def test_archives_old_notes(self, invoke, app_dir, tmp_dir):
        notes_dir = app_dir / "notes"
        notes_dir.mkdir(parents=True)
        (notes_dir / "2020-01-01.txt").write_text("___TODO___\nbuy milk\n", encoding="utf-8")

        result = invoke("archive")
        assert result.exit_code == 0
        assert "Notes archived: 1" in result.output
        assert not (notes_dir / "2020-01-01.txt").exists()
        assert (app_dir / "archive" / "archive-Jan2020.txt").read_text(encoding="utf-8") == (
            "ARCHIVE Jan2020\n___TODO___\n[2020-01-01]\nbuy milk\n"
        )
        cli_log = (tmp_dir / "logs" / "operations" / "cli.log").read_text(encoding="utf-8")
        assert "Archive complete: 1 notes archived" in cli_log

    def test_dry_run_and_explicit_dirs(self, invoke, tmp_dir):
        notes_dir = tmp_dir / "n"
        notes_dir.mkdir()
        (notes_dir / "2020-01-01.txt").write_text("___TODO___\nbuy milk\n", encoding="utf-8")

        result = invoke("archive", "-n", str(notes_dir), "-a", str(tmp_dir / "a"), "--dry-run")
        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert "Archive files written: 0" in result.output
        assert (notes_dir / "2020-01-01.txt").exists()

    def test_negative_after_days_rejected(self, invoke):
        result = invoke("archive", "--after-days", "-1")
        assert result.exit_code == 2

    def test_broken_note_reports_error(self, invoke, app_dir):
        notes_dir = app_dir / "notes"
        notes_dir.mkdir(parents=True)
        (notes_dir / "2020-01-01.txt").write_bytes(b"\xff\xfe")

        result = invoke("archive")
        assert result.exit_code == 1
        assert "ArchiveError" in result.output


class TestConfigCommand:
    """Test the config command."""

    def test_path(self, invoke, app_dir):
        result = invoke("config", "--path")
        assert result.exit_code == 0
        assert f"[{app_dir / 'config.yml'}]" in result.output

    def test_active_defaults(self, invoke):
        result = invoke("config", "--active")
        assert result.exit_code == 0
        assert "section:" in result.output
        assert "after_days: 14" in result.output

    def test_active_includes_environment(self, invoke, monkeypatch):
        monkeypatch.setenv("TEXTNOTE_ARCHIVE_AFTER_DAYS", "3")
        result = invoke("config", "--active")
        assert result.exit_code == 0
        assert "after_days: 3" in result.output

    def test_file_contents(self, invoke, app_dir):
        app_dir.mkdir(parents=True)
        (app_dir / "config.yml").write_text("archive:\n  after_days: 7\n")
        result = invoke("config")
        assert result.exit_code == 0
        assert result.output == "archive:\n  after_days: 7\n"

    def test_first_run_writes_defaults(self, invoke, app_dir):
        result = invoke("config")
        assert result.exit_code == 0
        assert (app_dir / "config.yml").is_file()
        assert "after_days: 14" in result.output
        assert result.output == (app_dir / "config.yml").read_text(encoding="utf-8")

    def test_missing_file(self, invoke, tmp_dir):
        result = invoke("-c", str(tmp_dir / "missing.yml"), "config")
        assert result.exit_code == 1
        assert "cannot find configuration file" in result.output

    def test_broken_file_path_still_shown(self, invoke, tmp_dir):
        path = tmp_dir / "broken.yml"
        path.write_text("section: [unclosed\n")
        result = invoke("-c", str(path), "config", "--path")
        assert result.exit_code == 0
        assert str(path) in result.output
