"""
conftest.py
-----------
Shared pytest fixtures for textnote tests.

Provides fixtures for:
- Temporary directories and an isolated application directory
- Parser configurations (bracketed and hash-delimited)
- Sample note text
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from textnote.core.config import NoteConfig, ParserConfig, ENV_OVERRIDES


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def app_dir(tmp_dir, monkeypatch):
    """Point TEXTNOTE_DIR at a temp dir and clear config overrides."""
    monkeypatch.setenv("TEXTNOTE_DIR", str(tmp_dir / "app"))
    monkeypatch.delenv("TEXTNOTE_CONFIG", raising=False)
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)
    return tmp_dir / "app"


# ----- Config Fixtures -----

@pytest.fixture
def hash_config():
    """Sections '## NAME ##', entries '### ... ###'."""
    return ParserConfig(
        section_prefix="## ",
        section_suffix=" ##",
        entry_prefix="### ",
        entry_suffix=" ###",
    )


@pytest.fixture
def bare_section_config():
    """Section name lines without delimiters, entries '### ... ###'."""
    return ParserConfig(
        section_prefix="",
        section_suffix="",
        entry_prefix="### ",
        entry_suffix=" ###",
    )


@pytest.fixture
def default_parser_config():
    """Default delimiters: '___NAME___' sections, '[date]' entries."""
    return ParserConfig()


@pytest.fixture
def note_config():
    """Default application config, archiving after 14 days."""
    return NoteConfig()


# ----- Sample Note Content Fixtures -----

@pytest.fixture
def daily_note_text():
    """Daily note in the default layout."""
    return """Monday, 15 Jan 2024

___TODO___
buy milk
call the bank
___DONE___
filed taxes
___NOTES___

"""


@pytest.fixture
def archive_note_text():
    """Monthly archive with dated entries out of order."""
    return """ARCHIVE Jan2024
___TODO___
[2024-01-03]
water plants
[2024-01-01]
renew passport
___DONE___
[2024-01-02]
paid rent
"""
