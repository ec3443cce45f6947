"""
test_content_entry.py
---------------------
Unit tests for the ContentEntry dataclass.
"""
from textnote.dataclasses import ContentEntry


class TestContentEntryRender:
    """Test ContentEntry.render()."""

    def test_render_with_header(self):
        """Header goes on its own line above the text."""
        entry = ContentEntry(header="[2024-01-15]", text="buy milk\n")
        assert entry.render() == "[2024-01-15]\nbuy milk\n"

    def test_render_without_header(self):
        """Headerless entries render their text unchanged."""
        entry = ContentEntry(header="", text="hello\nworld")
        assert entry.render() == "hello\nworld"

    def test_render_does_not_add_trailing_newline(self):
        """Newline normalization is left to Section."""
        entry = ContentEntry(header="[2024-01-15]", text="no newline")
        assert entry.render() == "[2024-01-15]\nno newline"

    def test_render_header_with_empty_text(self):
        """A header with no body still renders the header line."""
        entry = ContentEntry(header="[2024-01-15]", text="")
        assert entry.render() == "[2024-01-15]\n"


class TestContentEntryIsEmpty:
    """Test ContentEntry.is_empty()."""

    def test_empty_text_is_empty(self):
        assert ContentEntry().is_empty()

    def test_newlines_only_is_empty(self):
        assert ContentEntry(text="\n\n\n").is_empty()

    def test_text_is_not_empty(self):
        assert not ContentEntry(text="x").is_empty()

    def test_whitespace_is_not_empty(self):
        """Only newlines are ignored; spaces count as content."""
        assert not ContentEntry(text=" \n").is_empty()

    def test_header_ignored_for_emptiness(self):
        """
        A dated entry whose body is blank counts as empty.

        The header does not make the entry non-empty, so such an entry can
        be dropped when its whole section is pruned.
        """
        entry = ContentEntry(header="[2024-01-15]", text="\n")
        assert entry.is_empty()
