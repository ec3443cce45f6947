"""
txt.py
-------------------
Line-level helpers for delimited note text.

Section name lines and entry header lines are both recognised by shape
alone: a literal prefix at the start and a literal suffix at the end.
No regular expression is built from the configured delimiters.

Intended to be imported by the parsers and the CLI.
"""

from __future__ import annotations

# --- Standard library imports ---
from typing import Iterable

# --- Third-party library imports ---
from textstat import lexicon_count  # type: ignore


# ----- Delimiters -----
def is_delimited_line(line: str, prefix: str, suffix: str) -> bool:
    """
    input: line, a single line without its newline; prefix and suffix strings
    output: True if line starts with prefix and ends with suffix, with the
      two not overlapping
    process: literal startswith/endswith; the text between them is ignored
    """
    if len(line) < len(prefix) + len(suffix):
        return False
    return line.startswith(prefix) and line.endswith(suffix)


def strip_prefix_suffix(line: str, prefix: str, suffix: str) -> str:
    """
    input: line, prefix, suffix
    output: line with one trailing suffix, then one leading prefix, removed
    process: exact matches only; missing delimiters leave the line as is
    """
    return line.removesuffix(suffix).removeprefix(prefix)


def ensure_trailing_newline(text: str) -> str:
    """Append a newline unless text already ends with one."""
    return text if text.endswith("\n") else text + "\n"


# ----- Metrics -----
def compute_word_count(texts: Iterable[str]) -> int:
    """
    input: texts, pieces of note text
    output: number of words across all of them, punctuation ignored
    """
    text = " ".join(t.strip() for t in texts)
    if not text.strip():
        return 0
    return lexicon_count(text, removepunct=True)
