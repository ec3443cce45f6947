#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for textnote.

Exception Hierarchy:
    Exception (built-in)
    ├── NoteParseError - Base for text -> structure failures
    │   └── EmptyInputError - Zero-length input handed to a parser
    ├── ConfigurationError - Invalid configuration values or file
    │   └── InvalidDelimiterPatternError - Delimiters cannot mark lines
    ├── NoteFileError - Note file read/write failures
    └── ArchiveError - Archiving of old notes failed
    KeyError (built-in)
    └── SectionNotFoundError - Document has no section with that name

Usage:
    from textnote.core.exceptions import EmptyInputError, ConfigurationError

    try:
        document = parse_document(text, config)
    except EmptyInputError:
        document = Document()
"""


class NoteParseError(Exception):
    """
    Base exception for parsing failures.

    Malformed note text is not an error: any line shaped like a header is
    taken as an entry boundary. This is only raised for input the parser
    cannot start from at all.
    """

    pass


class EmptyInputError(NoteParseError):
    """
    Exception for zero-length parser input.

    Raised by parse_section and parse_document. Callers decide whether an
    empty note file is a fresh file or a problem.

    Examples:
        >>> raise EmptyInputError("cannot parse Section from empty input")
    """

    pass


class ConfigurationError(Exception):
    """
    Exception for invalid configuration.

    Raised when the configuration file cannot be read as YAML, holds
    unknown keys, or holds values of the wrong type.

    Examples:
        >>> raise ConfigurationError("unknown configuration key: 'sectoin'")
        >>> raise ConfigurationError("archive.after_days must be >= 0, got -1")
    """

    pass


class InvalidDelimiterPatternError(ConfigurationError):
    """
    Exception for delimiters that cannot identify a line.

    Raised when building a ParserConfig whose prefix/suffix values could
    never delimit a single line: a newline inside a delimiter, or an entry
    prefix and suffix that are both empty (every line would be a header).
    Also raised by parse_document when section delimiters are empty and no
    section names are configured.

    Examples:
        >>> raise InvalidDelimiterPatternError("invalid entry prefix [] or suffix []")
    """

    pass


class SectionNotFoundError(KeyError):
    """
    Exception for looking up a section a Document does not have.

    Subclasses KeyError so it reads naturally at dict-like call sites.
    """

    def __str__(self) -> str:
        return f"section not found: {self.args[0]!r}" if self.args else "section not found"


class NoteFileError(Exception):
    """
    Exception for note file I/O failures.

    Examples:
        >>> raise NoteFileError("cannot read note file: notes/2024-01-15.txt")
    """

    pass


class ArchiveError(Exception):
    """
    Exception for archive pipeline failures.

    Wraps parse and file errors met while archiving, naming the file that
    caused them. Nothing is written once an ArchiveError is raised during
    the read phase.

    Examples:
        >>> raise ArchiveError("cannot archive notes/2024-01-02.txt: empty file")
    """

    pass
