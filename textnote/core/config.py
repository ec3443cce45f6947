#!/usr/bin/env python3
"""
config.py
-------------------
Configuration values for parsing, rendering and archiving notes.

Two frozen dataclasses:
- ParserConfig: the delimiter bundle handed to every parse/render call
  (section prefix/suffix, entry prefix/suffix, entry time format and the
  optional list of known section names)
- NoteConfig: ParserConfig plus note file naming and archive settings

Both validate themselves on construction, so an invalid delimiter is
reported before any note file is touched.

Configuration is read from a YAML file laid out in groups:

    section:
      prefix: "___"
      suffix: "___"
      names: [TODO, DONE, NOTES]
    entry:
      prefix: "["
      suffix: "]"
      time_format: "%Y-%m-%d"
    file:
      ext: txt
      time_format: "%Y-%m-%d"
    archive:
      after_days: 14
      file_prefix: "archive-"
      header_prefix: "ARCHIVE "
      month_format: "%b%Y"

Any key may be omitted; the defaults above apply. Environment variables
(TEXTNOTE_SECTION_PREFIX, TEXTNOTE_ENTRY_TIME_FORMAT, ...) override the file.

Usage:
    from textnote.core.config import init_app, load_config

    init_app()          # first run: app dir plus default config.yml
    config = load_config()
    document = parse_document(text, config.parser)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from textnote.core.exceptions import ConfigurationError, InvalidDelimiterPatternError
from textnote.core.paths import get_app_dir, get_config_file_path
from textnote.utils.txt import is_delimited_line

logger = logging.getLogger(__name__)


# ----- Parser bundle -----
@dataclass(frozen=True)
class ParserConfig:
    """
    Delimiters and formats consumed by the parser.

    Attributes:
        section_prefix: Text before a section name on its name line
        section_suffix: Text after a section name on its name line
        entry_prefix: Text opening an entry header line
        entry_suffix: Text closing an entry header line
        time_format: strftime format for the date inside new entry headers
        section_names: Known section names; when given, only exact
            name lines for these names start a section in a document
    """

    section_prefix: str = "___"
    section_suffix: str = "___"
    entry_prefix: str = "["
    entry_suffix: str = "]"
    time_format: str = "%Y-%m-%d"
    section_names: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        delimiters = {
            "section_prefix": self.section_prefix,
            "section_suffix": self.section_suffix,
            "entry_prefix": self.entry_prefix,
            "entry_suffix": self.entry_suffix,
            "time_format": self.time_format,
        }
        for name, value in delimiters.items():
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string, got {type(value).__name__}"
                )

        names = self.section_names
        if names is None:
            names = ()
        if not isinstance(names, (list, tuple)) or not all(isinstance(n, str) for n in names):
            raise ConfigurationError(
                f"section_names must be a list of strings, got {names!r}"
            )
        # Stored as a tuple to keep the config hashable
        object.__setattr__(self, "section_names", tuple(names))

        for name, value in delimiters.items():
            if "\n" in value:
                raise InvalidDelimiterPatternError(
                    f"{name} cannot contain a newline: {value!r}"
                )
        for section_name in self.section_names:
            if "\n" in section_name:
                raise InvalidDelimiterPatternError(
                    f"section name cannot contain a newline: {section_name!r}"
                )
        if not self.entry_prefix and not self.entry_suffix:
            raise InvalidDelimiterPatternError(
                f"invalid entry prefix [{self.entry_prefix}] "
                f"or suffix [{self.entry_suffix}]: every line would be a header"
            )

    def is_entry_header(self, line: str) -> bool:
        """True if line has the entry header shape (prefix...suffix)."""
        return is_delimited_line(line, self.entry_prefix, self.entry_suffix)

    def format_entry_header(self, day: date) -> str:
        """Header line for an entry dated `day`."""
        return f"{self.entry_prefix}{day.strftime(self.time_format)}{self.entry_suffix}"

    def format_section_name(self, name: str) -> str:
        """Section name line without its trailing newline."""
        return f"{self.section_prefix}{name}{self.section_suffix}"


# ----- Application config -----
@dataclass(frozen=True)
class NoteConfig:
    """
    Complete application configuration.

    Attributes:
        parser: Delimiter bundle for parsing and rendering
        file_ext: Extension of note and archive files, without the dot
        file_time_format: strftime format of daily note file stems
        archive_after_days: Notes at least this many days old get archived
        archive_file_prefix: Prefix of monthly archive file names
        archive_header_prefix: Prefix of the title line of an archive file
        archive_month_format: strftime format naming an archive month
    """

    parser: ParserConfig = field(default_factory=ParserConfig)
    file_ext: str = "txt"
    file_time_format: str = "%Y-%m-%d"
    archive_after_days: int = 14
    archive_file_prefix: str = "archive-"
    archive_header_prefix: str = "ARCHIVE "
    archive_month_format: str = "%b%Y"

    def __post_init__(self) -> None:
        if not isinstance(self.parser, ParserConfig):
            raise ConfigurationError("parser must be a ParserConfig")
        for name in (
            "file_ext",
            "file_time_format",
            "archive_file_prefix",
            "archive_header_prefix",
            "archive_month_format",
        ):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string, got {type(value).__name__}"
                )
        if isinstance(self.archive_after_days, bool) or not isinstance(
            self.archive_after_days, int
        ):
            raise ConfigurationError(
                f"archive_after_days must be an integer, got {self.archive_after_days!r}"
            )
        if self.archive_after_days < 0:
            raise ConfigurationError(
                f"archive_after_days must be >= 0, got {self.archive_after_days}"
            )
        ext = self.file_ext.lstrip(".")
        if not ext or "/" in ext:
            raise ConfigurationError(f"invalid file extension: {self.file_ext!r}")
        object.__setattr__(self, "file_ext", ext)

    # ---- Serialization ----
    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Nested mapping in the YAML file layout."""
        data: Dict[str, Dict[str, Any]] = {}
        for (group, key), (target, attr) in _YAML_FIELDS.items():
            source = self.parser if target == "parser" else self
            value = getattr(source, attr)
            if isinstance(value, tuple):
                value = list(value)
            data.setdefault(group, {})[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> NoteConfig:
        """
        Build a NoteConfig from a (possibly partial) YAML-layout mapping.

        Args:
            data: Mapping of group name -> mapping of key -> value

        Returns:
            NoteConfig with defaults for any key not given

        Raises:
            ConfigurationError: For unknown groups/keys or wrong types
            InvalidDelimiterPatternError: For unusable delimiters
        """
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"configuration must be a mapping, got {type(data).__name__}"
            )

        parser_kwargs: Dict[str, Any] = {}
        note_kwargs: Dict[str, Any] = {}
        for group, values in data.items():
            if group not in _GROUPS:
                raise ConfigurationError(f"unknown configuration group: {group!r}")
            if values is None:
                continue
            if not isinstance(values, Mapping):
                raise ConfigurationError(
                    f"configuration group {group!r} must be a mapping"
                )
            for key, value in values.items():
                target = _YAML_FIELDS.get((group, key))
                if target is None:
                    raise ConfigurationError(
                        f"unknown configuration key: '{group}.{key}'"
                    )
                kind, attr = target
                if kind == "parser":
                    parser_kwargs[attr] = value
                else:
                    note_kwargs[attr] = value

        return cls(parser=ParserConfig(**parser_kwargs), **note_kwargs)


# (group, key) in YAML -> (dataclass, attribute)
_YAML_FIELDS: Dict[Tuple[str, str], Tuple[str, str]] = {
    ("section", "prefix"): ("parser", "section_prefix"),
    ("section", "suffix"): ("parser", "section_suffix"),
    ("section", "names"): ("parser", "section_names"),
    ("entry", "prefix"): ("parser", "entry_prefix"),
    ("entry", "suffix"): ("parser", "entry_suffix"),
    ("entry", "time_format"): ("parser", "time_format"),
    ("file", "ext"): ("note", "file_ext"),
    ("file", "time_format"): ("note", "file_time_format"),
    ("archive", "after_days"): ("note", "archive_after_days"),
    ("archive", "file_prefix"): ("note", "archive_file_prefix"),
    ("archive", "header_prefix"): ("note", "archive_header_prefix"),
    ("archive", "month_format"): ("note", "archive_month_format"),
}

_GROUPS = frozenset(group for group, _ in _YAML_FIELDS)

ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "TEXTNOTE_SECTION_PREFIX": ("section", "prefix"),
    "TEXTNOTE_SECTION_SUFFIX": ("section", "suffix"),
    "TEXTNOTE_ENTRY_PREFIX": ("entry", "prefix"),
    "TEXTNOTE_ENTRY_SUFFIX": ("entry", "suffix"),
    "TEXTNOTE_ENTRY_TIME_FORMAT": ("entry", "time_format"),
    "TEXTNOTE_ARCHIVE_AFTER_DAYS": ("archive", "after_days"),
}


# ----- Loading -----
def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Read a YAML configuration file into a mapping.

    An empty file yields an empty mapping.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"cannot read configuration file [{path}]: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML in configuration file [{path}]: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"configuration file [{path}] must hold a mapping, got {type(data).__name__}"
        )
    return data


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Dict[str, Any]]:
    overrides: Dict[str, Dict[str, Any]] = {}
    for var, (group, key) in ENV_OVERRIDES.items():
        if var not in environ:
            continue
        value: Any = environ[var]
        if (group, key) == ("archive", "after_days"):
            try:
                value = int(value)
            except ValueError as e:
                raise ConfigurationError(f"{var} must be an integer, got {value!r}") from e
        overrides.setdefault(group, {})[key] = value
    return overrides


def load_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> NoteConfig:
    """
    Load the active configuration.

    Defaults, then the YAML file, then environment overrides.

    Args:
        path: Explicit config file; must exist. Default: the standard
            config file location, used only if present.
        environ: Environment mapping (default: os.environ)

    Returns:
        Validated NoteConfig

    Raises:
        ConfigurationError: Missing explicit file, unreadable file, bad values
        InvalidDelimiterPatternError: Delimiters that cannot mark lines
    """
    env = os.environ if environ is None else environ

    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigurationError(f"cannot find configuration file [{config_path}]")
        data = read_config_file(config_path)
    else:
        config_path = get_config_file_path(env)
        if config_path.is_file():
            data = read_config_file(config_path)
        else:
            logger.debug(f"No configuration file at {config_path}; using defaults")
            data = {}

    for group, values in _env_overrides(env).items():
        existing = data.get(group)
        merged = dict(existing) if isinstance(existing, Mapping) else {}
        merged.update(values)
        data[group] = merged

    return NoteConfig.from_dict(data)


def init_app(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Create the application directory and a default config file if missing.

    An existing config file is left untouched.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Path to the config file

    Raises:
        ConfigurationError: If the directory or file cannot be created
    """
    env = os.environ if environ is None else environ
    app_dir = get_app_dir(env)
    config_path = get_config_file_path(env)
    try:
        app_dir.mkdir(parents=True, exist_ok=True)
        if not config_path.exists():
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(NoteConfig().to_dict(), f, sort_keys=False)
            logger.info(f"Wrote default configuration to {config_path}")
    except OSError as e:
        raise ConfigurationError(
            f"cannot initialize application directory [{app_dir}]: {e}"
        ) from e
    return config_path
