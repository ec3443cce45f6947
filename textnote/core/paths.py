#!/usr/bin/env python3
"""
paths.py
-------------------
Path resolution for textnote application files.

Everything lives under one application directory, overridable through the
environment so tests and alternate setups never touch the real one:

    ~/.textnote/            # TEXTNOTE_DIR
    ├── config.yml          # TEXTNOTE_CONFIG overrides this file alone
    ├── notes/              # Daily note files (<YYYY-MM-DD>.txt)
    ├── archive/            # Monthly archive files (archive-<Mon><YYYY>.txt)
    └── logs/               # Application logs

Paths are computed on call, not at import, so environment changes made
after import are honoured.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path
from typing import Mapping, Optional

APP_DIR_ENV = "TEXTNOTE_DIR"
CONFIG_FILE_ENV = "TEXTNOTE_CONFIG"
CONFIG_FILE_NAME = "config.yml"


def get_app_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Application directory: $TEXTNOTE_DIR, else ~/.textnote.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Path to the application directory (not created)
    """
    env = os.environ if environ is None else environ
    override = env.get(APP_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".textnote"


def get_config_file_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Config file: $TEXTNOTE_CONFIG, else <app dir>/config.yml."""
    env = os.environ if environ is None else environ
    override = env.get(CONFIG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return get_app_dir(env) / CONFIG_FILE_NAME


def get_notes_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    return get_app_dir(environ) / "notes"


def get_archive_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    return get_app_dir(environ) / "archive"


def get_log_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    return get_app_dir(environ) / "logs"
