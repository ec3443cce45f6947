#!/usr/bin/env python3
"""
textnote CLI
------------

Command-line interface over note files. On first run the group creates the
application directory and a default config.yml.

Commands:
    - show: List a note's sections, or print one section
    - sort: Sort every section's entries by header
    - clear: Delete the contents of one section
    - archive: Move old daily notes into monthly archive files
    - config: Show the configuration file path, contents or active values

Usage:
    textnote show notes/2024-01-15.txt
    textnote show notes/2024-01-15.txt -s TODO
    textnote sort archive/archive-Jan2024.txt --dry-run
    textnote clear notes/2024-01-15.txt -s DONE
    textnote archive --keep
    textnote config --active
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from textnote.core.cli import setup_logger
from textnote.core.config import NoteConfig, init_app, load_config
from textnote.core.exceptions import ConfigurationError
from textnote.core.logging_manager import handle_cli_error
from textnote.core.paths import get_log_dir


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for log files [default: <app dir>/logs]",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file [default: $TEXTNOTE_CONFIG or <app dir>/config.yml]",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(
    ctx: click.Context, log_dir: Optional[str], config_path: Optional[str], verbose: bool
) -> None:
    """textnote - plain-text daily notes"""
    ctx.ensure_object(dict)
    resolved_log_dir = Path(log_dir) if log_dir else get_log_dir()
    ctx.obj["log_dir"] = resolved_log_dir
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["logger"] = setup_logger(resolved_log_dir, "cli")

    try:
        init_app()
    except ConfigurationError as e:
        handle_cli_error(ctx, e, "init")


def get_config(ctx: click.Context) -> NoteConfig:
    """
    Active configuration, loaded on first use and cached on the context.

    Loading is deferred so `config --path` works with a broken config file.
    """
    if "config" not in ctx.obj:
        ctx.obj["config"] = load_config(ctx.obj.get("config_path"))
    return ctx.obj["config"]


# Import and register commands from submodules
from .notes import show, sort, clear
from .archive import archive
from .config import config

cli.add_command(show)
cli.add_command(sort)
cli.add_command(clear)
cli.add_command(archive)
cli.add_command(config)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
