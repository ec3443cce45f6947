"""
Archive Command
---------------

Move daily notes older than the configured age into monthly archive files.
"""
from __future__ import annotations

import click
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Optional

from textnote.core.logging_manager import TextnoteLogger, handle_cli_error
from textnote.core.paths import get_archive_dir, get_notes_dir
from textnote.pipeline.archive import archive_notes
from textnote.pipeline.cli import get_config


@click.command()
@click.option(
    "-n",
    "--notes-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of daily notes [default: <app dir>/notes]",
)
@click.option(
    "-a",
    "--archive-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of monthly archives [default: <app dir>/archive]",
)
@click.option(
    "--after-days",
    type=click.IntRange(min=0),
    default=None,
    help="Archive notes at least this many days old [default: from config]",
)
@click.option("-k", "--keep", is_flag=True, help="Keep daily notes after archiving them")
@click.option("--dry-run", is_flag=True, help="Preview without writing or deleting files")
@click.pass_context
def archive(
    ctx: click.Context,
    notes_dir: Optional[str],
    archive_dir: Optional[str],
    after_days: Optional[int],
    keep: bool,
    dry_run: bool,
) -> None:
    """Archive old daily notes into monthly files."""
    logger: TextnoteLogger = ctx.obj["logger"]
    notes_path = Path(notes_dir) if notes_dir else get_notes_dir()
    archive_path = Path(archive_dir) if archive_dir else get_archive_dir()

    try:
        config = get_config(ctx)
        if after_days is not None:
            config = replace(config, archive_after_days=after_days)

        if dry_run:
            click.echo("🗄️  Archiving notes (DRY RUN - no files will be modified)...")
        else:
            click.echo("🗄️  Archiving notes...")

        stats = archive_notes(
            notes_dir=notes_path,
            archive_dir=archive_path,
            today=date.today(),
            config=config,
            keep=keep,
            dry_run=dry_run,
            logger=logger,
        )

        click.echo("\n✅ Archive complete:")
        click.echo(f"  Notes archived: {stats.notes_archived}")
        click.echo(f"  Entries archived: {stats.entries_archived}")
        click.echo(f"  Archive files written: {stats.archives_written}")
        click.echo(f"  Notes deleted: {stats.notes_deleted}")
        click.echo(f"  Duration: {stats.duration():.2f}s")
        logger.log_info(f"Archive complete: {stats.summary()}")

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "archive",
            additional_context={"notes_dir": notes_path, "archive_dir": archive_path},
        )


__all__ = ["archive"]
