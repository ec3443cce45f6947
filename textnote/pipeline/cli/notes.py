"""
Note File Commands
------------------

Commands that read one note file, act on its sections and write it back.

Commands:
    - show: List sections with entry and word counts, or print one section
    - sort: Sort each section's entries by header
    - clear: Delete the contents of one section
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from textnote.core.logging_manager import TextnoteLogger, handle_cli_error
from textnote.dataclasses.parsers import parse_document
from textnote.pipeline.cli import get_config
from textnote.utils.fs import read_note, write_note
from textnote.utils.txt import compute_word_count

FILE_ARGUMENT = click.argument("file", type=click.Path(exists=True, dir_okay=False))


@click.command()
@FILE_ARGUMENT
@click.option("-s", "--section", "section_name", default=None, help="Print only this section")
@click.pass_context
def show(ctx: click.Context, file: str, section_name: Optional[str]) -> None:
    """Show the sections of a note file."""
    try:
        config = get_config(ctx).parser
        document = parse_document(read_note(Path(file)), config)

        if section_name:
            section = document.get_section(section_name)
            click.echo(section.render(config.section_prefix, config.section_suffix), nl=False)
            return

        click.echo(f"📄 {Path(file).name}: {len(document.sections)} sections")
        for section in document.sections:
            if section.is_empty():
                click.echo(f"  • {section.name}: empty")
                continue
            words = compute_word_count(entry.text for entry in section.contents)
            click.echo(f"  • {section.name}: {len(section.contents)} entries, {words} words")

    except Exception as e:
        handle_cli_error(ctx, e, "show", additional_context={"file": file})


@click.command()
@FILE_ARGUMENT
@click.option("--dry-run", is_flag=True, help="Print the sorted note instead of writing it")
@click.pass_context
def sort(ctx: click.Context, file: str, dry_run: bool) -> None:
    """Sort every section's entries by header."""
    logger: TextnoteLogger = ctx.obj["logger"]
    path = Path(file)
    try:
        config = get_config(ctx).parser
        document = parse_document(read_note(path), config)
        document.sort_contents()
        rendered = document.render(config)

        if dry_run:
            click.echo(rendered, nl=False)
            return

        write_note(path, rendered)
        logger.log_operation("sort", {"file": path, "sections": len(document.sections)})
        click.echo(f"✅ Sorted {len(document.sections)} sections in {path.name}")

    except Exception as e:
        handle_cli_error(ctx, e, "sort", additional_context={"file": file})


@click.command()
@FILE_ARGUMENT
@click.option("-s", "--section", "section_name", required=True, help="Section to clear")
@click.option("--dry-run", is_flag=True, help="Print the result instead of writing it")
@click.pass_context
def clear(ctx: click.Context, file: str, section_name: str, dry_run: bool) -> None:
    """Delete the contents of one section, keeping its name line."""
    logger: TextnoteLogger = ctx.obj["logger"]
    path = Path(file)
    try:
        config = get_config(ctx).parser
        document = parse_document(read_note(path), config)
        document.clear_section(section_name)
        rendered = document.render(config)

        if dry_run:
            click.echo(rendered, nl=False)
            return

        write_note(path, rendered)
        logger.log_operation("clear", {"file": path, "section": section_name})
        click.echo(f"✅ Cleared section {section_name} in {path.name}")

    except Exception as e:
        handle_cli_error(
            ctx, e, "clear", additional_context={"file": file, "section": section_name}
        )


__all__ = ["show", "sort", "clear"]
