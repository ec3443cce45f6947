"""
Config Command
--------------

Display the configuration file path, its raw contents, or the active
configuration (file plus environment overrides) as YAML.
"""
from __future__ import annotations

import click
import yaml

from textnote.core.exceptions import ConfigurationError
from textnote.core.logging_manager import handle_cli_error
from textnote.core.paths import get_config_file_path
from textnote.pipeline.cli import get_config


@click.command()
@click.option("-p", "--path", "show_path", is_flag=True, help="Display path to configuration file")
@click.option(
    "-a",
    "--active",
    is_flag=True,
    help="Display the configuration in use (includes environment variable overrides)",
)
@click.option("-f", "--file", "show_file", is_flag=True, help="Display contents of configuration file (default)")
@click.pass_context
def config(ctx: click.Context, show_path: bool, active: bool, show_file: bool) -> None:
    """Show configuration."""
    config_path = ctx.obj.get("config_path") or get_config_file_path()

    if show_path:
        click.echo(f"configuration file path: [{config_path}]")
        return

    try:
        if active:
            data = get_config(ctx).to_dict()
            click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
            return

        if not config_path.is_file():
            raise ConfigurationError(f"cannot find configuration file [{config_path}]")
        click.echo(config_path.read_text(encoding="utf-8"), nl=False)

    except Exception as e:
        handle_cli_error(ctx, e, "config", additional_context={"path": config_path})


__all__ = ["config"]
