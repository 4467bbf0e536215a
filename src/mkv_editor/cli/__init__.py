"""CLI module for mkv-editor."""

import logging
import sys
from pathlib import Path

import click

from mkv_editor.cli.exit_codes import ExitCode
from mkv_editor.config import ConfigError, configure_logging_from_cli

logger = logging.getLogger(__name__)


def _configure_logging(
    ctx: click.Context, level_override: str | None = None
) -> None:
    """Configure logging from the group options stored on the context.

    Args:
        ctx: Click context whose ``obj`` holds the group options.
        level_override: Level requested by a subcommand (``-v``/``-d``).
            An explicit ``--log-level`` wins over it.
    """
    obj = ctx.find_root().obj
    try:
        configure_logging_from_cli(
            config_path=obj["config_path"],
            level=obj["log_level"] or level_override,
            file=obj["log_file"],
            format="json" if obj["log_json"] else None,
        )
    except (ConfigError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)


@click.group()
@click.version_option(package_name="mkv-editor")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.mkv-editor/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """mkv-editor - Batch-edit track metadata of Matroska files."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_level"] = log_level.lower() if log_level else None
    ctx.obj["log_file"] = log_file
    ctx.obj["log_json"] = log_json

    _configure_logging(ctx)


# Defer import to avoid circular dependency
def _register_commands():
    from mkv_editor.cli.doctor import doctor_command
    from mkv_editor.cli.inspect import inspect_command
    from mkv_editor.cli.run import run_collection_command
    from mkv_editor.cli.scripts import scripts_command

    main.add_command(run_collection_command)
    main.add_command(inspect_command)
    main.add_command(doctor_command)
    main.add_command(scripts_command)


_register_commands()
