"""CLI inspect command for mkv-editor."""

import sys
from pathlib import Path

import click

from mkv_editor.cli.exit_codes import ExitCode
from mkv_editor.config import ConfigError, get_config
from mkv_editor.introspector import (
    InspectionError,
    MkvmergeInspector,
    format_human,
    format_json,
)


@click.command("inspect")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def inspect_command(ctx: click.Context, file: str, output_format: str) -> None:
    """Show the tracks of a Matroska file as mkv-editor sees them.

    FILE is the path to the file to inspect.
    """
    file_path = Path(file)

    if not file_path.exists():
        click.echo(f"Error: File not found: {file_path}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    try:
        config = get_config(config_path=ctx.find_root().obj.get("config_path"))
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    try:
        inspector = MkvmergeInspector(
            mkvmerge_path=config.tools.mkvmerge,
            timeout=config.timeouts.inspect_seconds,
        )
    except InspectionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.TOOL_NOT_AVAILABLE)

    try:
        snapshot = inspector.fetch(file_path)
    except InspectionError as e:
        click.echo(f"Error: Could not parse file: {file_path}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.PARSE_ERROR)

    if output_format == "json":
        click.echo(format_json(snapshot))
    else:
        click.echo(format_human(snapshot))
