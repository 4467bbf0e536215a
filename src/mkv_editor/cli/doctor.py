"""mkv-editor doctor command for checking external tool availability."""

import sys

import click

from mkv_editor.cli.exit_codes import ExitCode
from mkv_editor.executor.interface import (
    MKVTOOLNIX_TOOLS,
    get_tool_path,
    refresh_tool_paths,
)


def _format_status(available: bool) -> str:
    """Format status for display."""
    return "✓" if available else "✗"


@click.command("doctor")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show resolved tool paths",
)
def doctor_command(verbose: bool) -> None:
    """Check that the mkvtoolnix tools are installed.

    Exit codes:
      0 - All tools available
      30 - At least one tool missing
    """
    refresh_tool_paths()

    click.echo("mkv-editor External Tool Check")
    click.echo("=" * 40)
    click.echo()
    click.echo("MKVToolNix:")
    click.echo("-" * 20)

    missing = False
    for name in MKVTOOLNIX_TOOLS:
        path = get_tool_path(name)
        status = _format_status(path is not None)
        path_info = f" ({path})" if path is not None and verbose else ""
        click.echo(f"  {status} {name}{path_info}")
        if path is None:
            missing = True
            click.echo("    └─ Install mkvtoolnix: https://mkvtoolnix.download/")

    click.echo()
    if missing:
        click.echo("Some tools are missing.")
        sys.exit(ExitCode.TOOL_NOT_AVAILABLE)
    click.echo("All tools available.")
