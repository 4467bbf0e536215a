"""CLI run command: edit every Matroska file under a path."""

import dataclasses
import logging
import shutil
import sys
from pathlib import Path

import click

from mkv_editor.cli.exit_codes import ExitCode
from mkv_editor.config import (
    AppConfig,
    ConfigError,
    EditorConfig,
    ToolPathsConfig,
    get_cache_dir,
    get_config,
    parse_script_selection,
    verbosity_level,
)
from mkv_editor.domain.enums import EditorScript
from mkv_editor.engine import CollectionWalker, WalkResult
from mkv_editor.executor import MkvToolnixMutator
from mkv_editor.introspector import MkvmergeInspector
from mkv_editor.operator import ConsoleOperator

logger = logging.getLogger(__name__)


def _required_tools(editor_config: EditorConfig) -> list[str]:
    tools = ["mkvmerge", "mkvpropedit"]
    if editor_config.is_enabled(EditorScript.EXTRACT_SUBTITLES):
        tools.append("mkvextract")
    return tools


def _resolve_tools(
    app_config: AppConfig, required: list[str]
) -> tuple[ToolPathsConfig, list[str]]:
    """Resolve tool paths: configured path if it exists, else the PATH.

    Only the configuration selected for this run is consulted.

    Returns:
        Tuple of (resolved tool paths, names of required tools not found).
    """
    resolved: dict[str, Path | None] = {}
    for name in ("mkvmerge", "mkvpropedit", "mkvextract"):
        configured = app_config.get_tool_path(name)
        if configured is not None:
            resolved[name] = configured if configured.exists() else None
        else:
            found = shutil.which(name)
            resolved[name] = Path(found) if found else None
    missing = [name for name in required if resolved[name] is None]
    return ToolPathsConfig(**resolved), missing


def _print_summary(result: WalkResult, batch: bool) -> None:
    click.echo("")
    click.echo(
        f"Files: {result.files_found} found, {result.files_processed} processed, "
        f"{result.files_failed} failed"
    )
    if batch:
        click.echo(f"Batched actions run: {result.actions_replayed}")
    for path, message in result.errors:
        click.echo(f"  ✗ {path}: {message}", err=True)
    click.echo(f"Done in {result.elapsed_seconds:.1f}s")


@click.command("run")
@click.argument("root", type=click.Path(path_type=Path))
@click.option("--verbose", "-v", is_flag=True, help="Log what is being done.")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Log debug details and dump each snapshot to ~/.mkv-editor/content/.",
)
@click.option(
    "--batch",
    "-b",
    is_flag=True,
    help="Ask every question first, then apply all changes at the end.",
)
@click.option(
    "--scripts",
    "-s",
    "scripts",
    default="default",
    show_default=True,
    help="Scripts to run: 'all', 'default', or a comma separated list "
    "(see 'mkv-editor scripts').",
)
@click.pass_context
def run_collection_command(
    ctx: click.Context,
    root: Path,
    verbose: bool,
    debug: bool,
    batch: bool,
    scripts: str,
) -> None:
    """Edit the Matroska files under ROOT.

    ROOT is a single file or a directory walked recursively. Questions are
    asked in the terminal; an empty answer skips the question where that
    makes sense.

    In batch mode (-b) every question is asked first and all changes are
    applied once the whole tree has been scanned. Only one script may run
    in batch mode.
    """
    try:
        selected = parse_script_selection(scripts)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="'--scripts'") from e

    editor_config = EditorConfig(
        verbose=verbose, debug=debug, batch=batch, scripts=selected
    )
    try:
        editor_config.validate()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    level = verbosity_level(verbose, debug)
    if level is not None:
        from mkv_editor.cli import _configure_logging

        _configure_logging(ctx, level_override=level)

    if not root.exists():
        click.echo(f"Error: Path not found: {root}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    try:
        app_config = get_config(config_path=ctx.find_root().obj.get("config_path"))
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    tools, missing = _resolve_tools(app_config, _required_tools(editor_config))
    if missing:
        click.echo(
            f"Error: Required tool(s) not available: {', '.join(missing)}.\n"
            "Install mkvtoolnix: https://mkvtoolnix.download/",
            err=True,
        )
        sys.exit(ExitCode.TOOL_NOT_AVAILABLE)
    app_config = dataclasses.replace(app_config, tools=tools)

    walker = CollectionWalker(
        root=root,
        config=editor_config,
        inspector=MkvmergeInspector(
            mkvmerge_path=tools.mkvmerge, timeout=app_config.timeouts.inspect_seconds
        ),
        mutator=MkvToolnixMutator.from_config(app_config),
        operator=ConsoleOperator(),
        extensions=app_config.scan.suffixes,
        debug_dir=get_cache_dir() if debug else None,
    )

    click.echo(
        "Running mkv-editor with the following scripts:\n"
        + "\n".join(f"- {s.value}" for s in EditorScript if s in selected)
    )

    try:
        result = walker.run()
    except KeyboardInterrupt:
        click.echo("\nInterrupted.", err=True)
        sys.exit(ExitCode.INTERRUPTED)

    _print_summary(result, batch)

    if result.errors:
        sys.exit(ExitCode.OPERATION_FAILED)
