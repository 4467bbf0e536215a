"""CLI scripts command: list the available editing scripts."""

import click

from mkv_editor.domain.enums import EditorScript

_DESCRIPTIONS = {
    EditorScript.ADD_MISSING_LANGUAGES: "Ask a language for tracks that have none",
    EditorScript.PROMPT_DEFAULT_AUDIO_LANGUAGE: "Choose the default audio language",
    EditorScript.SET_DEFAULT_SUBTITLE: "Pick the default subtitle from the audio",
    EditorScript.REMOVE_USELESS_AUDIO_TRACKS: "Remove audio not default nor French",
    EditorScript.SANITIZE_TITLE: "Rename to 'Title (Year)' and set the title",
    EditorScript.EXTRACT_SUBTITLES: "Extract a subtitle track next to the file",
}


@click.command("scripts")
def scripts_command() -> None:
    """List editing scripts, in the order they run on a file."""
    width = max(len(s.value) for s in EditorScript)
    for script in EditorScript:
        marker = "*" if script.is_run_by_default else " "
        click.echo(f"{marker} {script.value:<{width}}  {_DESCRIPTIONS[script]}")
    click.echo()
    click.echo("* run by default")
