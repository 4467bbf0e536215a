"""Terminal operator using click prompts."""

import click

from mkv_editor.operator.interface import AskKind


class ConsoleOperator:
    """Operator backed by the terminal.

    Ctrl+C or end of input at a prompt raises KeyboardInterrupt, so that
    the walker stops instead of recording a per-file failure.
    """

    def ask(self, prompt: str, kind: AskKind, default: str | None = None) -> str:
        try:
            return self._prompt(prompt, kind, default)
        except click.Abort:
            raise KeyboardInterrupt from None

    def _prompt(self, prompt: str, kind: AskKind, default: str | None) -> str:
        if kind == AskKind.INDEX:
            # Non-integers are re-asked by click itself
            value = click.prompt(
                prompt,
                type=int,
                default=int(default) if default is not None else None,
            )
            return str(value)

        # An empty answer is a valid answer ("skip this track")
        value = click.prompt(
            prompt,
            type=str,
            default=default if default is not None else "",
            show_default=default is not None,
        )
        return value.strip()

    def notify(self, message: str) -> None:
        click.echo(message)
