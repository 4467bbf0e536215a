"""ContainerMutator implementation backed by mkvtoolnix."""

import logging
from collections.abc import Sequence
from pathlib import Path

from mkv_editor.config.models import AppConfig
from mkv_editor.executor.commands import MutationCommand
from mkv_editor.executor.interface import Executor, MutationError
from mkv_editor.executor.mkvextract import MkvextractExecutor
from mkv_editor.executor.mkvmerge import MkvmergeExecutor
from mkv_editor.executor.mkvpropedit import MkvpropeditExecutor

logger = logging.getLogger(__name__)


class MkvToolnixMutator:
    """Apply mutation commands with the first executor that can handle them."""

    def __init__(self, executors: Sequence[Executor] | None = None) -> None:
        """Initialize the mutator.

        Args:
            executors: Executors to dispatch to, tried in order. None uses
                the mkvpropedit, mkvmerge and mkvextract executors with
                their default timeouts.
        """
        self._executors: list[Executor] = list(
            executors
            if executors is not None
            else (MkvpropeditExecutor(), MkvmergeExecutor(), MkvextractExecutor())
        )

    @classmethod
    def from_config(cls, config: AppConfig) -> "MkvToolnixMutator":
        """Build the default executor set with configured tool paths and timeouts.

        Tools without a configured path are looked up on the PATH when
        first used.
        """
        timeouts = config.timeouts
        return cls(
            [
                MkvpropeditExecutor(
                    timeout=timeouts.edit_seconds, tool_path=config.tools.mkvpropedit
                ),
                MkvmergeExecutor(
                    timeout=timeouts.remux_seconds, tool_path=config.tools.mkvmerge
                ),
                MkvextractExecutor(
                    timeout=timeouts.edit_seconds, tool_path=config.tools.mkvextract
                ),
            ]
        )

    def apply(self, path: Path, command: MutationCommand) -> None:
        """Apply a command to the file at ``path``.

        Raises:
            MutationError: If no executor handles the command or the
                executor reports a failure.
        """
        executor = next((e for e in self._executors if e.can_handle(command)), None)
        if executor is None:
            raise MutationError(f"No executor for command {type(command).__name__}")

        result = executor.execute(path, command)
        if not result.success:
            raise MutationError(result.message)
        logger.debug("Command applied: %s", result.message)
