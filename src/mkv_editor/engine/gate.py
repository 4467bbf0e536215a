"""Execution gate: run mutations now, or queue them for a final pass."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from mkv_editor.executor.commands import MutationCommand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueuedAction:
    """A mutation waiting for the batch replay."""

    command: MutationCommand
    description: str


class ExecutionGate:
    """Decide whether a mutation runs immediately or is deferred.

    One gate per file session. With batch mode off every submitted command
    is executed on the spot; with batch mode on commands are queued in
    submission order and only executed by ``replay``.
    """

    def __init__(
        self, batch: bool, execute: Callable[[MutationCommand], None]
    ) -> None:
        """Initialize the gate.

        Args:
            batch: Whether mutations are deferred.
            execute: Callback applying one command to the owning file.
        """
        self._batch = batch
        self._execute = execute
        self._queue: list[QueuedAction] = []

    @property
    def batch(self) -> bool:
        return self._batch

    @property
    def pending(self) -> tuple[QueuedAction, ...]:
        """Queued actions, oldest first."""
        return tuple(self._queue)

    def submit(self, command: MutationCommand, description: str | None = None) -> bool:
        """Execute or queue a command.

        Returns:
            True if the command was executed now, False if it was queued.
        """
        description = description or command.describe()
        if not self._batch:
            logger.debug("Executing: %s", description)
            self._execute(command)
            return True

        logger.debug("Queued: %s", description)
        self._queue.append(QueuedAction(command=command, description=description))
        return False

    def replay(self) -> int:
        """Execute queued actions in order and empty the queue.

        If an action raises, the actions after it are dropped and the
        error propagates.

        Returns:
            Number of actions executed.
        """
        actions, self._queue = self._queue, []
        for count, action in enumerate(actions, start=1):
            logger.info("Running batched action: %s", action.description)
            try:
                self._execute(action.command)
            except Exception:
                dropped = len(actions) - count
                if dropped:
                    logger.warning("Dropping %d remaining batched action(s)", dropped)
                raise
        return len(actions)
