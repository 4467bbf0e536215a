"""MKV metadata executor using mkvpropedit.

This module provides an executor for changing MKV metadata (default flags,
language, container title) using mkvpropedit. Edits are in-place; no remux
is needed.
"""

import logging
import subprocess  # nosec B404 - for TimeoutExpired / SubprocessError
import time
from pathlib import Path

from mkv_editor.core.subprocess_utils import run_command
from mkv_editor.executor.commands import (
    MutationCommand,
    SetContainerTitle,
    SetDefaultFlags,
    SetLanguage,
)
from mkv_editor.executor.interface import ExecutorResult, require_tool

logger = logging.getLogger(__name__)


class MkvpropeditExecutor:
    """Executor for MKV metadata changes using mkvpropedit.

    This executor handles:
    - SetLanguage (``--edit track:@N --set language=...``)
    - SetDefaultFlags (``--edit track:@N --set flag-default=0|1`` per track)
    - SetContainerTitle (``--edit info --set title=...``)

    Tracks are selected by Matroska track number (``track:@N``), not by
    position, so the selector stays valid whatever the track order.
    """

    DEFAULT_TIMEOUT: int = 300  # 5 minutes

    def __init__(
        self, timeout: int | None = None, tool_path: Path | None = None
    ) -> None:
        """Initialize the executor.

        Args:
            timeout: Subprocess timeout in seconds. None uses DEFAULT_TIMEOUT.
            tool_path: Explicit tool path. None resolves it on first use.
        """
        self._tool_path: Path | None = tool_path
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT

    @property
    def tool_path(self) -> Path:
        """Get path to mkvpropedit, verifying availability."""
        if self._tool_path is None:
            self._tool_path = require_tool("mkvpropedit")
        return self._tool_path

    def can_handle(self, command: MutationCommand) -> bool:
        """Return True for metadata-only commands."""
        return isinstance(command, (SetLanguage, SetDefaultFlags, SetContainerTitle))

    def execute(self, path: Path, command: MutationCommand) -> ExecutorResult:
        """Apply a metadata command to an MKV file.

        Args:
            path: File to edit in place.
            command: The command to apply.

        Returns:
            ExecutorResult with success status.
        """
        try:
            cmd = self._build_command(path, command)
        except ValueError as e:
            return ExecutorResult(
                success=False, message=f"Command build failed for {path}: {e}"
            )

        logger.info("Applying metadata change: %s", command.describe())
        start_time = time.monotonic()

        try:
            stdout, stderr, returncode = run_command(cmd, timeout=self._timeout)
        except subprocess.TimeoutExpired:
            return ExecutorResult(
                success=False,
                message=f"mkvpropedit timed out after {self._timeout}s for {path}",
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.error(
                "mkvpropedit execution failed",
                extra={"error": str(e), "target": str(path)},
            )
            return ExecutorResult(
                success=False, message=f"mkvpropedit failed for {path}: {e}"
            )

        elapsed = time.monotonic() - start_time
        # Exit code 1 means the edit was done with warnings
        if returncode == 1:
            logger.warning(
                "mkvpropedit reported warnings: %s", (stdout or stderr).strip()
            )
        elif returncode != 0:
            logger.error(
                "mkvpropedit returned non-zero exit code",
                extra={
                    "returncode": returncode,
                    "elapsed_seconds": round(elapsed, 3),
                },
            )
            return ExecutorResult(
                success=False,
                message=f"mkvpropedit failed for {path}: "
                f"{(stderr or stdout).strip()}",
            )

        logger.debug(
            "Metadata change applied",
            extra={"elapsed_seconds": round(elapsed, 3)},
        )
        return ExecutorResult(success=True, message=command.describe())

    def _build_command(self, path: Path, command: MutationCommand) -> list[str]:
        """Build the mkvpropedit command line for a command."""
        return [str(self.tool_path), str(path), *self._command_to_args(command)]

    @staticmethod
    def _command_to_args(command: MutationCommand) -> list[str]:
        """Convert a command to mkvpropedit arguments."""
        if isinstance(command, SetContainerTitle):
            if command.title == "":
                return ["--edit", "info", "--delete", "title"]
            return ["--edit", "info", "--set", f"title={command.title}"]

        if isinstance(command, SetLanguage):
            if not command.language:
                raise ValueError(
                    f"SetLanguage requires a language for track {command.track_number}"
                )
            return [
                "--edit",
                f"track:@{command.track_number}",
                "--set",
                f"language={command.language}",
            ]

        if isinstance(command, SetDefaultFlags):
            if not command.flags:
                raise ValueError("SetDefaultFlags requires at least one track")
            args: list[str] = []
            for number, flag in command.flags:
                args.extend(
                    ["--edit", f"track:@{number}", "--set", f"flag-default={int(flag)}"]
                )
            return args

        raise ValueError(f"Unsupported command: {type(command).__name__}")
