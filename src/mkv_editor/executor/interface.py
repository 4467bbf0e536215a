"""Executor and mutator protocols, and tool resolution utilities.

Executors apply one kind of command to a file with one mkvtoolnix binary.
The ContainerMutator is the single entry point the editing engine uses;
it routes each command to the executor able to handle it.
"""

import shutil
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from mkv_editor.executor.commands import MutationCommand

MKVTOOLNIX_TOOLS: tuple[str, ...] = ("mkvmerge", "mkvpropedit", "mkvextract")


class MutationError(Exception):
    """Raised when a command could not be applied to a file."""

    pass


class ToolNotAvailableError(RuntimeError):
    """Raised when a required external tool cannot be found."""

    pass


@dataclass(frozen=True)
class ExecutorResult:
    """Result of an executor operation."""

    success: bool
    """True if the operation succeeded."""

    message: str = ""
    """Human-readable message describing the result."""


class Executor(Protocol):
    """Protocol for execution adapters."""

    def can_handle(self, command: MutationCommand) -> bool:
        """Check if this executor can apply the given command."""
        ...

    def execute(self, path: Path, command: MutationCommand) -> ExecutorResult:
        """Apply the command to the file at ``path``.

        Returns:
            ExecutorResult; executors report failures instead of raising.
        """
        ...


class ContainerMutator(Protocol):
    """Protocol for applying mutation commands to containers."""

    def apply(self, path: Path, command: MutationCommand) -> None:
        """Apply a command to the file at ``path``.

        Raises:
            MutationError: If the command could not be applied.
        """
        ...


# =============================================================================
# Tool Resolution Functions
# =============================================================================
# Configured paths (config file or MKV_EDITOR_*_PATH) take precedence over
# the system PATH. Results are cached for the life of the process.

_tool_paths: dict[str, Path | None] = {}
_tool_lock = threading.Lock()


def _resolve_tool(tool_name: str) -> Path | None:
    from mkv_editor.config import get_config

    configured = get_config().get_tool_path(tool_name)
    if configured is not None:
        return configured if configured.exists() else None

    found = shutil.which(tool_name)
    return Path(found) if found else None


def get_tool_path(tool_name: str) -> Path | None:
    """Get path to a tool, or None if not available."""
    with _tool_lock:
        if tool_name not in _tool_paths:
            _tool_paths[tool_name] = _resolve_tool(tool_name)
        return _tool_paths[tool_name]


def refresh_tool_paths() -> None:
    """Forget resolved tool paths (call after changing configuration)."""
    with _tool_lock:
        _tool_paths.clear()


def check_tool_availability() -> dict[str, bool]:
    """Check which mkvtoolnix tools are available.

    Returns:
        Dict mapping tool name to availability.
    """
    return {name: get_tool_path(name) is not None for name in MKVTOOLNIX_TOOLS}


def get_missing_tools() -> list[str]:
    """Get list of mkvtoolnix tools that are not available."""
    return [name for name, ok in check_tool_availability().items() if not ok]


def require_tool(tool_name: str) -> Path:
    """Get path to a required tool, raising an error if not available.

    Raises:
        ToolNotAvailableError: If the tool is not available.
    """
    path = get_tool_path(tool_name)
    if path is None:
        raise ToolNotAvailableError(
            f"Required tool not available: {tool_name}. Install mkvtoolnix "
            f"or set MKV_EDITOR_{tool_name.upper()}_PATH."
        )
    return path
