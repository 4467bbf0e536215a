"""Executor module for mkv-editor.

Mutation commands, the executors applying them with mkvtoolnix, and the
ContainerMutator used by the editing engine:

- SetLanguage, SetDefaultFlags, SetContainerTitle: MkvpropeditExecutor
- StripTracks: MkvmergeExecutor (remux)
- ExtractTrack: MkvextractExecutor
"""

from mkv_editor.executor.commands import (
    ExtractTrack,
    MutationCommand,
    SetContainerTitle,
    SetDefaultFlags,
    SetLanguage,
    StripTracks,
)
from mkv_editor.executor.interface import (
    ContainerMutator,
    Executor,
    ExecutorResult,
    MutationError,
    ToolNotAvailableError,
    check_tool_availability,
    get_missing_tools,
    get_tool_path,
    refresh_tool_paths,
    require_tool,
)
from mkv_editor.executor.mkvextract import MkvextractExecutor
from mkv_editor.executor.mkvmerge import MkvmergeExecutor
from mkv_editor.executor.mkvpropedit import MkvpropeditExecutor
from mkv_editor.executor.mutator import MkvToolnixMutator

__all__ = [
    # Commands
    "ExtractTrack",
    "MutationCommand",
    "SetContainerTitle",
    "SetDefaultFlags",
    "SetLanguage",
    "StripTracks",
    # Protocols and results
    "ContainerMutator",
    "Executor",
    "ExecutorResult",
    "MutationError",
    "ToolNotAvailableError",
    # Implementations
    "MkvToolnixMutator",
    "MkvextractExecutor",
    "MkvmergeExecutor",
    "MkvpropeditExecutor",
    # Tool resolution
    "check_tool_availability",
    "get_missing_tools",
    "get_tool_path",
    "refresh_tool_paths",
    "require_tool",
]
