"""Core utilities package.

Pure helpers shared across the codebase, with no knowledge of the editing
engine.
"""

from mkv_editor.core.subprocess_utils import run_command

__all__ = [
    "run_command",
]
