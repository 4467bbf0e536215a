"""Operator interaction for mkv-editor."""

from mkv_editor.operator.console import ConsoleOperator
from mkv_editor.operator.interface import AskKind, Operator, is_confirmed

__all__ = [
    "AskKind",
    "ConsoleOperator",
    "Operator",
    "is_confirmed",
]
