"""Operator interface: the human answering questions during a run."""

from enum import Enum
from typing import Protocol


class AskKind(Enum):
    """Shape of the answer expected from the operator."""

    FREE_TEXT = "free_text"
    CONFIRMATION = "confirmation"
    INDEX = "index"


class Operator(Protocol):
    """Protocol for blocking prompt/answer interaction.

    ``ask`` always returns the raw answer as a string (an empty string
    when the operator gave nothing and there is no default). Rules do their
    own validation and re-ask on invalid input.
    """

    def ask(self, prompt: str, kind: AskKind, default: str | None = None) -> str:
        """Ask a question and block until it is answered."""
        ...

    def notify(self, message: str) -> None:
        """Show a message to the operator."""
        ...


CONFIRMATION_ANSWERS = frozenset({"y", "yes"})


def is_confirmed(answer: str) -> bool:
    """Return True if a confirmation answer means yes (case-insensitive)."""
    return answer.strip().lower() in CONFIRMATION_ANSWERS
