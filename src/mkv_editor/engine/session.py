"""Per-file editing session."""

import logging
from collections.abc import Callable
from pathlib import Path

from mkv_editor.config.models import EditorConfig
from mkv_editor.domain.enums import EditorScript
from mkv_editor.domain.models import TrackSnapshot
from mkv_editor.engine.gate import ExecutionGate, QueuedAction
from mkv_editor.engine.rules import (
    add_missing_languages,
    extract_subtitles,
    prompt_default_audio_language,
    remove_useless_audio_tracks,
    set_default_subtitle,
)
from mkv_editor.engine.title import sanitize_title
from mkv_editor.executor.commands import MutationCommand
from mkv_editor.executor.interface import ContainerMutator
from mkv_editor.introspector.formatters import format_json
from mkv_editor.introspector.interface import ContainerInspector
from mkv_editor.logging.context import (
    file_context,
    get_file_context,
    set_file_context,
)
from mkv_editor.operator.interface import Operator

logger = logging.getLogger(__name__)

# Order in which enabled scripts run on a file
RULES: tuple[tuple[EditorScript, Callable[["FileSession"], None]], ...] = (
    (EditorScript.ADD_MISSING_LANGUAGES, add_missing_languages),
    (EditorScript.PROMPT_DEFAULT_AUDIO_LANGUAGE, prompt_default_audio_language),
    (EditorScript.SET_DEFAULT_SUBTITLE, set_default_subtitle),
    (EditorScript.REMOVE_USELESS_AUDIO_TRACKS, remove_useless_audio_tracks),
    (EditorScript.SANITIZE_TITLE, sanitize_title),
    (EditorScript.EXTRACT_SUBTITLES, extract_subtitles),
)


class FileSession:
    """Editing state of one container.

    The session owns the file's current path: a rename updates it, and
    every command is applied to whatever the path is when the command
    runs. Mutations go through the session's ExecutionGate; each applied
    mutation is followed by a fresh inspection, so rules always read a
    snapshot of the file as it currently is.
    """

    def __init__(
        self,
        file_path: Path,
        config: EditorConfig,
        inspector: ContainerInspector,
        mutator: ContainerMutator,
        operator: Operator,
        debug_dir: Path | None = None,
    ) -> None:
        self._file_path = file_path
        self.config = config
        self.inspector = inspector
        self.mutator = mutator
        self.operator = operator
        self.debug_dir = debug_dir
        self._snapshot: TrackSnapshot | None = None
        self._gate = ExecutionGate(batch=config.batch, execute=self._apply)

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def file_name(self) -> str:
        return self._file_path.name

    @property
    def file_stem(self) -> str:
        return self._file_path.stem

    @property
    def snapshot(self) -> TrackSnapshot:
        """Last fetched snapshot (fetched on first access)."""
        if self._snapshot is None:
            self.refresh()
        assert self._snapshot is not None  # nosec B101
        return self._snapshot

    @property
    def pending_actions(self) -> tuple[QueuedAction, ...]:
        """Mutations waiting for ``replay`` (batch mode only)."""
        return self._gate.pending

    def refresh(self) -> TrackSnapshot:
        """Re-inspect the file at its current path.

        Raises:
            InspectionError: If the file cannot be inspected.
        """
        self._snapshot = self.inspector.fetch(self._file_path)
        return self._snapshot

    def submit(self, command: MutationCommand) -> bool:
        """Run or queue a mutation depending on batch mode.

        Returns:
            True if the mutation ran immediately.
        """
        return self._gate.submit(command)

    def _apply(self, command: MutationCommand) -> None:
        logger.info("%s", command.describe())
        self.mutator.apply(self._file_path, command)
        self.refresh()

    def rename(self, new_name: str) -> Path:
        """Rename the file within its directory, immediately.

        Raises:
            FileExistsError: If another file already has the new name.
        """
        new_path = self._file_path.with_name(new_name)
        if new_path == self._file_path:
            return new_path

        # Same inode covers case-only renames on case-insensitive filesystems
        if new_path.exists() and not new_path.samefile(self._file_path):
            raise FileExistsError(f"Cannot rename {self.file_name}: {new_path} exists")

        logger.info("Rename file %s => %s", self.file_name, new_name)
        old_path = self._file_path
        self._file_path.rename(new_path)
        self._file_path = new_path
        # Only follow the rename when this session owns the logging context
        if get_file_context() == str(old_path):
            set_file_context(new_path)
        return new_path

    def run(self) -> None:
        """Inspect the file and run every enabled script, in order.

        Raises:
            InspectionError: If the file cannot be inspected.
            MutationError: If an immediate mutation fails.
            FileExistsError: If a rename would overwrite another file.
        """
        with file_context(self._file_path):
            snapshot = self.refresh()
            if self.config.debug and self.debug_dir is not None:
                self._dump_snapshot(snapshot)

            for script, rule in RULES:
                if self.config.is_enabled(script):
                    logger.debug("Running script %s", script.value)
                    rule(self)

    def replay(self) -> int:
        """Run the mutations queued during ``run``.

        Returns:
            Number of mutations executed.
        """
        if not self._gate.pending:
            return 0
        with file_context(self._file_path):
            logger.info("Run batched actions for %s", self.file_name)
            return self._gate.replay()

    def _dump_snapshot(self, snapshot: TrackSnapshot) -> None:
        assert self.debug_dir is not None  # nosec B101
        self.debug_dir.mkdir(parents=True, exist_ok=True)
        target = self.debug_dir / f"{self.file_name}.json"
        target.write_text(format_json(snapshot), encoding="utf-8")
        logger.debug("Snapshot written to %s", target)
