"""Collection walker: run file sessions over a directory tree."""

import logging
import stat
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from mkv_editor.config.models import EditorConfig
from mkv_editor.engine.session import FileSession
from mkv_editor.executor.interface import ContainerMutator
from mkv_editor.introspector.interface import ContainerInspector
from mkv_editor.operator.interface import Operator

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".mkv",)


@dataclass
class WalkResult:
    """Outcome of a walk."""

    files_found: int = 0
    files_processed: int = 0
    files_failed: int = 0
    actions_replayed: int = 0
    errors: list[tuple[Path, str]] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def success(self) -> bool:
        return not self.errors


class CollectionWalker:
    """Walk a file or directory tree and edit every matching container.

    Files are processed one at a time, depth-first, children sorted by name.
    A failure on one file is recorded and the walk goes on. In batch mode
    the sessions that completed are replayed, in traversal order, once
    every file has been scanned.
    """

    def __init__(
        self,
        root: Path,
        config: EditorConfig,
        inspector: ContainerInspector,
        mutator: ContainerMutator,
        operator: Operator,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        debug_dir: Path | None = None,
    ) -> None:
        self.root = root
        self.config = config
        self.inspector = inspector
        self.mutator = mutator
        self.operator = operator
        self.extensions = frozenset(
            (ext if ext.startswith(".") else f".{ext}").lower() for ext in extensions
        )
        self.debug_dir = debug_dir

    def run(self) -> WalkResult:
        """Process the tree.

        Raises:
            ConfigError: If the editor configuration is inconsistent. Raised
                before the filesystem is touched.
            FileNotFoundError: If the root does not exist.
        """
        self.config.validate()

        if not self.root.exists():
            raise FileNotFoundError(f"No such file or directory: {self.root}")

        logger.info(
            "Enabled scripts: %s",
            ", ".join(sorted(s.value for s in self.config.scripts)) or "none",
        )

        start = time.monotonic()
        result = WalkResult()
        completed: list[FileSession] = []

        for path in self._iter_files(self.root):
            result.files_found += 1
            session = self._make_session(path)
            try:
                session.run()
            except Exception as e:
                logger.exception("Failed to process %s", path)
                result.files_failed += 1
                result.errors.append((session.file_path, str(e)))
                continue
            result.files_processed += 1
            completed.append(session)

        if self.config.batch:
            for session in completed:
                try:
                    result.actions_replayed += session.replay()
                except Exception as e:
                    logger.exception("Batched actions failed for %s", session.file_path)
                    result.errors.append((session.file_path, str(e)))

        result.elapsed_seconds = time.monotonic() - start
        return result

    def _make_session(self, path: Path) -> FileSession:
        return FileSession(
            file_path=path,
            config=self.config,
            inspector=self.inspector,
            mutator=self.mutator,
            operator=self.operator,
            debug_dir=self.debug_dir,
        )

    def _matches(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    def _iter_files(self, path: Path) -> Iterator[Path]:
        """Yield matching files under ``path``, depth-first, sorted by name.

        Symlinked directories below the root are not followed.
        """
        try:
            mode = (path.stat() if path == self.root else path.lstat()).st_mode
        except OSError as e:
            logger.warning("Cannot stat %s: %s", path, e)
            return

        if stat.S_ISDIR(mode):
            try:
                children = sorted(path.iterdir(), key=lambda p: p.name)
            except OSError as e:
                logger.warning("Cannot list %s: %s", path, e)
                return
            for child in children:
                yield from self._iter_files(child)
        elif path == self.root or self._matches(path):
            # An explicitly given file is edited whatever its extension
            yield path
