"""MKV track stripping executor using mkvmerge.

Removing tracks requires a remux (no re-encoding): mkvmerge writes a copy
of the file containing only the kept tracks, then the copy replaces the
original.
"""

import logging
import subprocess  # nosec B404 - for TimeoutExpired / SubprocessError
import time
from dataclasses import dataclass
from pathlib import Path

from mkv_editor.core.subprocess_utils import run_command
from mkv_editor.domain.enums import TrackType
from mkv_editor.executor.commands import MutationCommand, StripTracks
from mkv_editor.executor.interface import ExecutorResult, require_tool

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".temp"


@dataclass(frozen=True)
class TrackTypeOptions:
    """mkvmerge options selecting the tracks of one type."""

    keep_option: str  # followed by a comma separated list of track IDs
    drop_all_option: str


TRACK_TYPE_OPTIONS: dict[TrackType, TrackTypeOptions] = {
    TrackType.VIDEO: TrackTypeOptions("--video-tracks", "--no-video"),
    TrackType.AUDIO: TrackTypeOptions("--audio-tracks", "--no-audio"),
    TrackType.SUBTITLES: TrackTypeOptions("--subtitle-tracks", "--no-subtitles"),
}


def temp_path_for(path: Path) -> Path:
    """Return the temporary output path used while remuxing ``path``."""
    return path.with_name(path.name + TEMP_SUFFIX)


class MkvmergeExecutor:
    """Executor for removing tracks of one type using mkvmerge.

    The replacement is done as write-temp, delete-original, rename-temp.
    This sequence is not atomic: a crash between the steps leaves either
    the original alongside an orphaned ``.temp`` file, or only the
    ``.temp`` file. Neither case is recovered automatically.
    """

    DEFAULT_TIMEOUT: int = 1800  # 30 minutes

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
        """Get path to mkvmerge, verifying availability."""
        if self._tool_path is None:
            self._tool_path = require_tool("mkvmerge")
        return self._tool_path

    def can_handle(self, command: MutationCommand) -> bool:
        """Return True for StripTracks commands."""
        return isinstance(command, StripTracks)

    def execute(self, path: Path, command: MutationCommand) -> ExecutorResult:
        """Remux ``path`` without the tracks that are not kept.

        Args:
            path: File to rewrite.
            command: A StripTracks command.

        Returns:
            ExecutorResult with success status.
        """
        if not isinstance(command, StripTracks):
            return ExecutorResult(
                success=False, message=f"Unsupported command: {type(command).__name__}"
            )

        temp_path = temp_path_for(path)
        cmd = self._build_command(path, temp_path, command)

        logger.info("Remuxing file: %s", command.describe())
        start_time = time.monotonic()

        try:
            stdout, stderr, returncode = run_command(cmd, timeout=self._timeout)
        except subprocess.TimeoutExpired:
            temp_path.unlink(missing_ok=True)
            return ExecutorResult(
                success=False,
                message=f"mkvmerge timed out after {self._timeout}s for {path}",
            )
        except (subprocess.SubprocessError, OSError) as e:
            temp_path.unlink(missing_ok=True)
            return ExecutorResult(
                success=False, message=f"mkvmerge execution failed for {path}: {e}"
            )

        # mkvmerge returns 0 for success, 1 for warnings, 2 for errors
        if returncode >= 2:
            temp_path.unlink(missing_ok=True)
            return ExecutorResult(
                success=False,
                message=f"mkvmerge failed for {path}: {(stderr or stdout).strip()}",
            )
        if returncode == 1:
            logger.warning("mkvmerge reported warnings: %s", stdout.strip())

        try:
            path.unlink()
            temp_path.rename(path)
        except OSError as e:
            logger.error(
                "Could not replace original with remuxed file",
                extra={"error": str(e), "temp_path": str(temp_path)},
            )
            return ExecutorResult(
                success=False,
                message=f"Failed to replace {path} with {temp_path}: {e}",
            )

        elapsed = time.monotonic() - start_time
        logger.info(
            "Tracks removed",
            extra={
                "track_type": command.track_type.value,
                "kept_ids": list(command.keep_ids),
                "elapsed_seconds": round(elapsed, 3),
            },
        )
        return ExecutorResult(success=True, message=command.describe())

    def _build_command(
        self, path: Path, temp_path: Path, command: StripTracks
    ) -> list[str]:
        """Build the mkvmerge remux command line."""
        options = TRACK_TYPE_OPTIONS[command.track_type]
        if command.keep_ids:
            selection = [
                options.keep_option,
                ",".join(str(track_id) for track_id in command.keep_ids),
            ]
        else:
            selection = [options.drop_all_option]
        return [str(self.tool_path), "-o", str(temp_path), *selection, str(path)]
