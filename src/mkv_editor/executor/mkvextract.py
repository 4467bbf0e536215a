"""Subtitle extraction executor using mkvextract."""

import logging
import subprocess  # nosec B404 - for TimeoutExpired / SubprocessError
from pathlib import Path

from mkv_editor.core.subprocess_utils import run_command
from mkv_editor.executor.commands import ExtractTrack, MutationCommand
from mkv_editor.executor.interface import ExecutorResult, require_tool

logger = logging.getLogger(__name__)

# Matroska subtitle codec IDs to the extension mkvextract output should get
SUBTITLE_EXTENSIONS: dict[str, str] = {
    "S_TEXT/UTF8": "srt",
    "S_TEXT/ASCII": "srt",
    "S_TEXT/ASS": "ass",
    "S_ASS": "ass",
    "S_TEXT/SSA": "ssa",
    "S_SSA": "ssa",
    "S_TEXT/WEBVTT": "vtt",
    "S_HDMV/PGS": "sup",
    "S_VOBSUB": "sub",
}

DEFAULT_SUBTITLE_EXTENSION = "sub"


def extracted_track_path(path: Path, command: ExtractTrack) -> Path:
    """Return where an extracted track is written.

    ``<directory>/<file stem>.<language>.<extension>``, next to the
    container.
    """
    extension = SUBTITLE_EXTENSIONS.get(
        command.codec_id or "", DEFAULT_SUBTITLE_EXTENSION
    )
    return path.with_name(f"{path.stem}.{command.language}.{extension}")


class MkvextractExecutor:
    """Executor extracting a single track with ``mkvextract tracks``."""

    DEFAULT_TIMEOUT: int = 300

    def __init__(
        self, timeout: int | None = None, tool_path: Path | None = None
    ) -> None:
        self._tool_path: Path | None = tool_path
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT

    @property
    def tool_path(self) -> Path:
        """Get path to mkvextract, verifying availability."""
        if self._tool_path is None:
            self._tool_path = require_tool("mkvextract")
        return self._tool_path

    def can_handle(self, command: MutationCommand) -> bool:
        return isinstance(command, ExtractTrack)

    def execute(self, path: Path, command: MutationCommand) -> ExecutorResult:
        """Extract the track to a file next to ``path``."""
        if not isinstance(command, ExtractTrack):
            return ExecutorResult(
                success=False, message=f"Unsupported command: {type(command).__name__}"
            )

        output_path = extracted_track_path(path, command)
        cmd = [
            str(self.tool_path),
            str(path),
            "tracks",
            f"{command.track_id}:{output_path}",
        ]

        logger.info("Extracting track %d to %s", command.track_id, output_path)
        try:
            stdout, stderr, returncode = run_command(cmd, timeout=self._timeout)
        except subprocess.TimeoutExpired:
            return ExecutorResult(
                success=False,
                message=f"mkvextract timed out after {self._timeout}s for {path}",
            )
        except (subprocess.SubprocessError, OSError) as e:
            return ExecutorResult(
                success=False, message=f"mkvextract execution failed for {path}: {e}"
            )

        # Same convention as mkvmerge: 1 means warnings only
        if returncode >= 2:
            return ExecutorResult(
                success=False,
                message=f"mkvextract failed for {path}: {(stderr or stdout).strip()}",
            )

        return ExecutorResult(success=True, message=f"Extracted to {output_path}")
