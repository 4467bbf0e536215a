"""mkvmerge-based implementation of the ContainerInspector protocol."""

import json
import subprocess  # nosec B404 - for TimeoutExpired / SubprocessError
from pathlib import Path

from mkv_editor.core.subprocess_utils import run_command
from mkv_editor.domain.models import TrackSnapshot
from mkv_editor.introspector.interface import InspectionError
from mkv_editor.introspector.parsers import (
    get_identification_errors,
    parse_mkvmerge_output,
)


class MkvmergeInspector:
    """Inspect containers with ``mkvmerge -J`` (JSON identification)."""

    DEFAULT_TIMEOUT: int = 120

    def __init__(
        self, mkvmerge_path: Path | None = None, timeout: int | None = None
    ) -> None:
        """Initialize the inspector.

        Args:
            mkvmerge_path: Explicit path to mkvmerge. If not provided, uses
                the configured path or the system PATH.
            timeout: Subprocess timeout in seconds. None uses DEFAULT_TIMEOUT.

        Raises:
            InspectionError: If mkvmerge is not available.
        """
        self._mkvmerge_path = mkvmerge_path or self._get_configured_path()
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT

        if self._mkvmerge_path is None:
            raise InspectionError(
                "mkvmerge is not installed or not in PATH. "
                "Install mkvtoolnix, or configure a custom path via "
                "MKV_EDITOR_MKVMERGE_PATH or ~/.mkv-editor/config.toml"
            )

    @staticmethod
    def _get_configured_path() -> Path | None:
        from mkv_editor.executor.interface import get_tool_path

        return get_tool_path("mkvmerge")

    def fetch(self, path: Path) -> TrackSnapshot:
        """Inspect a container.

        Args:
            path: Path to the media file.

        Returns:
            TrackSnapshot of the file.

        Raises:
            InspectionError: If the file cannot be inspected.
        """
        if not path.exists():
            raise InspectionError(f"File not found: {path}")

        data = self._run_mkvmerge(path)

        errors = get_identification_errors(data)
        if errors:
            raise InspectionError(f"mkvmerge could not identify {path}: {'; '.join(errors)}")

        return parse_mkvmerge_output(path, data)

    def _run_mkvmerge(self, path: Path) -> dict:
        """Run ``mkvmerge -J`` and return the parsed JSON output."""
        try:
            stdout, stderr, returncode = run_command(
                [str(self._mkvmerge_path), "-J", str(path)], timeout=self._timeout
            )
        except subprocess.TimeoutExpired as e:
            raise InspectionError(
                f"mkvmerge timed out after {self._timeout}s for {path}"
            ) from e
        except (subprocess.SubprocessError, OSError) as e:
            raise InspectionError(f"mkvmerge failed for {path}: {e}") from e

        # -J prints JSON even for unrecognized files; exit code 2 without
        # output means mkvmerge itself failed
        if returncode >= 2 and not stdout.strip():
            raise InspectionError(f"mkvmerge failed for {path}: {stderr.strip()}")

        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as e:
            raise InspectionError(f"Invalid mkvmerge output for {path}: {e}") from e

        if not isinstance(data, dict):
            raise InspectionError(f"Invalid mkvmerge output for {path}")
        return data
