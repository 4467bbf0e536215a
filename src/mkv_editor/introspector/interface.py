"""ContainerInspector interface for track metadata extraction."""

from pathlib import Path
from typing import Protocol

from mkv_editor.domain.models import TrackSnapshot


class InspectionError(Exception):
    """Raised when a container cannot be inspected."""

    pass


class ContainerInspector(Protocol):
    """Protocol for container inspection implementations.

    Implementations turn a file on disk into a TrackSnapshot. The engine
    never retries a failed inspection.
    """

    def fetch(self, path: Path) -> TrackSnapshot:
        """Inspect a container.

        Args:
            path: Path to the media file.

        Returns:
            TrackSnapshot describing the file as it is now.

        Raises:
            InspectionError: If the file is not a valid container or the
                external tool fails.
        """
        ...
