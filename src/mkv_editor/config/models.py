"""Configuration data models.

This module defines dataclasses for mkv-editor configuration options.
AppConfig holds the settings read from the config file and environment;
EditorConfig holds the per-run options chosen on the command line.
"""

from dataclasses import dataclass, field
from pathlib import Path

from mkv_editor.config.exceptions import ConfigError
from mkv_editor.domain.enums import EditorScript


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    All paths are optional. If not specified, tools are looked up in PATH.
    """

    mkvmerge: Path | None = None
    mkvpropedit: Path | None = None
    mkvextract: Path | None = None


@dataclass
class TimeoutsConfig:
    """Subprocess timeouts in seconds (0 disables the timeout)."""

    # mkvmerge -J
    inspect_seconds: int = 120

    # mkvpropedit, mkvextract
    edit_seconds: int = 300

    # mkvmerge remux when stripping tracks
    remux_seconds: int = 1800

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("inspect_seconds", "edit_seconds", "remux_seconds"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


@dataclass
class ScanConfig:
    """Configuration for collection traversal."""

    # File extensions (without dot) processed by the walker
    extensions: list[str] = field(default_factory=lambda: ["mkv"])

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.extensions:
            raise ValueError("extensions must not be empty")

    @property
    def suffixes(self) -> tuple[str, ...]:
        """Extensions as casefolded suffixes, e.g. (".mkv",)."""
        return tuple(f".{ext.casefold().lstrip('.')}" for ext in self.extensions)


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class AppConfig:
    """Main configuration container.

    Aggregates all configuration sections of config.toml.
    """

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    timeouts: TimeoutsConfig = field(default_factory=TimeoutsConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def get_tool_path(self, tool_name: str) -> Path | None:
        """Get configured path for a tool.

        Args:
            tool_name: Name of the tool (mkvmerge, mkvpropedit, mkvextract).

        Returns:
            Configured path or None if not configured.
        """
        return getattr(self.tools, tool_name.lower(), None)


@dataclass(frozen=True)
class EditorConfig:
    """Options of one editing run.

    Immutable for the duration of the run. Only ``batch`` and ``scripts``
    change what the engine does; ``verbose`` and ``debug`` only change what
    gets logged (``debug`` also dumps each snapshot to the cache directory).
    """

    verbose: bool = False
    debug: bool = False
    batch: bool = False
    scripts: frozenset[EditorScript] = frozenset()

    def is_enabled(self, script: EditorScript) -> bool:
        """Return True if the script is part of this run."""
        return script in self.scripts

    def validate(self) -> None:
        """Check option combinations that would make a run inconsistent.

        Batched actions are computed from snapshots taken during the scan
        pass, so only a single script may contribute to a batch.

        Raises:
            ConfigError: If batch mode is enabled with anything other than
                exactly one script.
        """
        if self.batch and len(self.scripts) != 1:
            raise ConfigError(
                "You can only run a single script in batch mode to avoid "
                f"inconsistencies ({len(self.scripts)} selected)"
            )
