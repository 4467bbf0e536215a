"""Shared test fixtures for mkv-editor.

The engine is exercised against in-memory fakes of its collaborators:

- FakeLibrary plays both the ContainerInspector and the ContainerMutator.
  Each fake container is a real (tiny) file whose content is a key into
  the library, so renaming the file on disk keeps its tracks.
- ScriptedOperator answers prompts from a list and records what it was
  asked and told.
"""

import dataclasses
import shutil
import tempfile
import uuid
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from mkv_editor.config.models import EditorConfig
from mkv_editor.domain.enums import EditorScript, TrackType
from mkv_editor.domain.models import Track, TrackSnapshot
from mkv_editor.engine.session import FileSession
from mkv_editor.executor.commands import (
    ExtractTrack,
    MutationCommand,
    SetContainerTitle,
    SetDefaultFlags,
    SetLanguage,
    StripTracks,
)
from mkv_editor.executor.interface import MutationError
from mkv_editor.introspector.interface import InspectionError
from mkv_editor.logging.context import set_file_context
from mkv_editor.operator.interface import AskKind


class FakeLibrary:
    """In-memory containers addressed through files on disk."""

    def __init__(self) -> None:
        self.titles: dict[str, str] = {}
        self.tracks: dict[str, list[Track]] = {}
        # (file name at the time of the call, command)
        self.applied: list[tuple[str, MutationCommand]] = []
        self.fetched: list[str] = []
        self.fail_on: set[str] = set()  # file names whose mutations fail

    # Track builders -------------------------------------------------------

    @staticmethod
    def video(track_id: int = 0) -> Track:
        return Track(id=track_id, track_type=TrackType.VIDEO, number=track_id + 1)

    @staticmethod
    def audio(track_id: int, language: str = "und", default: bool = False) -> Track:
        return Track(
            id=track_id,
            track_type=TrackType.AUDIO,
            number=track_id + 1,
            language=language,
            is_default=default,
        )

    @staticmethod
    def subtitle(
        track_id: int,
        language: str = "und",
        default: bool = False,
        codec_id: str | None = "S_TEXT/UTF8",
    ) -> Track:
        return Track(
            id=track_id,
            track_type=TrackType.SUBTITLES,
            number=track_id + 1,
            language=language,
            is_default=default,
            codec_id=codec_id,
        )

    # Library management ---------------------------------------------------

    def add(
        self, directory: Path, name: str, tracks: Iterable[Track], title: str = ""
    ) -> Path:
        """Create a fake container file and register its tracks."""
        key = uuid.uuid4().hex
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(key, encoding="utf-8")
        self.titles[key] = title
        self.tracks[key] = list(tracks)
        return path

    def _key(self, path: Path) -> str:
        try:
            key = path.read_text(encoding="utf-8")
        except OSError as e:
            raise InspectionError(f"File not found: {path}") from e
        if key not in self.tracks:
            raise InspectionError(f"Not a container: {path}")
        return key

    def snapshot_of(self, path: Path) -> TrackSnapshot:
        key = self._key(path)
        return TrackSnapshot(
            file_path=path, container_title=self.titles[key], tracks=tuple(self.tracks[key])
        )

    # ContainerInspector ---------------------------------------------------

    def fetch(self, path: Path) -> TrackSnapshot:
        self.fetched.append(path.name)
        return self.snapshot_of(path)

    # ContainerMutator -----------------------------------------------------

    def apply(self, path: Path, command: MutationCommand) -> None:
        self.applied.append((path.name, command))
        if path.name in self.fail_on:
            raise MutationError(f"mutation failed for {path}")

        key = self._key(path)
        tracks = self.tracks[key]
        if isinstance(command, SetLanguage):
            self.tracks[key] = [
                dataclasses.replace(t, language=command.language)
                if t.number == command.track_number
                else t
                for t in tracks
            ]
        elif isinstance(command, SetDefaultFlags):
            flags = command.as_dict()
            self.tracks[key] = [
                dataclasses.replace(t, is_default=flags[t.number])
                if t.number in flags
                else t
                for t in tracks
            ]
        elif isinstance(command, SetContainerTitle):
            self.titles[key] = command.title
        elif isinstance(command, StripTracks):
            self.tracks[key] = [
                t
                for t in tracks
                if t.track_type != command.track_type or t.id in command.keep_ids
            ]
        elif isinstance(command, ExtractTrack):
            pass

    def commands(self) -> list[MutationCommand]:
        return [command for _, command in self.applied]


class ScriptedOperator:
    """Operator answering from a script.

    An answer of None means "accept the default" (empty when none).
    """

    def __init__(self, answers: Iterable[str | None] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[tuple[str, AskKind, str | None]] = []
        self.messages: list[str] = []

    def ask(self, prompt: str, kind: AskKind, default: str | None = None) -> str:
        self.prompts.append((prompt, kind, default))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        answer = self.answers.pop(0)
        if answer is None:
            return default or ""
        return answer

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture(autouse=True)
def reset_file_context():
    """Clear the logging file context after each test."""
    yield
    set_file_context(None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def library() -> FakeLibrary:
    """Fake inspector and mutator sharing one set of containers."""
    return FakeLibrary()


@pytest.fixture
def scripted_operator() -> Callable[..., ScriptedOperator]:
    """Factory for operators answering from a list."""
    return ScriptedOperator


@pytest.fixture
def make_session(library: FakeLibrary) -> Callable[..., FileSession]:
    """Factory for sessions bound to the fake library."""

    def _make(
        path: Path,
        operator: ScriptedOperator | None = None,
        *,
        batch: bool = False,
        scripts: Iterable[EditorScript] = (),
        debug: bool = False,
        debug_dir: Path | None = None,
    ) -> FileSession:
        config = EditorConfig(batch=batch, debug=debug, scripts=frozenset(scripts))
        return FileSession(
            file_path=path,
            config=config,
            inspector=library,
            mutator=library,
            operator=operator or ScriptedOperator(),
            debug_dir=debug_dir,
        )

    return _make
