"""Unit tests for the logging file context."""

import logging

from mkv_editor.logging.context import (
    FileContextFilter,
    file_context,
    get_file_context,
    set_file_context,
)


def _filtered_record() -> logging.LogRecord:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", (), None)
    assert FileContextFilter().filter(record) is True
    return record


class TestFileContext:
    def test_no_context(self) -> None:
        record = _filtered_record()
        assert record.file_path is None
        assert record.file_tag == ""

    def test_context_manager_restores(self) -> None:
        with file_context("/movies/a.mkv"):
            assert get_file_context() == "/movies/a.mkv"
            with file_context("/movies/b.mkv"):
                assert get_file_context() == "/movies/b.mkv"
            assert get_file_context() == "/movies/a.mkv"
        assert get_file_context() is None

    def test_file_tag_uses_name(self) -> None:
        with file_context("/movies/Alien (1979).mkv"):
            record = _filtered_record()
        assert record.file_tag == "[Alien (1979).mkv] "

    def test_set_inside_context_is_undone(self) -> None:
        """A rename inside a session does not leak past the session."""
        with file_context("/movies/a.mkv"):
            set_file_context("/movies/A (2000).mkv")
            assert get_file_context() == "/movies/A (2000).mkv"
        assert get_file_context() is None
