"""File logging tests — persistent log files for post-run diagnosis.

Run logs can be mirrored to a timestamped file while stderr output keeps
flowing.  Messages from library modules (``articlekit.*`` child loggers)
must reach the same file.  The stderr threshold is tuned separately.
"""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING

import pytest

from articlekit.errors import ActionableError, ErrorType
from articlekit.logging import configure_file_logging, console_level, logger, set_console_level
from articlekit.pipeline import ProcessingRunner

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def file_logging(tmp_path: Path) -> Iterator[tuple[Path, logging.FileHandler]]:
    """Enable file logging into ``tmp_path/logs`` and undo it afterwards."""
    log_dir = tmp_path / "logs"
    original_level = logger.level
    handler = configure_file_logging(log_dir=str(log_dir), level=logging.DEBUG)
    try:
        yield log_dir, handler
    finally:
        logger.removeHandler(handler)
        handler.close()
        logger.setLevel(original_level)


def _read_single_log(log_dir: Path) -> str:
    log_files = list(log_dir.glob("*.log"))
    assert len(log_files) == 1, f"Expected 1 log file, found {len(log_files)}"
    return log_files[0].read_text(encoding="utf-8")


class TestFileLogging:
    """REQUIREMENT: Run logs are persisted to disk for post-run diagnosis.

    WHO: The operator investigating a run after the terminal is gone
    WHAT: A timestamped log file is created on demand; it receives root
          and child-module messages at the requested level; stderr stays on
    WHY: Slug-collision warnings scroll past quickly in a long run
    """

    def test_log_file_created_in_requested_directory(self, file_logging) -> None:
        """A log file appears under the specified directory once a message is logged."""
        log_dir, _ = file_logging
        logger.info("test message")

        assert "test message" in _read_single_log(log_dir)

    def test_log_file_name_includes_timestamp(self, file_logging) -> None:
        """Log file names follow articlekit_YYYY-MM-DDTHH-MM-SS.log so runs sort chronologically."""
        log_dir, handler = file_logging
        name = os.path.basename(handler.baseFilename)

        assert re.match(r"articlekit_\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}\.log$", name), (
            f"Log filename '{name}' does not match timestamp pattern"
        )
        assert list(log_dir.glob("*.log")), "Handler did not create its file"

    def test_log_directory_is_created_if_absent(self, tmp_path: Path) -> None:
        """Nested log directories are created automatically."""
        log_dir = tmp_path / "nested" / "deep" / "logs"
        assert not log_dir.exists()
        handler = configure_file_logging(log_dir=str(log_dir))
        try:
            assert log_dir.is_dir()
        finally:
            logger.removeHandler(handler)
            handler.close()

    def test_child_module_warnings_reach_the_file(
        self, file_logging, make_settings, make_article
    ) -> None:
        """A slug-collision warning raised inside the pipeline is written to the log file."""
        log_dir, _ = file_logging
        runner = ProcessingRunner(make_settings())

        runner.run([make_article(title="Same"), make_article(title="same!")])

        content = _read_single_log(log_dir)
        assert "WARNING" in content
        assert "'same'" in content, "Collision warning did not name the slug"

    def test_debug_level_is_captured_when_requested(self, file_logging) -> None:
        """The file handler honours a DEBUG level so diagnostic detail is kept."""
        log_dir, _ = file_logging
        logger.debug("debug-level message")

        content = _read_single_log(log_dir)
        assert "debug-level message" in content
        assert "DEBUG" in content

    def test_stderr_handler_remains_attached(self, file_logging) -> None:
        """File logging is additive — the stderr StreamHandler is still present."""
        handler_types = [type(h) for h in logger.handlers]

        assert logging.StreamHandler in handler_types, (
            "stderr StreamHandler was removed when file logging was enabled"
        )


@pytest.fixture
def restore_levels() -> Iterator[None]:
    """Put the stderr threshold and logger level back after a test changes them."""
    original_console = console_level()
    original_logger = logger.level
    try:
        yield
    finally:
        set_console_level(original_console)
        logger.setLevel(original_logger)


class TestConsoleLevel:
    """REQUIREMENT: The stderr threshold is adjustable without touching file logging.

    WHO: The operator who wants quiet runs, or full detail while debugging
    WHAT: Level names or numbers set the stderr threshold; lowering it
          lowers the logger so DEBUG records flow; raising it keeps the
          logger where it was; unknown names raise VALIDATION
    WHY: A warnings-only console must not starve the log file of INFO lines
    """

    def test_level_name_sets_stderr_threshold(self, restore_levels) -> None:
        """'warning' (any case) resolves to logging.WARNING on the stderr handler."""
        result = set_console_level("warning")

        assert result == logging.WARNING
        assert console_level() == logging.WARNING

    def test_debug_lowers_logger_level(self, restore_levels) -> None:
        """DEBUG on stderr requires the logger itself to pass DEBUG records."""
        set_console_level(logging.DEBUG)

        assert logger.level == logging.DEBUG, f"Logger stuck at {logger.level}"

    def test_raising_threshold_keeps_file_detail(self, restore_levels, file_logging) -> None:
        """With stderr at ERROR an INFO message still lands in the log file."""
        log_dir, _ = file_logging
        set_console_level("ERROR")

        logger.info("kept for the file")

        assert "kept for the file" in _read_single_log(log_dir)

    def test_unknown_level_name_raises_validation_error(self, restore_levels) -> None:
        """A misspelt level is reported instead of silently ignored."""
        with pytest.raises(ActionableError) as exc_info:
            set_console_level("LOUD")

        assert exc_info.value.error_type == ErrorType.VALIDATION
        assert "LOUD" in exc_info.value.error
