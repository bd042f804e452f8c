"""
LiveLocale Logging Tests

Logger naming and file output.
"""

import logging

import pytest

from livelocale.services.logger import (
    LOG_FILE_NAME,
    get_log_manager,
    get_logger,
    initialize_logging,
    set_debug_mode,
    shutdown_logging,
)


@pytest.fixture
def logging_dir(temp_dir):
    initialize_logging(temp_dir, debug_mode=True)
    yield temp_dir
    shutdown_logging()
    set_debug_mode(False)


class TestLogger:
    """Logging helpers."""

    def test_logger_names(self):
        """Loggers live below the livelocale root."""
        assert get_logger("catalog").name == "livelocale.catalog"
        assert get_logger("livelocale.i18n.unit").name == "livelocale.i18n.unit"

    def test_singleton(self):
        """One manager per process."""
        assert get_log_manager() is get_log_manager()

    def test_file_output(self, logging_dir):
        """Messages are written to the rotating log file."""
        get_logger("test").debug("culture switched")
        for handler in logging.getLogger("livelocale").handlers:
            handler.flush()

        content = (logging_dir / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "culture switched" in content
        assert get_log_manager().log_file == logging_dir / LOG_FILE_NAME

    def test_debug_mode_toggle(self, logging_dir):
        """Debug mode can be switched at runtime."""
        assert get_log_manager().debug_mode
        set_debug_mode(False)
        assert not get_log_manager().debug_mode
        assert logging.getLogger("livelocale").level == logging.INFO

    def test_unit_events_logged(self, logging_dir, registry):
        """Translation units report lifecycle events."""
        from livelocale.i18n.unit import TranslationUnit

        with TranslationUnit("logged.key", {"en": "x"}, registry):
            pass
        for handler in logging.getLogger("livelocale").handlers:
            handler.flush()

        content = (logging_dir / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "logged.key" in content

    def test_console_output_toggle(self, logging_dir):
        """The stdout handler can be added and removed at runtime."""
        manager = get_log_manager()
        root = logging.getLogger("livelocale")
        assert not manager.console_output

        manager.set_console_output(True)
        manager.set_console_output(True)
        console = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert manager.console_output
        assert len(console) == 1

        manager.set_console_output(False)
        assert not manager.console_output
        assert not [h for h in root.handlers if type(h) is logging.StreamHandler]
