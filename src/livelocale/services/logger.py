"""
LiveLocale Logging System

Rotating file logger for the ``livelocale`` logger hierarchy.

The library only creates loggers; it never configures handlers on import.
Applications call ``initialize_logging`` once at startup.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "livelocale.log"
MAX_LOG_SIZE = 2 * 1024 * 1024  # 2 MB per file
MAX_LOG_FILES = 5
ROOT_LOGGER_NAME = "livelocale"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _level(debug: bool) -> int:
    return logging.DEBUG if debug else logging.INFO


class LogManager:
    """
    Process-wide owner of the handlers attached to the ``livelocale`` logger.
    """

    _instance: Optional["LogManager"] = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._log_file = None
            instance._file_handler = None
            instance._console_handler = None
            instance._debug_mode = False
            instance._root_logger = logging.getLogger(ROOT_LOGGER_NAME)
            cls._instance = instance
        return cls._instance

    def _attach(self, handler: logging.Handler) -> logging.Handler:
        handler.setLevel(_level(self._debug_mode))
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        self._root_logger.addHandler(handler)
        return handler

    def _detach(self, handler: Optional[logging.Handler]) -> None:
        if handler is not None:
            self._root_logger.removeHandler(handler)
            handler.close()

    def initialize(
        self,
        log_dir: Optional[Path] = None,
        debug_mode: bool = False,
        console_output: bool = False
    ) -> None:
        """
        Install the rotating file handler (and optionally a console handler).

        Args:
            log_dir: Directory for log files (default: ./logs)
            debug_mode: Enable DEBUG level logging
            console_output: Also log to stdout
        """
        log_dir = log_dir or Path.cwd() / LOG_DIR_NAME
        log_dir.mkdir(parents=True, exist_ok=True)

        self.shutdown()
        self._debug_mode = debug_mode
        self._root_logger.setLevel(_level(debug_mode))

        self._log_file = log_dir / LOG_FILE_NAME
        self._file_handler = self._attach(RotatingFileHandler(
            self._log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=MAX_LOG_FILES,
            encoding='utf-8'
        ))
        self.set_console_output(console_output)

        self._root_logger.info(f"LiveLocale logging initialized: {self._log_file} (debug={debug_mode})")

    def set_console_output(self, enabled: bool) -> None:
        """Add or remove the stdout handler."""
        if enabled and self._console_handler is None:
            self._console_handler = self._attach(logging.StreamHandler(sys.stdout))
        elif not enabled and self._console_handler is not None:
            self._detach(self._console_handler)
            self._console_handler = None

    @property
    def console_output(self) -> bool:
        return self._console_handler is not None

    def set_debug_mode(self, enabled: bool) -> None:
        """Switch between DEBUG and INFO at runtime."""
        self._debug_mode = enabled
        self._root_logger.setLevel(_level(enabled))
        for handler in (self._file_handler, self._console_handler):
            if handler is not None:
                handler.setLevel(_level(enabled))

    @property
    def debug_mode(self) -> bool:
        return self._debug_mode

    @property
    def log_file(self) -> Optional[Path]:
        """Current log file, if initialized."""
        return self._log_file

    def shutdown(self) -> None:
        """Detach and close the installed handlers."""
        self._detach(self._file_handler)
        self._detach(self._console_handler)
        self._file_handler = None
        self._console_handler = None


def get_log_manager() -> LogManager:
    """Get the LogManager singleton."""
    return LogManager()


def initialize_logging(
    log_dir: Optional[Path] = None,
    debug_mode: bool = False,
    console_output: bool = False
) -> None:
    """Initialize the logging system. Call this early in application startup."""
    get_log_manager().initialize(log_dir, debug_mode, console_output)


def get_logger(name: str) -> logging.Logger:
    """
    Logger below the ``livelocale`` root.

    Example:
        logger = get_logger(__name__)
        logger.info("Culture changed")
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_debug_mode(enabled: bool) -> None:
    """Enable or disable debug mode."""
    get_log_manager().set_debug_mode(enabled)


def shutdown_logging() -> None:
    """Close the log handlers."""
    get_log_manager().shutdown()
