"""
LiveLocale Settings Manager

Persisted localization settings.
"""

import json
from pathlib import Path
from typing import Any, Optional
from dataclasses import dataclass, asdict, fields

from PySide6.QtCore import QStandardPaths

from livelocale.i18n.registry import CultureRegistry, get_culture_registry
from livelocale.models.culture import CultureInfo
from livelocale.services.logger import get_logger, get_log_manager
from livelocale.utils.constants import APP_NAME, SETTINGS_FILENAME


logger = get_logger(__name__)


@dataclass
class LocaleSettings:
    """Localization settings."""
    culture: str = ""  # empty = environment default
    debug_logging: bool = False
    log_to_console: bool = False


class SettingsManager:
    """
    Settings manager.

    Loads and saves ``settings.json`` in the configuration directory.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._settings = LocaleSettings()
        self._config_dir = config_dir or self._get_config_dir()
        self._settings_file = self._config_dir / SETTINGS_FILENAME

        self._load_settings()

    def _get_config_dir(self) -> Path:
        """Get configuration directory."""
        location = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppConfigLocation
        )
        config_path = Path(location) if location else Path.home() / f".{APP_NAME.lower()}"
        return config_path / APP_NAME

    @property
    def config_dir(self) -> Path:
        """Configuration directory."""
        return self._config_dir

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    @property
    def settings(self) -> LocaleSettings:
        return self._settings

    def _load_settings(self) -> None:
        """Load settings. Unknown keys are ignored."""
        if not self._settings_file.exists():
            return

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading settings from {self._settings_file}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed settings file: {self._settings_file}")
            return

        known = {f.name for f in fields(LocaleSettings)}
        for key, value in data.items():
            if key in known:
                setattr(self._settings, key, value)

    def save_settings(self) -> None:
        """
        Save settings.

        Raises:
            OSError: If the file cannot be written
        """
        self._config_dir.mkdir(parents=True, exist_ok=True)
        with open(self._settings_file, 'w', encoding='utf-8') as f:
            json.dump(asdict(self._settings), f, indent=2, ensure_ascii=False)
        logger.debug(f"Settings saved: {self._settings_file}")

    # Getters and setters

    @property
    def culture(self) -> Optional[CultureInfo]:
        """Configured culture, or None for the environment default."""
        return CultureInfo.try_parse(self._settings.culture) if self._settings.culture else None

    @culture.setter
    def culture(self, value: Any) -> None:
        self._settings.culture = CultureInfo.coerce(value).tag if value else ""

    @property
    def debug_logging(self) -> bool:
        return self._settings.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self._settings.debug_logging = value

    @property
    def log_to_console(self) -> bool:
        return self._settings.log_to_console

    @log_to_console.setter
    def log_to_console(self, value: bool) -> None:
        self._settings.log_to_console = value

    def apply(self, registry: Optional[CultureRegistry] = None) -> None:
        """
        Push the configured culture onto a registry and the logging flags
        (debug level, console output) onto the log manager.
        """
        registry = registry or get_culture_registry()
        if (culture := self.culture) is not None:
            registry.set_culture(culture)
        elif self._settings.culture:
            logger.warning(f"Ignoring invalid configured culture: {self._settings.culture!r}")

        log_manager = get_log_manager()
        log_manager.set_debug_mode(self._settings.debug_logging)
        log_manager.set_console_output(self._settings.log_to_console)
