"""
LiveLocale Services

Logging and settings. Import ``livelocale.services.settings_manager``
directly for settings.
"""

from livelocale.services.logger import (
    get_logger,
    initialize_logging,
    set_debug_mode,
)

__all__ = [
    "get_logger",
    "initialize_logging",
    "set_debug_mode",
]
