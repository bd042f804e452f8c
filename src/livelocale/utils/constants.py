"""
LiveLocale Constants

Library-wide constants.
"""

from typing import Final

# Library info
APP_NAME: Final[str] = "LiveLocale"

# Culture defaults
FALLBACK_CULTURE: Final[str] = "en-US"
CULTURE_ENV_VAR: Final[str] = "LIVELOCALE_CULTURE"
INVARIANT_TAG: Final[str] = ""

# Settings
SETTINGS_FILENAME: Final[str] = "settings.json"
