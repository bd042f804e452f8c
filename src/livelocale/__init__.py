"""
LiveLocale - live, culture-aware translations for Qt applications

Binds UI text to parameterized translation templates that update
automatically when the active culture or their parameters change.

Main features:
- Culture fallback (exact, parent, same language)
- Indexed {0} and named {name} placeholders
- Replay-latest value streams
- PySide6 widget binding helpers
"""

__version__ = "1.0.0"
__license__ = "MIT"

from livelocale.errors import (
    LiveLocaleError,
    InvalidCultureError,
    TranslationNotFoundError,
    ParameterResolutionError,
    ParameterIndexError,
    MissingParameterError,
    DisposedError,
)
from livelocale.models import CultureInfo, TranslationParameters
from livelocale.i18n import (
    CultureRegistry,
    TranslationUnit,
    TranslationCatalog,
    get_culture_registry,
    get_current_culture,
    set_culture,
)

__all__ = [
    "__version__",
    "CultureInfo",
    "TranslationParameters",
    "CultureRegistry",
    "TranslationUnit",
    "TranslationCatalog",
    "get_culture_registry",
    "get_current_culture",
    "set_culture",
    "LiveLocaleError",
    "InvalidCultureError",
    "TranslationNotFoundError",
    "ParameterResolutionError",
    "ParameterIndexError",
    "MissingParameterError",
    "DisposedError",
]
