"""
LiveLocale Models

Culture identifiers and parameter bags.
"""

from livelocale.models.culture import CultureInfo, INVARIANT
from livelocale.models.parameters import TranslationParameters

__all__ = [
    "CultureInfo",
    "INVARIANT",
    "TranslationParameters",
]
