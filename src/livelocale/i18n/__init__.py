"""
LiveLocale Internationalization (i18n) Module

Live translation units bound to the active culture.

Usage:
    from livelocale.i18n import TranslationUnit, set_culture

    unit = TranslationUnit("greeting", {"en": "Hello {name}", "de": "Hallo {name}"})
    unit.parameters["name"] = "Anna"
    unit.current_value          # "Hello Anna"

    set_culture("de-DE")
    unit.current_value          # "Hallo Anna"

Qt usage:
    from livelocale.i18n.ui_support import TranslationBinding

    TranslationBinding(unit, parent=label).bind(label)
"""

from livelocale.i18n.registry import (
    CultureRegistry,
    environment_culture,
    get_culture_registry,
    get_current_culture,
    set_culture,
    reset_culture_registry,
)

from livelocale.i18n.unit import TranslationUnit

from livelocale.i18n.catalog import TranslationCatalog

from livelocale.i18n.ui_support import TranslationBinding, UITextBinder

__all__ = [
    # Registry
    "CultureRegistry",
    "environment_culture",
    "get_culture_registry",
    "get_current_culture",
    "set_culture",
    "reset_culture_registry",
    # Units
    "TranslationUnit",
    "TranslationCatalog",
    # Qt support
    "TranslationBinding",
    "UITextBinder",
]
