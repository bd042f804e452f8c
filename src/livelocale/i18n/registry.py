"""
LiveLocale Culture Registry

Current-culture state with synchronous change notification.
"""

import os
from typing import Callable, Optional, Union

from PySide6.QtCore import QLocale

from livelocale.models.culture import CultureInfo
from livelocale.services.logger import get_logger
from livelocale.utils.constants import CULTURE_ENV_VAR, FALLBACK_CULTURE
from livelocale.utils.events import Event, Subscription


logger = get_logger(__name__)

CultureLike = Union[CultureInfo, str]


def environment_culture() -> CultureInfo:
    """
    Default UI culture of the environment.

    Order: LIVELOCALE_CULTURE environment variable, the system UI
    languages reported by Qt, then en-US.
    """
    candidates = [os.environ.get(CULTURE_ENV_VAR, "")]
    candidates.extend(QLocale.system().uiLanguages())

    for candidate in candidates:
        if not candidate:
            continue
        culture = CultureInfo.try_parse(candidate)
        if culture is not None and not culture.is_invariant:
            return culture

    return CultureInfo(FALLBACK_CULTURE)


class CultureRegistry:
    """
    Holds the active culture and broadcasts changes.

    Subscribers are notified synchronously, in subscription order, before
    ``set_culture`` returns. Exceptions raised by a subscriber propagate to
    the caller of ``set_culture``.
    """

    def __init__(self, initial: Optional[CultureLike] = None):
        self._initial_override = CultureInfo.coerce(initial) if initial is not None else None
        self._current = self._initial_culture()
        self._culture_changed = Event()

    def _initial_culture(self) -> CultureInfo:
        return self._initial_override or environment_culture()

    @property
    def current(self) -> CultureInfo:
        """Active culture."""
        return self._current

    def set_culture(self, culture: CultureLike) -> None:
        """
        Switch the active culture.

        No-op (no notification) if the culture equals the current one.

        Raises:
            InvalidCultureError: If a tag string is malformed
            TranslationNotFoundError: If a live unit has no template for it
        """
        culture = CultureInfo.coerce(culture)
        if culture == self._current:
            return

        previous, self._current = self._current, culture
        logger.info(f"Culture changed: {previous} -> {culture}")
        self._culture_changed.emit(culture)

    def subscribe(self, handler: Callable[[CultureInfo], None]) -> Subscription:
        """Call handler with the new culture on every change."""
        return self._culture_changed.subscribe(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._culture_changed)

    def reset(self) -> None:
        """Drop all subscribers and restore the initial culture. For tests."""
        self._culture_changed.clear()
        self._current = self._initial_culture()
        logger.debug(f"Culture registry reset to {self._current}")


# === Convenience functions ===

_default_registry: Optional[CultureRegistry] = None


def get_culture_registry() -> CultureRegistry:
    """Get the process-wide default registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = CultureRegistry()
    return _default_registry


def get_current_culture() -> CultureInfo:
    """Active culture of the default registry."""
    return get_culture_registry().current


def set_culture(culture: CultureLike) -> None:
    """
    Set the culture of the default registry.

    Args:
        culture: CultureInfo or tag (e.g. "en-US", "de")
    """
    get_culture_registry().set_culture(culture)


def reset_culture_registry() -> None:
    """Reset the default registry. For tests."""
    get_culture_registry().reset()
