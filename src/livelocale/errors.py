"""
LiveLocale Errors

Exception hierarchy for the translation engine.
"""

from typing import Any, Iterable


class LiveLocaleError(Exception):
    """Base class for all LiveLocale errors."""


class InvalidCultureError(LiveLocaleError, ValueError):
    """A culture tag could not be parsed."""

    def __init__(self, tag: Any):
        self.tag = tag
        super().__init__(f"Invalid culture tag: {tag!r}")


class TranslationNotFoundError(LiveLocaleError, KeyError):
    """
    No template exists for a culture, even after fallback.

    Raised at unit construction and propagated out of culture changes.
    """

    def __init__(self, culture: Any, key: str):
        self.culture = culture
        self.key = key
        super().__init__(culture, key)

    def __str__(self) -> str:
        return f"No translation found for culture '{self.culture}' and key '{self.key}'."


class ParameterResolutionError(LiveLocaleError):
    """A template placeholder could not be substituted."""


class ParameterIndexError(ParameterResolutionError, IndexError):
    """An indexed placeholder is beyond the supplied values."""

    def __init__(self, index: int, available: int):
        self.index = index
        self.available = available
        if available:
            message = (
                f"Parameter index {index} is out of range. "
                f"Available parameters: 0-{available - 1}"
            )
        else:
            message = f"Parameter index {index} is out of range. No parameters available"
        super().__init__(message)


class MissingParameterError(ParameterResolutionError, KeyError):
    """A named placeholder has no value."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        return (
            f"Parameter '{self.name}' not found in provided parameters. "
            f"Available parameters: {', '.join(self.available)}"
        )


class DisposedError(LiveLocaleError, RuntimeError):
    """An operation was attempted on a disposed object."""
