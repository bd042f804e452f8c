"""
LiveLocale Culture Model

Normalized culture (locale) identifiers.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from livelocale.errors import InvalidCultureError
from livelocale.utils.constants import INVARIANT_TAG


# language[-Script][-REGION], "_" accepted as separator
_TAG_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_](?P<region>[A-Za-z]{2}|\d{3}))?$"
)


def _normalize(tag: str) -> str:
    """Canonical form of a tag, or raise InvalidCultureError."""
    stripped = tag.strip()
    if stripped == INVARIANT_TAG:
        return INVARIANT_TAG

    match = _TAG_PATTERN.match(stripped)
    if match is None:
        raise InvalidCultureError(tag)

    parts = [match.group("language").lower()]
    if match.group("script"):
        parts.append(match.group("script").title())
    if match.group("region"):
        parts.append(match.group("region").upper())
    return "-".join(parts)


@dataclass(frozen=True)
class CultureInfo:
    """
    Culture identifier.

    Holds a normalized tag such as ``en-US``, ``zh-Hans-CN`` or ``fr``.
    The empty tag is the invariant (root) culture. Construction normalizes
    the tag, so equality and hashing are case-insensitive.
    """

    tag: str

    def __post_init__(self):
        if not isinstance(self.tag, str):
            raise InvalidCultureError(self.tag)
        object.__setattr__(self, "tag", _normalize(self.tag))

    @classmethod
    def parse(cls, tag: str) -> "CultureInfo":
        """
        Parse a culture tag.

        Raises:
            InvalidCultureError: If the tag is malformed
        """
        return cls(tag)

    @classmethod
    def try_parse(cls, tag: str) -> Optional["CultureInfo"]:
        """Parse a culture tag, returning None if it is malformed."""
        try:
            return cls(tag)
        except InvalidCultureError:
            return None

    @classmethod
    def coerce(cls, value: Union["CultureInfo", str]) -> "CultureInfo":
        """Accept a CultureInfo or a tag string."""
        if isinstance(value, CultureInfo):
            return value
        return cls(value)

    @property
    def _parts(self):
        return self.tag.split("-") if self.tag else []

    @property
    def language(self) -> str:
        """Language subtag (e.g. "en")."""
        parts = self._parts
        return parts[0] if parts else ""

    @property
    def script(self) -> str:
        """Script subtag (e.g. "Hans"), or empty string."""
        for part in self._parts[1:]:
            if len(part) == 4:
                return part
        return ""

    @property
    def region(self) -> str:
        """Region subtag (e.g. "US"), or empty string."""
        parts = self._parts
        if len(parts) > 1 and len(parts[-1]) != 4:
            return parts[-1]
        return ""

    @property
    def two_letter_language(self) -> str:
        """Language projection used for loose matching."""
        return self.language

    @property
    def is_invariant(self) -> bool:
        return self.tag == INVARIANT_TAG

    @property
    def is_neutral(self) -> bool:
        """True for language-only cultures (no region)."""
        return not self.is_invariant and not self.region

    @property
    def parent(self) -> "CultureInfo":
        """
        Parent culture.

        en-US -> en, zh-Hans-CN -> zh-Hans, en -> invariant.
        The invariant culture is its own parent.
        """
        parts = self._parts
        if len(parts) <= 1:
            return INVARIANT
        return CultureInfo("-".join(parts[:-1]))

    def language_equivalent(self, other: "CultureInfo") -> bool:
        """True if both cultures share the two-letter language projection."""
        return self.two_letter_language == other.two_letter_language

    def __str__(self) -> str:
        return self.tag


INVARIANT = CultureInfo(INVARIANT_TAG)
