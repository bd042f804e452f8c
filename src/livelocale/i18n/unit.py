"""
LiveLocale Translation Unit

One localizable string across cultures, live-bound to the active culture
and to its own parameters.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from livelocale.errors import ParameterResolutionError, TranslationNotFoundError
from livelocale.i18n import resolver
from livelocale.i18n.registry import CultureRegistry, get_culture_registry
from livelocale.models.culture import CultureInfo
from livelocale.models.parameters import TranslationParameters
from livelocale.services.logger import get_logger
from livelocale.utils.events import LiveValue


logger = get_logger(__name__)


def build_translation_map(
    translations: Mapping[Union[CultureInfo, str], str],
    key: str = "",
) -> Dict[CultureInfo, str]:
    """
    Convert culture keys to CultureInfo.

    Malformed tags are dropped (with a warning), not raised.
    """
    result: Dict[CultureInfo, str] = {}
    for culture, template in translations.items():
        if isinstance(culture, CultureInfo):
            result[culture] = template
            continue

        parsed = CultureInfo.try_parse(culture) if isinstance(culture, str) else None
        if parsed is None:
            logger.warning(f"Skipping invalid culture tag {culture!r} for key '{key}'")
            continue
        result[parsed] = template
    return result


class TranslationUnit:
    """
    A translation with support for multiple cultures.

    The resolved value is recomputed eagerly whenever the registry's culture
    or this unit's parameters change, and pushed onto ``value``. Subscribers
    of ``value`` receive the current string immediately.

    Usage:
        unit = TranslationUnit("greeting", {"en": "Hello {0}", "fr": "Bonjour {0}"})
        unit.parameters[0] = "John"
        unit.current_value          # "Hello John"
        unit.value.subscribe(label.setText)
        ...
        unit.dispose()

    Raises:
        TranslationNotFoundError: If no template matches the current culture
    """

    def __init__(
        self,
        key: str,
        translations: Mapping[Union[CultureInfo, str], str],
        registry: Optional[CultureRegistry] = None,
    ):
        self._key = key
        self._translations = MappingProxyType(build_translation_map(translations, key))
        self._registry = registry or get_culture_registry()
        self._parameters = TranslationParameters()
        self._disposed = False

        # Raises TranslationNotFoundError before subscribing to anything
        self._value: LiveValue[str] = LiveValue(self._resolve(self._registry.current))

        self._culture_subscription = self._registry.subscribe(self._on_culture_changed)
        self._parameters_subscription = self._parameters.subscribe(self._on_parameters_changed)

        logger.debug(f"Translation unit created: {key} ({len(self._translations)} cultures)")

    # === Properties ===

    @property
    def key(self) -> str:
        return self._key

    @property
    def translations(self) -> Mapping[CultureInfo, str]:
        """Read-only culture -> template map."""
        return self._translations

    @property
    def parameters(self) -> TranslationParameters:
        """
        Parameters of this unit.

        unit.parameters[0] = "value" or unit.parameters["name"] = "value"
        """
        return self._parameters

    @property
    def value(self) -> LiveValue[str]:
        """Replay-latest stream of resolved strings."""
        return self._value

    @property
    def current_value(self) -> str:
        return self._value.value

    @property
    def registry(self) -> CultureRegistry:
        return self._registry

    @property
    def disposed(self) -> bool:
        return self._disposed

    # === Lookup ===

    def translation_for(self, culture: Union[CultureInfo, str]) -> str:
        """
        Base template for a culture.

        Tries, in order: exact culture, parent culture (for specific
        cultures whose parent is not the invariant culture), then the first
        template whose language matches.

        Raises:
            TranslationNotFoundError: If nothing matches
        """
        culture = CultureInfo.coerce(culture)

        template = self._translations.get(culture)
        if template is not None:
            return template

        parent = culture.parent
        if not culture.is_neutral and not parent.is_invariant:
            template = self._translations.get(parent)
            if template is not None:
                return template

        for candidate, template in self._translations.items():
            if candidate.language_equivalent(culture):
                return template

        logger.warning(f"No translation for culture '{culture}' and key '{self._key}'")
        raise TranslationNotFoundError(culture, self._key)

    # === Resolution ===

    def _resolve(self, culture: CultureInfo) -> str:
        base = self.translation_for(culture)

        if not self._parameters.has_parameters():
            return base

        if not resolver.has_placeholders(base):
            return base

        try:
            return self._apply_parameters(base)
        except ParameterResolutionError as e:
            logger.debug(f"Parameter resolution failed for '{self._key}': {e}")
            return base

    def _apply_parameters(self, base: str) -> str:
        """Substitute parameters, or return base unless all placeholders are satisfied."""
        names = resolver.required_names(base)
        indices = resolver.required_indices(base)

        named = self._parameters.to_named_map()
        values = self._parameters.to_indexed_array()

        named_ok = bool(named) and all(name in named for name in names)
        indexed_ok = bool(values) and all(
            index < len(values) and values[index] is not None for index in indices
        )

        if names and indices:
            if named_ok and indexed_ok:
                return resolver.resolve(base, values, named)
            return base

        if names and named_ok:
            return resolver.resolve_named(base, named)

        if indices and indexed_ok:
            return resolver.resolve_indexed(base, values)

        return base

    def _refresh(self, culture: CultureInfo) -> None:
        self._value.emit(self._resolve(culture))

    def _on_culture_changed(self, culture: CultureInfo) -> None:
        if self._disposed:
            return
        self._refresh(culture)

    def _on_parameters_changed(self) -> None:
        if self._disposed:
            return
        self._refresh(self._registry.current)

    # === Lifecycle ===

    def dispose(self) -> None:
        """Detach from the registry and release parameters and stream."""
        if self._disposed:
            return
        self._disposed = True
        self._culture_subscription.dispose()
        self._parameters_subscription.dispose()
        self._parameters.dispose()
        self._value.close()
        logger.debug(f"Translation unit disposed: {self._key}")

    def __enter__(self) -> "TranslationUnit":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def __str__(self) -> str:
        return self.current_value

    def __repr__(self) -> str:
        return f"TranslationUnit(key={self._key!r}, value={self.current_value!r})"
