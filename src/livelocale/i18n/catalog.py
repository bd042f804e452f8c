"""
LiveLocale Translation Catalog

Keyed collection of translation units built from per-culture string tables.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from livelocale.i18n.registry import CultureRegistry, get_culture_registry
from livelocale.i18n.unit import TranslationUnit
from livelocale.models.culture import CultureInfo
from livelocale.services.logger import get_logger


logger = get_logger(__name__)


def flatten_dict(d: Mapping[str, Any], parent_key: str = '') -> Dict[str, str]:
    """
    Flatten nested dictionary into dotted keys.

    Example:
        {"menu": {"file": "File"}} -> {"menu.file": "File"}
    """
    items: Dict[str, str] = {}
    for k, v in d.items():
        new_key = f"{parent_key}.{k}" if parent_key else k
        if isinstance(v, Mapping):
            items |= flatten_dict(v, new_key)
        else:
            items[new_key] = str(v)
    return items


class TranslationCatalog:
    """
    Translation units addressed by key.

    Units are created on first access and cached, so a key only has to be
    complete for the current culture once it is used.

    Usage:
        catalog = TranslationCatalog({
            "en": {"menu": {"file": "File"}, "greeting": "Hello {name}"},
            "hu": {"menu": {"file": "Fájl"}, "greeting": "Szia {name}"},
        })
        catalog["menu.file"].current_value
        catalog.translate("greeting", name="Anna")
    """

    def __init__(
        self,
        tables: Mapping[Union[CultureInfo, str], Mapping[str, Any]],
        registry: Optional[CultureRegistry] = None,
    ):
        self._registry = registry or get_culture_registry()
        self._templates: Dict[str, Dict[CultureInfo, str]] = {}
        self._units: Dict[str, TranslationUnit] = {}

        cultures = set()
        for tag, table in tables.items():
            culture = tag if isinstance(tag, CultureInfo) else CultureInfo.try_parse(tag)
            if culture is None:
                logger.warning(f"Skipping invalid culture tag {tag!r} in catalog")
                continue
            cultures.add(culture)
            for key, template in flatten_dict(table).items():
                self._templates.setdefault(key, {})[culture] = template

        logger.debug(
            f"Catalog loaded: {len(self._templates)} keys, {len(cultures)} cultures"
        )

    def __getitem__(self, key: str) -> TranslationUnit:
        unit = self._units.get(key)
        if unit is None:
            if key not in self._templates:
                raise KeyError(key)
            unit = TranslationUnit(key, self._templates[key], self._registry)
            self._units[key] = unit
        return unit

    def get(self, key: str) -> Optional[TranslationUnit]:
        """Unit for key, or None for an unknown key."""
        return self[key] if key in self._templates else None

    def keys(self) -> List[str]:
        return list(self._templates)

    def cultures(self) -> List[CultureInfo]:
        """Every culture with at least one template."""
        seen: Dict[CultureInfo, None] = {}
        for templates in self._templates.values():
            seen.update(dict.fromkeys(templates))
        return list(seen)

    def translate(self, key: str, *args: Any, **named: Any) -> str:
        """
        Resolve key for the current culture with one-off parameters.

        The cached unit's own parameters are not touched.
        """
        with TranslationUnit(key, self._templates[key], self._registry) as unit:
            if args:
                unit.parameters.set_indexed_parameters(*args)
            if named:
                unit.parameters.set_named_parameters(named)
            return unit.current_value

    def dispose(self) -> None:
        """Dispose every unit created so far."""
        for unit in self._units.values():
            unit.dispose()
        self._units.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)
