"""
LiveLocale Translation Parameters

Mutable bag of indexed and named parameter values with change notification.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from livelocale.utils.events import Event, Subscription


ParameterKey = Union[int, str]


def _same_value(current: Any, new: Any) -> bool:
    """Type-strict value equality (1, 1.0 and True are different values)."""
    return type(current) is type(new) and current == new


def _check_index(index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Parameter index must be an int, not {type(index).__name__}")
    if index < 0:
        raise IndexError(f"Parameter index must be non-negative: {index}")
    return index


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Parameter name must be a str, not {type(name).__name__}")
    return name


class TranslationParameters:
    """
    Indexed and named parameters of one translation unit.

    Every mutation that actually changes the contents emits exactly one
    ``changed`` event; assigning a value equal to the stored one, or
    clearing an absent entry, is a silent no-op.

    Usage:
        params[0] = "John"
        params["count"] = 5
        params[0] = None   # removes index 0
    """

    def __init__(self):
        self._indexed: Dict[int, Any] = {}
        self._named: Dict[str, Any] = {}
        self.changed = Event()

    # === Single-entry access ===

    def get_indexed(self, index: int) -> Any:
        """Value at index, or None."""
        return self._indexed.get(_check_index(index))

    def get_named(self, name: str) -> Any:
        """Value for name, or None."""
        return self._named.get(_check_name(name))

    def set_indexed(self, index: int, value: Any) -> None:
        """Set (or with None, remove) the value at index."""
        if self._store(self._indexed, _check_index(index), value):
            self._notify()

    def set_named(self, name: str, value: Any) -> None:
        """Set (or with None, remove) the value for name."""
        if self._store(self._named, _check_name(name), value):
            self._notify()

    @staticmethod
    def _store(target: Dict, key: Any, value: Any) -> bool:
        """Apply one assignment. Returns True if the contents changed."""
        if value is None:
            if key not in target:
                return False
            del target[key]
            return True

        if key in target and _same_value(target[key], value):
            return False
        target[key] = value
        return True

    def __getitem__(self, key: ParameterKey) -> Any:
        if isinstance(key, str):
            return self.get_named(key)
        return self.get_indexed(key)

    def __setitem__(self, key: ParameterKey, value: Any) -> None:
        if isinstance(key, str):
            self.set_named(key, value)
        else:
            self.set_indexed(key, value)

    def __delitem__(self, key: ParameterKey) -> None:
        self[key] = None

    # === Bulk operations ===

    def set_indexed_parameters(self, *values: Any) -> None:
        """
        Replace all indexed parameters.

        Position i becomes index i; None positions stay empty.
        Emits a single event if anything changed.
        """
        replacement = {i: v for i, v in enumerate(values) if v is not None}
        if self._replace(self._indexed, replacement):
            self._notify()

    def set_named_parameters(self, mapping: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """
        Replace all named parameters.

        Entries with None values are skipped.
        Emits a single event if anything changed.
        """
        merged = dict(mapping or {})
        merged.update(kwargs)
        replacement = {_check_name(k): v for k, v in merged.items() if v is not None}
        if self._replace(self._named, replacement):
            self._notify()

    @staticmethod
    def _replace(target: Dict, replacement: Dict) -> bool:
        unchanged = target.keys() == replacement.keys() and all(
            _same_value(target[k], v) for k, v in replacement.items()
        )
        if unchanged:
            return False
        target.clear()
        target.update(replacement)
        return True

    def clear(self) -> None:
        """Remove everything. Emits once, and only if something was removed."""
        had_parameters = self.has_parameters()
        self._indexed.clear()
        self._named.clear()
        if had_parameters:
            self._notify()

    # === Queries ===

    @property
    def indexed_count(self) -> int:
        return len(self._indexed)

    @property
    def named_count(self) -> int:
        return len(self._named)

    def has_parameters(self) -> bool:
        """True if any indexed or named value is set."""
        return bool(self._indexed) or bool(self._named)

    def to_indexed_array(self) -> List[Any]:
        """
        Dense list from index 0 to the highest set index.

        Gaps are None. Empty list if no indexed parameters are set.
        """
        if not self._indexed:
            return []
        array: List[Any] = [None] * (max(self._indexed) + 1)
        for index, value in self._indexed.items():
            array[index] = value
        return array

    def to_named_map(self) -> Mapping[str, Any]:
        """Read-only snapshot of the named parameters."""
        return MappingProxyType(dict(self._named))

    # === Notification ===

    def subscribe(self, handler) -> Subscription:
        """Shortcut for ``changed.subscribe``; handler takes no arguments."""
        return self.changed.subscribe(handler)

    def _notify(self) -> None:
        self.changed.emit()

    def dispose(self) -> None:
        """Drop all change subscribers."""
        self.changed.clear()

    def __repr__(self) -> str:
        return f"TranslationParameters(indexed={self._indexed!r}, named={self._named!r})"
