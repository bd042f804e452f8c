"""
LiveLocale Template Resolver

Placeholder substitution for translation templates.

Supports indexed ({0}, {1}) and named ({name}, {count}) placeholders.
Doubled braces ({{ and }}) are escapes for a literal brace. Escapes and
placeholders are tokenized in one left-to-right pass, so "{{0}}" is never
a placeholder and always renders as "{0}".
"""

import re
from typing import Any, Mapping, Optional, Sequence, Set

from livelocale.errors import MissingParameterError, ParameterIndexError


_TOKEN_PATTERN = re.compile(
    r"\{\{|\}\}"
    r"|\{(?P<index>\d+)\}"
    r"|\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}"
)


def to_display_string(value: Any) -> str:
    """
    External string form of a parameter value.

    None -> "", booleans -> "True"/"False", everything else via str().
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "True" if value else "False"
    return str(value)


def _placeholders(template: Optional[str]):
    if not template:
        return
    for match in _TOKEN_PATTERN.finditer(template):
        if match.group("index") is not None or match.group("name") is not None:
            yield match


def has_placeholders(template: Optional[str]) -> bool:
    """True if the template has at least one {0} or {name} placeholder."""
    return next(_placeholders(template), None) is not None


def required_indices(template: Optional[str]) -> Set[int]:
    """Distinct indices referenced by {n} placeholders."""
    return {
        int(match.group("index"))
        for match in _placeholders(template)
        if match.group("index") is not None
    }


def required_names(template: Optional[str]) -> Set[str]:
    """Distinct names referenced by {name} placeholders."""
    return {
        match.group("name")
        for match in _placeholders(template)
        if match.group("name") is not None
    }


def _substitute(
    template: Optional[str],
    values: Optional[Sequence[Any]],
    named: Optional[Mapping[str, Any]],
) -> Optional[str]:
    """
    Single-pass substitution.

    A placeholder kind whose source is None is left untouched.
    """
    if not template:
        return template

    def replace(match: "re.Match") -> str:
        token = match.group(0)
        if token in ("{{", "}}"):
            return token[0]

        index = match.group("index")
        if index is not None:
            if values is None:
                return token
            position = int(index)
            if position >= len(values):
                raise ParameterIndexError(position, len(values))
            return to_display_string(values[position])

        name = match.group("name")
        if named is None:
            return token
        if name not in named:
            raise MissingParameterError(name, named.keys())
        return to_display_string(named[name])

    return _TOKEN_PATTERN.sub(replace, template)


def resolve_indexed(template: Optional[str], values: Sequence[Any]) -> Optional[str]:
    """
    Replace {n} placeholders with values[n].

    None slots render as "". Named placeholders are left as they are.

    Raises:
        ParameterIndexError: If a placeholder index is >= len(values)
    """
    return _substitute(template, list(values or ()), None)


def resolve_named(template: Optional[str], named: Mapping[str, Any]) -> Optional[str]:
    """
    Replace {name} placeholders with named[name].

    Indexed placeholders are left as they are.

    Raises:
        MissingParameterError: If a placeholder name is not in named
    """
    return _substitute(template, None, named or {})


def resolve(
    template: Optional[str],
    values: Sequence[Any],
    named: Mapping[str, Any],
) -> Optional[str]:
    """Replace both indexed and named placeholders in one pass."""
    return _substitute(template, list(values or ()), named or {})


def unescape_braces(template: Optional[str]) -> Optional[str]:
    """Collapse {{ and }} without touching placeholders."""
    return _substitute(template, None, None)
