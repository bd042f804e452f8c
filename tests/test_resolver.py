"""
LiveLocale Template Resolver Tests

Placeholder detection and substitution.
"""

import pytest

from livelocale.errors import (
    MissingParameterError,
    ParameterIndexError,
    ParameterResolutionError,
)
from livelocale.i18n import resolver


class TestDetection:
    """Placeholder detection."""

    @pytest.mark.parametrize("template", ["Hello {0}", "Hi {name}", "{_x1}", "a {10} b"])
    def test_has_placeholders(self, template):
        """Indexed and named placeholders are detected."""
        assert resolver.has_placeholders(template)

    @pytest.mark.parametrize("template", ["Hello", "", None, "{}", "{ 0 }", "{1a}", "{{0}}", "{-1}"])
    def test_no_placeholders(self, template):
        """Plain text, malformed markers and escapes are not placeholders."""
        assert not resolver.has_placeholders(template)

    def test_required_indices(self):
        """Distinct indices."""
        assert resolver.required_indices("{0} {2} {0} {name}") == {0, 2}

    def test_required_names(self):
        """Distinct names."""
        assert resolver.required_names("{a} {b} {a} {0}") == {"a", "b"}

    def test_escaped_not_required(self):
        """Escaped markers are not required keys."""
        assert resolver.required_indices("{{0}} {1}") == {1}
        assert resolver.required_names("{{name}}") == set()


class TestResolveIndexed:
    """Indexed substitution."""

    def test_basic(self):
        """Values are substituted by position."""
        result = resolver.resolve_indexed("Hello {0}, you have {1} messages", ["John", 5])
        assert result == "Hello John, you have 5 messages"

    def test_repeated_and_unordered(self):
        """Placeholders may repeat and appear in any order."""
        assert resolver.resolve_indexed("{1}-{0}-{1}", ["a", "b"]) == "b-a-b"

    def test_none_slot_renders_empty(self):
        """An absent in-range slot renders as an empty string."""
        assert resolver.resolve_indexed("[{1}]", ["a", None]) == "[]"

    def test_out_of_range(self):
        """Index beyond the values raises."""
        with pytest.raises(ParameterIndexError) as exc_info:
            resolver.resolve_indexed("{0} {3}", ["a"])
        assert exc_info.value.index == 3
        assert isinstance(exc_info.value, ParameterResolutionError)
        assert isinstance(exc_info.value, IndexError)

    def test_named_left_untouched(self):
        """Named placeholders are not indexed placeholders."""
        assert resolver.resolve_indexed("{0} {name}", ["a"]) == "a {name}"

    def test_escaped_braces(self):
        """Escapes collapse to single braces."""
        assert resolver.resolve_indexed("{{literal}} {0}", ["x"]) == "{literal} x"

    def test_escaped_placeholder_is_literal(self):
        """{{0}} renders as {0} whatever the values."""
        assert resolver.resolve_indexed("{{0}}", ["x"]) == "{0}"
        assert resolver.resolve_indexed("{{0}}", []) == "{0}"

    def test_empty_template(self):
        """Empty templates pass through."""
        assert resolver.resolve_indexed("", ["x"]) == ""


class TestResolveNamed:
    """Named substitution."""

    def test_basic(self):
        """Values are substituted by name."""
        result = resolver.resolve_named(
            "Welcome {name}, you have {count} items", {"name": "Alice", "count": 3}
        )
        assert result == "Welcome Alice, you have 3 items"

    def test_missing_key(self):
        """A missing name raises."""
        with pytest.raises(MissingParameterError) as exc_info:
            resolver.resolve_named("{name} {age}", {"name": "Bob"})
        assert exc_info.value.name == "age"
        assert "Available parameters: name" in str(exc_info.value)

    def test_extra_values_ignored(self):
        """Unused names do no harm."""
        assert resolver.resolve_named("{a}", {"a": 1, "b": 2}) == "1"

    def test_indexed_left_untouched(self):
        """Indexed placeholders survive named resolution."""
        assert resolver.resolve_named("{name} {0}", {"name": "x"}) == "x {0}"

    def test_escaped_braces(self):
        """{{name}} is literal."""
        assert resolver.resolve_named("{{name}} {name}", {"name": "x"}) == "{name} x"


class TestResolveMixed:
    """Single-pass substitution of both kinds."""

    def test_both_kinds(self):
        """Indexed and named values in one template."""
        assert resolver.resolve("{greeting}, {0}!", ["Ann"], {"greeting": "Hi"}) == "Hi, Ann!"

    def test_unescape_only(self):
        """unescape_braces leaves placeholders."""
        assert resolver.unescape_braces("{{x}} {0} {name}") == "{x} {0} {name}"


class TestDisplayString:
    """External string form of values."""

    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        ("text", "text"),
        (5, "5"),
        (2.5, "2.5"),
        (True, "True"),
        (False, "False"),
    ])
    def test_primitives(self, value, expected):
        """Primitive values."""
        assert resolver.to_display_string(value) == expected

    def test_objects_use_str(self):
        """Other objects use __str__."""
        class Money:
            def __str__(self):
                return "10 EUR"

        assert resolver.to_display_string(Money()) == "10 EUR"
