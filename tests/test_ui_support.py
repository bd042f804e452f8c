"""
LiveLocale Qt UI Support Tests

Widget bindings (requires pytest-qt).
"""

import pytest
from PySide6.QtWidgets import QLabel

from livelocale.i18n.ui_support import TranslationBinding, UITextBinder
from livelocale.i18n.unit import TranslationUnit


@pytest.fixture
def unit(registry):
    unit = TranslationUnit(
        "welcome",
        {"en": "Welcome {0}", "fr": "Bienvenue {0}"},
        registry,
    )
    yield unit
    unit.dispose()


@pytest.fixture
def label(qtbot):
    label = QLabel()
    qtbot.addWidget(label)
    return label


class TestTranslationBinding:
    """TranslationBinding behavior."""

    def test_bind_sets_current_text(self, unit, label):
        """Binding pushes the current value."""
        binding = TranslationBinding(unit)
        binding.bind(label)

        assert label.text() == "Welcome {0}"

    def test_parameter_updates_widget(self, unit, label, qtbot):
        """Parameter changes reach the widget and the signal."""
        binding = TranslationBinding(unit)
        binding.bind(label)

        with qtbot.waitSignal(binding.value_changed, timeout=1000) as blocker:
            binding.set_parameter(0, "Anna")

        assert blocker.args == ["Welcome Anna"]
        assert label.text() == "Welcome Anna"

    def test_culture_change_updates_widget(self, unit, label, registry):
        """Culture changes reach the widget."""
        binding = TranslationBinding(unit)
        binding.bind(label)
        binding.set_parameter(0, "Anna")

        registry.set_culture("fr-FR")

        assert label.text() == "Bienvenue Anna"

    def test_none_parameter_ignored(self, unit):
        """Unset binding sources never clear parameters."""
        binding = TranslationBinding(unit)
        binding.set_parameter(0, "Anna")
        binding.set_parameter(0, None)

        assert unit.parameters[0] == "Anna"
        assert binding.text == "Welcome Anna"

    def test_custom_setter(self, unit, qtbot):
        """Any setter name may be targeted."""
        label = QLabel()
        qtbot.addWidget(label)
        binding = TranslationBinding(unit)

        binding.bind(label, "setToolTip")

        assert label.toolTip() == "Welcome {0}"

    def test_dispose_stops_forwarding(self, unit, label):
        """Disposed bindings leave the widget alone; the unit lives on."""
        binding = TranslationBinding(unit)
        binding.bind(label)

        binding.dispose()
        unit.parameters[0] = "Anna"

        assert label.text() == "Welcome {0}"
        assert unit.current_value == "Welcome Anna"
        assert unit.value.subscriber_count == 0


class TestUITextBinder:
    """UITextBinder behavior."""

    def test_bind_with_parameters(self, unit, label):
        """Parameters passed to bind are applied."""
        binder = UITextBinder()
        binder.bind(label, "setText", unit, "John")

        assert label.text() == "Welcome John"

    def test_clear(self, unit, label):
        """clear disposes every binding."""
        binder = UITextBinder()
        binder.bind(label, "setText", unit)

        binder.clear()
        unit.parameters[0] = "Anna"

        assert binder.bindings == []
        assert label.text() == "Welcome {0}"
