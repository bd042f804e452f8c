"""
LiveLocale Qt UI Support

Helper classes for binding Qt widgets to translation units.
These only forward values; all resolution happens in the unit.
"""

from typing import Any, List, Optional, Union

from PySide6.QtCore import QObject, Signal

from livelocale.i18n.unit import TranslationUnit
from livelocale.services.logger import get_logger
from livelocale.utils.events import Subscription


logger = get_logger(__name__)


class TranslationBinding(QObject):
    """
    Qt-side view of one translation unit.

    Re-emits the unit's value stream as ``value_changed`` and writes
    parameters pushed from widgets or models into the unit.

    Usage:
        binding = TranslationBinding(unit)
        binding.bind(label)                  # label.setText(...) on every change
        binding.set_parameter(0, user_name)
    """

    value_changed = Signal(str)

    def __init__(self, unit: TranslationUnit, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._unit = unit
        self._targets: List[tuple] = []
        self._subscription: Optional[Subscription] = unit.value.subscribe(self._forward)

    @property
    def unit(self) -> TranslationUnit:
        return self._unit

    @property
    def text(self) -> str:
        """Current resolved string."""
        return self._unit.current_value

    def _forward(self, text: str) -> None:
        for widget, method_name in self._targets:
            if method := getattr(widget, method_name, None):
                method(text)
        self.value_changed.emit(text)

    def bind(self, widget, method_name: str = "setText") -> None:
        """
        Push the current value and every change into a widget setter.

        Args:
            widget: Qt widget (or any object)
            method_name: Setter name (e.g. "setText", "setWindowTitle")
        """
        self._targets.append((widget, method_name))
        if method := getattr(widget, method_name, None):
            method(self.text)

    def set_parameter(self, key: Union[int, str], value: Any) -> None:
        """
        Forward a parameter value to the unit.

        None is ignored: an unset binding source never clears a parameter.
        """
        if value is None:
            return
        self._unit.parameters[key] = value

    def set_parameters(self, *args: Any, **named: Any) -> None:
        """Forward several indexed and named values at once."""
        for index, value in enumerate(args):
            self.set_parameter(index, value)
        for name, value in named.items():
            self.set_parameter(name, value)

    def dispose(self) -> None:
        """Stop forwarding. The unit itself stays alive."""
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self._targets.clear()


class UITextBinder:
    """
    Binds many widget texts to translation units.

    Usage:
        binder = UITextBinder()
        binder.bind(button, "setText", strings["buttons.ok"])
        binder.bind(label, "setText", strings["labels.welcome"], name="John")

        # On teardown
        binder.clear()
    """

    def __init__(self):
        self._bindings: List[TranslationBinding] = []

    def bind(
        self,
        widget,
        method_name: str,
        unit: TranslationUnit,
        *args: Any,
        **kwargs: Any
    ) -> TranslationBinding:
        """
        Bind a widget setter to a unit.

        Args:
            widget: Qt widget
            method_name: Setter name (e.g. "setText", "setWindowTitle")
            unit: Translation unit
            *args: Indexed parameters
            **kwargs: Named parameters
        """
        binding = TranslationBinding(unit)
        binding.set_parameters(*args, **kwargs)
        binding.bind(widget, method_name)
        self._bindings.append(binding)
        logger.debug(f"Bound {type(widget).__name__}.{method_name} to '{unit.key}'")
        return binding

    @property
    def bindings(self) -> List[TranslationBinding]:
        return list(self._bindings)

    def clear(self) -> None:
        """Dispose all bindings."""
        for binding in self._bindings:
            binding.dispose()
        self._bindings.clear()
