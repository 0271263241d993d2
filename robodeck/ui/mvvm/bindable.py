"""
WPF-Style Bindable Property Descriptor.

Provides automatic signal emission on property change.

Usage:
    class DashboardViewModel(BindableBase):
        categoryChanged = Signal(object)
        category = BindableProperty(default="All")

    # Changing the property auto-emits categoryChanged
    vm.category = "Scalping"
"""
from typing import Any, Optional, Callable, TypeVar, Generic
from PySide6.QtCore import QObject, Signal

T = TypeVar('T')


def _by_value(old: Any, new: Any) -> bool:
    return old == new


def by_identity(old: Any, new: Any) -> bool:
    """Change test for large derived values that are replaced, never mutated."""
    return old is new


class BindableProperty(Generic[T]):
    """
    Descriptor that emits a signal when the property value changes.

    Args:
        default: Default value for the property.
        signal_name: Optional custom signal name. Defaults to "{property_name}Changed".
        coerce: Optional callable to coerce/validate the value before setting.
        equals: Callable(old, new) deciding whether a set is a no-op.
            Defaults to ==; pass by_identity for big memoized collections.
    """

    def __init__(
        self,
        default: T = None,
        signal_name: Optional[str] = None,
        coerce: Optional[Callable[[Any], T]] = None,
        equals: Callable[[Any, Any], bool] = _by_value,
    ):
        self.default = default
        self._signal_name = signal_name
        self.coerce = coerce
        self.equals = equals
        self._attr_name: str = ""
        self._public_name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._public_name = name
        self._attr_name = f"_bindable_{name}"
        if not self._signal_name:
            self._signal_name = f"{name}Changed"

        # Signals cannot be added to a QObject class after creation in PySide6;
        # the owner declares "{name}Changed" itself when it needs one.

    def __get__(self, obj: Optional[QObject], objtype: type = None) -> T:
        if obj is None:
            return self  # type: ignore
        return getattr(obj, self._attr_name, self.default)

    def __set__(self, obj: QObject, value: Any) -> None:
        if self.coerce is not None:
            value = self.coerce(value)

        old_value = getattr(obj, self._attr_name, self.default)
        if self.equals(old_value, value):
            return

        setattr(obj, self._attr_name, value)

        specific_signal = getattr(obj, self._signal_name, None)
        if specific_signal is not None and callable(getattr(specific_signal, 'emit', None)):
            specific_signal.emit(value)

        generic_signal = getattr(obj, 'propertyChanged', None)
        if generic_signal is not None and callable(getattr(generic_signal, 'emit', None)):
            generic_signal.emit(self._public_name, value)


class BindableBase(QObject):
    """
    Base class for ViewModels with WPF-style property change notification.

    Provides a generic `propertyChanged(name, value)` signal that every
    BindableProperty emits in addition to its own "{name}Changed" signal.
    """

    propertyChanged = Signal(str, object)

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)

    def notify_property_changed(self, property_name: str, value: Any) -> None:
        """Manually emit a property changed notification."""
        self.propertyChanged.emit(property_name, value)
