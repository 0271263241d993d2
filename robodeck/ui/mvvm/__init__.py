"""
MVVM Package - WPF-Style Data Binding for PySide6.

Provides:
- BindableProperty: Descriptor for auto-signaling properties.
- BindableBase: QObject with a generic propertyChanged signal.
- BaseViewModel: Base for the dashboard view models.
"""
from robodeck.ui.mvvm.bindable import BindableProperty, BindableBase, by_identity
from robodeck.ui.mvvm.viewmodel import BaseViewModel

__all__ = [
    "BaseViewModel",
    "BindableBase",
    "BindableProperty",
    "by_identity",
]
