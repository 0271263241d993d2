"""
Unit Tests for the bindable property system.

Tests for:
- BindableProperty descriptor
- Change tests (by value, by identity)
- BindableBase generic notification
"""
from unittest.mock import MagicMock
from PySide6.QtCore import Signal

from robodeck.ui.mvvm import BaseViewModel, BindableBase, BindableProperty, by_identity


class TestBindableProperty:
    """Tests for BindableProperty descriptor."""

    def test_default_value(self, qapp):
        class TestVM(BindableBase):
            name = BindableProperty(default="default_name")

        assert TestVM().name == "default_name"

    def test_emits_property_changed(self, qapp):
        class TestVM(BindableBase):
            count = BindableProperty(default=0)

        vm = TestVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.count = 42

        assert vm.count == 42
        callback.assert_called_once_with("count", 42)

    def test_emits_specific_signal(self, qapp):
        class TestVM(BindableBase):
            countChanged = Signal(int)
            count = BindableProperty(default=0)

        vm = TestVM()
        callback = MagicMock()
        vm.countChanged.connect(callback)

        vm.count = 100

        callback.assert_called_once_with(100)

    def test_custom_signal_name(self, qapp):
        class TestVM(BindableBase):
            searchTermChanged = Signal(str)
            search_term = BindableProperty(default="", signal_name="searchTermChanged")

        vm = TestVM()
        callback = MagicMock()
        vm.searchTermChanged.connect(callback)

        vm.search_term = "btc"

        callback.assert_called_once_with("btc")

    def test_no_emit_on_same_value(self, qapp):
        class TestVM(BindableBase):
            category = BindableProperty(default="All")

        vm = TestVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.category = "All"

        callback.assert_not_called()

    def test_identity_comparison(self, qapp):
        class TestVM(BindableBase):
            rows = BindableProperty(default=(), equals=by_identity)

        vm = TestVM()
        first = [1, 2]
        vm.rows = first
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.rows = first
        vm.rows = [1, 2]

        callback.assert_called_once_with("rows", [1, 2])

    def test_coerce(self, qapp):
        class TestVM(BindableBase):
            term = BindableProperty(default="", coerce=lambda v: (v or "").strip())

        vm = TestVM()
        vm.term = "  eth "
        assert vm.term == "eth"
        vm.term = None
        assert vm.term == ""

    def test_instances_are_independent(self, qapp):
        class TestVM(BindableBase):
            value = BindableProperty(default=0)

        a, b = TestVM(), TestVM()
        a.value = 5

        assert b.value == 0


class TestBaseViewModel:

    def test_config_is_optional(self, qapp):
        assert BaseViewModel().config is None

    def test_notify_property_changed(self, qapp):
        vm = BaseViewModel()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.notify_property_changed("anything", 1)

        callback.assert_called_once_with("anything", 1)
