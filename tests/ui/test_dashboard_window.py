"""
DashboardWindow Tests - toolbar wiring and collaborators.
"""
import pytest

from robodeck.core.config import ViewportSettings
from robodeck.core.repository import InMemoryRobotRepository
from robodeck.main import parse_args
from robodeck.ui.cardview import CardViewModel
from robodeck.ui.dashboard_window import DashboardWindow, StatusBarToaster


@pytest.fixture
def window(qapp, btc_robots):
    vm = CardViewModel(
        InMemoryRobotRepository(btc_robots), settings=ViewportSettings(search_debounce_ms=0)
    )
    vm.set_items(btc_robots)
    win = DashboardWindow(vm)
    yield win
    win.card_view.dispose()


class TestDashboardWindow:

    def test_category_selector_lists_categories(self, window):
        combo = window.category_combo
        entries = [combo.itemText(i) for i in range(combo.count())]

        assert entries == ["All", "Scalping", "Trend", "Custom"]
        assert combo.currentText() == "All"

    def test_search_box_drives_filter(self, window):
        window.search_edit.setText("btc")

        assert [r.id for r in window.viewmodel.filtered_items] == ["1", "3"]
        assert window.count_label.text() == "2 / 3"

    def test_category_selection_drives_filter(self, window):
        window.category_combo.setCurrentText("Custom")

        assert window.viewmodel.category == "Custom"
        assert [row.item.id for row in window.card_view.render_window.rows] == ["3"]

    def test_clear_filters_resets_toolbar(self, window):
        window.search_edit.setText("doge")
        window.category_combo.setCurrentText("Trend")

        window.card_view.clear_filters_button.click()

        assert window.search_edit.text() == ""
        assert window.category_combo.currentText() == "All"
        assert window.count_label.text() == "3 / 3"

    @pytest.mark.asyncio
    async def test_action_toast_in_status_bar(self, window):
        window.viewmodel.set_collaborators(notify=window.toaster, confirm=lambda message: True)

        await window.viewmodel.delete("2", "ETH Trend")

        assert window.statusBar().currentMessage() == "Robot deleted successfully"
        assert window.count_label.text() == "2 / 2"

    def test_window_labels_are_translated(self, qapp, btc_robots):
        vm = CardViewModel(InMemoryRobotRepository(btc_robots))
        win = DashboardWindow(vm, translate=lambda key, **kwargs: f"<{key}>")

        assert win.windowTitle() == "<dash_title>"

        vm.loading = True
        assert win.statusBar().currentMessage() == "<dash_loading>"

        vm.loading = False
        assert win.statusBar().currentMessage() == ""
        win.card_view.dispose()

    def test_toaster_message(self, window):
        toaster = StatusBarToaster(window, timeout_ms=500)

        toaster("Failed to delete robot", "error")

        assert window.statusBar().currentMessage() == "Failed to delete robot"
        assert "#ef4444" in window.statusBar().styleSheet()


def test_parse_args_defaults():
    args = parse_args([])

    assert args.count == 10_000
    assert args.config == "config.json"


def test_parse_args_overrides():
    args = parse_args(["--count", "500", "--config", "robodeck.toml", "--latency", "0"])

    assert args.count == 500
    assert args.config == "robodeck.toml"
    assert args.latency == 0.0
