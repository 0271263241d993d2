"""
CardView Tests - windowed rendering against a live ViewModel.
"""
import pytest
from PySide6.QtWidgets import QLabel

from robodeck.core.config import ViewportSettings
from robodeck.core.repository import InMemoryRobotRepository
from robodeck.ui.cardview.card_item_widget import RobotCardWidget
from robodeck.ui.cardview.card_view import CardView
from robodeck.ui.cardview.card_viewmodel import CardViewModel


def make_vm(robots):
    vm = CardViewModel(
        InMemoryRobotRepository(robots), settings=ViewportSettings(search_debounce_ms=0)
    )
    vm.set_items(robots)
    return vm


@pytest.fixture
def view(qapp):
    card_view = CardView()
    yield card_view
    card_view.dispose()


@pytest.fixture
def large_vm(qapp, make_robots):
    return make_vm(make_robots(100_000))


class TestRendering:

    def test_initial_window_uses_fallback_size(self, view, large_vm):
        view.set_data_context(large_vm)

        rows = view.render_window.rows
        assert view.tracker.container_size == 600
        assert [row.index for row in rows] == list(range(9))
        assert rows[0].offset == 0
        assert view.render_window.total_height == 100_000 * 280

    def test_scroll_range_spans_collection(self, view, large_vm):
        view.set_data_context(large_vm)

        bar = view.scroll_area.verticalScrollBar()
        assert bar.maximum() == 100_000 * 280 - 600
        assert bar.pageStep() == 600

    def test_scrolled_window(self, view, large_vm):
        view.set_data_context(large_vm)

        view.scroll_area.verticalScrollBar().setValue(2800)
        view.update_visible_items()

        rows = view.render_window.rows
        assert len(rows) == 14
        assert rows[0].index == 5
        assert rows[0].offset == 1400
        assert rows[-1].index == 18

    def test_rows_positioned_relative_to_scroll(self, view, large_vm):
        view.set_data_context(large_vm)
        view.scroll_area.verticalScrollBar().setValue(2800)
        view.update_visible_items()

        for row in view.render_window.rows:
            widget = view.widget_pool.get_widget(row.item.id)
            assert widget.y() == row.offset - 2800
            assert widget.data_context is row.item

    def test_widget_count_bounded_while_scrolling(self, view, large_vm):
        view.set_data_context(large_vm)
        bar = view.scroll_area.verticalScrollBar()

        for offset in range(0, 2_000_000, 99_991):
            bar.setValue(offset)
            view.update_visible_items()
            assert view.widget_pool.active_count == len(view.render_window.rows)
            assert view.widget_pool.active_count <= 14

        assert view.widget_pool.total_count <= view.widget_pool.pool_size

    def test_render_completed_signal(self, view, qapp, make_robots):
        windows = []
        view.render_completed.connect(windows.append)

        view.set_data_context(make_vm(make_robots(3)))

        assert windows[-1] is view.render_window
        assert len(windows[-1].rows) == 3


class TestFilterInteraction:

    def test_search_narrows_rows(self, view, qapp, make_robots):
        vm = make_vm(make_robots(50))
        view.set_data_context(vm)

        vm.set_search_term("Robot 4")

        ids = [row.item.id for row in view.render_window.rows]
        assert ids == ["4", "40", "41", "42", "43", "44", "45", "46", "47"]

    def test_search_change_scrolls_to_top(self, view, large_vm):
        view.set_data_context(large_vm)
        bar = view.scroll_area.verticalScrollBar()
        bar.setValue(28_000)

        large_vm.set_search_term("Robot 9")

        assert bar.value() == 0
        assert view.render_window.rows[0].index == 0

    def test_no_matches_shows_empty_state(self, view, qapp, btc_robots):
        vm = make_vm(btc_robots)
        view.set_data_context(vm)

        vm.set_search_term("doge")

        assert view.render_window.no_results
        assert not view.empty_state.isHidden()
        assert view.scroll_area.isHidden()
        assert view.empty_title.text() == "No matches found"
        assert not view.clear_filters_button.isHidden()
        assert view.widget_pool.active_count == 0

    def test_clear_filters_button(self, view, qapp, btc_robots):
        vm = make_vm(btc_robots)
        view.set_data_context(vm)
        vm.set_category("Trend")
        vm.set_search_term("btc")

        view.clear_filters_button.click()

        assert vm.search_term == ""
        assert vm.category == "All"
        assert len(view.render_window.rows) == 3
        assert view.empty_state.isHidden()

    def test_no_robots_state(self, view, qapp):
        view.set_data_context(make_vm([]))

        assert view.empty_title.text() == "No Robots Yet"
        assert view.clear_filters_button.isHidden()


class TestProcessingMarker:

    def test_marker_follows_viewmodel(self, view, qapp, btc_robots):
        vm = make_vm(btc_robots)
        view.set_data_context(vm)

        vm.processing_id = "2"

        states = {item_id: w.processing for item_id, w in view.widget_pool.items()}
        assert states == {"1": False, "2": True, "3": False}

        vm.processing_id = None

        assert not any(w.processing for _, w in view.widget_pool.items())

    def test_busy_card_ignores_clicks(self, view, qapp, btc_robots):
        vm = make_vm(btc_robots)
        view.set_data_context(vm)
        card = view.widget_pool.get_widget("1")
        requests = []
        card.delete_requested.connect(lambda item_id, name: requests.append(item_id))

        vm.processing_id = "1"
        card.delete_button.click()

        assert requests == []
        assert not card.delete_button.isEnabled()


class TestLifetime:

    def test_dispose_stops_tracking(self, qapp, btc_robots):
        view = CardView()
        view.set_data_context(make_vm(btc_robots))

        view.dispose()
        view.dispose()

        assert not view.tracker.is_active
        assert view.widget_pool.total_count == 0


class TestCardLabels:

    def test_card_labels_use_translate(self, qapp):
        card = RobotCardWidget(translate=lambda key, **kwargs: f"<{key}>")
        texts = {label.text() for label in card.findChildren(QLabel)}

        assert "<dash_processing>" in texts
        assert card.duplicate_button.text() == "<dash_duplicate>"
        assert card.delete_button.text() == "<dash_delete>"
