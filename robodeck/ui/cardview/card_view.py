"""
CardView - Windowed robot card list.

The scroll bar of a QAbstractScrollArea spans the full height of the
filtered collection; only the rows of the current render window exist
as widgets, placed on the viewport at index * item_height minus the
scroll offset and recycled through a WidgetPool. Qt caps widget
heights at QWIDGETSIZE_MAX, so the full extent lives in the scroll bar
range rather than in a spacer widget.
"""
from typing import Callable, Optional, Sequence, TYPE_CHECKING
from PySide6.QtCore import Qt, Signal, QTimer
from PySide6.QtWidgets import (
    QAbstractScrollArea, QFrame, QLabel, QPushButton, QVBoxLayout, QWidget
)
from loguru import logger

from robodeck.core.i18n import translate as default_translate
from robodeck.ui.cardview.card_item_widget import RobotCardWidget
from robodeck.ui.cardview.materializer import materialize, total_height
from robodeck.ui.cardview.models.robot_item import RenderWindow
from robodeck.ui.cardview.viewport_tracker import DEFAULT_CONTAINER_SIZE, ViewportTracker
from robodeck.ui.cardview.widget_pool import WidgetPool
from robodeck.ui.cardview.windowing import DEFAULT_OVERSCAN, compute_range, max_rows

if TYPE_CHECKING:
    from robodeck.ui.cardview.card_viewmodel import CardViewModel
    from robodeck.ui.cardview.models.robot_item import RobotItem


class CardView(QWidget):
    """
    Virtualized single-column robot list.

    Signals:
        clear_filters_requested: Clear-filters button in the empty state
        render_completed(RenderWindow): After each render pass
    """

    clear_filters_requested = Signal()
    render_completed = Signal(object)

    def __init__(
        self,
        parent: QWidget | None = None,
        item_height: int = 280,
        overscan: int = DEFAULT_OVERSCAN,
        default_container_size: int = DEFAULT_CONTAINER_SIZE,
        scroll_coalesce_ms: int = 16,
        pool_size: int = 64,
        translate: Callable[..., str] = default_translate,
    ):
        """Initialize CardView."""
        super().__init__(parent)

        self._viewmodel: Optional['CardViewModel'] = None
        self._translate = translate

        # Settings
        self._item_height = item_height
        self._overscan = overscan
        self._spacing = 12
        self._margin = 8
        self._scroll_coalesce_ms = scroll_coalesce_ms

        # State
        self._items: Sequence['RobotItem'] = ()
        self._processing_id: Optional[str] = None
        self._render_window = RenderWindow(rows=(), total_height=0, no_results=True)
        self._disposed = False

        # Deferred update, coalesces scroll bursts into one pass per frame
        self._update_timer = QTimer(self)
        self._update_timer.setSingleShot(True)
        self._update_timer.timeout.connect(self.update_visible_items)

        self._setup_ui()

        self._widget_pool: WidgetPool[RobotCardWidget] = WidgetPool(
            factory=self._create_pool_widget,
            pool_size=max(pool_size, self._row_limit(default_container_size)),
        )

        self.tracker = ViewportTracker(default_container_size, self)
        self.tracker.viewportChanged.connect(self._on_viewport_changed)
        self.tracker.start(self.scroll_area.verticalScrollBar(), self.scroll_area.viewport())

    def _setup_ui(self):
        """Build the UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Scroll area; rows are absolutely positioned viewport children
        self.scroll_area = QAbstractScrollArea()
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.verticalScrollBar().setRange(0, 0)
        layout.addWidget(self.scroll_area)

        self.empty_state = self._build_empty_state()
        self.empty_state.hide()
        layout.addWidget(self.empty_state)

    def _build_empty_state(self) -> QWidget:
        widget = QWidget()
        box = QVBoxLayout(widget)
        box.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.empty_title = QLabel()
        self.empty_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_title.setStyleSheet("font-size: 18px; font-weight: 600;")
        self.empty_hint = QLabel()
        self.empty_hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_hint.setStyleSheet("color: #9ca3af;")
        self.clear_filters_button = QPushButton(self._translate("dash_clear_filters"))
        self.clear_filters_button.setFlat(True)
        self.clear_filters_button.clicked.connect(self.clear_filters_requested)

        box.addWidget(self.empty_title)
        box.addWidget(self.empty_hint)
        box.addWidget(self.clear_filters_button, 0, Qt.AlignmentFlag.AlignCenter)
        return widget

    def _create_pool_widget(self) -> RobotCardWidget:
        widget = RobotCardWidget(self.scroll_area.viewport(), translate=self._translate)
        widget.duplicate_requested.connect(self._on_duplicate_requested)
        widget.delete_requested.connect(self._on_delete_requested)
        widget.hide()
        return widget

    def _row_limit(self, container_size: int) -> int:
        return max_rows(container_size, self._item_height, self._overscan)

    # --- DataContext / ViewModel ---

    def set_data_context(self, viewmodel: 'CardViewModel'):
        """Bind ViewModel."""
        self._viewmodel = viewmodel
        viewmodel.filteredItemsChanged.connect(self.set_items)
        viewmodel.processingIdChanged.connect(self.set_processing_id)
        viewmodel.searchTermChanged.connect(self.scroll_to_top)
        viewmodel.categoryChanged.connect(self.scroll_to_top)
        self.clear_filters_requested.connect(viewmodel.clear_filters)
        self._processing_id = viewmodel.processing_id
        self.set_items(viewmodel.filtered_items)

    @property
    def data_context(self) -> Optional['CardViewModel']:
        return self._viewmodel

    # --- Items ---

    def set_items(self, items: Sequence['RobotItem']):
        """Show a new filtered collection."""
        self._items = items
        self.update_visible_items()
        logger.debug(f"CardView: {len(items)} robots")

    def set_processing_id(self, item_id: Optional[str]):
        """Mark the card of item_id busy; None clears the marker."""
        self._processing_id = item_id
        for row_id, widget in self._widget_pool.items():
            widget.set_processing(row_id == item_id)

    def scroll_to_top(self, *_):
        self.scroll_area.verticalScrollBar().setValue(0)

    @property
    def render_window(self) -> RenderWindow:
        """Result of the latest render pass."""
        return self._render_window

    @property
    def item_height(self) -> int:
        return self._item_height

    @property
    def widget_pool(self) -> WidgetPool[RobotCardWidget]:
        return self._widget_pool

    # --- Render pass ---

    def update_visible_items(self):
        """Recompute the visible range and materialize it."""
        if self._disposed:
            return

        container_size = self.tracker.container_size
        self._update_scroll_range(total_height(len(self._items), self._item_height), container_size)
        # Clamping the range may have queued another pass
        self._update_timer.stop()

        scroll_offset = self.tracker.scroll_offset
        visible_range = compute_range(
            scroll_offset,
            container_size,
            self._item_height,
            self._overscan,
            len(self._items),
        )
        window = materialize(self._items, visible_range, self._item_height)
        self._render_window = window

        self._update_empty_state(window.no_results)

        limit = self._row_limit(container_size)
        if limit > self._widget_pool.pool_size:
            self._widget_pool.pool_size = limit

        self._widget_pool.retain({row.item.id for row in window.rows})

        width = max(1, self.scroll_area.viewport().width() - 2 * self._margin)
        height = max(1, self._item_height - self._spacing)
        for row in window.rows:
            widget = self._widget_pool.acquire(row.item.id)
            widget.bind_data(row.item)
            widget.set_processing(row.item.id == self._processing_id)
            widget.setFixedSize(width, height)
            widget.move(self._margin, row.offset - scroll_offset)
            widget.show()

        logger.trace(
            f"Render: range={visible_range.start}-{visible_range.end}, "
            f"rows={len(window.rows)}, pool={self._widget_pool.total_count}"
        )
        self.render_completed.emit(window)

    def _update_scroll_range(self, content_height: int, container_size: int):
        bar = self.scroll_area.verticalScrollBar()
        bar.setPageStep(container_size)
        bar.setSingleStep(max(1, self._item_height // 4))
        bar.setRange(0, max(0, content_height - container_size))

    def _update_empty_state(self, no_results: bool):
        if no_results:
            has_source = self._viewmodel is not None and self._viewmodel.has_items
            if has_source:
                self.empty_title.setText(self._translate("dash_no_matches"))
                self.empty_hint.setText(self._translate("dash_no_matches_hint"))
            else:
                self.empty_title.setText(self._translate("dash_no_robots_title"))
                self.empty_hint.setText(self._translate("dash_no_robots_desc"))
            self.clear_filters_button.setVisible(has_source)
        self.empty_state.setVisible(no_results)
        self.scroll_area.setVisible(not no_results)

    # --- Events ---

    def _on_viewport_changed(self, scroll_offset: int, container_size: int):
        self._update_timer.start(self._scroll_coalesce_ms)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        # Row widths follow the viewport width
        self._update_timer.start(self._scroll_coalesce_ms)

    def _on_duplicate_requested(self, item_id: str):
        if self._viewmodel is not None:
            self._viewmodel.request_duplicate(item_id)

    def _on_delete_requested(self, item_id: str, name: str):
        if self._viewmodel is not None:
            self._viewmodel.request_delete(item_id, name)

    def dispose(self):
        """Release listeners and pooled widgets."""
        if self._disposed:
            return
        self._disposed = True
        self._update_timer.stop()
        self.tracker.stop()
        self._widget_pool.dispose()
        logger.debug("CardView disposed")

    def closeEvent(self, event):
        self.dispose()
        super().closeEvent(event)
