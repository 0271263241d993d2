"""
DashboardWindow - Main window hosting the robot CardView.

Search box, category selector, result counter and the windowed list.
Toasts are shown in the status bar; delete confirmation uses a
QMessageBox.
"""
from typing import Callable
from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QComboBox, QHBoxLayout, QLabel, QLineEdit, QMainWindow, QMessageBox,
    QVBoxLayout, QWidget
)
from loguru import logger

from robodeck.core.i18n import translate as default_translate
from robodeck.ui.cardview import CardView, CardViewModel


TOAST_COLORS = {
    "success": "#22c55e",
    "error": "#ef4444",
    "info": "#60a5fa",
}


class StatusBarToaster:
    """Notifier collaborator: shows a colored message for a few seconds."""

    def __init__(self, window: QMainWindow, timeout_ms: int = 3000):
        self._window = window
        self._timeout_ms = timeout_ms
        self._reset_timer = QTimer(window)
        self._reset_timer.setSingleShot(True)
        self._reset_timer.timeout.connect(lambda: self._window.statusBar().setStyleSheet(""))

    def __call__(self, message: str, kind: str = "info"):
        bar = self._window.statusBar()
        bar.setStyleSheet(f"color: {TOAST_COLORS.get(kind, TOAST_COLORS['info'])};")
        bar.showMessage(message, self._timeout_ms)
        self._reset_timer.start(self._timeout_ms)


def ask_confirmation(parent: QWidget, title: str = "Confirm") -> Callable[[str], bool]:
    """Confirm collaborator backed by a modal Yes/No box."""
    def confirm(message: str) -> bool:
        answer = QMessageBox.question(
            parent, title, message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes
    return confirm


class DashboardWindow(QMainWindow):
    """
    Robot dashboard.

    The view model is created by the caller (see robodeck.main) so the
    same window works with any repository.
    """

    def __init__(self, viewmodel: CardViewModel, translate: Callable[..., str] = default_translate):
        super().__init__()
        self.viewmodel = viewmodel
        self._translate = translate
        self.setWindowTitle(self._translate("dash_title"))
        self.resize(960, 900)
        self.toaster = StatusBarToaster(self)
        viewmodel.set_collaborators(
            notify=self.toaster,
            confirm=ask_confirmation(self, self._translate("dash_confirm_title")),
        )
        self._setup_ui()
        self._bind()

    def _setup_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 0)
        layout.setSpacing(12)

        toolbar = QHBoxLayout()
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText(self._translate("dash_search_placeholder"))
        self.search_edit.setClearButtonEnabled(True)
        self.category_combo = QComboBox()
        self.category_combo.setMinimumWidth(160)
        self.count_label = QLabel()
        toolbar.addWidget(self.search_edit, 1)
        toolbar.addWidget(self.category_combo)
        toolbar.addWidget(self.count_label)
        layout.addLayout(toolbar)

        settings = self.viewmodel.settings
        self.card_view = CardView(
            item_height=settings.item_height,
            overscan=settings.overscan,
            default_container_size=settings.default_container_size,
            scroll_coalesce_ms=settings.scroll_coalesce_ms,
            pool_size=settings.pool_size,
            translate=self._translate,
        )
        layout.addWidget(self.card_view, 1)
        self.setCentralWidget(central)

    def _bind(self):
        vm = self.viewmodel
        self.search_edit.textChanged.connect(vm.set_search_term)
        self.category_combo.currentTextChanged.connect(self._on_category_selected)

        vm.categoriesChanged.connect(self._on_categories_changed)
        vm.categoryChanged.connect(self._sync_category)
        vm.searchTermChanged.connect(self._sync_search)
        vm.filteredItemsChanged.connect(self._update_count)
        vm.loadingChanged.connect(self._on_loading_changed)

        self.card_view.set_data_context(vm)
        self._on_categories_changed(vm.categories)
        self._update_count(vm.filtered_items)

    # --- ViewModel → widgets ---

    def _on_categories_changed(self, categories):
        current = self.viewmodel.category
        self.category_combo.blockSignals(True)
        self.category_combo.clear()
        self.category_combo.addItems(list(categories))
        if current not in categories:
            self.category_combo.addItem(current)
        self.category_combo.setCurrentText(current)
        self.category_combo.blockSignals(False)

    def _sync_category(self, category: str):
        if self.category_combo.currentText() != category:
            self.category_combo.blockSignals(True)
            self.category_combo.setCurrentText(category)
            self.category_combo.blockSignals(False)

    def _sync_search(self, term: str):
        # Only overwrite the box when filters were cleared from elsewhere
        if term == "" and self.search_edit.text():
            self.search_edit.blockSignals(True)
            self.search_edit.clear()
            self.search_edit.blockSignals(False)

    def _update_count(self, filtered):
        self.count_label.setText(f"{len(filtered)} / {len(self.viewmodel.items)}")

    def _on_loading_changed(self, loading: bool):
        if loading:
            self.statusBar().showMessage(self._translate("dash_loading"))
        else:
            self.statusBar().clearMessage()

    # --- widgets → ViewModel ---

    def _on_category_selected(self, category: str):
        if category:
            self.viewmodel.set_category(category)

    def closeEvent(self, event):
        logger.info("Dashboard closing")
        self.card_view.dispose()
        super().closeEvent(event)
