"""
RobotCardWidget - Leaf renderer for one robot card.

Provides:
- DataContext binding (bind_data / reset for pool recycling)
- Category badge, description and creation date
- Duplicate / delete buttons forwarded as signals
- Busy marker while an action for this robot is in flight
"""
from typing import Callable, Dict, Optional, TYPE_CHECKING
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QSizePolicy, QVBoxLayout, QWidget
)
from loguru import logger

from robodeck.core.i18n import translate as default_translate

if TYPE_CHECKING:
    from robodeck.ui.cardview.models.robot_item import RobotItem


BADGE_STYLES: Dict[str, str] = {
    "Scalping": "background-color: #3b1f4f; color: #d8b4fe; border: 1px solid #6b21a8;",
    "Trend": "background-color: #14342b; color: #86efac; border: 1px solid #166534;",
}
DEFAULT_BADGE_STYLE = "background-color: #1f2937; color: #d1d5db; border: 1px solid #374151;"


class RobotCardWidget(QFrame):
    """
    Card for a single RobotItem.

    Signals:
        duplicate_requested(item_id: str)
        delete_requested(item_id: str, name: str)
    """

    duplicate_requested = Signal(str)
    delete_requested = Signal(str, str)

    def __init__(self, parent: QWidget | None = None, translate: Callable[..., str] = default_translate):
        super().__init__(parent)
        self._data_context: Optional['RobotItem'] = None
        self._processing = False
        self._translate = translate
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("robotCard")
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setStyleSheet("""
            QFrame#robotCard {
                background-color: #111827;
                border: 1px solid #1f2937;
                border-radius: 10px;
            }
            QFrame#robotCard[processing="true"] {
                border-color: #2563eb;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 12)
        layout.setSpacing(8)

        header = QHBoxLayout()
        self._name_label = QLabel()
        self._name_label.setStyleSheet("font-size: 15px; font-weight: 600; color: #f9fafb;")
        self._name_label.setWordWrap(True)
        self._badge_label = QLabel()
        self._badge_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.addWidget(self._name_label, 1)
        header.addWidget(self._badge_label, 0, Qt.AlignmentFlag.AlignTop)
        layout.addLayout(header)

        self._description_label = QLabel()
        self._description_label.setWordWrap(True)
        self._description_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self._description_label.setStyleSheet("color: #9ca3af;")
        layout.addWidget(self._description_label, 1)

        self._date_label = QLabel()
        self._date_label.setStyleSheet("color: #6b7280; font-size: 11px;")
        layout.addWidget(self._date_label)

        self._busy_label = QLabel(self._translate("dash_processing"))
        self._busy_label.setStyleSheet("color: #60a5fa;")
        self._busy_label.hide()
        layout.addWidget(self._busy_label)

        actions = QHBoxLayout()
        self.duplicate_button = QPushButton(self._translate("dash_duplicate"))
        self.delete_button = QPushButton(self._translate("dash_delete"))
        self.duplicate_button.clicked.connect(self._on_duplicate_clicked)
        self.delete_button.clicked.connect(self._on_delete_clicked)
        actions.addStretch()
        actions.addWidget(self.duplicate_button)
        actions.addWidget(self.delete_button)
        layout.addLayout(actions)

    # --- DataContext Pattern ---

    @property
    def data_context(self) -> Optional['RobotItem']:
        return self._data_context

    def bind_data(self, item: 'RobotItem'):
        """Bind a robot to this card. Called when acquired from the pool."""
        if item is self._data_context:
            return
        self._data_context = item
        self.update_display()

    def update_display(self):
        item = self._data_context
        if item is None:
            return
        category = item.effective_category
        self._name_label.setText(item.name)
        self._badge_label.setText(category)
        self._badge_label.setStyleSheet(
            "border-radius: 6px; padding: 2px 8px; font-size: 11px;"
            + BADGE_STYLES.get(category, DEFAULT_BADGE_STYLE)
        )
        self._description_label.setText(item.description)
        self._date_label.setText(item.created_at.strftime("%Y-%m-%d"))

    def reset(self):
        """Reset widget for recycling."""
        self._data_context = None
        self.set_processing(False)
        self._name_label.clear()
        self._badge_label.clear()
        self._description_label.clear()
        self._date_label.clear()

    # --- Processing marker ---

    @property
    def processing(self) -> bool:
        return self._processing

    def set_processing(self, processing: bool):
        """Mark the card busy while its action is in flight."""
        if self._processing == processing:
            return
        self._processing = processing
        self._busy_label.setVisible(processing)
        self.duplicate_button.setEnabled(not processing)
        self.delete_button.setEnabled(not processing)
        self.setProperty("processing", "true" if processing else "false")
        # Re-polish so the [processing] selector applies
        self.style().unpolish(self)
        self.style().polish(self)

    # --- Actions ---

    def _on_duplicate_clicked(self):
        if self._data_context and not self._processing:
            logger.debug(f"Duplicate requested for {self._data_context.id}")
            self.duplicate_requested.emit(self._data_context.id)

    def _on_delete_clicked(self):
        if self._data_context and not self._processing:
            logger.debug(f"Delete requested for {self._data_context.id}")
            self.delete_requested.emit(self._data_context.id, self._data_context.name)
