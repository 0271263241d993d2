"""
MVVM ViewModel Infrastructure.
"""
from PySide6.QtCore import QObject

from robodeck.ui.mvvm.bindable import BindableBase


class BaseViewModel(BindableBase):
    """
    Base class for ViewModels.

    Holds the application config so derived view models read their
    tuning values (item height, debounce, ...) from one place.

    Example:
        class DashboardViewModel(BaseViewModel):
            titleChanged = Signal(str)
            title = BindableProperty(default="")
    """

    def __init__(self, config=None, parent: QObject | None = None):
        super().__init__(parent)
        self.config = config
