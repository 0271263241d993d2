"""
WidgetPool - Card widget recycling for the windowed list.

The list never holds more widgets than the largest render window, no
matter how many robots the filtered collection contains.
"""
from typing import Callable, Dict, Iterable, List, TypeVar, Generic
from loguru import logger
from PySide6.QtWidgets import QWidget


T = TypeVar('T', bound=QWidget)


class WidgetPool(Generic[T]):
    """
    Recycles QWidget instances keyed by item id.

    Example:
        pool = WidgetPool(factory=lambda: RobotCardWidget(viewport), pool_size=20)

        # Row entered the render window
        widget = pool.acquire(item.id)
        widget.bind_data(item)

        # Render window moved on
        pool.retain({row.item.id for row in window.rows})
    """

    def __init__(
        self,
        factory: Callable[[], T],
        pool_size: int = 64,
        prealloc: bool = False
    ):
        """
        Initialize widget pool.

        Args:
            factory: Function that creates new widget instances
            pool_size: Maximum number of widgets to create
            prealloc: If True, pre-allocate all widgets on init
        """
        self._factory = factory
        self._pool_size = max(1, pool_size)
        self._free_widgets: List[T] = []
        self._active_widgets: Dict[str, T] = {}  # item_id → widget

        if prealloc:
            self._preallocate()

    def _preallocate(self):
        logger.debug(f"Pre-allocating {self._pool_size} card widgets")
        for _ in range(self._pool_size):
            widget = self._factory()
            widget.hide()
            self._free_widgets.append(widget)

    @property
    def pool_size(self) -> int:
        return self._pool_size

    @pool_size.setter
    def pool_size(self, size: int):
        """Grow the limit; shrinking only takes effect as widgets are freed."""
        self._pool_size = max(1, size)

    @property
    def active_count(self) -> int:
        """Number of widgets currently bound to rows."""
        return len(self._active_widgets)

    @property
    def free_count(self) -> int:
        """Number of widgets available for reuse."""
        return len(self._free_widgets)

    @property
    def total_count(self) -> int:
        """Total number of widgets created."""
        return self.active_count + self.free_count

    @property
    def active_ids(self) -> set[str]:
        return set(self._active_widgets.keys())

    def items(self) -> Iterable[tuple[str, T]]:
        """(item_id, widget) pairs for active widgets."""
        return list(self._active_widgets.items())

    def acquire(self, item_id: str) -> T:
        """
        Get widget for item (recycled or new).

        Args:
            item_id: Unique identifier for the item

        Returns:
            Widget instance (recycled or newly created)
        """
        if item_id in self._active_widgets:
            return self._active_widgets[item_id]

        if self._free_widgets:
            widget = self._free_widgets.pop()
            logger.trace(f"Recycled widget for {item_id}")
        elif self.total_count < self._pool_size:
            widget = self._factory()
            logger.trace(f"Created new widget for {item_id}")
        else:
            logger.warning(
                f"Widget pool exhausted ({self._pool_size}). "
                "Render window is larger than the pool."
            )
            oldest_id = next(iter(self._active_widgets))
            widget = self._active_widgets.pop(oldest_id)
            self._reset_widget(widget)
            logger.debug(f"Force-recycled widget from {oldest_id}")

        self._active_widgets[item_id] = widget
        return widget

    def release(self, item_id: str) -> bool:
        """
        Return widget to pool for recycling.

        Returns:
            True if widget was released, False if not found
        """
        widget = self._active_widgets.pop(item_id, None)
        if widget is None:
            return False
        self._reset_widget(widget)
        widget.hide()
        if self.total_count < self._pool_size:
            self._free_widgets.append(widget)
        else:
            widget.deleteLater()
        logger.trace(f"Released widget for {item_id}")
        return True

    def retain(self, visible_ids: set[str]) -> int:
        """
        Release every widget whose item left the render window.

        Returns:
            Number of widgets released
        """
        released = 0
        for item_id in list(self._active_widgets.keys()):
            if item_id not in visible_ids:
                self.release(item_id)
                released += 1

        if released > 0:
            logger.trace(f"Released {released} out-of-window widgets")
        return released

    def get_widget(self, item_id: str) -> T | None:
        return self._active_widgets.get(item_id)

    def is_active(self, item_id: str) -> bool:
        return item_id in self._active_widgets

    def _reset_widget(self, widget: T):
        if hasattr(widget, 'reset'):
            widget.reset()

    def clear(self):
        """Release all widgets."""
        for item_id in list(self._active_widgets.keys()):
            self.release(item_id)
        logger.debug("Cleared all active widgets")

    def dispose(self):
        """Dispose all widgets and cleanup."""
        for widget in self._active_widgets.values():
            widget.deleteLater()
        for widget in self._free_widgets:
            widget.deleteLater()

        self._active_widgets.clear()
        self._free_widgets.clear()
        logger.debug("Disposed widget pool")
