"""
ViewportTracker - observes scroll offset and viewport size.

Listens to a scroll bar's valueChanged signal and to resize events of
the viewport widget. Registration is explicit: start() acquires both
listeners, stop() releases them, and a failure half-way through start()
releases whatever was already acquired.
"""
from contextlib import contextmanager
from typing import Iterator, Optional
from PySide6.QtCore import QEvent, QObject, Signal
from PySide6.QtWidgets import QAbstractSlider, QWidget
from loguru import logger


DEFAULT_CONTAINER_SIZE = 600


class ViewportTracker(QObject):
    """
    Tracks viewport state for the windowing calculator.

    Signals:
        viewportChanged(scroll_offset: int, container_size: int)

    Example:
        tracker = ViewportTracker()
        tracker.viewportChanged.connect(view.schedule_render)
        tracker.start(scroll_area.verticalScrollBar(), scroll_area.viewport())
        ...
        tracker.stop()
    """

    viewportChanged = Signal(int, int)

    def __init__(self, default_container_size: int = DEFAULT_CONTAINER_SIZE, parent: QObject | None = None):
        super().__init__(parent)
        self._default_container_size = default_container_size
        self._scroll_offset = 0
        self._container_size = default_container_size
        self._measured = False
        self._scroll_bar: Optional[QAbstractSlider] = None
        self._viewport: Optional[QWidget] = None

    # --- State ---

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def container_size(self) -> int:
        return self._container_size

    @property
    def is_measured(self) -> bool:
        """True once a real viewport height has been observed."""
        return self._measured

    @property
    def is_active(self) -> bool:
        return self._scroll_bar is not None or self._viewport is not None

    # --- Lifetime ---

    def start(self, scroll_bar: QAbstractSlider, viewport: QWidget):
        """
        Begin observing scroll_bar and viewport.

        Raises:
            RuntimeError: If the tracker is already started
        """
        if self.is_active:
            raise RuntimeError("ViewportTracker is already started")

        try:
            scroll_bar.valueChanged.connect(self._on_scroll)
            self._scroll_bar = scroll_bar
            viewport.installEventFilter(self)
            self._viewport = viewport

            self._scroll_offset = max(0, scroll_bar.value())
            if viewport.isVisible() and viewport.height() > 0:
                self._container_size = viewport.height()
                self._measured = True
        except Exception:
            logger.error("ViewportTracker: start failed, releasing listeners")
            self.stop()
            raise

        logger.debug(
            f"ViewportTracker started: offset={self._scroll_offset}, size={self._container_size}"
        )

    def stop(self):
        """Release all listeners. Safe to call more than once."""
        if self._scroll_bar is not None:
            try:
                self._scroll_bar.valueChanged.disconnect(self._on_scroll)
            except RuntimeError as e:
                # Scroll bar already destroyed together with its scroll area
                logger.debug(f"ViewportTracker: scroll listener already gone: {e}")
            self._scroll_bar = None

        if self._viewport is not None:
            try:
                self._viewport.removeEventFilter(self)
            except RuntimeError as e:
                logger.debug(f"ViewportTracker: resize listener already gone: {e}")
            self._viewport = None

        logger.debug("ViewportTracker stopped")

    @contextmanager
    def tracking(self, scroll_bar: QAbstractSlider, viewport: QWidget) -> Iterator['ViewportTracker']:
        """Scope observation to a with-block."""
        self.start(scroll_bar, viewport)
        try:
            yield self
        finally:
            self.stop()

    # --- Events ---

    def _on_scroll(self, value: int):
        if self._scroll_bar is None:
            return
        offset = max(0, value)
        if offset != self._scroll_offset:
            self._scroll_offset = offset
            self.viewportChanged.emit(self._scroll_offset, self._container_size)

    def _on_resize(self, height: int):
        size = height if height > 0 else self._default_container_size
        self._measured = height > 0
        if size != self._container_size:
            self._container_size = size
            self.viewportChanged.emit(self._scroll_offset, self._container_size)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self._viewport and event.type() == QEvent.Type.Resize:
            # The event carries the new size; no extra layout query needed
            self._on_resize(event.size().height())
        return super().eventFilter(watched, event)
