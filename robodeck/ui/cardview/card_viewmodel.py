"""
CardViewModel - MVVM ViewModel for the robot CardView.

Owns the source collection, the filter criteria and the action
dispatcher; exposes the memoized filtered collection to the view.
"""
import asyncio
from typing import Callable, Optional, Sequence, Set, Tuple, TYPE_CHECKING
from PySide6.QtCore import QTimer, Signal
from loguru import logger

from robodeck.core.config import ViewportSettings
from robodeck.core.i18n import translate as default_translate
from robodeck.ui.mvvm import BaseViewModel, BindableProperty, by_identity
from robodeck.ui.cardview.controllers.action_dispatcher import ActionDispatcher, Confirm, Notifier
from robodeck.ui.cardview.controllers.filter_controller import FilterController
from robodeck.ui.cardview.models.robot_item import ALL_CATEGORIES

if TYPE_CHECKING:
    from robodeck.core.config import ConfigManager
    from robodeck.core.repository import RobotRepository
    from robodeck.ui.cardview.models.robot_item import RobotItem


class CardViewModel(BaseViewModel):
    """
    ViewModel for the robot dashboard list.

    Controls:
    - Source collection (replaced, never mutated)
    - Debounced search term and category selector
    - Memoized filtered collection and category list
    - Duplicate/delete through the ActionDispatcher

    Properties (Bindable):
        items: Source robots
        filtered_items: Robots matching the criteria
        categories: Selector entries ("All" first)
        search_term: Search text currently applied
        category: Selected category
        processing_id: Robot with an in-flight action, or None
        loading: True while load_items() runs

    Example:
        vm = CardViewModel(repository, config)
        await vm.load_items()
        vm.set_search_term("btc")
        vm.set_category("Scalping")
    """

    # Signals
    itemsChanged = Signal(object)
    filteredItemsChanged = Signal(object)
    categoriesChanged = Signal(list)
    searchTermChanged = Signal(str)
    categoryChanged = Signal(str)
    processingIdChanged = Signal(object)
    loadingChanged = Signal(bool)

    # Bindable properties
    items = BindableProperty(default=(), equals=by_identity)
    filtered_items = BindableProperty(default=(), equals=by_identity, signal_name="filteredItemsChanged")
    categories = BindableProperty(default=[ALL_CATEGORIES])
    search_term = BindableProperty(default="", signal_name="searchTermChanged")
    category = BindableProperty(default=ALL_CATEGORIES)
    processing_id = BindableProperty(default=None, signal_name="processingIdChanged")
    loading = BindableProperty(default=False)

    def __init__(
        self,
        repository: 'RobotRepository',
        config: Optional['ConfigManager'] = None,
        notify: Optional[Notifier] = None,
        translate: Callable[..., str] = default_translate,
        confirm: Optional[Confirm] = None,
        settings: Optional[ViewportSettings] = None,
        parent=None,
    ):
        """
        Initialize CardViewModel.

        Args:
            repository: Robot repository (list/duplicate/delete)
            config: ConfigManager; defaults are used when None
            notify: Toast collaborator, Callable(message, kind)
            translate: Label lookup
            confirm: Delete confirmation, Callable(message) -> bool
            settings: Viewport settings overriding the config section
        """
        super().__init__(config, parent)
        self.settings: ViewportSettings = settings or (
            config.data.viewport if config else ViewportSettings()
        )
        self.translate = translate
        self._repository = repository
        self._notify = notify
        self._source: Tuple['RobotItem', ...] = ()
        self._pending_search: Optional[str] = None
        self._tasks: Set[asyncio.Future] = set()

        self.filter_controller = FilterController()

        self.dispatcher = ActionDispatcher(
            repository, notify=notify, translate=translate, confirm=confirm, parent=self
        )
        self.dispatcher.processingChanged.connect(self._on_processing_changed)
        self.dispatcher.itemDeleted.connect(self.remove_item)
        self.dispatcher.itemDuplicated.connect(self.prepend_item)

        self._search_timer = QTimer(self)
        self._search_timer.setSingleShot(True)
        self._search_timer.timeout.connect(self.flush_search)

    def set_collaborators(self, notify: Optional[Notifier] = None, confirm: Optional[Confirm] = None):
        """Attach toast and confirmation collaborators created by the host window."""
        self._notify = notify
        self.dispatcher.set_notifier(notify)
        self.dispatcher.set_confirm(confirm)

    # --- Data Loading ---

    async def load_items(self):
        """Fetch robots from the repository."""
        self.loading = True
        try:
            robots = await self._repository.list_robots()
        except Exception as e:
            logger.error(f"Failed to load robots: {e}")
            if self._notify:
                self._notify(self.translate("dash_toast_load_failed"), "error")
        else:
            self.set_items(robots)
        finally:
            self.loading = False

    def set_items(self, items: Sequence['RobotItem']):
        """
        Replace the source collection.

        Args:
            items: Robots in display order
        """
        self._source = tuple(items)
        self.items = self._source
        self._apply_transformations()
        logger.debug(f"Loaded {len(self._source)} robots")

    def get_item_by_id(self, item_id: str) -> Optional['RobotItem']:
        for item in self._source:
            if item.id == item_id:
                return item
        return None

    def remove_item(self, item_id: str):
        """Drop a deleted robot from the source collection."""
        remaining = tuple(item for item in self._source if item.id != item_id)
        if len(remaining) != len(self._source):
            self.set_items(remaining)

    def prepend_item(self, item: 'RobotItem'):
        """Show a freshly duplicated robot at the top."""
        self.set_items((item, *self._source))

    @property
    def has_items(self) -> bool:
        return bool(self._source)

    # --- Filter ---

    def set_search_term(self, text: str):
        """
        Queue search text; applied after the debounce interval.

        A debounce of 0 applies the text immediately.
        """
        self._pending_search = text or ""
        delay = self.settings.search_debounce_ms
        if delay <= 0:
            self.flush_search()
        else:
            self._search_timer.start(delay)

    def flush_search(self):
        """Apply pending search text now."""
        self._search_timer.stop()
        if self._pending_search is None:
            return
        text, self._pending_search = self._pending_search, None
        if self.filter_controller.set_search_term(text):
            self.search_term = self.filter_controller.criteria.search_term
            self._apply_transformations()

    @property
    def has_pending_search(self) -> bool:
        return self._pending_search is not None

    def set_category(self, category: Optional[str]):
        """Select a category; None or "All" shows every category."""
        if self.filter_controller.set_category(category):
            self.category = self.filter_controller.criteria.category
            self._apply_transformations()

    def clear_filters(self):
        """Reset search and category."""
        self._search_timer.stop()
        self._pending_search = None
        if self.filter_controller.clear():
            self.search_term = ""
            self.category = ALL_CATEGORIES
            self._apply_transformations()

    # --- Actions ---

    async def duplicate(self, item_id: str) -> bool:
        return await self.dispatcher.duplicate(item_id)

    async def delete(self, item_id: str, name: str) -> bool:
        return await self.dispatcher.delete(item_id, name)

    def request_duplicate(self, item_id: str) -> asyncio.Future:
        """Schedule duplicate() on the running loop (button handlers)."""
        return self._schedule(self.duplicate(item_id))

    def request_delete(self, item_id: str, name: str) -> asyncio.Future:
        """Schedule delete() on the running loop (button handlers)."""
        return self._schedule(self.delete(item_id, name))

    def _schedule(self, coro) -> asyncio.Future:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _on_processing_changed(self, item_id: Optional[str]):
        self.processing_id = item_id

    # --- Transformations ---

    def _apply_transformations(self):
        """Recompute derived collections; memoized stages skip unchanged inputs."""
        self.filtered_items = self.filter_controller.apply(self._source)
        self.categories = self.filter_controller.categories(self._source)
        logger.debug(
            f"Filter applied: {len(self._source)} → {len(self.filtered_items)} robots"
        )
