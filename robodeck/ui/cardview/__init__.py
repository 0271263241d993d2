"""
CardView Module - Windowed Robot Card List.

Filter → window → materialize pipeline:
- filter_items(): name search + category selector, memoized
- compute_range(): visible index range for a uniform row height
- materialize(): positioned rows plus the full content height
- ViewportTracker: scroll/resize observation with explicit start/stop
- ActionDispatcher: duplicate/delete with a single processing marker

Usage:
    from robodeck.ui.cardview import CardView, CardViewModel

    vm = CardViewModel(repository, config)
    view = CardView(item_height=280)
    view.set_data_context(vm)
    await vm.load_items()
"""
from robodeck.ui.cardview.models.robot_item import (
    RobotItem, FilterCriteria, VisibleRange, RenderRow, RenderWindow, EMPTY_RANGE
)
from robodeck.ui.cardview.memo import MemoCache
from robodeck.ui.cardview.windowing import compute_range
from robodeck.ui.cardview.materializer import materialize
from robodeck.ui.cardview.viewport_tracker import ViewportTracker
from robodeck.ui.cardview.controllers import ActionDispatcher, FilterController, filter_items
from robodeck.ui.cardview.widget_pool import WidgetPool
from robodeck.ui.cardview.card_item_widget import RobotCardWidget
from robodeck.ui.cardview.card_viewmodel import CardViewModel
from robodeck.ui.cardview.card_view import CardView

__all__ = [
    # Main widget
    "CardView",
    "CardViewModel",
    "RobotCardWidget",
    # Data types
    "RobotItem",
    "FilterCriteria",
    "VisibleRange",
    "RenderRow",
    "RenderWindow",
    "EMPTY_RANGE",
    # Pipeline
    "filter_items",
    "compute_range",
    "materialize",
    "MemoCache",
    "FilterController",
    "ViewportTracker",
    "ActionDispatcher",
    # Virtualization
    "WidgetPool",
]
