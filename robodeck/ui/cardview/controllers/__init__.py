"""
CardView Controllers Package.
"""
from robodeck.ui.cardview.controllers.filter_controller import (
    FilterController,
    available_categories,
    filter_items,
)
from robodeck.ui.cardview.controllers.action_dispatcher import ActionDispatcher

__all__ = ["FilterController", "ActionDispatcher", "filter_items", "available_categories"]
