"""
CardView Models Package.
"""
from robodeck.ui.cardview.models.robot_item import (
    ALL_CATEGORIES,
    DEFAULT_CATEGORY,
    EMPTY_RANGE,
    FilterCriteria,
    RenderRow,
    RenderWindow,
    RobotItem,
    VisibleRange,
)

__all__ = [
    "ALL_CATEGORIES",
    "DEFAULT_CATEGORY",
    "EMPTY_RANGE",
    "FilterCriteria",
    "RenderRow",
    "RenderWindow",
    "RobotItem",
    "VisibleRange",
]
