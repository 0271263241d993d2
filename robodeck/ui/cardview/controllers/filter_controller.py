"""
FilterController - Manages filtering logic for CardView.

Supports a case-insensitive name search and a category selector.
The actual reduction is the pure filter_items() function; the
controller only holds the current criteria and memoizes results.
"""
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TYPE_CHECKING
from loguru import logger

from robodeck.ui.cardview.memo import MemoCache
from robodeck.ui.cardview.models.robot_item import (
    ALL_CATEGORIES,
    DEFAULT_CATEGORY,
    FilterCriteria,
)

if TYPE_CHECKING:
    from robodeck.ui.cardview.models.robot_item import RobotItem


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def item_category(item: Any) -> str:
    """
    Category an item is matched under.

    Missing or empty categories count as "Custom"; values that are not
    strings read as "" and only match the wildcard.
    """
    value = getattr(item, "category", None)
    if value is None or value == "":
        return DEFAULT_CATEGORY
    return _text(value)


def filter_items(
    items: Sequence['RobotItem'],
    search_term: Optional[str],
    category: Optional[str],
) -> Tuple['RobotItem', ...]:
    """
    Reduce items to those matching the search term and category.

    Args:
        items: Source collection
        search_term: Case-insensitive substring of the name ("" matches all)
        category: "All" or an exact category value

    Returns:
        Matching items as a tuple, in source order
    """
    if not items:
        return ()

    needle = _text(search_term).lower()
    wanted = _text(category) or ALL_CATEGORIES
    match_all_categories = wanted == ALL_CATEGORIES

    return tuple(
        item for item in items
        if needle in _text(getattr(item, "name", None)).lower()
        and (match_all_categories or item_category(item) == wanted)
    )


def available_categories(items: Iterable['RobotItem']) -> List[str]:
    """Wildcard followed by each distinct category in first-seen order."""
    seen = dict.fromkeys(item_category(item) for item in items)
    seen.pop("", None)
    return [ALL_CATEGORIES, *seen]


class FilterController:
    """
    Controls filtering for CardView.

    Features:
    - Name search (case-insensitive substring)
    - Category selector with "All" wildcard
    - Memoized results: apply() returns the same tuple object while
      neither the items nor the criteria changed

    Example:
        controller = FilterController()
        controller.set_search_term("btc")
        controller.set_category("Scalping")
        visible = controller.apply(items)
    """

    def __init__(self):
        """Initialize filter controller."""
        self._criteria = FilterCriteria()
        self._filter_cache = MemoCache(filter_items, name="filter")
        self._category_cache = MemoCache(available_categories, name="categories")

    # --- Criteria ---

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def set_search_term(self, text: Optional[str]) -> bool:
        """
        Set search text.

        Returns:
            True if the criteria changed
        """
        return self._set_criteria(search_term=text or "")

    def set_category(self, category: Optional[str]) -> bool:
        """
        Set category selector. None or "" select every category.

        Returns:
            True if the criteria changed
        """
        return self._set_criteria(category=category or ALL_CATEGORIES)

    def _set_criteria(self, **changes) -> bool:
        criteria = self._criteria.model_copy(update=changes)
        if criteria == self._criteria:
            return False
        self._criteria = criteria
        logger.debug(
            f"Filter set: search='{criteria.search_term}', category='{criteria.category}'"
        )
        return True

    def clear(self) -> bool:
        """Reset both search and category."""
        return self._set_criteria(search_term="", category=ALL_CATEGORIES)

    @property
    def is_active(self) -> bool:
        """Check if any filter is active."""
        return self._criteria.is_active

    # --- Apply ---

    def apply(self, items: Sequence['RobotItem']) -> Tuple['RobotItem', ...]:
        """
        Apply the current criteria to items.

        Args:
            items: Items to filter

        Returns:
            Filtered tuple (cached while inputs are unchanged)
        """
        return self._filter_cache(
            items, self._criteria.search_term, self._criteria.category
        )

    def categories(self, items: Sequence['RobotItem']) -> List[str]:
        """Categories offered by the selector for the given items."""
        return self._category_cache(items)
