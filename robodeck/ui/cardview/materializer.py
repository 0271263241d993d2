"""
Materializer - turns a visible range into positioned rows.
"""
from typing import Sequence, TYPE_CHECKING

from robodeck.ui.cardview.models.robot_item import RenderRow, RenderWindow, VisibleRange

if TYPE_CHECKING:
    from robodeck.ui.cardview.models.robot_item import RobotItem


def total_height(item_count: int, item_height: int) -> int:
    """Full content height of item_count rows (the scroll extent)."""
    return max(0, item_count) * item_height


def materialize(
    filtered_items: Sequence['RobotItem'],
    visible_range: VisibleRange,
    item_height: int,
) -> RenderWindow:
    """
    Slice the filtered collection by the visible range.

    Rows carry absolute offsets (index * item_height) so each one can be
    placed independently; nothing from a previous pass is reused.

    Args:
        filtered_items: Current filtered collection
        visible_range: Inclusive range from compute_range()
        item_height: Height of every row

    Returns:
        RenderWindow with rows, content height and the no-results marker
    """
    count = len(filtered_items)
    if count == 0:
        return RenderWindow(rows=(), total_height=0, no_results=True)

    start = max(0, visible_range.start)
    end = min(count - 1, visible_range.end)
    rows = tuple(
        RenderRow(index, filtered_items[index], index * item_height)
        for index in range(start, end + 1)
    )
    return RenderWindow(
        rows=rows,
        total_height=total_height(count, item_height),
        no_results=False,
    )
