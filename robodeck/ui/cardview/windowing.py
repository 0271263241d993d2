"""
Windowing - visible index range for a uniform-height list.

Every row is assumed to be exactly item_height tall. Rows of varying
height would need a prefix-sum offset index instead of this arithmetic.
"""
import math

from robodeck.ui.cardview.models.robot_item import EMPTY_RANGE, VisibleRange


DEFAULT_OVERSCAN = 5


def compute_range(
    scroll_offset: float,
    container_size: float,
    item_height: int,
    overscan: int = DEFAULT_OVERSCAN,
    item_count: int = 0,
) -> VisibleRange:
    """
    Map viewport state to the inclusive range of rows to materialize.

        start = max(0, floor(offset / h) - overscan)
        end   = min(count - 1, ceil((offset + size) / h) + overscan)

    Inputs are clamped rather than rejected: negative offsets read as 0,
    offsets past the end pin the range to the last rows, negative overscan
    reads as 0 and a non-positive container size counts as one row.

    Args:
        scroll_offset: Vertical scroll position
        container_size: Viewport height
        item_height: Height of every row
        overscan: Extra rows on each side of the viewport
        item_count: Number of rows in the filtered collection

    Returns:
        VisibleRange, or EMPTY_RANGE when item_count is 0

    Raises:
        ValueError: If item_height is not positive
    """
    if item_height <= 0:
        raise ValueError(f"item_height must be positive, got {item_height}")
    if item_count <= 0:
        return EMPTY_RANGE

    overscan = max(0, int(overscan))
    offset = max(0.0, float(scroll_offset))
    size = float(container_size) if container_size > 0 else float(item_height)
    last = item_count - 1

    first_visible = math.floor(offset / item_height)
    last_visible = math.ceil((offset + size) / item_height)

    start = min(last, max(0, first_visible - overscan))
    end = min(last, last_visible + overscan)
    # A misaligned offset straddles one extra row; drop it from the trailing overscan
    end = min(end, start + max_rows(size, item_height, overscan) - 1)
    return VisibleRange(start, max(start, end))


def max_rows(container_size: float, item_height: int, overscan: int = DEFAULT_OVERSCAN) -> int:
    """Upper bound of rows compute_range can yield for a viewport."""
    size = container_size if container_size > 0 else item_height
    return math.ceil(size / item_height) + 2 * max(0, int(overscan)) + 1
