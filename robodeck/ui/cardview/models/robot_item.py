"""
RobotItem Data Model.

Pydantic models for the cards shown in the dashboard and the small
value types that flow through the filter → window → materialize pipeline.
"""
from datetime import datetime
from typing import NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


ALL_CATEGORIES = "All"
DEFAULT_CATEGORY = "Custom"


class RobotItem(BaseModel):
    """
    Data model for a single robot card.

    Items are owned by the repository; the card view never mutates them.

    Attributes:
        id: Unique, stable identifier (required for virtualization)
        name: Display name, matched by the search box
        description: Secondary text
        category: Strategy category; None means "Custom"
        created_at: Creation timestamp

    Example:
        item = RobotItem(
            id="42",
            name="BTCUSDT Scalper",
            category="Scalping",
        )
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier")
    name: str = Field("", description="Display name")
    description: str = Field("", description="Secondary text")
    category: Optional[str] = Field(None, description="Strategy category")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation time")

    @property
    def effective_category(self) -> str:
        """Category used for matching and grouping."""
        return self.category or DEFAULT_CATEGORY


class FilterCriteria(BaseModel):
    """Search term plus category selector."""
    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    category: str = ALL_CATEGORIES

    @property
    def is_active(self) -> bool:
        return bool(self.search_term) or self.category != ALL_CATEGORIES


class VisibleRange(NamedTuple):
    """Inclusive index range into the filtered collection."""
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.end < self.start

    @property
    def count(self) -> int:
        return 0 if self.is_empty else self.end - self.start + 1

    def indices(self) -> range:
        return range(self.start, self.end + 1)


EMPTY_RANGE = VisibleRange(0, -1)


class RenderRow(NamedTuple):
    """One materialized row: the item and its absolute y offset."""
    index: int
    item: RobotItem
    offset: int


class RenderWindow(NamedTuple):
    """
    Result of a materialize pass.

    Attributes:
        rows: Rows for the visible range, in index order
        total_height: Full content height (scroll extent)
        no_results: True when the filtered collection is empty
    """
    rows: Tuple[RenderRow, ...]
    total_height: int
    no_results: bool
