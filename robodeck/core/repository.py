"""
Robot repository collaborators.

RobotRepository is the contract the dashboard's action dispatcher talks
to. InMemoryRobotRepository backs the demo application and the tests.
"""
import asyncio
import itertools
import random
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Protocol, Set

from loguru import logger

from robodeck.ui.cardview.models.robot_item import RobotItem


class RepositoryError(Exception):
    """Raised when a repository call cannot be completed."""


class RobotRepository(Protocol):
    async def list_robots(self) -> List[RobotItem]: ...

    async def duplicate(self, item_id: str) -> Optional[RobotItem]: ...

    async def delete(self, item_id: str) -> None: ...


class InMemoryRobotRepository:
    """
    Dict-backed repository with optional latency and failure injection.

    Args:
        items: Initial robots
        latency: Seconds every call sleeps before answering
        fail_ids: Ids whose duplicate/delete calls raise RepositoryError
    """

    def __init__(
        self,
        items: Iterable[RobotItem] = (),
        latency: float = 0.0,
        fail_ids: Optional[Set[str]] = None,
    ):
        self._robots: Dict[str, RobotItem] = {item.id: item for item in items}
        self._latency = latency
        self.fail_ids: Set[str] = set(fail_ids or ())
        self._ids = itertools.count(1)

    async def _wait(self):
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    def _check(self, item_id: str):
        if item_id in self.fail_ids:
            raise RepositoryError(f"Robot {item_id} is locked")
        if item_id not in self._robots:
            raise RepositoryError(f"Robot {item_id} not found")

    async def list_robots(self) -> List[RobotItem]:
        await self._wait()
        return sorted(self._robots.values(), key=lambda r: r.created_at, reverse=True)

    async def duplicate(self, item_id: str) -> Optional[RobotItem]:
        await self._wait()
        self._check(item_id)
        source = self._robots[item_id]
        new_id = f"{item_id}-copy-{next(self._ids)}"
        while new_id in self._robots:
            new_id = f"{item_id}-copy-{next(self._ids)}"
        copy = source.model_copy(update={
            "id": new_id,
            "name": f"{source.name} (Copy)",
            "created_at": datetime.now(),
        })
        self._robots[copy.id] = copy
        logger.debug(f"Repository: duplicated {item_id} -> {copy.id}")
        return copy

    async def delete(self, item_id: str) -> None:
        await self._wait()
        self._check(item_id)
        del self._robots[item_id]
        logger.debug(f"Repository: deleted {item_id}")

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._robots

    def __len__(self) -> int:
        return len(self._robots)


SAMPLE_SYMBOLS = ["BTCUSDT", "ETHUSDT", "EURUSD", "GBPJPY", "XAUUSD", "US30", "SOLUSDT"]
SAMPLE_STYLES = {
    "Scalping": "Scalper",
    "Trend": "Trend",
    "Grid": "Grid",
    "Breakout": "Breakout",
    "Mean Reversion": "Reverter",
}


def generate_sample_robots(count: int, seed: int = 0) -> List[RobotItem]:
    """Deterministic fake robots for the demo window."""
    rng = random.Random(seed)
    categories = [*SAMPLE_STYLES, None]
    now = datetime.now()
    robots = []
    for i in range(count):
        category = rng.choice(categories)
        style = SAMPLE_STYLES.get(category, "Custom EA")
        symbol = rng.choice(SAMPLE_SYMBOLS)
        robots.append(RobotItem(
            id=str(i + 1),
            name=f"{symbol} {style} #{i + 1}",
            description=f"{style} strategy on {symbol}, {rng.choice(['M1', 'M5', 'H1', 'H4'])} timeframe.",
            category=category,
            created_at=now - timedelta(minutes=i),
        ))
    return robots
