import pytest
from datetime import datetime

from robodeck.core.repository import (
    InMemoryRobotRepository,
    RepositoryError,
    generate_sample_robots,
)
from robodeck.ui.cardview.models.robot_item import RobotItem


@pytest.fixture
def repository():
    return InMemoryRobotRepository([
        RobotItem(id="1", name="Old", created_at=datetime(2024, 1, 1)),
        RobotItem(id="2", name="New", category="Trend", created_at=datetime(2024, 6, 1)),
    ])


@pytest.mark.asyncio
async def test_list_newest_first(repository):
    robots = await repository.list_robots()

    assert [r.id for r in robots] == ["2", "1"]


@pytest.mark.asyncio
async def test_duplicate_creates_copy(repository):
    copy = await repository.duplicate("2")

    assert copy.id != "2"
    assert copy.name == "New (Copy)"
    assert copy.category == "Trend"
    assert copy.id in repository
    assert len(repository) == 3


@pytest.mark.asyncio
async def test_duplicate_ids_are_unique(repository):
    first = await repository.duplicate("1")
    second = await repository.duplicate("1")

    assert first.id != second.id


@pytest.mark.asyncio
async def test_delete(repository):
    await repository.delete("1")

    assert "1" not in repository
    with pytest.raises(RepositoryError):
        await repository.delete("1")


@pytest.mark.asyncio
async def test_failure_injection(repository):
    repository.fail_ids.add("2")

    with pytest.raises(RepositoryError):
        await repository.duplicate("2")
    with pytest.raises(RepositoryError):
        await repository.delete("2")
    assert len(repository) == 2


def test_sample_robots_are_deterministic():
    first = generate_sample_robots(20, seed=7)
    second = generate_sample_robots(20, seed=7)

    assert [r.name for r in first] == [r.name for r in second]
    assert [r.id for r in first] == [str(i) for i in range(1, 21)]
    assert len({r.effective_category for r in generate_sample_robots(200)}) > 2
