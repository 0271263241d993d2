import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from datetime import datetime, timedelta
from PySide6.QtWidgets import QApplication

from robodeck.ui.cardview.models.robot_item import RobotItem


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def make_robots():
    """Factory for numbered robots; every third one has no category."""
    def factory(count: int, prefix: str = "Robot"):
        base = datetime(2024, 1, 1)
        categories = ["Scalping", "Trend", None]
        return [
            RobotItem(
                id=str(i),
                name=f"{prefix} {i}",
                description=f"Robot number {i}",
                category=categories[i % 3],
                created_at=base + timedelta(minutes=i),
            )
            for i in range(count)
        ]
    return factory


@pytest.fixture
def btc_robots():
    return [
        RobotItem(id="1", name="BTCUSDT Scalper", category="Scalping"),
        RobotItem(id="2", name="ETH Trend", category="Trend"),
        RobotItem(id="3", name="btc Grid"),
    ]
