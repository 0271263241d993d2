"""
Robot dashboard entry point.

    python -m robodeck [--count N] [--config config.json]

Runs the Qt event loop through qasync so duplicate/delete coroutines
share the loop with scroll and resize events.
"""
import argparse
import asyncio
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication
from qasync import QEventLoop
from loguru import logger

from robodeck.core.config import ConfigManager
from robodeck.core.logging import setup_logging
from robodeck.core.repository import InMemoryRobotRepository, generate_sample_robots
from robodeck.ui.cardview import CardViewModel
from robodeck.ui.dashboard_window import DashboardWindow


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="robodeck", description="Windowed robot dashboard demo")
    parser.add_argument("--count", type=int, default=10_000, help="number of sample robots")
    parser.add_argument("--config", default="config.json", help="JSON or TOML settings file")
    parser.add_argument("--latency", type=float, default=0.4, help="simulated repository latency (s)")
    return parser.parse_args(argv)


def run_app(argv: Optional[List[str]] = None) -> int:
    """Build the window, load sample robots and run until closed."""
    args = parse_args(argv)
    config = ConfigManager(args.config)
    setup_logging(config.data.general.debug_mode, config.data.general.log_dir)

    repository = InMemoryRobotRepository(generate_sample_robots(args.count), latency=args.latency)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    viewmodel = CardViewModel(repository, config)
    window = DashboardWindow(viewmodel)
    window.show()

    app.aboutToQuit.connect(loop.stop)

    try:
        with loop:
            loop.run_until_complete(viewmodel.load_items())
            logger.info(f"Dashboard started with {len(viewmodel.items)} robots")
            loop.run_forever()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except RuntimeError as e:
        if "Event loop stopped" not in str(e):
            raise
    return 0


def main():
    sys.exit(run_app())


if __name__ == "__main__":
    main()
