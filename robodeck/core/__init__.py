"""
Core services shared by the dashboard: configuration, logging, events, labels.
"""
from robodeck.core.config import ConfigManager, AppConfig, GeneralSettings, ViewportSettings
from robodeck.core.events import ObserverEvent
from robodeck.core.i18n import translate
from robodeck.core.logging import setup_logging

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "ViewportSettings",
    "ObserverEvent",
    "translate",
    "setup_logging",
]
