"""
Default English labels for the dashboard.

Hosts with their own catalog pass a different translate callable to
the view model; this one only covers the keys the card view uses.
"""
from typing import Dict
from loguru import logger


LABELS: Dict[str, str] = {
    "dash_title": "Robot Dashboard",
    "dash_no_robots_title": "No Robots Yet",
    "dash_no_robots_desc": "Get started by generating your first AI-powered trading algorithm.",
    "dash_no_matches": "No matches found",
    "dash_no_matches_hint": "Try adjusting your search or filters.",
    "dash_clear_filters": "Clear Filters",
    "dash_search_placeholder": "Search robots...",
    "dash_duplicate": "Duplicate",
    "dash_delete": "Delete",
    "dash_confirm_title": "Confirm",
    "dash_delete_confirm": "Are you sure you want to delete \"{name}\"?",
    "dash_toast_delete_success": "Robot deleted successfully",
    "dash_toast_duplicate_success": "Robot duplicated successfully",
    "dash_toast_delete_failed": "Failed to delete robot",
    "dash_toast_duplicate_failed": "Failed to duplicate robot",
    "dash_toast_load_failed": "Failed to load robots",
    "dash_processing": "Processing...",
    "dash_loading": "Loading robots...",
}


def translate(key: str, **kwargs) -> str:
    """
    Look up a label, formatting {placeholders} from kwargs.

    Unknown keys come back unchanged so missing labels stay visible.
    """
    text = LABELS.get(key)
    if text is None:
        logger.warning(f"Missing label: {key}")
        return key
    if kwargs:
        try:
            return text.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Label '{key}' missing placeholder value: {e}")
    return text
