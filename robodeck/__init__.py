"""
robodeck - Windowed trading-robot dashboard for PySide6.

Renders large, filterable robot collections with cost proportional to
the viewport instead of the collection size.
"""

__version__ = "0.1.0"
