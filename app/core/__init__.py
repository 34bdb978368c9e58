"""
Core functionality for the Random Profile Aggregator
"""
from app.core.dependencies import get_settings, get_aggregator

__all__ = ["get_settings", "get_aggregator"]
