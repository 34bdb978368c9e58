"""
FastAPI dependencies for settings and the aggregator
"""
from fastapi import Depends

from app.config import Settings, settings
from app.services.aggregator import Aggregator


def get_settings() -> Settings:
    """
    Get application settings

    Returns:
        Settings: The immutable settings loaded at startup
    """
    return settings


# Singleton instance
_aggregator = None


def get_aggregator(app_settings: Settings = Depends(get_settings)) -> Aggregator:
    """
    Get or create the aggregator singleton

    The aggregator holds only immutable configuration, so one instance
    serves every request.

    Args:
        app_settings: Application settings

    Returns:
        Aggregator: Aggregator built from the settings
    """
    global _aggregator
    if _aggregator is None:
        _aggregator = Aggregator(app_settings)
    return _aggregator
