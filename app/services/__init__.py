"""
Services for the Random Profile Aggregator
"""
from app.services.aggregator import Aggregator, GENERIC_ERROR_MESSAGE

__all__ = ["Aggregator", "GENERIC_ERROR_MESSAGE"]
