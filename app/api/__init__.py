"""
API routers for the Random Profile Aggregator
"""
