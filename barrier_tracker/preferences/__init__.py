"""
BARRIER TRACKER Planner API - Preferences Module

Hard stop, work hours and display format per user.
"""

from barrier_tracker.preferences.router import router as preferences_router

__all__ = ["preferences_router"]
