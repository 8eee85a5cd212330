"""
BARRIER TRACKER Planner API - Energy Schedule Module

Preset and custom daily energy curves.
"""

from barrier_tracker.schedule.router import router as schedule_router

__all__ = ["schedule_router"]
