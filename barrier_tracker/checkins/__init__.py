"""
BARRIER TRACKER Planner API - Check-ins Module

Daily internal-weather check-ins.
"""

from barrier_tracker.checkins.router import router as checkins_router

__all__ = ["checkins_router"]
