"""
BARRIER TRACKER Planner API - Tasks Module

Focus and life tasks planned per day.
"""

from barrier_tracker.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
