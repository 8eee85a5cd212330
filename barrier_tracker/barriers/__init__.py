"""
BARRIER TRACKER Planner API - Barriers Module

Read-only catalog of barriers and micro-strategies.
"""

from barrier_tracker.barriers.router import router as barriers_router

__all__ = ["barriers_router"]
