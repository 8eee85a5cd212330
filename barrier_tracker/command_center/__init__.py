"""
BARRIER TRACKER Planner API - Command Center Module
"""

from barrier_tracker.command_center.router import router as command_center_router

__all__ = ["command_center_router"]
