"""
BARRIER TRACKER Planner API - Authentication Module

Bearer-token verification for tokens issued by the hosted auth provider.
"""

from barrier_tracker.auth.dependencies import CurrentUser, get_current_user

__all__ = ["CurrentUser", "get_current_user"]
