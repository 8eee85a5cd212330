"""
BARRIER TRACKER Planner API

Energy-aware daily planning backend.
"""
