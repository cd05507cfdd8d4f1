"""Screens package - contains all screen definitions.

Screens:
- DashboardScreen: Audit results dashboard
"""

from difr_leaderboard.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
