"""Config services for dashboard settings."""

from difr_leaderboard.services.config.dashboard_settings import (
    DashboardSettings,
    DashboardSettingsManager,
)

__all__ = [
    "DashboardSettings",
    "DashboardSettingsManager",
]
