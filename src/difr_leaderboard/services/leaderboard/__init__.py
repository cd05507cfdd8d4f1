"""Leaderboard services: aggregate audit records into dashboard views."""

from difr_leaderboard.services.leaderboard.aggregate import (
    LEADERBOARD_LIMIT,
    LeaderboardRow,
    ProviderStat,
    TimeSeries,
    TimeSeriesPoint,
    build_leaderboard,
    build_provider_stats,
    build_time_series,
    list_models,
    provider_name,
    visible_rows,
)

__all__ = [
    "LEADERBOARD_LIMIT",
    "LeaderboardRow",
    "ProviderStat",
    "TimeSeries",
    "TimeSeriesPoint",
    "build_leaderboard",
    "build_provider_stats",
    "build_time_series",
    "list_models",
    "provider_name",
    "visible_rows",
]
