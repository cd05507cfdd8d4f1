"""Widgets package - custom widgets for the audit dashboard.

Dashboard widgets:
- leaderboard_table.py: Overall provider rankings
- time_series_chart.py: Per-endpoint exact match rate over time
- provider_comparison.py: Statistics cards for the selected model

Utility:
- score_style.py: Score color bands and percent formatting
"""

from difr_leaderboard.widgets.leaderboard_table import LeaderboardTable
from difr_leaderboard.widgets.provider_comparison import ProviderComparison
from difr_leaderboard.widgets.time_series_chart import TimeSeriesChart

__all__ = [
    "LeaderboardTable",
    "ProviderComparison",
    "TimeSeriesChart",
]
