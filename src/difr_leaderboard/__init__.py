"""DiFR leaderboard - terminal dashboard for inference provider audits."""

__version__ = "0.1.0"
