"""Examples package - built-in audit data for demonstration and fallback."""

from difr_leaderboard.examples.sample_audits import (
    APP_INFO,
    SAMPLE_AUDIT_RESULTS,
)

__all__ = [
    "APP_INFO",
    "SAMPLE_AUDIT_RESULTS",
]
