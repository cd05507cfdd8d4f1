"""Services package - import from subdirectories directly.

Subpackages:
- audits: Audit record parsing and manifest loading
- leaderboard: Aggregation of audit records into dashboard views
- config: Dashboard settings from the environment
"""
