"""Entry point for running the dashboard as a module.

Usage:
    python -m difr_leaderboard
"""

from difr_leaderboard.app import main

if __name__ == "__main__":
    main()
