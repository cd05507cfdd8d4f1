"""DiFR Leaderboard - Textual app for inference provider audit results.

This is the main application entry point. It:
- Loads settings from the environment and an optional .env file
- Routes logging through Textual so it does not corrupt the terminal
- Pushes the dashboard screen
"""

import logging

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from difr_leaderboard import __version__
from difr_leaderboard.examples import APP_INFO
from difr_leaderboard.screens import DashboardScreen
from difr_leaderboard.services.config import DashboardSettings, DashboardSettingsManager


class LeaderboardApp(App):
    """Main application - a single dashboard screen."""

    TITLE = f"{APP_INFO['name']} v{__version__}"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("f1", "toggle_help", "Help"),
    ]

    def __init__(self, settings: DashboardSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or DashboardSettings()

    @property
    def settings(self) -> DashboardSettings:
        return self._settings

    def on_mount(self) -> None:
        """Push the dashboard when the app mounts."""
        self.push_screen(DashboardScreen(self._settings))

    def action_toggle_help(self) -> None:
        """Show the keyboard shortcuts."""
        self.notify(
            "Arrow keys: Navigate\n"
            "Tab: Cycle focus\n"
            "A: Show all / top 10 providers\n"
            "R: Reload audit data\n"
            "Q: Quit",
            title="Keyboard Shortcuts",
        )


def configure_logging(level_name: str) -> None:
    """Send log records to the Textual devtools console at ``level_name``."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


def main() -> None:
    """Entry point for the application."""
    settings = DashboardSettingsManager().load()
    configure_logging(settings.log_level)

    app = LeaderboardApp(settings)
    app.run()


if __name__ == "__main__":
    main()
