"""LeaderboardTable - overall provider rankings."""

from rich.text import Text
from textual.widgets import DataTable

from difr_leaderboard.services.leaderboard import LeaderboardRow
from difr_leaderboard.widgets.score_style import format_percent, score_style


class LeaderboardTable(DataTable):
    """Ranked providers by average exact match rate.

    +------+----------+----------------------+--------+-------------+
    | Rank | Provider | Avg Exact Match Rate | Models | Data Points |
    |------+----------+----------------------+--------+-------------|
    | #1   | together |               97.05% |      2 |           5 |
    +------+----------+----------------------+--------+-------------+
    """

    DEFAULT_CSS = """
    LeaderboardTable {
        height: auto;
        max-height: 24;
    }
    """

    def show_rows(self, rows: list[LeaderboardRow]) -> None:
        """Replace the table contents with ``rows`` in the given order."""
        self.clear(columns=True)
        self.add_column("Rank", key="rank", width=6)
        self.add_column("Provider", key="provider", width=24)
        self.add_column(Text("Avg Exact Match Rate", justify="right"), key="avg_score")
        self.add_column(Text("Models", justify="right"), key="models")
        self.add_column(Text("Data Points", justify="right"), key="data_points")

        for rank, row in enumerate(rows, start=1):
            self.add_row(
                f"#{rank}",
                row.provider,
                Text(
                    format_percent(row.avg_score),
                    style=f"bold {score_style(row.avg_score)}",
                    justify="right",
                ),
                Text(str(row.model_count), justify="right"),
                Text(str(row.data_points), style="dim", justify="right"),
                key=row.provider,
            )

        self.cursor_type = "row"
        self.zebra_stripes = True
