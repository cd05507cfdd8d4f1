"""ProviderComparison - one card of statistics per endpoint for a model."""

from rich.columns import Columns
from rich.panel import Panel
from rich.text import Text
from textual.widgets import Static

from difr_leaderboard.services.leaderboard import ProviderStat
from difr_leaderboard.widgets.score_style import (
    format_percent,
    format_trend,
    score_style,
)

CARD_WIDTH = 34
TREND_UP_STYLE = "#55C89F"
TREND_DOWN_STYLE = "#FF563F"


class ProviderComparison(Static):
    """Card grid of ProviderStat entries, best average first."""

    DEFAULT_CSS = """
    ProviderComparison {
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__("", name=name, id=id, classes=classes)
        self.stats: list[ProviderStat] = []

    def show_stats(self, stats: list[ProviderStat]) -> None:
        self.stats = list(stats)
        if not self.stats:
            self.update(Text("No valid runs for this model", style="dim"))
            return
        cards = [build_card(rank, stat) for rank, stat in enumerate(self.stats, start=1)]
        self.update(Columns(cards, padding=(0, 1)))


def build_card(rank: int, stat: ProviderStat) -> Panel:
    """Render one endpoint's statistics as a card."""
    body = Text()
    body.append(f"#{rank}", style="bold reverse" if rank == 1 else "bold")
    body.append(f"  {stat.data_points} runs", style="dim")
    if stat.trend > 0:
        body.append("  ▲", style=TREND_UP_STYLE)
    elif stat.trend < 0:
        body.append("  ▼", style=TREND_DOWN_STYLE)

    body.append("\nAverage Score\n", style="dim")
    body.append(format_percent(stat.avg_score), style=f"bold {score_style(stat.avg_score)}")

    body.append("\nMin ", style="dim")
    body.append(format_percent(stat.min_score))
    body.append("   Max ", style="dim")
    body.append(format_percent(stat.max_score))

    body.append("\nLatest ", style="dim")
    body.append(format_percent(stat.latest_score), style="bold")
    if stat.trend != 0:
        body.append(f"  {format_trend(stat.trend)}")

    return Panel(body, title=stat.provider, title_align="left", width=CARD_WIDTH)
